"""Resolution of the compound ``-t`` trigger mode argument."""

from __future__ import annotations

import logging

from btmonitor._constants import TRIGGER_ARRIVE, TRIGGER_DEPART, TRIGGER_REPORT_OUT
from btmonitor.preferences import TriggerMode

_logger = logging.getLogger(__name__)

_SCAN_CHARS: frozenset[str] = frozenset({TRIGGER_ARRIVE, TRIGGER_DEPART})


def _describe(mode: TriggerMode) -> str:
    parts: list[str] = []
    if mode.on_arrive_trigger:
        parts.append("arrive scan on mqtt trigger")
    if mode.on_depart_trigger:
        parts.append("depart scan on mqtt trigger")
    if mode.report_out_trigger:
        parts.append("report out arrive/depart triggers")
    return ", ".join(parts)


def parse_trigger_mode(value: str) -> TriggerMode | None:
    """Return the facets encoded in *value*, or ``None`` if it is not a valid mode.

    ``r`` may be combined with any arrangement of ``a`` and ``d``; repeated
    characters are harmless. Without ``r`` at least one of ``a``/``d`` is
    required.
    """
    chars = set(value)
    report_out = TRIGGER_REPORT_OUT in chars
    scan_chars = chars - {TRIGGER_REPORT_OUT}

    if not scan_chars <= _SCAN_CHARS:
        return None
    if not scan_chars and not report_out:
        return None

    return TriggerMode(
        on_arrive_trigger=TRIGGER_ARRIVE in scan_chars,
        on_depart_trigger=TRIGGER_DEPART in scan_chars,
        report_out_trigger=report_out,
    )


def resolve_trigger_mode(value: str, current: TriggerMode | None = None) -> TriggerMode:
    """Resolve *value* on top of *current*, logging one diagnostic line.

    An unknown mode string leaves *current* untouched and logs a warning.
    """
    base = current if current is not None else TriggerMode()
    parsed = parse_trigger_mode(value)
    if parsed is None:
        _logger.warning("> unknown trigger mode: %s", value)
        return base

    _logger.info("> trigger mode: %s", _describe(parsed))
    return base.merged(parsed)
