"""Single-pass argument parsing into :class:`PreferenceState`.

The command line follows ``getopts`` conventions: single-letter options that
may be clustered (``-rbx``), ``-t``/``-D`` taking the rest of the cluster or
the next element as their argument, and scanning that stops at the first
non-option element or at ``--``. Everything from that point on, ``--``
included, is returned untouched as positional arguments.

Unlike :mod:`argparse`, unknown options never abort parsing. Each one is
reported as a warning in argument order and the remaining flags still take
effect.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from btmonitor import __version__
from btmonitor._constants import (
    CLEAN_CACHES_FLAG,
    CONFIG_DIR_FLAG,
    EXIT_OK,
    FLAGS_WITH_ARGUMENT,
    HELP_FLAG,
    OPTION_TERMINATOR,
    TERMINAL_FLAGS,
    TRIGGER_FLAG,
    VERSION_FLAG,
)
from btmonitor.cache import CacheInvalidator
from btmonitor.config import MonitorConfig
from btmonitor.configdir import validate_config_dir
from btmonitor.exceptions import MonitorConfigError
from btmonitor.preferences import PreferenceState, TriggerMode
from btmonitor.trigger import resolve_trigger_mode
from btmonitor.usage import FLAGS_BY_LETTER, format_help

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionToken:
    """An option found on the command line.

    ``flag`` is the option letter, or the whole element for ``--long`` style
    options (which are never recognised). ``value`` is only set for options
    taking an argument, and stays ``None`` when the argument is missing.
    """

    flag: str
    value: str | None = None

    @property
    def display(self) -> str:
        return f"-{self.flag}" if len(self.flag) == 1 else self.flag


@dataclass(frozen=True)
class Invocation:
    """Tokenised argument vector."""

    options: tuple[OptionToken, ...]
    positional: tuple[str, ...] = ()

    @property
    def terminal_flag(self) -> str | None:
        """The first help/version flag present, if any."""
        for token in self.options:
            if token.flag in TERMINAL_FLAGS:
                return token.flag
        return None


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing: resolved preferences, or an exit code."""

    preferences: PreferenceState | None = None
    positional: tuple[str, ...] = ()
    exit_code: int | None = None

    @property
    def should_exit(self) -> bool:
        return self.exit_code is not None


def tokenize(argv: Sequence[str]) -> Invocation:
    options: list[OptionToken] = []
    index = 0
    while index < len(argv):
        arg = argv[index]
        # the terminator itself is handed on with the positional arguments
        if arg in (OPTION_TERMINATOR, "-") or not arg.startswith("-"):
            break
        index += 1

        if arg.startswith("--"):
            options.append(OptionToken(flag=arg))
            continue

        cluster = arg[1:]
        for pos, letter in enumerate(cluster):
            if letter not in FLAGS_WITH_ARGUMENT:
                options.append(OptionToken(flag=letter))
                continue
            value: str | None
            if pos + 1 < len(cluster):
                value = cluster[pos + 1 :]
            elif index < len(argv):
                value = argv[index]
                index += 1
            else:
                value = None
            options.append(OptionToken(flag=letter, value=value))
            break

    return Invocation(options=tuple(options), positional=tuple(argv[index:]))


def resolve_invocation(invocation: Invocation, *, config: MonitorConfig | None = None) -> ParseResult:
    """Apply every option of *invocation* in order and build the preferences.

    Help and version requests short-circuit before any other option has an
    effect. A missing ``-D`` directory stops parsing with exit code 1.
    """
    terminal = invocation.terminal_flag
    if terminal == HELP_FLAG:
        print(format_help(), end="")
        return ParseResult(exit_code=EXIT_OK)
    if terminal == VERSION_FLAG:
        print(__version__)
        return ParseResult(exit_code=EXIT_OK)

    if config is None:
        config = MonitorConfig.from_env()

    updates: dict[str, Any] = {}
    trigger = TriggerMode()

    for token in invocation.options:
        if token.flag in FLAGS_WITH_ARGUMENT and token.value is None:
            _logger.warning("> option %s requires an argument", token.display)
            continue

        if token.flag == CLEAN_CACHES_FLAG:
            CacheInvalidator.from_config(config).clean()
        elif token.flag == TRIGGER_FLAG:
            assert token.value is not None  # noqa: S101
            trigger = resolve_trigger_mode(token.value, trigger)
        elif token.flag == CONFIG_DIR_FLAG:
            assert token.value is not None  # noqa: S101
            try:
                updates["config_dir"] = validate_config_dir(token.value)
            except MonitorConfigError as exc:
                _logger.error("%s", exc)
                return ParseResult(exit_code=exc.exit_code)
            _logger.info("> using alternate configuration directory: %s", token.value)
        else:
            spec = FLAGS_BY_LETTER.get(token.flag)
            if spec is None or spec.field is None:
                _logger.warning("> unknown or unsupported option: %s", token.display)
                continue
            updates[spec.field] = True
            _logger.info(spec.message)

    return ParseResult(
        preferences=PreferenceState(trigger=trigger, **updates),
        positional=invocation.positional,
    )


def parse_arguments(argv: Sequence[str], *, config: MonitorConfig | None = None) -> ParseResult:
    """Parse *argv* (without the program name) into a :class:`ParseResult`."""
    return resolve_invocation(tokenize(argv), config=config)
