"""Flag table and help text for the ``btmonitor`` command line."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from btmonitor._constants import (
    CLEAN_CACHES_FLAG,
    CONFIG_DIR_FLAG,
    HELP_FLAG,
    PROGRAM_NAME,
    TRIGGER_FLAG,
    VERSION_FLAG,
)


@dataclass(frozen=True)
class FlagSpec:
    """One single-letter option of the command line.

    ``field`` names the :class:`~btmonitor.preferences.PreferenceState`
    attribute a plain boolean flag switches on, and ``message`` is the
    diagnostic line logged when it does.
    """

    letter: str
    help: str
    field: str | None = None
    message: str = ""
    metavar: str | None = None


FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec(HELP_FLAG, "show this help text and exit"),
    FlagSpec(VERSION_FLAG, "print the version and exit"),
    FlagSpec(CLEAN_CACHES_FLAG, "remove the manufacturer and public name caches"),
    FlagSpec(
        "C",
        "clean retained messages from the mqtt broker",
        field="clean_mqtt_retained",
        message="> cleaning retained messages on publish topic",
    ),
    FlagSpec(
        "E",
        "report scan start/end status messages over mqtt",
        field="mqtt_report_scan_messages",
        message="> reporting scan status messages over mqtt",
    ),
    FlagSpec(
        "s",
        "publish all presence messages on a single topic",
        field="mqtt_single_topic_mode",
        message="> publishing all messages on a single topic",
    ),
    FlagSpec(
        "e",
        "publish environment and host information",
        field="publish_environment",
        message="> publishing environment information",
    ),
    FlagSpec(
        "x",
        "retain status messages on the mqtt broker",
        field="retain_mqtt_messages",
        message="> retaining mqtt status reports",
    ),
    FlagSpec(
        "R",
        "redact addresses and credentials from log output",
        field="redact_logs",
        message="> redacting private information from logs",
    ),
    FlagSpec(
        "d",
        "restore default preferences and configuration",
        field="restore_defaults",
        message="> restoring default settings",
    ),
    FlagSpec(
        "r",
        "repeat the scan loop periodically",
        field="periodic_scan",
        message="> periodic scan mode enabled",
    ),
    FlagSpec(
        "u",
        "update the installed system service",
        field="update_service",
        message="> updating system service",
    ),
    FlagSpec(
        "b",
        "report iBeacon advertisements",
        field="beacon_mode",
        message="> reporting iBeacon advertisements",
    ),
    FlagSpec(
        "f",
        "format mqtt topic names",
        field="format_mqtt_topics",
        message="> formatting mqtt topics",
    ),
    FlagSpec(
        "g",
        "report generic public advertisements",
        field="public_mode",
        message="> reporting public advertisements",
    ),
    FlagSpec(
        TRIGGER_FLAG,
        "scan only on mqtt trigger and/or report triggers out; "
        "MODE combines a (arrive), d (depart) and r (report out)",
        metavar="MODE",
    ),
    FlagSpec(
        "a",
        "report every scan result, not only changes",
        field="report_all_results",
        message="> reporting all scan results",
    ),
    FlagSpec(
        "m",
        "publish a periodic heartbeat",
        field="heartbeat",
        message="> heartbeat enabled",
    ),
    FlagSpec(CONFIG_DIR_FLAG, "read configuration from an alternate directory", metavar="DIR"),
)

FLAGS_BY_LETTER: dict[str, FlagSpec] = {spec.letter: spec for spec in FLAGS}


def build_help_parser() -> argparse.ArgumentParser:
    """Return an :class:`argparse.ArgumentParser` describing the flag surface.

    The parser only renders help text; argument vectors are consumed by
    :mod:`btmonitor.argv`, which tolerates unknown flags.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Bluetooth presence monitor reporting arrivals and departures over MQTT.",
        add_help=False,
    )
    for spec in FLAGS:
        if spec.metavar is None:
            parser.add_argument(f"-{spec.letter}", action="store_true", help=spec.help)
        else:
            parser.add_argument(f"-{spec.letter}", metavar=spec.metavar, help=spec.help)
    return parser


def format_help() -> str:
    return build_help_parser().format_help()
