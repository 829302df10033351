from __future__ import annotations

import logging
from pathlib import Path

import pytest

from btmonitor import __version__
from btmonitor.argv import OptionToken, parse_arguments, tokenize
from btmonitor.config import MonitorConfig
from btmonitor.preferences import PreferenceState, TriggerMode

_BOOLEAN_FLAGS = {
    "-C": "clean_mqtt_retained",
    "-E": "mqtt_report_scan_messages",
    "-s": "mqtt_single_topic_mode",
    "-e": "publish_environment",
    "-x": "retain_mqtt_messages",
    "-R": "redact_logs",
    "-d": "restore_defaults",
    "-r": "periodic_scan",
    "-u": "update_service",
    "-b": "beacon_mode",
    "-f": "format_mqtt_topics",
    "-g": "public_mode",
    "-a": "report_all_results",
    "-m": "heartbeat",
}


@pytest.fixture
def config(tmp_path: Path) -> MonitorConfig:
    return MonitorConfig(base_dir=tmp_path)


def _messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.getMessage() for record in caplog.records if record.name.startswith("btmonitor")]


@pytest.mark.parametrize(("flag", "field"), sorted(_BOOLEAN_FLAGS.items()))
def test_single_flag_sets_only_its_field(
    flag: str,
    field: str,
    config: MonitorConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    result = parse_arguments([flag], config=config)

    assert result.exit_code is None
    assert result.preferences == PreferenceState(**{field: True})
    assert len(_messages(caplog)) == 1


def test_no_flags_yields_defaults(config: MonitorConfig) -> None:
    result = parse_arguments([], config=config)
    assert result.preferences == PreferenceState()
    assert result.positional == ()
    assert not result.should_exit


def test_clean_caches_flag_leaves_preferences_default(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")
    config.manufacturer_cache.write_text("cache")

    result = parse_arguments(["-c"], config=config)

    assert result.preferences == PreferenceState()
    assert not config.manufacturer_cache.exists()
    assert _messages(caplog) == ["> cache cleaned"]


def test_clean_caches_composes_with_other_flags(config: MonitorConfig) -> None:
    result = parse_arguments(["-c", "-r"], config=config)
    assert result.preferences is not None
    assert result.preferences.periodic_scan


def test_repeated_flags_are_idempotent(config: MonitorConfig) -> None:
    result = parse_arguments(["-r", "-r", "-rr"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True)


def test_clustered_flags(config: MonitorConfig) -> None:
    result = parse_arguments(["-rbx"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True, beacon_mode=True, retain_mqtt_messages=True)


@pytest.mark.parametrize("argv", [["-tad"], ["-t", "ad"], ["-t", "da"], ["-rtad"]])
def test_trigger_argument_forms(argv: list[str], config: MonitorConfig) -> None:
    result = parse_arguments(argv, config=config)
    assert result.preferences is not None
    assert result.preferences.trigger == TriggerMode(on_arrive_trigger=True, on_depart_trigger=True)


def test_unknown_trigger_mode_does_not_abort(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    result = parse_arguments(["-t", "xyz", "-b"], config=config)

    assert result.preferences == PreferenceState(beacon_mode=True)
    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_trigger_without_argument_warns(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    result = parse_arguments(["-r", "-t"], config=config)

    assert result.preferences == PreferenceState(periodic_scan=True)
    assert caplog.records[-1].levelno == logging.WARNING
    assert "-t" in caplog.records[-1].getMessage()


def test_unknown_flag_does_not_abort_parsing(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    result = parse_arguments(["-Z", "-r", "-b"], config=config)

    assert result.preferences == PreferenceState(periodic_scan=True, beacon_mode=True)
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "-Z" in warnings[0].getMessage()


def test_unknown_flag_inside_cluster(config: MonitorConfig) -> None:
    result = parse_arguments(["-rZb"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True, beacon_mode=True)


def test_long_options_are_reported_as_unknown(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    result = parse_arguments(["--verbose", "-m"], config=config)

    assert result.preferences == PreferenceState(heartbeat=True)
    assert "--verbose" in _messages(caplog)[0]


def test_diagnostics_follow_argument_order(config: MonitorConfig, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")

    parse_arguments(["-b", "-Z", "-r"], config=config)

    assert _messages(caplog) == [
        "> reporting iBeacon advertisements",
        "> unknown or unsupported option: -Z",
        "> periodic scan mode enabled",
    ]


def test_option_terminator_returns_remaining_arguments(config: MonitorConfig) -> None:
    result = parse_arguments(["-r", "--", "extra", "-b"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True)
    assert result.positional == ("--", "extra", "-b")


def test_option_terminator_alone_is_positional(config: MonitorConfig) -> None:
    result = parse_arguments(["-r", "--"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True)
    assert result.positional == ("--",)


def test_first_non_option_stops_scanning(config: MonitorConfig) -> None:
    result = parse_arguments(["-r", "extra", "-b"], config=config)
    assert result.preferences == PreferenceState(periodic_scan=True)
    assert result.positional == ("extra", "-b")


def test_alternate_config_dir_kept_verbatim(config: MonitorConfig, tmp_path: Path) -> None:
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir()
    raw = f"{conf_dir}/"

    result = parse_arguments(["-D", raw], config=config)

    assert result.preferences is not None
    assert result.preferences.config_dir == raw


def test_alternate_config_dir_attached_argument(config: MonitorConfig, tmp_path: Path) -> None:
    result = parse_arguments([f"-D{tmp_path}"], config=config)
    assert result.preferences is not None
    assert result.preferences.config_dir == str(tmp_path)


def test_missing_config_dir_exits_with_one(
    config: MonitorConfig,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="btmonitor")
    missing = str(tmp_path / "missing")

    result = parse_arguments(["-r", "-D", missing, "-b"], config=config)

    assert result.exit_code == 1
    assert result.preferences is None
    assert caplog.records[-1].levelno == logging.ERROR
    assert missing in caplog.records[-1].getMessage()


def test_help_exits_zero_without_side_effects(config: MonitorConfig, capsys: pytest.CaptureFixture[str]) -> None:
    config.manufacturer_cache.write_text("cache")

    result = parse_arguments(["-c", "-r", "-h"], config=config)

    assert result.exit_code == 0
    assert result.preferences is None
    assert config.manufacturer_cache.exists()
    out = capsys.readouterr().out
    assert "usage: btmonitor" in out
    assert "-D DIR" in out
    assert "-t MODE" in out


def test_help_wins_over_missing_config_dir(config: MonitorConfig, tmp_path: Path) -> None:
    result = parse_arguments(["-D", str(tmp_path / "missing"), "-h"], config=config)
    assert result.exit_code == 0


def test_version_prints_version(config: MonitorConfig, capsys: pytest.CaptureFixture[str]) -> None:
    result = parse_arguments(["-rv"], config=config)
    assert result.exit_code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_parsing_is_deterministic(config: MonitorConfig, tmp_path: Path) -> None:
    argv = ["-rb", "-tra", "-D", str(tmp_path), "-Z", "-m"]
    first = parse_arguments(argv, config=config)
    second = parse_arguments(argv, config=config)
    assert first.preferences == second.preferences
    assert first.preferences is not second.preferences


def test_tokenize_argument_options() -> None:
    invocation = tokenize(["-rt", "ad", "-Dconf", "-x"])
    assert invocation.options == (
        OptionToken("r"),
        OptionToken("t", "ad"),
        OptionToken("D", "conf"),
        OptionToken("x"),
    )
    assert invocation.terminal_flag is None


def test_tokenize_does_not_treat_option_argument_as_flag() -> None:
    assert tokenize(["-t", "-h"]).terminal_flag is None
    assert tokenize(["-Dh"]).terminal_flag is None
    assert tokenize(["-r", "--", "-h"]).terminal_flag is None
