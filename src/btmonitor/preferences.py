"""Immutable preference models handed to the scanning engine.

:class:`PreferenceState` is the only output of argument parsing. It is a
frozen pydantic model: the parser collects field updates while walking the
argument vector and constructs the model once, so the engine never sees a
partially resolved value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TriggerMode(BaseModel):
    """Independent facets of the ``-t`` trigger mode.

    Arrive/depart facets gate local scanning behind an MQTT signal from
    another instance; the report-out facet publishes such signals after a
    local scan.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    on_arrive_trigger: bool = False
    on_depart_trigger: bool = False
    report_out_trigger: bool = False

    def merged(self, other: TriggerMode) -> TriggerMode:
        """Return a mode with every facet set in either *self* or *other*."""
        return TriggerMode(
            on_arrive_trigger=self.on_arrive_trigger or other.on_arrive_trigger,
            on_depart_trigger=self.on_depart_trigger or other.on_depart_trigger,
            report_out_trigger=self.report_out_trigger or other.report_out_trigger,
        )


class PreferenceState(BaseModel):
    """Resolved daemon preferences."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    periodic_scan: bool = False
    beacon_mode: bool = False
    public_mode: bool = False
    report_all_results: bool = False
    redact_logs: bool = False
    retain_mqtt_messages: bool = False
    format_mqtt_topics: bool = False
    publish_environment: bool = False
    heartbeat: bool = False
    mqtt_report_scan_messages: bool = False
    mqtt_single_topic_mode: bool = False
    clean_mqtt_retained: bool = False
    restore_defaults: bool = False
    update_service: bool = False
    config_dir: str = Field(default="", description="Alternate configuration directory; empty means default")
    trigger: TriggerMode = Field(default_factory=TriggerMode)
