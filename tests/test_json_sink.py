"""Tests for the NDJSON sink."""

from __future__ import annotations

import json
from pathlib import Path

from core.sample import TrafficSample
from output.json_sink import JsonSink


def test_creates_parent_and_appends(tmp_path: Path) -> None:
    path = tmp_path / "out" / "events.ndjson"
    sink = JsonSink(str(path))
    sink.write({"a": 1})
    sink.write({"b": 2})

    lines = path.read_text().splitlines()
    assert [json.loads(l) for l in lines] == [{"a": 1}, {"b": 2}]


def test_dispatch_record(tmp_path: Path) -> None:
    path = tmp_path / "events.ndjson"
    sink = JsonSink(str(path))
    sink.dispatch(TrafficSample(plugin="snmp6", scope="eth0", rx=100, tx=200))

    rec = json.loads(path.read_text())
    assert rec["host"] == sink.host
    assert isinstance(rec["ts_unix"], float)
    assert rec["plugin"] == "snmp6"
    assert rec["plugin_instance"] == "eth0"
    assert rec["type"] == "if_octets"
    assert rec["values"] == [100, 200]
