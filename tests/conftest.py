"""Pytest fixtures: fake procfs/sysfs trees with snmp6 counter files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

LABELS = [
    "Ip6InReceives", "Ip6InHdrErrors", "Ip6InTooBigErrors", "Ip6InNoRoutes",
    "Ip6InAddrErrors", "Ip6InUnknownProtos", "Ip6InTruncatedPkts", "Ip6InDiscards",
    "Ip6InDelivers", "Ip6OutForwDatagrams", "Ip6OutRequests", "Ip6OutDiscards",
    "Ip6OutNoRoutes", "Ip6ReasmTimeout", "Ip6ReasmReqds", "Ip6ReasmOKs",
    "Ip6ReasmFails", "Ip6FragOKs", "Ip6FragFails", "Ip6FragCreates",
    "Ip6InMcastPkts", "Ip6OutMcastPkts", "Ip6InOctets", "Ip6OutOctets",
    "Ip6InMcastOctets", "Ip6OutMcastOctets", "Ip6InBcastOctets", "Ip6OutBcastOctets",
]


def counter_text(count: int = len(LABELS), rx: int = 100, tx: int = 200) -> str:
    """Counter file body with ``count`` valid lines; slots 24/25 hold rx/tx."""
    lines = []
    for i in range(count):
        label = LABELS[i] if i < len(LABELS) else f"Ip6Extra{i}"
        value = {24: rx, 25: tx}.get(i, i + 1)
        lines.append(f"{label:<32}{value}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_counters(tmp_path: Path) -> Callable[..., Path]:
    """Write a counter file under tmp_path and return its path."""

    def _write(name: str = "snmp6", text: Optional[str] = None, **kwargs) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(counter_text(**kwargs) if text is None else text)
        return path

    return _write


@pytest.fixture
def fake_procfs(tmp_path: Path) -> Callable[[Dict[str, Optional[str]], Optional[str]], Path]:
    """
    Build <tmp>/proc with net/snmp6 and net/dev_snmp6/<iface> files.

    A None body means the interface has no counter file.
    """

    def _build(ifaces: Dict[str, Optional[str]], global_text: Optional[str] = None) -> Path:
        root = tmp_path / "proc"
        dev = root / "net" / "dev_snmp6"
        dev.mkdir(parents=True, exist_ok=True)
        for name, body in ifaces.items():
            if body is not None:
                (dev / name).write_text(body)
        if global_text is not None:
            (root / "net" / "snmp6").write_text(global_text)
        return root

    return _build


@pytest.fixture
def fake_sysfs(tmp_path: Path) -> Callable[[List[str]], Path]:
    """Build <tmp>/sys/class/net with one directory per interface."""

    def _build(names: List[str]) -> Path:
        root = tmp_path / "sys"
        net = root / "class" / "net"
        net.mkdir(parents=True, exist_ok=True)
        for name in names:
            (net / name).mkdir()
        return root

    return _build
