from __future__ import annotations
import os
import re
from typing import IO, Iterator, List, NamedTuple

from core.errors import SourceUnavailable

SOURCE_GLOBAL = "net/snmp6"
SOURCE_IFACE = "net/dev_snmp6/{iface}"

# Bounds of the kernel dump we are prepared to look at. Anything past them
# on a line is dropped, never an error.
MAX_LINE_LENGTH = 1024
MAX_FIELDS = 16

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


class CounterLine(NamedTuple):
    num_fields: int
    value: int


def atoll(text: str) -> int:
    """
    Lenient base-10 conversion: leading digits win, garbage gives 0.

    "12" -> 12, "12abc" -> 12, "-7" -> -7, "abc" -> 0. Results are clamped
    to the signed 64-bit range.
    """
    m = _LEADING_INT.match(text)
    if m is None:
        return 0
    return max(INT64_MIN, min(INT64_MAX, int(m.group(1))))


def split_fields(line: str) -> List[str]:
    return line[: MAX_LINE_LENGTH - 1].split()[:MAX_FIELDS]


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines cut to MAX_LINE_LENGTH - 1 characters, dropping the rest."""
    while True:
        line = stream.readline(MAX_LINE_LENGTH - 1)
        if not line:
            return
        rest = line
        while rest and not rest.endswith("\n"):
            rest = stream.readline(MAX_LINE_LENGTH)
        yield line


def iter_counter_lines(stream: IO[str]) -> Iterator[CounterLine]:
    """Yield one CounterLine per line carrying at least a label and a value."""
    for line in read_lines(stream):
        fields = split_fields(line)
        if len(fields) < 2:
            continue
        yield CounterLine(len(fields), atoll(fields[1]))


def parse_counters(path: str) -> List[int]:
    """
    Read a snmp6 style counter file into an ordered list of values.

    Entry ``i`` is the second field of the ``i``-th line that has at least
    two fields; shorter lines do not take a slot.

    Raises:
        SourceUnavailable: if the file cannot be opened or read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
            return [c.value for c in iter_counter_lines(f)]
    except OSError as e:
        raise SourceUnavailable(path, e.strerror or str(e)) from e


class ProcNetSnmp6:
    """
    Collector for the kernel's IPv6 SNMP counters.

    Reads /proc/net/snmp6 for the host wide counters, or
    /proc/net/dev_snmp6/<iface> when an interface is given.
    """

    def __init__(self, iface: str | None = None, procfs_root: str = "/proc") -> None:
        """
        Args:
            iface: Interface name, or None for the global counter file
            procfs_root: Mount point of procfs
        """
        self.iface = iface
        self.procfs_root = procfs_root

    @property
    def path(self) -> str:
        if self.iface is None:
            return os.path.join(self.procfs_root, SOURCE_GLOBAL)
        return os.path.join(self.procfs_root, SOURCE_IFACE.format(iface=self.iface))

    def read(self) -> List[int]:
        return parse_counters(self.path)
