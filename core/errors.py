from __future__ import annotations


class Snmp6Error(Exception):
    """Base class for recoverable collection failures."""


class SourceUnavailable(Snmp6Error):
    """
    A counter pseudo-file could not be opened or read.

    The target is skipped for this pass; the next pass tries again.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InsufficientData(Snmp6Error):
    """Fewer counter lines were parsed than the octet counters require."""

    def __init__(self, scope: str, found: int, needed: int) -> None:
        super().__init__(f"{scope}: {found} counter lines, need {needed}")
        self.scope = scope
        self.found = found
        self.needed = needed


class EnumerationFailure(Snmp6Error):
    """The interface list for a pass could not be obtained."""
