from __future__ import annotations
import re
from typing import Iterable, List, Optional, Pattern, Set


class FilterFrozen(ValueError):
    """Raised when an IgnoreList is modified after it was frozen."""


class IgnoreList:
    """
    Name based allow/deny list for interface scopes.

    Patterns are compared case-sensitively. A pattern wrapped in slashes
    (``/^eth[0-9]+$/``) is a regular expression searched in the name,
    anything else must match exactly.

    ``matches(name)`` answers "should this scope be skipped":

        skip = found(name) XOR invert

    With ``invert=False`` the list is a deny list (listed names are skipped),
    with ``invert=True`` it is an allow list (only listed names pass). An
    empty list skips nothing, whatever the invert flag says.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, invert: bool = False) -> None:
        self._names: Set[str] = set()
        self._regexes: List[Pattern[str]] = []
        self._invert = bool(invert)
        self._frozen = False
        for p in patterns or ():
            self.add(p)

    @property
    def invert(self) -> bool:
        return self._invert

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._names) + len(self._regexes)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FilterFrozen("ignore list is frozen")

    def add(self, pattern: str) -> None:
        """
        Add one pattern. Patterns accumulate; there is no removal.

        Raises:
            ValueError: if a ``/regex/`` pattern does not compile
            FilterFrozen: if the list was frozen
        """
        self._check_mutable()
        if len(pattern) > 2 and pattern.startswith("/") and pattern.endswith("/"):
            try:
                self._regexes.append(re.compile(pattern[1:-1]))
            except re.error as e:
                raise ValueError(f"invalid pattern {pattern!r}: {e}") from e
        else:
            self._names.add(pattern)

    def set_invert(self, invert: bool) -> None:
        self._check_mutable()
        self._invert = bool(invert)

    def configure(self, patterns: Iterable[str], invert_selected: Optional[bool] = None) -> None:
        """Add ``patterns`` and, if given, replace the invert flag."""
        for p in patterns:
            self.add(p)
        if invert_selected is not None:
            self.set_invert(invert_selected)

    def freeze(self) -> "IgnoreList":
        self._frozen = True
        return self

    def _found(self, name: str) -> bool:
        if name in self._names:
            return True
        return any(r.search(name) for r in self._regexes)

    def matches(self, name: str) -> bool:
        if not len(self):
            return False
        return self._found(name) != self._invert
