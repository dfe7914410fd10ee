from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from collectors.proc_snmp6 import ProcNetSnmp6
from core.errors import EnumerationFailure, Snmp6Error
from core.ignorelist import IgnoreList
from core.sample import TrafficSample, build_sample

logger = logging.getLogger(__name__)

MODE_PER_INTERFACE = "per_interface"
MODE_GLOBAL = "global"
MODES = (MODE_PER_INTERFACE, MODE_GLOBAL)

PLUGIN_PER_INTERFACE = "snmp6"
PLUGIN_GLOBAL = "snmpv6"
GLOBAL_SCOPE = "snmpv6"

Dispatch = Callable[[TrafficSample], None]
Enumerate = Callable[[], List[str]]


@dataclass
class PassResult:
    """Outcome of one collection pass."""
    dispatched: int = 0
    filtered: int = 0
    failed: int = 0


class Snmp6Collector:
    """
    Runs one collection pass per read() call.

    In per-interface mode every name returned by ``interfaces`` is read from
    /proc/net/dev_snmp6/<name> and checked against the ignore list. In global
    mode /proc/net/snmp6 is read once and the ignore list is not consulted.
    A failing target is logged and skipped; it never stops the pass.
    """

    def __init__(
        self,
        dispatch: Dispatch,
        mode: str = MODE_PER_INTERFACE,
        ignorelist: Optional[IgnoreList] = None,
        interfaces: Optional[Enumerate] = None,
        procfs_root: str = "/proc",
    ) -> None:
        if mode not in MODES:
            raise ValueError(f"unknown mode {mode!r}, expected one of {', '.join(MODES)}")
        if mode == MODE_PER_INTERFACE and interfaces is None:
            raise ValueError("per_interface mode needs an interface enumerator")
        self.dispatch = dispatch
        self.mode = mode
        self.ignorelist = (ignorelist or IgnoreList()).freeze()
        self.interfaces = interfaces
        self.procfs_root = procfs_root
        self.last_result: Optional[PassResult] = None

    def read(self) -> bool:
        """
        Collect once.

        Returns:
            False if the pass could not run at all (interface enumeration
            failed) or, in global mode, the single target failed. True
            otherwise, even when single interfaces were skipped.
        """
        result = PassResult()
        self.last_result = result
        if self.mode == MODE_GLOBAL:
            self._collect(None, GLOBAL_SCOPE, PLUGIN_GLOBAL, result)
            return result.failed == 0

        try:
            names = self.interfaces()
        except EnumerationFailure as e:
            logger.warning(f"snmp6: cannot enumerate interfaces: {e}")
            return False

        for name in names:
            self._collect(name, name, PLUGIN_PER_INTERFACE, result)

        logger.debug(
            f"snmp6: pass done, {result.dispatched} dispatched, "
            f"{result.filtered} filtered, {result.failed} failed"
        )
        return True

    def _collect(self, iface: Optional[str], scope: str, plugin: str, result: PassResult) -> None:
        try:
            sample = build_sample(ProcNetSnmp6(iface, self.procfs_root).read(), scope, plugin)
        except Snmp6Error as e:
            logger.warning(f"{plugin}: skipping {scope}: {e}")
            result.failed += 1
            return

        if iface is not None and self.ignorelist.matches(iface):
            result.filtered += 1
            return

        self.dispatch(sample)
        result.dispatched += 1
