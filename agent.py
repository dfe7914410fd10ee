from __future__ import annotations
import logging
import sys
import time
from typing import Any, Dict, List, Optional

from core.config import build_ignorelist, load_config
from core.driver import MODE_PER_INTERFACE, Snmp6Collector
from collectors.interfaces import SysClassNet
from output.json_sink import JsonSink

USAGE = "Usage: python3 agent.py [--once] [config.yml]"

logger = logging.getLogger("snmp6stat")


def build_collector(cfg: Dict[str, Any], sink: JsonSink) -> Snmp6Collector:
    """
    Wire a collector from configuration.

    Args:
        cfg: Configuration as returned by load_config()
        sink: Output for accepted samples

    Returns:
        Collector ready for read() calls
    """
    mode = cfg.get("mode", MODE_PER_INTERFACE)
    interfaces = SysClassNet(cfg.get("sysfs_root", "/sys")) if mode == MODE_PER_INTERFACE else None
    return Snmp6Collector(
        dispatch=sink.dispatch,
        mode=mode,
        ignorelist=build_ignorelist(cfg),
        interfaces=interfaces,
        procfs_root=cfg.get("procfs_root", "/proc"),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Agent loop: one collection pass every poll_interval_sec.

    With --once a single pass runs and the exit status reports whether it
    succeeded. Otherwise the loop runs until interrupted.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    once = "--once" in args
    args = [a for a in args if a != "--once"]
    if len(args) > 1 or any(a.startswith("-") for a in args):
        print(USAGE)
        return 2

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args[0] if args else "config.yml")
    interval = float(cfg.get("poll_interval_sec", 10.0))
    sink = JsonSink(cfg["output"]["path"])
    collector = build_collector(cfg, sink)
    logger.info(f"collecting in {collector.mode} mode every {interval}s into {sink.path}")

    if once:
        return 0 if collector.read() else 1

    try:
        while True:
            collector.read()
            time.sleep(interval)
    except KeyboardInterrupt:
        return 0

if __name__ == "__main__":
    sys.exit(main())
