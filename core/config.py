from __future__ import annotations
import logging
import os
from typing import Any, Dict

import yaml  # from pyyaml

from core.driver import MODE_PER_INTERFACE
from core.ignorelist import IgnoreList

logger = logging.getLogger(__name__)

FILTER_KEYS = ("interface", "ignoreselected")

DEFAULTS: Dict[str, Any] = {
    "mode": MODE_PER_INTERFACE,
    "poll_interval_sec": 10.0,
    "procfs_root": "/proc",
    "sysfs_root": "/sys",
    "output": {"path": "./snmp6.ndjson"},
}


def is_true(value: Any) -> bool:
    """Boolean-like config values: YAML bools, or true/yes/on/1 in any case."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "yes", "on", "1")


def load_config(path: str = "config.yml") -> Dict[str, Any]:
    """
    Load configuration from YAML file and override with environment variables.

    Environment variables override YAML values:
    - SNMP6STAT_MODE: per_interface or global
    - SNMP6STAT_POLL_INTERVAL: Polling interval in seconds (e.g., 10.0)
    - SNMP6STAT_OUTPUT_PATH: Output file path
    - SNMP6STAT_PROCFS_ROOT: procfs mount point (e.g., /host/proc)

    Args:
        path: Path to the YAML configuration file

    Returns:
        Defaults merged with the file and environment overrides
    """
    config: Dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in DEFAULTS.items()}
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file {path} not found, using defaults")
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    for key, value in loaded.items():
        if key == "output" and isinstance(value, dict):
            config["output"].update(value)
        else:
            config[key] = value

    if "SNMP6STAT_MODE" in os.environ:
        config["mode"] = os.environ["SNMP6STAT_MODE"]

    if "SNMP6STAT_POLL_INTERVAL" in os.environ:
        try:
            config["poll_interval_sec"] = float(os.environ["SNMP6STAT_POLL_INTERVAL"])
        except ValueError:
            logger.warning(f"Invalid SNMP6STAT_POLL_INTERVAL value: {os.environ['SNMP6STAT_POLL_INTERVAL']}")

    if "SNMP6STAT_OUTPUT_PATH" in os.environ:
        config["output"]["path"] = os.environ["SNMP6STAT_OUTPUT_PATH"]

    if "SNMP6STAT_PROCFS_ROOT" in os.environ:
        config["procfs_root"] = os.environ["SNMP6STAT_PROCFS_ROOT"]

    return config


def apply_config_key(ignorelist: IgnoreList, key: str, value: Any) -> bool:
    """
    Apply one filter option. Keys are case-insensitive.

    ``Interface`` adds one pattern (or each entry of a list),
    ``IgnoreSelected`` turns listed interfaces from selected into ignored.

    Returns:
        False if the key is not a filter option
    """
    k = key.lower()
    if k == "interface":
        # An empty "Interface:" loads as None and selects nothing.
        for pattern in value if isinstance(value, list) else [value]:
            if pattern is None:
                continue
            ignorelist.add(str(pattern))
    elif k == "ignoreselected":
        ignorelist.set_invert(not is_true(value))
    else:
        logger.warning(f"Unknown filter option {key!r}")
        return False
    return True


def build_ignorelist(config: Dict[str, Any]) -> IgnoreList:
    """
    Build the interface filter from the Interface/IgnoreSelected options.

    Without IgnoreSelected the listed interfaces are the only ones reported;
    ``IgnoreSelected: true`` reports everything except them.
    """
    ignorelist = IgnoreList(invert=True)
    for key, value in config.items():
        if isinstance(key, str) and key.lower() in FILTER_KEYS:
            apply_config_key(ignorelist, key, value)
    return ignorelist
