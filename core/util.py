from __future__ import annotations
import os, time, socket, pathlib

def now_ts() -> float:
    """Current Unix timestamp in seconds."""
    return time.time()

def hostname() -> str:
    return socket.gethostname()

def ensure_parent(path: str | os.PathLike) -> None:
    """
    Create parent directories for a file path, if they don't exist.

    Args:
        path: File path whose parent directories should be created
    """
    pathlib.Path(path).parent.mkdir(parents=True, exist_ok=True)
