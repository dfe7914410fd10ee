from __future__ import annotations
import os
from typing import List

from core.errors import EnumerationFailure

SOURCE = "class/net"


class SysClassNet:
    """
    Lists network interface names from /sys/class/net.

    Every call re-reads the directory, so interfaces that come and go
    between passes are picked up.
    """

    def __init__(self, sysfs_root: str = "/sys") -> None:
        self.sysfs_root = sysfs_root

    def __call__(self) -> List[str]:
        return self.read()

    def read(self) -> List[str]:
        """
        Returns:
            Interface names in sorted order.

        Raises:
            EnumerationFailure: if the directory cannot be listed
        """
        path = os.path.join(self.sysfs_root, SOURCE)
        try:
            return sorted(os.listdir(path))
        except OSError as e:
            raise EnumerationFailure(f"{path}: {e.strerror or e}") from e
