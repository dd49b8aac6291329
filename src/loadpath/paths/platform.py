"""
Separator / Platform Policy

Supplies the path separator and the rootedness test used by every path
helper. Scripts always see '/' as the separator; drive prefixes
("C:...") only count as rooted on Windows.
"""

import os
from dataclasses import dataclass

from ..utils.config import PATH_SEPARATOR


@dataclass(frozen=True)
class PathPolicy:
    """Separator character plus platform rooting rules."""
    separator: str = PATH_SEPARATOR
    drive_prefixes: bool = False

    def is_absolute(self, path: str) -> bool:
        """True if path starts with the separator or a drive prefix."""
        if path.startswith(self.separator):
            return True
        return self.drive_prefixes and len(path) >= 2 and path[0].isalpha() and path[1] == ":"


POSIX_POLICY = PathPolicy()
WINDOWS_POLICY = PathPolicy(drive_prefixes=True)
DEFAULT_POLICY = WINDOWS_POLICY if os.name == "nt" else POSIX_POLICY
