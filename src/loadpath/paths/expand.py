"""
Path joining, expansion and name extraction.

All helpers are total: they return a fresh string (or None / False for
the expected "not possible" outcomes) and never raise.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .canonical import canonicalize
from .home import resolve_home
from .platform import PathPolicy, DEFAULT_POLICY
from ..utils.config import CURRENT_DIR, HOME_PREFIX

logger = logging.getLogger(__name__)


def join_path(directory: str, name: str, policy: PathPolicy = DEFAULT_POLICY) -> str:
    """directory + separator + name, without canonicalization."""
    return f"{directory}{policy.separator}{name}"


def expand_path(path: str, policy: PathPolicy = DEFAULT_POLICY) -> Optional[str]:
    """
    Expand path to an absolute, canonical path.

    Decision order:
    - rooted path (separator or drive prefix): returned unchanged
    - "~" / "~login": home directory, then the remainder (None when the
      account does not exist)
    - anything else: relative to the current working directory

    A remainder is joined to its directory and canonicalized; a bare
    directory is returned as-is.
    """
    if policy.is_absolute(path):
        return path

    if path.startswith(HOME_PREFIX):
        home = resolve_home(path, policy)
        if home is None:
            logger.debug(f"Cannot expand {path!r}: unknown account")
            return None
        directory, remainder = home
    else:
        try:
            directory = os.getcwd()
        except OSError as e:
            logger.debug(f"Cannot expand {path!r}: no working directory ({e})")
            return None
        remainder = path

    if not remainder:
        return directory
    return canonicalize(join_path(directory, remainder, policy), policy)


def base_name(path: str, policy: PathPolicy = DEFAULT_POLICY) -> Optional[str]:
    """
    Text after the last separator.

    The whole string when it has no separator; None when the separator is
    the last character (no base).
    """
    index = path.rfind(policy.separator)
    if index == len(path) - 1 and path:
        return None
    return path[index + 1:]


def dir_name(path: str, policy: PathPolicy = DEFAULT_POLICY) -> str:
    """Text before the last separator; "/" for the root, "." without one."""
    index = path.rfind(policy.separator)
    if index < 0:
        return CURRENT_DIR
    if index == 0:
        return policy.separator
    return path[:index]


def file_exists(path: str) -> bool:
    """True if path names an existing regular file. Never raises."""
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        return False
