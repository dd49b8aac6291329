"""
Home-Directory Resolver

Expands a leading "~" or "~login" using the platform account database.
A missing account is an expected outcome and yields None, never an error.
"""

import logging
import os
from typing import NamedTuple, Optional

try:
    import pwd
except ImportError:  # no account database (Windows)
    pwd = None

from .platform import PathPolicy, DEFAULT_POLICY
from ..utils.config import HOME_PREFIX

logger = logging.getLogger(__name__)


class HomeDirectory(NamedTuple):
    """Resolved home directory plus the text that followed the login name."""
    directory: str
    remainder: str


def resolve_home(path: str, policy: PathPolicy = DEFAULT_POLICY) -> Optional[HomeDirectory]:
    """
    Resolve "~", "~/rest", "~login" or "~login/rest".

    Returns:
        HomeDirectory(directory, remainder) where remainder has its leading
        separator stripped (empty when nothing follows), or None when the
        account is unknown or the platform has no account database.

    Examples:
        resolve_home("~")            -> HomeDirectory("/home/me", "")
        resolve_home("~root/etc")    -> HomeDirectory("/root", "etc")
        resolve_home("~nosuchuser")  -> None
    """
    if not path.startswith(HOME_PREFIX) or pwd is None:
        return None

    login, _, remainder = path[len(HOME_PREFIX):].partition(policy.separator)

    try:
        if login:
            entry = pwd.getpwnam(login)
        else:
            entry = pwd.getpwuid(os.getuid())
    except KeyError:
        logger.debug(f"No account database entry for {login or 'current user'!r}")
        return None

    return HomeDirectory(directory=entry.pw_dir, remainder=remainder)
