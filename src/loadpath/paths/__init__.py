"""Path handling: separator policy, canonicalization, home and cwd expansion."""

from .platform import PathPolicy, POSIX_POLICY, WINDOWS_POLICY, DEFAULT_POLICY
from .canonical import canonicalize
from .home import HomeDirectory, resolve_home
from .expand import join_path, expand_path, base_name, dir_name, file_exists

__all__ = [
    'PathPolicy',
    'POSIX_POLICY',
    'WINDOWS_POLICY',
    'DEFAULT_POLICY',
    'canonicalize',
    'HomeDirectory',
    'resolve_home',
    'join_path',
    'expand_path',
    'base_name',
    'dir_name',
    'file_exists',
]
