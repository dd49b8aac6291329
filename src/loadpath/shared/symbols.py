"""
Symbols

Module names and global variable names are symbols. Symbols compare and
hash case-insensitively but keep the spelling they were created with.
"""

from typing import Any


class Symbol:
    """Case-insensitive interned-style name."""

    __slots__ = ("name", "_key")

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a string, got {type(name).__name__}")
        self.name = name
        self._key = name.casefold()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Symbol):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"'{self.name}"


def make_symbol(value: Any) -> Symbol:
    """Return value as a Symbol; strings are coerced, symbols pass through."""
    if isinstance(value, Symbol):
        return value
    return Symbol(value)
