"""
Execution Environment

Binding store for scripts: one global scope keyed by Symbol. The
configuration slots the loader reads (executable directory and the
environment mapping) live here as ordinary globals.
"""

import os
from typing import Any, Dict, Iterator, Mapping, Optional

from ..shared.symbols import Symbol, make_symbol
from ..utils.config import ENV_GLOBAL, EXE_DIR_GLOBAL

_MISSING = object()


class Environment:
    """
    Global bindings keyed by Symbol (case-insensitive).
    - set_value(name, value): bind or rebind a global
    - get_value(name, default): lookup
    - has_value(name): membership
    """
    _globals: Dict[Symbol, Any]

    def __init__(self, exe_dir: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        self._globals = {}
        self.set_value(ENV_GLOBAL, dict(environ) if environ is not None else dict(os.environ))
        if exe_dir is not None:
            self.set_value(EXE_DIR_GLOBAL, exe_dir)

    def set_value(self, name: Any, value: Any) -> None:
        """Bind name (Symbol or string) to value."""
        self._globals[make_symbol(name)] = value

    def get_value(self, name: Any, default: Any = None) -> Any:
        return self._globals.get(make_symbol(name), default)

    def has_value(self, name: Any) -> bool:
        return make_symbol(name) in self._globals

    def lookup(self, name: Any) -> Any:
        """Return the binding for name, or the module-private _MISSING marker."""
        return self._globals.get(make_symbol(name), _MISSING)

    @property
    def exe_dir(self) -> Optional[str]:
        return self.get_value(EXE_DIR_GLOBAL)

    @property
    def environ(self) -> Mapping[str, str]:
        return self.get_value(ENV_GLOBAL, {})

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._globals)


def is_missing(value: Any) -> bool:
    return value is _MISSING
