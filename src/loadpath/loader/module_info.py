"""
Module System Types

Pure data structures shared by the resolver and the runtime:
artifact kinds, the extension/type table entries, registry records and
require outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from ..shared.symbols import Symbol
from ..utils.config import NATIVE_EXTENSION, SCRIPT_EXTENSION


class ArtifactKind(Enum):
    """What a candidate file is loaded as"""
    NATIVE_LIBRARY = "native_library"
    SCRIPT_SOURCE = "script_source"


@dataclass(frozen=True)
class ExtensionType:
    """One row of the extension/type table: suffix plus how to load it."""
    extension: str
    kind: ArtifactKind


DEFAULT_EXTENSIONS: Tuple[ExtensionType, ...] = (
    ExtensionType(NATIVE_EXTENSION, ArtifactKind.NATIVE_LIBRARY),
    ExtensionType(SCRIPT_EXTENSION, ArtifactKind.SCRIPT_SOURCE),
)


@dataclass(frozen=True)
class LoadedModule:
    """
    Registry record for a resolved module.

    - symbol: name the module was required under
    - kind: native library or script source
    - path: file that satisfied the require
    - handle: NativeLibrary for native modules, None for scripts
    """
    symbol: Symbol
    kind: ArtifactKind
    path: str
    handle: Optional[Any] = None

    def __str__(self) -> str:
        return f"Module({self.symbol.name}, {self.kind.value}, {self.path})"


class RequireOutcome(Enum):
    ALREADY_LOADED = "already_loaded"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RequireResult:
    """Outcome of a require; module is set unless the outcome is NOT_FOUND."""
    outcome: RequireOutcome
    symbol: Symbol
    module: Optional[LoadedModule] = None

    @property
    def found(self) -> bool:
        return self.outcome is not RequireOutcome.NOT_FOUND

    @classmethod
    def already_loaded(cls, module: LoadedModule) -> 'RequireResult':
        return cls(RequireOutcome.ALREADY_LOADED, module.symbol, module)

    @classmethod
    def resolved(cls, module: LoadedModule) -> 'RequireResult':
        return cls(RequireOutcome.RESOLVED, module.symbol, module)

    @classmethod
    def not_found(cls, symbol: Symbol) -> 'RequireResult':
        return cls(RequireOutcome.NOT_FOUND, symbol)
