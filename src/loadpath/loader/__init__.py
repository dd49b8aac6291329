"""Module system: extension table, native library loading, module resolution."""

from .module_info import (
    ArtifactKind, ExtensionType, LoadedModule, RequireOutcome, RequireResult,
    DEFAULT_EXTENSIONS,
)
from .dylib import DylibLoader, NativeLibrary, close_library
from .resolver import ModuleResolver, LoadedRegistry, default_exe_dir

__all__ = [
    'ArtifactKind',
    'ExtensionType',
    'LoadedModule',
    'RequireOutcome',
    'RequireResult',
    'DEFAULT_EXTENSIONS',
    'DylibLoader',
    'NativeLibrary',
    'close_library',
    'ModuleResolver',
    'LoadedRegistry',
    'default_exe_dir',
]
