"""
loadpath: module resolution and path canonicalization for an embeddable
scripting runtime.
"""

from .shared import (
    Symbol, LoadpathError, ArgumentTypeError, DylibFailure, DylibOpenError,
    ModuleNotFoundError, ScriptReadError, ScriptSyntaxError, ScriptRuntimeError,
)
from .paths import canonicalize, expand_path, join_path, base_name, dir_name, file_exists
from .loader import (
    ArtifactKind, ExtensionType, ModuleResolver, RequireOutcome, RequireResult,
    DylibLoader, NativeLibrary,
)
from .runtime import ScriptRuntime, ExecutionResult

__version__ = "0.1.0"
