"""
Shared components: symbols, source locations and the error taxonomy.
"""

from .symbols import Symbol, make_symbol
from .source_location import SourceLocation
from .errors import (
    LoadpathError, ArgumentTypeError, DylibFailure, DylibOpenError,
    ModuleNotFoundError, ScriptReadError, ScriptSyntaxError, ScriptRuntimeError,
    LoadpathImplementationError, format_diagnostic,
)
