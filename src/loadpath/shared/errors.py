"""
Error Reporting

Exception taxonomy for the loader and the script runtime, plus a
rustc-style renderer for script diagnostics.
"""

import os
from enum import Enum
from typing import Any, List, Optional

from .source_location import SourceLocation


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    explicit = os.environ.get("LOADPATH_COLOR", "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


def format_diagnostic(
    message: str,
    location: Optional[SourceLocation],
    source: Optional[str] = None,
    code: Optional[str] = None,
    color: bool = False,
) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        error[S0001]: unexpected character
         --> init.lps:2:9
          |
        2 | Require(@)
          |         ^
    """
    code_str = f"[{code}]" if code else ""
    out: List[str] = [
        _style(f"error{code_str}", _BOLD, _RED, color=color)
        + _style(f": {message}", _BOLD, color=color)
    ]

    if location is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        return "\n".join(out)

    gw = max(len(str(location.line)), 1)
    out.append(_style(" " * gw + "--> ", _BOLD, _BLUE, color=color) + str(location))

    src_lines = source.split("\n") if source is not None else []
    idx = location.line - 1
    if not 0 <= idx < len(src_lines):
        return "\n".join(out)

    code_line = src_lines[idx]
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    out.append(_style(str(location.line).rjust(gw) + " | ", _BOLD, _BLUE, color=color) + code_line)
    span = 1
    if location.end_line == location.line and location.end_column > location.column:
        span = location.end_column - location.column
    carets = " " * max(location.column - 1, 0) + "^" * span
    out.append(
        _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)
        + _style(carets, _BOLD, _RED, color=color)
    )
    return "\n".join(out)


# ============================================================================
# Exception Classes
# ============================================================================

class LoadpathError(Exception):
    """Base exception for all user-visible loadpath errors"""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def __str__(self):
        return self.message


class ArgumentTypeError(LoadpathError):
    """An argument was not a string (or symbol) where one is required"""
    def __init__(self, value: Any, expected: str = "string"):
        super().__init__(
            f"expected a {expected}, got {type(value).__name__}: {value!r}", value
        )
        self.expected = expected


class DylibFailure(Enum):
    """Why a native library could not be installed"""
    OPEN_FAILED = "open_failed"
    ENTRY_POINT_MISSING = "entry_point_missing"


class DylibOpenError(LoadpathError):
    """
    A native library could not be opened, or opened without the install
    entry point.
    """
    def __init__(self, path: str, kind: DylibFailure, diagnostic: Optional[str] = None):
        if kind is DylibFailure.ENTRY_POINT_MISSING:
            message = f"not a loadable module (no install entry point): {path}"
        else:
            message = f"cannot open dynamic library: {path}"
        if diagnostic:
            message = f"{message}: {diagnostic}"
        super().__init__(message, path)
        self.path = path
        self.kind = kind
        self.diagnostic = diagnostic


class ModuleNotFoundError(LoadpathError):
    """Raised when no search directory holds a loadable file for a module"""
    def __init__(self, symbol: Any, searched: Optional[List[str]] = None):
        message = f"module not found: {symbol}"
        if searched:
            message = f"{message} (searched: {', '.join(searched)})"
        super().__init__(message, symbol)
        self.symbol = symbol
        self.searched = list(searched or [])


class ScriptReadError(LoadpathError):
    """A script file could not be read or is not valid text"""
    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read script {path}: {reason}", path)
        self.path = path
        self.reason = reason


class ScriptSyntaxError(LoadpathError):
    """Parse error in a script file, rendered with the offending line"""
    def __init__(self,
                 message: str,
                 source_file: str,
                 location: Optional[SourceLocation] = None,
                 source_code: Optional[str] = None):
        super().__init__(message, source_file)
        self.source_file = source_file
        self.location = location
        self.source_code = source_code

    def __str__(self):
        if self.location is None:
            return f"{self.message} in {self.source_file}"
        return format_diagnostic(
            self.message, self.location, self.source_code, code="S0001", color=_use_color()
        )


class ScriptRuntimeError(LoadpathError):
    """Error raised while evaluating a script"""
    def __init__(self, message: str, value: Any = None, location: Optional[SourceLocation] = None):
        super().__init__(message, value)
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message}\n --> {self.location}"
        return self.message


class LoadpathImplementationError(Exception):
    """
    Error in the Python implementation itself (broken invariant), never
    caused by a script or by the filesystem.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"
