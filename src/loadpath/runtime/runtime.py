"""
Runtime

Facade an embedding application talks to. One ScriptRuntime owns one
binding store, one module resolver and one interpreter, so independent
runtimes never share loaded modules.

Every operation that takes a path or module name checks its argument the
way the script-facing built-ins do, raising ArgumentTypeError for
anything that is not a string (or, for module names, a Symbol).
"""

import logging
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Mapping, Optional, Sequence, TextIO

from .environment import Environment
from .interpreter import Interpreter
from ..frontend.nodes import Program
from ..frontend.parser import Parser
from ..loader.dylib import DylibLoader, NativeLibrary
from ..loader.module_info import ExtensionType, RequireOutcome, RequireResult
from ..loader.resolver import ModuleResolver, default_exe_dir
from ..paths import expand as paths
from ..shared.errors import ArgumentTypeError
from ..shared.symbols import Symbol
from ..utils.io_utils import read_source_file

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def shared_parser() -> Parser:
    """Parser shared by all runtimes (stateless; grammar is built once)."""
    return Parser()


def _require_string(value: Any) -> str:
    if not isinstance(value, str):
        raise ArgumentTypeError(value, expected="string")
    return value


@dataclass(frozen=True)
class ExecutionResult:
    """Result of running a script: value of its last statement."""
    value: Any
    path: str


@dataclass(frozen=True)
class CompiledScript:
    """A parsed script file; calling it runs the script with no arguments."""
    path: str
    program: Program
    interpreter: Interpreter

    def __call__(self) -> Any:
        return self.interpreter.run(self.program)

    def __str__(self) -> str:
        return f"CompiledScript({self.path})"


class ScriptRuntime:
    """
    Embeddable runtime: path helpers, module resolution and script loading.

    Args:
        search_paths: explicit module search directories
        extensions: extension/type table (native before script by default)
        exe_dir: executable directory (default search path tail)
        environ: environment mapping (LOADPATH_LIB); a copy of os.environ by default
        dylib_loader: native library loader
        parser: script parser (shared default)
        stdout: stream Print writes to (sys.stdout when None)
    """

    def __init__(
        self,
        search_paths: Optional[Sequence[str]] = None,
        extensions: Optional[Sequence[ExtensionType]] = None,
        exe_dir: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        dylib_loader: Optional[DylibLoader] = None,
        parser: Optional[Parser] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.environment = Environment(
            exe_dir=exe_dir if exe_dir is not None else default_exe_dir(),
            environ=environ,
        )
        self.parser = parser if parser is not None else shared_parser()
        self.interpreter = Interpreter(self.environment)
        self.resolver = ModuleResolver(
            self.load_script,
            search_paths=search_paths,
            extensions=extensions,
            exe_dir=self.environment.exe_dir,
            environ=self.environment.environ,
            dylib_loader=dylib_loader,
        )
        self.stdout = stdout
        self._install_builtins()

    # ------------------------------------------------------------------
    # Path operations
    # ------------------------------------------------------------------

    def resolve_path(self, path: Any) -> Optional[str]:
        """Absolute canonical path; None when a "~login" cannot be expanded."""
        return paths.expand_path(_require_string(path))

    def file_exists(self, path: Any) -> bool:
        return paths.file_exists(_require_string(path))

    def base_name(self, path: Any) -> str:
        """Last path component; the path itself when it ends with a separator."""
        path = _require_string(path)
        base = paths.base_name(path)
        return base if base is not None else path

    def dir_name(self, path: Any) -> str:
        return paths.dir_name(_require_string(path))

    def join_path(self, directory: Any, name: Any) -> str:
        return paths.join_path(_require_string(directory), _require_string(name))

    # ------------------------------------------------------------------
    # Modules and scripts
    # ------------------------------------------------------------------

    def require(self, module: Any) -> RequireResult:
        """Load module once; NOT_FOUND is returned, not raised."""
        return self.resolver.require(module)

    def require_or_throw(self, module: Any) -> RequireResult:
        """Load module once; raise ModuleNotFoundError when it cannot be found."""
        return self.resolver.require_or_throw(module)

    def compile_file(self, path: Any) -> CompiledScript:
        """
        Parse a script file into a zero-argument callable.

        Raises:
            ScriptReadError: the file is missing, unreadable or not valid text
            ScriptSyntaxError: the file does not parse
        """
        path = _require_string(path)
        source = read_source_file(path)
        program = self.parser.parse(source, path)
        return CompiledScript(path=path, program=program, interpreter=self.interpreter)

    def load_script(self, path: Any) -> ExecutionResult:
        """Compile and run a script file."""
        compiled = self.compile_file(path)
        logger.debug(f"Executing script {compiled.path}")
        return ExecutionResult(value=compiled(), path=compiled.path)

    def load_lib(self, path: Any) -> NativeLibrary:
        """Open a native library by path and run its install entry point."""
        return self.resolver.dylib_loader.load(_require_string(path))

    def run_source(self, source: str, source_file: str = "<string>") -> Any:
        """Parse and run script text (used by embedders and the CLI)."""
        return self.interpreter.run(self.parser.parse(source, source_file))

    # ------------------------------------------------------------------
    # Script built-ins
    # ------------------------------------------------------------------

    def _install_builtins(self) -> None:
        define = self.interpreter.define_builtin
        define("Require", self._script_require)
        define("TryRequire", self._script_try_require)
        define("Load", lambda path: self.load_script(path).value)
        define("LoadLib", self.load_lib)
        define("CompileFile", self.compile_file)
        define("FileExists", self.file_exists)
        define("BaseName", self.base_name)
        define("DirName", self.dir_name)
        define("JoinPath", self.join_path)
        define("ExpandPath", self.resolve_path)
        define("Print", self._script_print)

    def _script_require(self, module: Any) -> Optional[Symbol]:
        return _require_value(self.require_or_throw(module))

    def _script_try_require(self, module: Any) -> Optional[Symbol]:
        return _require_value(self.require(module))

    def _script_print(self, *values: Any) -> None:
        stream = self.stdout if self.stdout is not None else sys.stdout
        print(*(format_value(v) for v in values), file=stream)


def _require_value(result: RequireResult) -> Optional[Symbol]:
    """Script view of a require: the symbol when newly loaded, else nil."""
    if result.outcome is RequireOutcome.RESOLVED:
        return result.symbol
    return None


def format_value(value: Any) -> str:
    """Render a script value the way Print shows it."""
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)
