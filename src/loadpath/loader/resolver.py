"""
Module Resolution

Turns a module symbol into a loaded artifact. For every directory of the
search path, in order, and every row of the extension/type table, in
order, the candidate <directory>/<name><extension> is probed; the first
existing file is loaded (native library) or registered and executed
(script), and the search stops there.

A symbol is loaded at most once per resolver: the registry is checked
before any filesystem access, and entries are never removed.

A resolver is an explicit context object owned by a runtime, so
independent runtimes (and tests) never share registries.
"""

import logging
import os
import sys
import threading
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .dylib import DylibLoader
from .module_info import (
    ArtifactKind, ExtensionType, LoadedModule, RequireOutcome, RequireResult,
    DEFAULT_EXTENSIONS,
)
from ..paths.expand import dir_name, expand_path, file_exists, join_path
from ..shared.errors import ArgumentTypeError, LoadpathImplementationError, ModuleNotFoundError
from ..shared.symbols import Symbol, make_symbol
from ..utils.config import CURRENT_DIR, LIBRARY_PATH_VARIABLE

logger = logging.getLogger(__name__)

ScriptLoader = Callable[[str], Any]


def default_exe_dir() -> str:
    """Directory of the running program (sys.argv[0]), or the working directory."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    expanded = expand_path(program) if program else None
    if expanded is None:
        return os.getcwd()
    return dir_name(expanded)


class LoadedRegistry:
    """Symbol -> LoadedModule. Grows monotonically; keys are never replaced."""

    def __init__(self):
        self._modules: Dict[Symbol, LoadedModule] = {}

    def register(self, module: LoadedModule) -> None:
        if module.symbol in self._modules:
            raise LoadpathImplementationError(
                f"Module {module.symbol.name} registered twice"
            )
        self._modules[module.symbol] = module

    def get(self, symbol: Symbol) -> Optional[LoadedModule]:
        return self._modules.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._modules)


class ModuleResolver:
    """
    Resolver context: search path list + extension/type table + registry.

    Args:
        script_loader: executes a script path (the evaluator); called after
                       the script has been registered
        search_paths: explicit search directories; overrides the environment
        extensions: extension/type table, in trial order
        exe_dir: executable directory for the default search path
        environ: environment mapping consulted for LOADPATH_LIB
        dylib_loader: native library loader
    """

    def __init__(
        self,
        script_loader: ScriptLoader,
        search_paths: Optional[Sequence[str]] = None,
        extensions: Optional[Sequence[ExtensionType]] = None,
        exe_dir: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        dylib_loader: Optional[DylibLoader] = None,
    ):
        self.script_loader = script_loader
        self.dylib_loader = dylib_loader if dylib_loader is not None else DylibLoader()
        self.registry = LoadedRegistry()
        self._explicit_paths = tuple(search_paths) if search_paths is not None else None
        self._extensions = tuple(extensions) if extensions is not None else DEFAULT_EXTENSIONS
        self._exe_dir = exe_dir
        self._environ = environ if environ is not None else os.environ
        self._search_paths: Optional[Tuple[str, ...]] = None
        self._lock = threading.RLock()

    @property
    def search_paths(self) -> Tuple[str, ...]:
        """Search path list, built on first use and fixed afterwards."""
        if self._search_paths is None:
            self._search_paths = self._build_search_paths()
            logger.debug(f"Module search path: {list(self._search_paths)}")
        return self._search_paths

    @property
    def extensions(self) -> Tuple[ExtensionType, ...]:
        return self._extensions

    def _build_search_paths(self) -> Tuple[str, ...]:
        if self._explicit_paths is not None:
            return self._explicit_paths
        configured = self._environ.get(LIBRARY_PATH_VARIABLE)
        if configured:
            return tuple(p for p in configured.split(os.pathsep) if p)
        exe_dir = self._exe_dir if self._exe_dir is not None else default_exe_dir()
        return (CURRENT_DIR, exe_dir)

    def candidates(self, name: str) -> Iterator[Tuple[str, ArtifactKind]]:
        """Candidate files for name, in trial order."""
        for directory in self.search_paths:
            base = join_path(directory, name)
            for ext in self._extensions:
                yield f"{base}{ext.extension}", ext.kind

    def require(self, module: Any) -> RequireResult:
        """
        Load module once. Never raises for a missing module.

        Returns:
            RequireResult with outcome ALREADY_LOADED (registry hit, no
            filesystem access), RESOLVED, or NOT_FOUND

        Raises:
            ArgumentTypeError: module is neither a Symbol nor a string
            DylibOpenError: the chosen native library failed to install
        """
        if not isinstance(module, (Symbol, str)):
            raise ArgumentTypeError(module, expected="symbol or string")
        symbol = make_symbol(module)

        with self._lock:
            loaded = self.registry.get(symbol)
            if loaded is not None:
                logger.debug(f"Module {symbol.name} already loaded from {loaded.path}")
                return RequireResult.already_loaded(loaded)

            for path, kind in self.candidates(symbol.name):
                logger.debug(f"Probing {path}")
                if not file_exists(path):
                    continue
                return RequireResult.resolved(self._load(symbol, path, kind))

        logger.debug(f"Module {symbol.name} not found")
        return RequireResult.not_found(symbol)

    def require_or_throw(self, module: Any) -> RequireResult:
        """Like require(), but raise ModuleNotFoundError when nothing matches."""
        result = self.require(module)
        if result.outcome is RequireOutcome.NOT_FOUND:
            searched: List[str] = [path for path, _ in self.candidates(result.symbol.name)]
            raise ModuleNotFoundError(result.symbol, searched)
        return result

    def _load(self, symbol: Symbol, path: str, kind: ArtifactKind) -> LoadedModule:
        if kind is ArtifactKind.NATIVE_LIBRARY:
            library = self.dylib_loader.load(path)
            module = LoadedModule(symbol=symbol, kind=kind, path=path, handle=library)
            self.registry.register(module)
            return module

        # Registered before execution, so a script requiring itself is a no-op
        module = LoadedModule(symbol=symbol, kind=kind, path=path)
        self.registry.register(module)
        logger.debug(f"Loading script {path} for module {symbol.name}")
        self.script_loader(path)
        return module

    def is_loaded(self, module: Any) -> bool:
        return make_symbol(module) in self.registry
