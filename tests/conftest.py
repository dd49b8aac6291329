"""
Pytest configuration and shared fixtures for all loadpath tests.

Native libraries are simulated with FakeLinker, an opener/closer pair
that stands in for ctypes: it "opens" any existing file and records
every open, close and install call.
"""

import io
import os
import sys
import pytest
from pathlib import Path
from typing import Dict, List, Set

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from loadpath.loader.dylib import DylibLoader
from loadpath.runtime.runtime import ScriptRuntime, shared_parser
from loadpath.utils.config import NATIVE_EXTENSION, SCRIPT_EXTENSION


# =============================================================================
# Native library doubles
# =============================================================================

class FakeLibrary:
    """Opened library; exposes the install entry point unless told not to."""

    def __init__(self, path: str, with_entry_point: bool = True):
        self.path = path
        self.install_calls = 0
        if with_entry_point:
            def loadpath_install():
                self.install_calls += 1
            self.loadpath_install = loadpath_install


class FakeLinker:
    """Opener/closer pair for DylibLoader that never touches ctypes."""

    def __init__(self):
        self.opened: List[FakeLibrary] = []
        self.closed: List[FakeLibrary] = []
        self.without_entry_point: Set[str] = set()

    def open(self, path: str) -> FakeLibrary:
        if not os.path.isfile(path):
            raise OSError(f"{path}: cannot open shared object file: No such file or directory")
        library = FakeLibrary(path, with_entry_point=os.path.basename(path) not in self.without_entry_point)
        self.opened.append(library)
        return library

    def close(self, library: FakeLibrary) -> None:
        self.closed.append(library)

    def loader(self) -> DylibLoader:
        return DylibLoader(opener=self.open, closer=self.close)


@pytest.fixture
def linker():
    return FakeLinker()


# =============================================================================
# Module trees on disk
# =============================================================================

@pytest.fixture
def write_module():
    """
    write_module(directory, name, kind="script", source="") creates
    <directory>/<name><extension> and returns its path as a string.
    """
    def _write(directory: Path, name: str, kind: str = "script", source: str = "") -> str:
        directory.mkdir(parents=True, exist_ok=True)
        extension = NATIVE_EXTENSION if kind == "native" else SCRIPT_EXTENSION
        path = directory / f"{name}{extension}"
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write


# =============================================================================
# Runtimes
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Parser shared across all tests (grammar is built once)."""
    return shared_parser()


@pytest.fixture
def make_runtime(tmp_path, linker, session_parser):
    """
    Factory for isolated runtimes: make_runtime(dir1, dir2, ...) searches
    exactly those directories, uses the fake linker and captures Print.
    """
    def _make(*search_dirs: Path, environ: Dict[str, str] = None, **kwargs) -> ScriptRuntime:
        options = dict(
            search_paths=[str(d) for d in search_dirs] if search_dirs else None,
            exe_dir=str(tmp_path / "bin"),
            environ=environ if environ is not None else {},
            dylib_loader=linker.loader(),
            parser=session_parser,
            stdout=io.StringIO(),
        )
        options.update(kwargs)
        return ScriptRuntime(**options)
    return _make


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
