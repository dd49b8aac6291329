"""
Dynamic Library Loader

Opens a native shared object and runs its install entry point:

    void loadpath_install(void);

The entry point is called exactly once, through a ctypes prototype with
no arguments and no result. A library that opens but lacks the entry
point is closed again and rejected.
"""

import ctypes
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import _ctypes

from ..shared.errors import DylibFailure, DylibOpenError
from ..utils.config import ENTRY_POINT_SYMBOL

logger = logging.getLogger(__name__)

Opener = Callable[[str], Any]
Closer = Callable[[Any], None]


@dataclass(frozen=True)
class NativeLibrary:
    """An opened and installed native library."""
    path: str
    handle: Any

    def __str__(self) -> str:
        return f"NativeLibrary({self.path})"


def close_library(library: Any) -> None:
    """Release a ctypes library handle (dlclose / FreeLibrary)."""
    release = getattr(_ctypes, "dlclose", None) or getattr(_ctypes, "FreeLibrary", None)
    if release is None:
        return
    release(library._handle)


class DylibLoader:
    """
    Typed plugin loader over ctypes.

    Args:
        entry_point: name of the install function to look up
        opener: opens a library path (ctypes.CDLL by default); must raise
                OSError on failure
        closer: releases a library returned by opener
    """

    def __init__(
        self,
        entry_point: str = ENTRY_POINT_SYMBOL,
        opener: Optional[Opener] = None,
        closer: Optional[Closer] = None,
    ):
        self.entry_point = entry_point
        self.opener = opener if opener is not None else ctypes.CDLL
        self.closer = closer if closer is not None else close_library

    def load(self, path: str) -> NativeLibrary:
        """
        Open path, run its install entry point and return the library.

        Raises:
            DylibOpenError: OPEN_FAILED when the platform cannot open the file,
                            ENTRY_POINT_MISSING when it opens without the entry point
        """
        try:
            library = self.opener(path)
        except OSError as e:
            diagnostic = str(e)
            logger.error(diagnostic)
            raise DylibOpenError(path, DylibFailure.OPEN_FAILED, diagnostic) from e

        try:
            install = getattr(library, self.entry_point)
        except AttributeError:
            self.closer(library)
            raise DylibOpenError(path, DylibFailure.ENTRY_POINT_MISSING) from None

        install.restype = None
        install.argtypes = []
        install()
        logger.debug(f"Installed native library {path}")
        return NativeLibrary(path=path, handle=library)
