"""
Configuration constants to replace magic values throughout loadpath
"""

import os
import sys
import tempfile

# Path configuration constants
PATH_SEPARATOR = "/"
HOME_PREFIX = "~"
CURRENT_DIR = "."
PARENT_DIR = ".."

# Module resolution constants
if sys.platform == "darwin":
    NATIVE_EXTENSION = ".dylib"
elif sys.platform in ("win32", "cygwin"):
    NATIVE_EXTENSION = ".dll"
else:
    NATIVE_EXTENSION = ".so"
SCRIPT_EXTENSION = ".lps"
ENTRY_POINT_SYMBOL = "loadpath_install"  # void loadpath_install(void)

# Environment variable holding extra search directories (os.pathsep separated)
LIBRARY_PATH_VARIABLE = "LOADPATH_LIB"

# Global slots of the binding store
EXE_DIR_GLOBAL = "_EXEDIR_"
ENV_GLOBAL = "_ENV_"

# Parser configuration constants (cache lives in the temp dir)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "loadpath_parser.cache")

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"
