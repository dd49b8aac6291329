"""
Script file reading.

Every script read goes through read_source_file, so a missing or
undecodable file always surfaces as ScriptReadError.
"""

from pathlib import Path
from typing import Union

from .config import DEFAULT_FILE_ENCODING
from ..shared.errors import ScriptReadError


def read_source_file(path: Union[Path, str]) -> str:
    """Return the text of a script file.

    Raises:
        ScriptReadError: the file cannot be opened or is not valid
                         DEFAULT_FILE_ENCODING text
    """
    try:
        return Path(path).read_text(encoding=DEFAULT_FILE_ENCODING)
    except UnicodeDecodeError as e:
        reason = f"not valid {DEFAULT_FILE_ENCODING} text ({e.reason} at byte {e.start})"
        raise ScriptReadError(str(path), reason) from e
    except OSError as e:
        raise ScriptReadError(str(path), e.strerror or str(e)) from e
