"""
Parser

Parses script source into a Program AST using Lark (LALR with native
grammar caching).
"""

import logging
from pathlib import Path

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError, LarkError

from .nodes import Program
from .transformer import ScriptTransformer
from ..shared.errors import ScriptSyntaxError
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE

logger = logging.getLogger("loadpath.frontend.parser")


class Parser:
    """
    Script parser.

    - Takes source code, returns a Program
    - Preserves source locations
    - Converts every Lark failure into ScriptSyntaxError
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='start',
            parser='lalr',
            cache=cache_file,
            propagate_positions=True,
            maybe_placeholders=False,
        )

    def parse(self, source: str, source_file: str = "<script>") -> Program:
        """Parse source code to a Program."""
        try:
            tree = self.parser.parse(source)
            return ScriptTransformer(source_file).transform(tree)

        except UnexpectedInput as e:
            location = SourceLocation(file=source_file, line=e.line, column=e.column)
            message = _describe(e)
            logger.debug(f"Parse error in {source_file}: {message}")
            raise ScriptSyntaxError(message, source_file, location, source) from e

        except VisitError as e:
            raise ScriptSyntaxError(
                f"invalid literal: {e.orig_exc}", source_file, source_code=source
            ) from e

        except LarkError as e:
            raise ScriptSyntaxError(f"parse error: {e}", source_file, source_code=source) from e


def _describe(error: UnexpectedInput) -> str:
    token = getattr(error, "token", None)
    if token is not None:
        if token.type == "$END":
            return "unexpected end of input"
        return f"unexpected token {str(token)!r}"
    char = getattr(error, "char", None)
    if char is not None:
        return f"unexpected character {char!r}"
    return "syntax error"
