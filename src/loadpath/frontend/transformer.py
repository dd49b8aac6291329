"""
Script AST Transformer
Converts the Lark parse tree to script AST nodes
"""

import ast
import logging
from typing import Any, List, Optional, Union

from lark import Transformer, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from .nodes import (
    ArrayLiteral, Assignment, Call, Literal, Node, Program, SymbolLiteral, Variable,
)
from ..shared.source_location import SourceLocation

# Lark Meta object contains location information
LarkMeta: TypeAlias = Any
NumberValue: TypeAlias = Union[int, float]

logger: logging.Logger = logging.getLogger(__name__)


@v_args(inline=True, meta=True)
class ScriptTransformer(Transformer):
    """Builds Program / statement / expression nodes with source locations."""

    def __init__(self, current_file: str = "<script>"):
        super().__init__()
        self.current_file = current_file

    def _location(self, meta: LarkMeta) -> Optional[SourceLocation]:
        if meta is None or getattr(meta, "empty", True):
            return None
        return SourceLocation(
            file=self.current_file,
            line=meta.line,
            column=meta.column,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )

    def start(self, meta: LarkMeta, *statements: Node) -> Program:
        return Program(list(statements), source_file=self.current_file, location=self._location(meta))

    def assignment(self, meta: LarkMeta, name: Token, value: Node) -> Assignment:
        return Assignment(str(name), value, location=self._location(meta))

    def call(self, meta: LarkMeta, name: Token, arguments: Optional[List[Node]] = None) -> Call:
        return Call(str(name), arguments or [], location=self._location(meta))

    def arguments(self, meta: LarkMeta, *items: Node) -> List[Node]:
        return list(items)

    def string(self, meta: LarkMeta, token: Token) -> Literal:
        return Literal(ast.literal_eval(str(token)), location=self._location(meta))

    def number(self, meta: LarkMeta, token: Token) -> Literal:
        text = str(token)
        value: NumberValue
        if any(c in text for c in ".eE"):
            value = float(text)
        else:
            value = int(text)
        return Literal(value, location=self._location(meta))

    def symbol(self, meta: LarkMeta, name: Token) -> SymbolLiteral:
        return SymbolLiteral(str(name), location=self._location(meta))

    def nil(self, meta: LarkMeta) -> Literal:
        return Literal(None, location=self._location(meta))

    def true(self, meta: LarkMeta) -> Literal:
        return Literal(True, location=self._location(meta))

    def false(self, meta: LarkMeta) -> Literal:
        return Literal(False, location=self._location(meta))

    def array(self, meta: LarkMeta, items: Optional[List[Node]] = None) -> ArrayLiteral:
        return ArrayLiteral(items or [], location=self._location(meta))

    def variable(self, meta: LarkMeta, name: Token) -> Variable:
        return Variable(str(name), location=self._location(meta))
