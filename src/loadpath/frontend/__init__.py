"""Script frontend: grammar, AST and parser."""

from .nodes import (
    Node, Literal, SymbolLiteral, ArrayLiteral, Variable, Call, Assignment, Program,
)
from .parser import Parser

__all__ = [
    'Node',
    'Literal',
    'SymbolLiteral',
    'ArrayLiteral',
    'Variable',
    'Call',
    'Assignment',
    'Program',
    'Parser',
]
