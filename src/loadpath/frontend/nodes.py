"""
Script AST nodes.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..shared.source_location import SourceLocation


@dataclass
class Node:
    location: Optional[SourceLocation] = field(default=None, compare=False, kw_only=True)


@dataclass
class Literal(Node):
    """String, number, nil, true or false"""
    value: Any


@dataclass
class SymbolLiteral(Node):
    """'name"""
    name: str


@dataclass
class ArrayLiteral(Node):
    items: List[Node]


@dataclass
class Variable(Node):
    name: str


@dataclass
class Call(Node):
    """Name(arg, ...): a built-in or a callable global"""
    name: str
    arguments: List[Node]


@dataclass
class Assignment(Node):
    """name := value, binds a global"""
    name: str
    value: Node


@dataclass
class Program(Node):
    statements: List[Node]
    source_file: str = "<script>"
