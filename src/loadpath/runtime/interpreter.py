"""
Interpreter

Tree-walking evaluator for script programs. Statements run in order;
the value of a program is the value of its last statement (nil for an
empty program).
"""

import inspect
import logging
from typing import Any, Callable, Dict, List

from .environment import Environment, is_missing
from ..frontend.nodes import (
    ArrayLiteral, Assignment, Call, Literal, Node, Program, SymbolLiteral, Variable,
)
from ..shared.errors import LoadpathImplementationError, ScriptRuntimeError
from ..shared.symbols import Symbol, make_symbol

logger = logging.getLogger(__name__)

Builtin = Callable[..., Any]


class Interpreter:
    """Evaluates programs against one Environment and a table of built-ins."""

    def __init__(self, environment: Environment):
        self.environment = environment
        self.builtins: Dict[Symbol, Builtin] = {}

    def define_builtin(self, name: str, function: Builtin) -> None:
        self.builtins[make_symbol(name)] = function

    def run(self, program: Program) -> Any:
        logger.debug(f"Running {program.source_file}: {len(program.statements)} statements")
        result = None
        for statement in program.statements:
            result = self.evaluate(statement)
        return result

    def evaluate(self, node: Node) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, SymbolLiteral):
            return Symbol(node.name)
        if isinstance(node, ArrayLiteral):
            return [self.evaluate(item) for item in node.items]
        if isinstance(node, Variable):
            value = self.environment.lookup(node.name)
            if is_missing(value):
                raise ScriptRuntimeError(
                    f"undefined variable: {node.name}", node.name, node.location
                )
            return value
        if isinstance(node, Assignment):
            value = self.evaluate(node.value)
            self.environment.set_value(node.name, value)
            return value
        if isinstance(node, Call):
            return self._call(node)
        raise LoadpathImplementationError(f"Unknown node type: {type(node).__name__}")

    def _call(self, node: Call) -> Any:
        arguments: List[Any] = [self.evaluate(arg) for arg in node.arguments]
        function = self.builtins.get(make_symbol(node.name))
        if function is None:
            bound = self.environment.lookup(node.name)
            if is_missing(bound) or not callable(bound):
                raise ScriptRuntimeError(
                    f"undefined function: {node.name}", node.name, node.location
                )
            function = bound
        _check_arity(node, function, arguments)
        return function(*arguments)


def _check_arity(node: Call, function: Builtin, arguments: List[Any]) -> None:
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return
    try:
        signature.bind(*arguments)
    except TypeError as e:
        raise ScriptRuntimeError(
            f"bad call to {node.name}: {e}", node.name, node.location
        ) from e
