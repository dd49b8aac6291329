"""Script runtime: binding store, interpreter and the embedding facade."""

from .environment import Environment
from .interpreter import Interpreter
from .runtime import ScriptRuntime, ExecutionResult, CompiledScript, format_value

__all__ = [
    'Environment',
    'Interpreter',
    'ScriptRuntime',
    'ExecutionResult',
    'CompiledScript',
    'format_value',
]
