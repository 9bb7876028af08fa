"""Executor bytecode builder - compiles swap routes into executor payloads."""

from executor.builders import Executor03BytecodeBuilder, get_bytecode_builder
from executor.config import DEFAULT_CONFIG, ExecutorConfig

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "Executor03BytecodeBuilder",
    "ExecutorConfig",
    "get_bytecode_builder",
    "__version__",
]
