"""Bytecode builders, one per executor contract version."""

from __future__ import annotations

from executor.builders.base import ExecutorBytecodeBuilder
from executor.builders.executor03 import Executor03BytecodeBuilder
from executor.config import DEFAULT_CONFIG, ExecutorConfig
from executor.constants import Executors
from executor.errors import UnsupportedExecutorError

_BUILDERS: dict[Executors, type[Executor03BytecodeBuilder]] = {
    Executors.THREE: Executor03BytecodeBuilder,
}


def get_bytecode_builder(
    executor: Executors | str,
    config: ExecutorConfig = DEFAULT_CONFIG,
) -> ExecutorBytecodeBuilder:
    """Return the builder for an executor version.

    Raises:
        UnsupportedExecutorError: If no builder exists for the version
    """
    try:
        key = Executors(executor)
        builder_cls = _BUILDERS[key]
    except (ValueError, KeyError):
        raise UnsupportedExecutorError(f"No bytecode builder for executor {executor!r}") from None
    return builder_cls(config)


__all__ = [
    "Executor03BytecodeBuilder",
    "ExecutorBytecodeBuilder",
    "get_bytecode_builder",
]
