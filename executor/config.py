"""Network configuration for the bytecode builders."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from executor.constants import AUGUSTUS_V6, EXECUTOR_03, NATIVE_TOKEN, WETH, Executors
from executor.errors import UnsupportedExecutorError
from executor.models.types import normalize_address


def _default_executor_addresses() -> Mapping[Executors, str]:
    return MappingProxyType({Executors.THREE: EXECUTOR_03})


@dataclass(frozen=True)
class ExecutorConfig:
    """Addresses a builder needs, passed in at construction.

    Attributes:
        wrapped_native_token_address: Wrapped native token (WETH on mainnet)
        native_token_address: Placeholder address routes use for the native asset
        receiver_address: Contract that receives leftover output and native balance
        executor_addresses: Deployed executor contract per version
    """

    wrapped_native_token_address: str = WETH
    native_token_address: str = NATIVE_TOKEN
    receiver_address: str = AUGUSTUS_V6
    executor_addresses: Mapping[Executors, str] = field(default_factory=_default_executor_addresses)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        for name in ("wrapped_native_token_address", "native_token_address", "receiver_address"):
            value = getattr(self, name)
            object.__setattr__(self, name, normalize_address(value, validate=True))
        object.__setattr__(
            self,
            "executor_addresses",
            MappingProxyType(
                {
                    Executors(key): normalize_address(address, validate=True)
                    for key, address in self.executor_addresses.items()
                }
            ),
        )

    def is_native(self, token: str) -> bool:
        """Check whether a token address is the native asset placeholder."""
        return normalize_address(token) == self.native_token_address

    def executor_address(self, executor: Executors) -> str:
        """Deployed address of an executor version.

        Raises:
            UnsupportedExecutorError: If no address is configured for the version
        """
        try:
            return self.executor_addresses[executor]
        except KeyError:
            raise UnsupportedExecutorError(f"No address configured for {executor.value}") from None


# Default configuration instance (mainnet)
DEFAULT_CONFIG = ExecutorConfig()


def load_config_from_env(environ: Mapping[str, str] | None = None) -> ExecutorConfig:
    """Build a config from environment variables, falling back to mainnet defaults.

    Recognized variables:
    - EXECUTOR_WRAPPED_NATIVE_TOKEN
    - EXECUTOR_NATIVE_TOKEN
    - EXECUTOR_RECEIVER_ADDRESS
    - EXECUTOR_03_ADDRESS

    Raises:
        ValueError: If any configured address is invalid
    """
    env = os.environ if environ is None else environ
    return ExecutorConfig(
        wrapped_native_token_address=env.get("EXECUTOR_WRAPPED_NATIVE_TOKEN", WETH),
        native_token_address=env.get("EXECUTOR_NATIVE_TOKEN", NATIVE_TOKEN),
        receiver_address=env.get("EXECUTOR_RECEIVER_ADDRESS", AUGUSTUS_V6),
        executor_addresses={Executors.THREE: env.get("EXECUTOR_03_ADDRESS", EXECUTOR_03)},
    )
