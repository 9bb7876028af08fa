"""Pytest configuration and fixtures."""

import pytest

from executor.builders.executor03 import Executor03BytecodeBuilder
from executor.calldata import CallDataBuilder
from executor.config import DEFAULT_CONFIG, ExecutorConfig
from executor.models.exchange import WrapUnwrapTemplates
from tests.helpers.factories import make_weth_call_data


@pytest.fixture
def config() -> ExecutorConfig:
    """Mainnet configuration."""
    return DEFAULT_CONFIG


@pytest.fixture
def builder(config: ExecutorConfig) -> Executor03BytecodeBuilder:
    """Executor03 builder on mainnet config."""
    return Executor03BytecodeBuilder(config)


@pytest.fixture
def calldata_builder(config: ExecutorConfig) -> CallDataBuilder:
    """Shared call helpers on mainnet config."""
    return CallDataBuilder(config)


@pytest.fixture
def weth_call_data() -> WrapUnwrapTemplates:
    """Deposit and withdraw calls on WETH."""
    return make_weth_call_data()
