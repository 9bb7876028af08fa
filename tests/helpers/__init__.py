"""Test helpers module for shared test utilities.

- constants: Token addresses, exchanges and common amounts
- factories: Leg, template and route factory functions
- decoding: Payload decoders for assertions
"""

from tests.helpers.constants import (
    DAI,
    ETH,
    EXCHANGE_A,
    EXCHANGE_B,
    EXCHANGE_C,
    SENDER,
    USDC,
    WETH,
)
from tests.helpers.decoding import decode_calls, decode_payload
from tests.helpers.factories import (
    make_exchange_data,
    make_leg,
    make_price_route,
    make_template,
    make_weth_call_data,
)

__all__ = [
    # Constants
    "ETH",
    "WETH",
    "USDC",
    "DAI",
    "EXCHANGE_A",
    "EXCHANGE_B",
    "EXCHANGE_C",
    "SENDER",
    # Factories
    "make_exchange_data",
    "make_leg",
    "make_price_route",
    "make_template",
    "make_weth_call_data",
    # Decoding
    "decode_calls",
    "decode_payload",
]
