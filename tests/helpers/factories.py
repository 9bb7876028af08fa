"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_leg, make_template, make_price_route

    leg = make_leg(src_token=ETH, dest_token=USDC)
"""

from eth_abi import encode  # type: ignore[attr-defined]

from executor.models.exchange import LegCallTemplate, WrapCall, WrapUnwrapTemplates
from executor.models.route import Leg, PriceRoute, Route
from executor.models.types import address_to_bytes
from tests.helpers.constants import (
    DAI,
    DEX_SELECTOR,
    EXCHANGE_A,
    ONE_DAI,
    RECIPIENT,
    USDC,
    USDC_2500,
    WETH,
)


def make_exchange_data(
    src_token: str = DAI,
    dest_token: str = USDC,
    src_amount: int = ONE_DAI,
    dest_amount: int = USDC_2500,
    recipient: str = RECIPIENT,
) -> bytes:
    """Synthetic dex call: selector + (src, dest, srcAmount, destAmount, recipient).

    Token bytes sit at 4 + 12 (src) and 36 + 12 (dest); amounts at 68 and 100.
    """
    return DEX_SELECTOR + encode(
        ["address", "address", "uint256", "uint256", "address"],
        [
            address_to_bytes(src_token),
            address_to_bytes(dest_token),
            src_amount,
            dest_amount,
            address_to_bytes(recipient),
        ],
    )


def make_leg(
    src_token: str = DAI,
    dest_token: str = USDC,
    src_amount: int = ONE_DAI,
    dest_amount: int = USDC_2500,
    percent: float = 100,
) -> Leg:
    """Create a leg with sensible defaults (1 DAI -> 2500 USDC, 100%)."""
    return Leg(
        srcToken=src_token,
        destToken=dest_token,
        srcAmount=str(src_amount),
        destAmount=str(dest_amount),
        percent=percent,
    )


def make_template(
    target: str = EXCHANGE_A,
    exchange_data: bytes | None = None,
    has_recipient: bool = True,
    need_wrap_native: bool = False,
) -> LegCallTemplate:
    """Create a call template; defaults to a DAI -> USDC dex call on EXCHANGE_A."""
    if exchange_data is None:
        exchange_data = make_exchange_data()
    return LegCallTemplate(
        targetExchange=target,
        exchangeData="0x" + exchange_data.hex(),
        dexFuncHasRecipient=has_recipient,
        needWrapNative=need_wrap_native,
    )


def make_price_route(legs: list[Leg]) -> PriceRoute:
    """Wrap legs into a price route with a single best route."""
    first, last = legs[0], legs[-1]
    return PriceRoute(
        srcToken=first.src_token,
        destToken=last.dest_token,
        srcAmount=str(sum(leg.src_amount_int for leg in legs)),
        destAmount=str(sum(leg.dest_amount_int for leg in legs)),
        bestRoute=[Route(percent=100, legs=legs)],
    )


def make_weth_call_data(
    deposit: bool = True,
    withdraw: bool = True,
    weth: str = WETH,
) -> WrapUnwrapTemplates:
    """Deposit/withdraw calls on the wrapped native token."""
    deposit_call = WrapCall(callee=weth, calldata="0xd0e30db0") if deposit else None
    withdraw_call = (
        WrapCall(callee=weth, calldata="0x2e1a7d4d" + "00" * 32) if withdraw else None
    )
    return WrapUnwrapTemplates(deposit=deposit_call, withdraw=withdraw_call)
