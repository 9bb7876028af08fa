"""Tests for Executor03 flag classification."""

from executor.flags import Flag, LegFlags
from tests.helpers import (
    DAI,
    ETH,
    USDC,
    WETH,
    make_exchange_data,
    make_leg,
    make_template,
    make_weth_call_data,
)


class TestSimpleSwapFlags:
    """Single-leg classification, evaluated in order."""

    def test_native_src_without_wrap_sends_native(self, builder):
        """Native source and no wrap: flag 5."""
        flags = builder.build_simple_swap_flags(make_leg(ETH, USDC), make_template())
        assert flags == LegFlags(dex=Flag.FIVE, approve=Flag.ZERO)

    def test_native_src_with_wrap_request_but_no_deposit(self, builder):
        """Wrap requested without a deposit call still sends native."""
        flags = builder.build_simple_swap_flags(
            make_leg(ETH, USDC),
            make_template(need_wrap_native=True),
            make_weth_call_data(deposit=False),
        )
        assert flags.dex == Flag.FIVE

    def test_native_src_with_wrap(self, builder):
        """Wrapped native source with recipient: flag 0."""
        flags = builder.build_simple_swap_flags(
            make_leg(ETH, USDC),
            make_template(need_wrap_native=True),
            make_weth_call_data(),
        )
        assert flags.dex == Flag.ZERO

    def test_native_dest_without_unwrap(self, builder):
        """Native destination and no unwrap: flag 4 (native balance check)."""
        flags = builder.build_simple_swap_flags(make_leg(DAI, ETH), make_template())
        assert flags.dex == Flag.FOUR

    def test_native_dest_with_unwrap(self, builder, weth_call_data):
        """Native destination with unwrap: flag 8."""
        flags = builder.build_simple_swap_flags(
            make_leg(DAI, ETH),
            make_template(need_wrap_native=True),
            weth_call_data,
        )
        assert flags.dex == Flag.EIGHT

    def test_missing_recipient(self, builder):
        """Dex call without recipient: flag 8 (destToken balance check)."""
        flags = builder.build_simple_swap_flags(
            make_leg(DAI, USDC), make_template(has_recipient=False)
        )
        assert flags.dex == Flag.EIGHT

    def test_native_src_takes_precedence_over_missing_recipient(self, builder):
        """Rule order: native source wins over a missing recipient."""
        flags = builder.build_simple_swap_flags(
            make_leg(ETH, USDC), make_template(has_recipient=False)
        )
        assert flags.dex == Flag.FIVE

    def test_token_to_token_with_recipient(self, builder):
        """Plain token swap with recipient: flag 0."""
        flags = builder.build_simple_swap_flags(make_leg(DAI, USDC), make_template())
        assert flags == LegFlags()


class TestMultiSwapFlags:
    """Horizontal classification."""

    def test_all_legs_zero(self, builder, weth_call_data):
        """Every leg of a multi-leg route gets (0, 0), whatever its tokens."""
        legs = [make_leg(ETH, USDC, percent=50), make_leg(ETH, USDC, percent=50)]
        templates = [
            make_template(has_recipient=False),
            make_template(need_wrap_native=True, exchange_data=make_exchange_data(WETH, USDC)),
        ]
        flags = builder.build_flags(legs, templates, weth_call_data)
        assert flags == [LegFlags(), LegFlags()]

    def test_single_leg_dispatches_to_simple(self, builder):
        """One leg uses the simple classification."""
        assert builder.build_flags([make_leg(ETH, USDC)], [make_template()]) == [
            LegFlags(dex=Flag.FIVE)
        ]
