"""Shared call-data helpers for executor bytecode builders.

Every call the executor performs is packed as:

    [20B target][4B calldata size][2B fromAmountPos][2B balanceCheckPos]
    [2B toAmountPos][1B specialDex][2B flag][calldata]

Builders for different executor versions compose a ``CallDataBuilder`` and
only differ in how they classify flags and lay out legs.
"""

from __future__ import annotations

from eth_abi import encode  # type: ignore[attr-defined]
from eth_abi.packed import encode_packed

from executor.config import ExecutorConfig
from executor.constants import (
    ERC20_APPROVE_SELECTOR,
    ERC20_TRANSFER_SELECTOR,
    MAX_UINT,
    TRANSFER_AMOUNT_POS,
    WITHDRAW_AMOUNT_POS,
    ZERO_ADDRESS,
)
from executor.flags import Flag, SpecialDex, inserts_from_amount
from executor.framing import ensure_fits
from executor.models.exchange import WrapCall
from executor.models.types import address_to_bytes
from executor.offsets import encode_uint256, find_offset


def encode_approve(spender: str, amount: int = MAX_UINT) -> bytes:
    """Encode ERC20 ``approve(spender, amount)``."""
    return ERC20_APPROVE_SELECTOR + encode(
        ["address", "uint256"], [address_to_bytes(spender), amount]
    )


def encode_transfer(recipient: str, amount: int) -> bytes:
    """Encode ERC20 ``transfer(recipient, amount)``."""
    return ERC20_TRANSFER_SELECTOR + encode(
        ["address", "uint256"], [address_to_bytes(recipient), amount]
    )


class CallDataBuilder:
    """Builds the framed calls shared by all executor versions.

    Args:
        config: Network addresses (wrapped native token, receiver)
    """

    def __init__(self, config: ExecutorConfig) -> None:
        self.config = config

    def build_call_data(
        self,
        target: str,
        call_data: bytes,
        from_amount_pos: int,
        balance_check_pos: int,
        special_dex: int,
        flag: Flag,
        to_amount_pos: int = 0,
    ) -> bytes:
        """Pack one executor call.

        Raises:
            HeaderOverflowError: If a position or the call size exceeds its field
        """
        return encode_packed(
            ["address", "uint32", "uint16", "uint16", "uint16", "uint8", "uint16", "bytes"],
            [
                address_to_bytes(target),
                ensure_fits(len(call_data), 4, "calldata_size"),
                ensure_fits(from_amount_pos, 2, "from_amount_pos"),
                ensure_fits(balance_check_pos, 2, "balance_check_pos"),
                ensure_fits(to_amount_pos, 2, "to_amount_pos"),
                ensure_fits(int(special_dex), 1, "special_dex"),
                ensure_fits(int(flag), 2, "flag"),
                call_data,
            ],
        )

    def build_approve_call_data(
        self,
        spender: str,
        token: str,
        amount: int = MAX_UINT,
        flag: Flag = Flag.ZERO,
    ) -> bytes:
        """Approve ``spender`` on ``token``.

        When the flag injects the amount, the allowance word becomes the patch point.
        """
        approve = encode_approve(spender, amount)
        from_amount_pos = 0
        if inserts_from_amount(flag):
            from_amount_pos = find_offset(approve, encode_uint256(amount), "approve amount")
        return self.build_call_data(token, approve, from_amount_pos, 0, SpecialDex.DEFAULT, flag)

    def build_transfer_call_data(self, token: str) -> bytes:
        """Transfer the executor's leftover ``token`` balance to the receiver.

        The amount is encoded as 0 and replaced by the balance check result.
        """
        transfer = encode_transfer(self.config.receiver_address, 0)
        return self.build_call_data(
            token,
            transfer,
            TRANSFER_AMOUNT_POS,
            0,
            SpecialDex.DEFAULT,
            Flag.ELEVEN,  # 11 % 4 = 3: insert amount, 11 % 3 = 2: check destToken balance
        )

    def build_wrap_call_data(self, deposit: WrapCall, flag: Flag = Flag.NINE) -> bytes:
        """Deposit native into the wrapped native token."""
        return self.build_call_data(
            deposit.callee, deposit.calldata_bytes, 0, 0, SpecialDex.DEFAULT, flag
        )

    def build_unwrap_call_data(self, withdraw: WrapCall) -> bytes:
        """Withdraw the wrapped native balance, patched in at runtime."""
        return self.build_call_data(
            withdraw.callee,
            withdraw.calldata_bytes,
            WITHDRAW_AMOUNT_POS,
            WITHDRAW_AMOUNT_POS,
            SpecialDex.DEFAULT,
            Flag.SEVEN,  # 7 % 4 = 3: insert amount, 7 % 3 = 1: check native balance
        )

    def build_final_special_flag_call_data(self) -> bytes:
        """Forward the executor's remaining native balance to the caller."""
        return self.build_call_data(ZERO_ADDRESS, b"", 0, 0, SpecialDex.SEND_NATIVE, Flag.ZERO)


__all__ = ["CallDataBuilder", "encode_approve", "encode_transfer"]
