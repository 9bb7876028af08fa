"""Byte-offset resolution inside opaque call data.

The executor patches runtime amounts into call data at fixed byte positions,
so the builder has to find where token addresses and amounts sit inside each
call template. Searches run on decoded bytes, never on hex text, so matches are
always byte aligned and case cannot interfere.

The first match wins. A 20-byte address or a 32-byte amount word is assumed
not to appear anywhere else in a template; the builder does not try to prove
this.
"""

from __future__ import annotations

from dataclasses import dataclass

from eth_abi import encode  # type: ignore[attr-defined]

from executor.constants import ADDRESS_WORD_PADDING, ZEROS_12_BYTES
from executor.errors import CallDataEncodingError, PatternNotFoundError
from executor.flags import BalanceCheck, balance_check, inserts_from_amount
from executor.models.types import address_to_bytes


@dataclass(frozen=True)
class DexOffsets:
    """Patch points inside a dex call. Zero means no patch point."""

    from_amount_pos: int = 0
    to_amount_pos: int = 0
    balance_check_pos: int = 0


def encode_uint256(value: int) -> bytes:
    """ABI encode an integer as a 32-byte big-endian word."""
    return encode(["uint256"], [value])


def find_offset(data: bytes, needle: bytes, label: str) -> int:
    """Return the byte offset of the first occurrence of ``needle``.

    Raises:
        PatternNotFoundError: If ``needle`` does not occur in ``data``
    """
    index = data.find(needle)
    if index < 0:
        raise PatternNotFoundError(f"{label} (0x{needle.hex()}) not found in call data")
    return index


def find_address_offset(data: bytes, address: str, label: str) -> int:
    """Byte offset of the raw 20-byte ``address`` inside ``data``."""
    return find_offset(data, address_to_bytes(address), label)


def add_token_address_to_call_data(call_data: bytes, token: str) -> bytes:
    """Append ``token`` as a 32-byte word unless the call data already holds it."""
    token_bytes = address_to_bytes(token)
    if token_bytes in call_data:
        return call_data
    return call_data + ZEROS_12_BYTES + token_bytes


def balance_check_offset(call_data: bytes, token: str) -> int:
    """Offset of the 32-byte word that holds ``token``.

    The executor reads the balance-check token relative to the start of its
    ABI word, i.e. 12 bytes before the address itself.

    Raises:
        PatternNotFoundError: If the token is absent
        CallDataEncodingError: If the address is not preceded by a full word padding
    """
    index = find_address_offset(call_data, token, "balance check token")
    offset = index - ADDRESS_WORD_PADDING
    if offset < 0:
        raise CallDataEncodingError(
            f"balance check token at byte {index} is not inside a 32-byte word"
        )
    return offset


def resolve_dex_offsets(
    call_data: bytes,
    flag: int,
    balance_token: str,
    src_amount: int,
    dest_amount: int,
) -> DexOffsets:
    """Resolve the patch points for a dex call under ``flag``.

    Args:
        call_data: Dex call data with source and destination tokens embedded
        flag: Dex flag of the leg
        balance_token: Token whose balance is checked (wrapped native for native output)
        src_amount: Leg source amount
        dest_amount: Leg destination amount

    Returns:
        DexOffsets, with zeros where the flag needs no patch point
    """
    balance_check_pos = 0
    if balance_check(flag) is BalanceCheck.DEST_TOKEN:
        balance_check_pos = balance_check_offset(call_data, balance_token)

    from_amount_pos = 0
    to_amount_pos = 0
    if inserts_from_amount(flag):
        from_amount_pos = find_offset(call_data, encode_uint256(src_amount), "source amount")
        to_amount_pos = find_offset(call_data, encode_uint256(dest_amount), "destination amount")

    return DexOffsets(
        from_amount_pos=from_amount_pos,
        to_amount_pos=to_amount_pos,
        balance_check_pos=balance_check_pos,
    )


__all__ = [
    "DexOffsets",
    "add_token_address_to_call_data",
    "balance_check_offset",
    "encode_uint256",
    "find_address_offset",
    "find_offset",
    "resolve_dex_offsets",
]
