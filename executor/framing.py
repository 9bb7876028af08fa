"""Fixed-width framing of leg call data and of the final payload.

Leg frame (all integers big-endian):

    [4B size][4B withdraw flag][8B destTokenPos][8B srcTokenPos][8B percent*100][calldata]

Payload frame:

    [32B offset = 32][32B length = len(body) + 96][body]
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from eth_abi.packed import encode_packed

from executor.constants import BYTES_96_LENGTH, CALLDATA_OFFSET
from executor.errors import HeaderOverflowError
from executor.offsets import find_address_offset


def ensure_fits(value: int, width: int, field: str) -> int:
    """Check that ``value`` fits in an unsigned field of ``width`` bytes.

    Raises:
        HeaderOverflowError: If the value is negative or too large
    """
    if value < 0 or value >= 1 << (8 * width):
        raise HeaderOverflowError(f"{field}={value} does not fit in {width} bytes")
    return value


def pack_header(fields: Sequence[tuple[str, int, int]], payload: bytes = b"") -> bytes:
    """Pack ``(name, value, width)`` fields big-endian, followed by ``payload``.

    Raises:
        HeaderOverflowError: If any value exceeds its field width
    """
    types = [f"uint{8 * width}" for _, _, width in fields]
    values = [ensure_fits(value, width, name) for name, value, width in fields]
    return encode_packed([*types, "bytes"], [*values, payload])


def encode_percentage(percent: float) -> int:
    """Encode a leg percentage with basis-point precision, rounding up.

    The float's shortest decimal form is used so that e.g. 1.1 gives 110.
    Plain float arithmetic (``ceil(1.1 * 100)``) would give 111, since
    ``1.1 * 100 == 110.00000000000001``.
    """
    return math.ceil(Decimal(str(percent)) * 100)


def add_metadata(
    call_data: bytes,
    percent: float,
    src_token: str,
    dest_token: str,
    need_withdraw: bool,
) -> bytes:
    """Wrap one leg's assembled call data in the leg frame.

    Token positions are looked up in the final call data, since prefixed
    approval and wrap calls shift everything after them.

    Raises:
        PatternNotFoundError: If either token address is absent from the call data
        HeaderOverflowError: If a field exceeds its width
    """
    src_token_pos = find_address_offset(call_data, src_token, "source token")
    dest_token_pos = find_address_offset(call_data, dest_token, "destination token")

    return pack_header(
        [
            ("size", len(call_data), 4),
            ("withdraw_flag", 1 if need_withdraw else 0, 4),
            ("dest_token_pos", dest_token_pos, 8),
            ("src_token_pos", src_token_pos, 8),
            ("percentage", encode_percentage(percent), 8),
        ],
        call_data,
    )


def frame_payload(body: bytes) -> bytes:
    """Prefix the concatenated leg frames with the calldata offset and length words.

    The length covers 96 extra bytes (bytes12(0) + msg.sender + padding) that
    the caller places in front of the body.
    """
    return pack_header(
        [
            ("calldata_offset", CALLDATA_OFFSET, 32),
            ("calldata_length", len(body) + BYTES_96_LENGTH, 32),
        ],
        body,
    )


__all__ = [
    "add_metadata",
    "encode_percentage",
    "ensure_fits",
    "frame_payload",
    "pack_header",
]
