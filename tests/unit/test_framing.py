"""Tests for leg and payload framing."""

import pytest

from executor.errors import HeaderOverflowError, PatternNotFoundError
from executor.framing import (
    add_metadata,
    encode_percentage,
    ensure_fits,
    frame_payload,
    pack_header,
)
from executor.models.types import address_to_bytes
from tests.helpers import DAI, ETH, USDC


class TestEncodePercentage:
    """Percentages are encoded as ceil(percent * 100)."""

    @pytest.mark.parametrize(
        ("percent", "expected"),
        [
            (33.333, 3334),
            (25.0, 2500),
            (100, 10000),
            (1.1, 110),
            (0.01, 1),
            (66.6667, 6667),
        ],
    )
    def test_encoding(self, percent, expected):
        """Basis-point encoding rounds up."""
        assert encode_percentage(percent) == expected


class TestPackHeader:
    """Tests for fixed-width header packing."""

    def test_big_endian_widths(self):
        """Fields are packed big-endian at their declared widths."""
        packed = pack_header([("a", 1, 4), ("b", 258, 2)], b"\xff")
        assert packed == b"\x00\x00\x00\x01" + b"\x01\x02" + b"\xff"

    def test_overflow_raises(self):
        """A value exceeding its width aborts."""
        with pytest.raises(HeaderOverflowError, match="size"):
            pack_header([("size", 2**32, 4)])

    def test_negative_raises(self):
        """Negative values never fit an unsigned field."""
        with pytest.raises(HeaderOverflowError):
            ensure_fits(-1, 8, "pos")

    def test_max_value_fits(self):
        """The largest representable value is accepted."""
        assert ensure_fits(2**64 - 1, 8, "pos") == 2**64 - 1


class TestAddMetadata:
    """Tests for the leg frame."""

    def _call_data(self) -> bytes:
        # DAI word at 0, USDC word at 32
        return bytes(12) + address_to_bytes(DAI) + bytes(12) + address_to_bytes(USDC)

    def test_layout(self):
        """Leg frame is [size][withdraw][destPos][srcPos][percent][calldata]."""
        call_data = self._call_data()
        framed = add_metadata(call_data, 25.0, DAI, USDC, need_withdraw=False)

        assert framed[0:4] == len(call_data).to_bytes(4, "big")
        assert framed[4:8] == (0).to_bytes(4, "big")
        assert framed[8:16] == (44).to_bytes(8, "big")  # dest token
        assert framed[16:24] == (12).to_bytes(8, "big")  # src token
        assert framed[24:32] == (2500).to_bytes(8, "big")
        assert framed[32:] == call_data

    def test_withdraw_flag(self):
        """Withdraw flag is encoded as 1."""
        framed = add_metadata(self._call_data(), 100, DAI, USDC, need_withdraw=True)
        assert framed[4:8] == (1).to_bytes(4, "big")

    def test_missing_token_raises(self):
        """Token positions must be resolvable in the assembled call data."""
        with pytest.raises(PatternNotFoundError):
            add_metadata(self._call_data(), 100, ETH, USDC, need_withdraw=False)

    def test_percentage_overflow_raises(self):
        """A percentage that does not fit 8 bytes aborts."""
        with pytest.raises(HeaderOverflowError, match="percentage"):
            add_metadata(self._call_data(), 1e20, DAI, USDC, need_withdraw=False)


class TestFramePayload:
    """Tests for the outer payload frame."""

    @pytest.mark.parametrize("body", [b"", b"\x01", bytes(31), bytes(range(256)) * 3])
    def test_offset_and_length(self, body):
        """Offset is always 32 and length is always len(body) + 96."""
        payload = frame_payload(body)
        assert int.from_bytes(payload[0:32], "big") == 32
        assert int.from_bytes(payload[32:64], "big") == len(body) + 96
        assert payload[64:] == body
