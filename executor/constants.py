"""Protocol constants for the executor bytecode builders.

Centralizes well-known addresses, executor versions and encoding widths.
"""

from enum import Enum

from executor.models.types import UINT256_MAX, is_valid_address


class Executors(str, Enum):
    """Executor contract versions."""

    ONE = "Executor01"
    TWO = "Executor02"
    THREE = "Executor03"


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Placeholder address routes use for the chain's native asset
NATIVE_TOKEN = _validate_address("native token", "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee")

ZERO_ADDRESS = _validate_address("zero", "0x0000000000000000000000000000000000000000")

# Mainnet defaults (lowercase for consistency)
WETH = _validate_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
AUGUSTUS_V6 = _validate_address("Augustus V6", "0x6a000f20005980200259b80c5102003040001068")
EXECUTOR_03 = _validate_address("Executor03", "0x000010036c0190e009a000d0fc3541100a07380a")

# Unlimited ERC20 allowance
MAX_UINT = UINT256_MAX

# Bytes the caller prepends to the executor calldata: bytes12(0) + msg.sender + padding
BYTES_96_LENGTH = 96

# Offset of the calldata body right after the offset word
CALLDATA_OFFSET = 32

# Zero padding in front of an address inside a 32-byte ABI word
ADDRESS_WORD_PADDING = 12
ZEROS_12_BYTES = bytes(ADDRESS_WORD_PADDING)

# ERC20 function selectors
ERC20_APPROVE_SELECTOR = bytes.fromhex("095ea7b3")  # approve(address,uint256)
ERC20_TRANSFER_SELECTOR = bytes.fromhex("a9059cbb")  # transfer(address,uint256)

# Byte positions of the amount argument in single-argument and transfer calls
WITHDRAW_AMOUNT_POS = 4  # withdraw(uint256)
TRANSFER_AMOUNT_POS = 36  # transfer(address,uint256)
