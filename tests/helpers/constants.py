"""Shared address and amount constants for tests.

All addresses are lowercase for consistency with normalize_address().
"""

# =============================================================================
# Mainnet tokens
# =============================================================================

ETH = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"  # Native asset placeholder
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)

# =============================================================================
# Exchanges and actors (synthetic, chosen not to collide with token bytes)
# =============================================================================

EXCHANGE_A = "0x1111111111111111111111111111111111111111"
EXCHANGE_B = "0x2222222222222222222222222222222222222222"
EXCHANGE_C = "0x3333333333333333333333333333333333333333"
SENDER = "0x5555555555555555555555555555555555555555"
RECIPIENT = "0x000010036c0190e009a000d0fc3541100a07380a"  # Executor03 receives dex output

# =============================================================================
# Common amounts
# =============================================================================

ONE_ETH = 10**18
ONE_DAI = 10**18
USDC_2500 = 2_500 * 10**6

# Selector used by the synthetic dex calls built in factories
DEX_SELECTOR = bytes.fromhex("12345678")

# Encoded sizes
CALL_HEADER_SIZE = 33  # 20 + 4 + 2 + 2 + 2 + 1 + 2
LEG_HEADER_SIZE = 32  # 4 + 4 + 8 + 8 + 8
DEX_CALL_SIZE = 4 + 5 * 32  # selector + (src, dest, srcAmount, destAmount, recipient)
