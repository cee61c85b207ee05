"""drips.core.constants

Protocol-wide constants.

These mirror the deployed contracts bit for bit. They are not configuration.
"""

from __future__ import annotations

# Accounting interval of the ledger: one week.
CYCLE_SECONDS = 604_800

MAX_STREAM_RECEIVERS = 100
MAX_SPLIT_RECEIVERS = 200
TOTAL_SPLIT_WEIGHT = 1_000_000

# amountPerSecond carries 9 decimals beyond the token's own.
AMOUNT_PER_SECOND_EXTRA_DECIMALS = 9
AMOUNT_PER_SECOND_MULTIPLIER = 10**AMOUNT_PER_SECOND_EXTRA_DECIMALS

UINT256_MAX = (1 << 256) - 1

# Account id layout: [driver tag: 32 | payload: 224]
DRIVER_TAG_SHIFT = 224
DRIVER_TAG_MASK = (1 << 32) - 1
