"""drips.codec.stream_config

Stream configuration packing.

Layout (256 bits, MSB -> LSB)::

    streamId: 32 | amountPerSecond: 160 | start: 32 | durationSeconds: 32

Decoded values are validated again. Upstream data is not trusted to be in range.
"""

from __future__ import annotations

from drips.core.constants import UINT256_MAX
from drips.core.exceptions import RangeViolationError
from drips.core.types import StreamConfig

STREAM_ID_BITS = 32
AMOUNT_PER_SECOND_BITS = 160
START_BITS = 32
DURATION_BITS = 32

MAX_STREAM_ID = (1 << STREAM_ID_BITS) - 1
MAX_AMOUNT_PER_SECOND = (1 << AMOUNT_PER_SECOND_BITS) - 1
MAX_START = (1 << START_BITS) - 1
MAX_DURATION = (1 << DURATION_BITS) - 1

_DURATION_OFFSET = 0
_START_OFFSET = _DURATION_OFFSET + DURATION_BITS
_AMOUNT_OFFSET = _START_OFFSET + START_BITS
_STREAM_ID_OFFSET = _AMOUNT_OFFSET + AMOUNT_PER_SECOND_BITS


def _check(field: str, value: int, lower: int, upper: int, *, lower_inclusive: bool = True) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeViolationError(field, value, lower=lower, upper=upper, lower_inclusive=lower_inclusive)
    too_low = value < lower if lower_inclusive else value <= lower
    if too_low or value > upper:
        raise RangeViolationError(field, value, lower=lower, upper=upper, lower_inclusive=lower_inclusive)


def validate_stream_config(config: StreamConfig) -> None:
    _check("streamId", config.stream_id, 0, MAX_STREAM_ID)
    _check("amountPerSecond", config.amount_per_second, 0, MAX_AMOUNT_PER_SECOND, lower_inclusive=False)
    _check("start", config.start, 0, MAX_START)
    _check("durationSeconds", config.duration_seconds, 0, MAX_DURATION)


def encode_stream_config(config: StreamConfig) -> int:
    validate_stream_config(config)

    packed = config.stream_id
    packed = (packed << AMOUNT_PER_SECOND_BITS) | config.amount_per_second
    packed = (packed << START_BITS) | config.start
    packed = (packed << DURATION_BITS) | config.duration_seconds
    return packed


def amount_per_second_of(packed: int) -> int:
    """Raw ``amountPerSecond`` field. No validation; zero comes back as zero."""

    return (packed >> _AMOUNT_OFFSET) & MAX_AMOUNT_PER_SECOND


def decode_stream_config(packed: int) -> StreamConfig:
    _check("config", packed, 0, UINT256_MAX)

    config = StreamConfig(
        stream_id=(packed >> _STREAM_ID_OFFSET) & MAX_STREAM_ID,
        amount_per_second=amount_per_second_of(packed),
        start=(packed >> _START_OFFSET) & MAX_START,
        duration_seconds=(packed >> _DURATION_OFFSET) & MAX_DURATION,
    )

    validate_stream_config(config)
    return config
