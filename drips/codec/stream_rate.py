"""drips.codec.stream_rate

Human rates <-> ``amountPerSecond``.

``amountPerSecond`` carries 9 extra decimals so that slow streams of cheap tokens
still have a non-zero per-second rate. The ledger settles per cycle, and it
settles whole wei: a rate that streams less than 1 wei per cycle is rejected.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import IntEnum

from drips.core.constants import AMOUNT_PER_SECOND_EXTRA_DECIMALS, AMOUNT_PER_SECOND_MULTIPLIER, CYCLE_SECONDS
from drips.core.exceptions import UnroundableRateError

# uint256 needs 78 digits; leave headroom for the fraction.
_PRECISION = 160


class TimeUnit(IntEnum):
    SECOND = 1
    MINUTE = 60
    HOUR = 3_600
    DAY = 86_400
    WEEK = 604_800
    MONTH = 2_592_000  # 30 days
    YEAR = 31_536_000  # 365 days

    @classmethod
    def from_name(cls, name: str) -> TimeUnit:
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown time unit: {name}") from None


def _parse_units(amount: str, decimals: int) -> int:
    """Decimal string to integer base units. Excess fraction digits round half up."""

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValueError(f"invalid amount: {amount!r}") from None
        if not value.is_finite() or value < 0:
            raise ValueError(f"invalid amount: {amount!r}")
        return int(value.scaleb(decimals).to_integral_value(rounding=ROUND_HALF_UP))


def parse_stream_rate(amount: str, time_unit: TimeUnit, token_decimals: int) -> int:
    """``amount`` tokens per ``time_unit`` as ``amountPerSecond``."""

    total_decimals = token_decimals + AMOUNT_PER_SECOND_EXTRA_DECIMALS
    return _parse_units(amount, total_decimals) // int(time_unit)


def validate_stream_rate(amount_per_second: int) -> None:
    wei_per_cycle = amount_per_second * CYCLE_SECONDS // AMOUNT_PER_SECOND_MULTIPLIER
    if wei_per_cycle < 1:
        raise UnroundableRateError(
            "Stream rate must be higher than 1 wei per week",
            amount_per_second=amount_per_second,
            wei_per_cycle=wei_per_cycle,
        )


def format_stream_rate(amount_per_second: int, display_unit: TimeUnit, token_decimals: int) -> str:
    """Inverse of :func:`parse_stream_rate`, truncated to whole wei."""

    wei = amount_per_second * int(display_unit) // AMOUNT_PER_SECOND_MULTIPLIER
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        text = format(Decimal(wei).scaleb(-token_decimals), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
