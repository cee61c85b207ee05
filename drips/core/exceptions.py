"""drips.core.exceptions

Errors are part of the interface.

Every failure is a deterministic function of its input. Retrying changes nothing;
reading the ``meta`` usually does.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class DripsError(Exception):
    """Base exception for drips.

    ``meta`` carries structured context (field names, bounds, offending ids) so
    that callers can surface it verbatim.
    """

    def __init__(self, message: str, **meta: Any) -> None:
        super().__init__(message)
        self.message = message
        self.meta: dict[str, Any] = dict(meta)


class ConfigError(DripsError):
    """Configuration is missing, invalid, or inconsistent."""


# ---------------------------------------------------------------------------
# Numeric encodings
# ---------------------------------------------------------------------------


class RangeViolationError(DripsError, ValueError):
    """A field does not fit its declared bit width."""

    def __init__(self, field: str, value: int, *, lower: int, upper: int, lower_inclusive: bool = True) -> None:
        left = "[" if lower_inclusive else "("
        super().__init__(
            f"'{field}' must be in {left}{lower}, {upper}], got {value}",
            field=field,
            value=value,
            lower=lower,
            upper=upper,
            lower_inclusive=lower_inclusive,
        )
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper


class UnroundableRateError(DripsError, ValueError):
    """Rate rounds to zero at protocol precision. Less than 1 wei per cycle moves nothing."""


class InvalidStreamIdError(DripsError, ValueError):
    """Stream identifier is not ``<sender>-<token>-<dripId>``."""


class MetadataKeyError(DripsError, ValueError):
    """Account metadata key does not fit into bytes32."""


# ---------------------------------------------------------------------------
# Account ids
# ---------------------------------------------------------------------------


class AccountIdError(DripsError, ValueError):
    """A 256-bit account id could not be interpreted."""


class MalformedAccountIdError(AccountIdError):
    """Value is not a uint256."""


class UnknownDriverError(AccountIdError):
    """Top 32 bits do not name a known driver."""


class ReservedBitsError(AccountIdError):
    """Bits that must be zero are not."""


class InvalidOrcidError(DripsError, ValueError):
    """ORCID iD is malformed or fails its check digit."""


# ---------------------------------------------------------------------------
# Receiver lists
# ---------------------------------------------------------------------------


class ReceiverError(DripsError, ValueError):
    """Receiver list rejected as a whole. There is no partial success."""


class ReceiverCountError(ReceiverError):
    def __init__(self, kind: str, actual: int, maximum: int) -> None:
        super().__init__(
            f"Too many {kind} receivers: {actual}. Maximum is {maximum}",
            kind=kind,
            actual=actual,
            maximum=maximum,
        )
        self.actual = actual
        self.maximum = maximum


class ZeroAmountReceiverError(ReceiverError):
    def __init__(self, account_ids: Sequence[int]) -> None:
        ids = list(account_ids)
        super().__init__(
            f"Stream receivers with 0 amountPerSecond: {', '.join(str(i) for i in ids)}",
            account_ids=ids,
        )
        self.account_ids = ids


class DuplicateReceiverError(ReceiverError):
    def __init__(self, kind: str, account_ids: Sequence[int]) -> None:
        ids = list(account_ids)
        super().__init__(
            f"Duplicate {kind} receivers: {', '.join(str(i) for i in ids)}",
            kind=kind,
            account_ids=ids,
        )
        self.account_ids = ids


class SplitsValidationError(ReceiverError):
    """Splits receivers violate ordering or weight invariants."""


class InvalidWeightError(SplitsValidationError):
    """Weight outside (0, TOTAL_SPLIT_WEIGHT]."""


class ReceiverOrderError(SplitsValidationError):
    """Ids not strictly increasing. Catches both disorder and duplicates."""


class TotalWeightError(SplitsValidationError):
    """Weights do not add up. The contract does not round."""


class ReceiverResolutionError(ReceiverError):
    """A receiver description could not be resolved to an account id."""


class InvalidProjectUrlError(ReceiverResolutionError):
    """Project URL does not point at a supported forge."""


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


class NoSchemaMatchedError(DripsError, ValueError):
    """Document satisfies no known version of its family.

    ``errors`` holds every rejection, newest version first. The newest one is
    the most likely intended version and is chained as ``__cause__``.
    """

    def __init__(self, family: str, errors: Sequence[tuple[str, Exception]]) -> None:
        rejected = list(errors)
        newest = f"{rejected[0][0]}: {rejected[0][1]}" if rejected else "no versions registered"
        super().__init__(
            f"No known {family} metadata version matched (newest rejection {newest})",
            family=family,
            versions=[name for name, _ in rejected],
        )
        self.family = family
        self.errors = rejected

    @property
    def primary(self) -> Exception | None:
        return self.errors[0][1] if self.errors else None
