"""drips.core.types

Lightweight dataclasses for hot-path values.

Pydantic models own the metadata boundary; dataclasses carry the integers that
end up in calldata.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class DriverTag(IntEnum):
    """Driver encoded in the top 32 bits of every account id."""

    ADDRESS = 0
    NFT = 1
    IMMUTABLE_SPLITS = 2
    REPO = 3
    REPO_SUB_ACCOUNT = 4

    @property
    def label(self) -> str:
        return _DRIVER_LABELS[self]


_DRIVER_LABELS: dict[DriverTag, str] = {
    DriverTag.ADDRESS: "address",
    DriverTag.NFT: "nft",
    DriverTag.IMMUTABLE_SPLITS: "immutable-splits",
    DriverTag.REPO: "repo",
    DriverTag.REPO_SUB_ACCOUNT: "repo-sub-account",
}


@dataclass(frozen=True, slots=True)
class StreamConfig:
    stream_id: int
    amount_per_second: int  # with AMOUNT_PER_SECOND_EXTRA_DECIMALS
    start: int = 0  # 0 = ledger-assigned activation time
    duration_seconds: int = 0  # 0 = until balance runs out


@dataclass(frozen=True, slots=True)
class OnChainStreamReceiver:
    account_id: int
    config: int  # packed StreamConfig


@dataclass(frozen=True, slots=True)
class SplitsReceiver:
    account_id: int
    weight: int
