"""drips.metadata.build

Latest-shape document builders.

Everything built here goes through ``parse_latest`` before it is returned:
a document this library writes is a document it can read.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from drips.codec.account_id import address_of, driver_of
from drips.codec.stream_config import encode_stream_config
from drips.codec.stream_id import encode_stream_id
from drips.core.exceptions import DripsError
from drips.core.types import DriverTag, StreamConfig
from drips.metadata.schemas import (
    address_driver_metadata_parser,
    immutable_splits_metadata_parser,
    nft_driver_metadata_parser,
)
from drips.metadata.schemas.address_driver import AddressDriverAccountMetadataV1
from drips.metadata.schemas.common import MetadataSplitsReceiver
from drips.metadata.schemas.immutable_splits_driver import SubListMetadataV1
from drips.metadata.schemas.nft_driver import DripListMetadataV7

_STREAM_RECEIVER_DRIVERS: dict[DriverTag, str] = {
    DriverTag.ADDRESS: "address",
    DriverTag.NFT: "nft",
    DriverTag.REPO: "repo",
}


@dataclass(frozen=True, slots=True)
class StreamEntry:
    """One outgoing stream of an address-driver account."""

    token_address: str
    receiver_account_id: int
    config: StreamConfig
    name: str | None = None
    description: str | None = None
    archived: bool = False


@dataclass(frozen=True, slots=True)
class ListLink:
    account_id: int
    driver: Literal["nft", "immutable-splits"]
    type: Literal["dripList", "ecosystem", "subList"]

    def to_dict(self) -> dict[str, str]:
        return {"accountId": str(self.account_id), "driver": self.driver, "type": self.type}


def _receivers_json(receivers: Sequence[MetadataSplitsReceiver]) -> list[dict]:
    return [r.to_json_dict() for r in receivers]


def build_drip_list_metadata(
    drip_list_id: int,
    receivers: Sequence[MetadataSplitsReceiver],
    *,
    name: str | None = None,
    description: str | None = None,
    is_visible: bool = True,
    latest_voting_round_id: str | None = None,
) -> DripListMetadataV7:
    doc: dict = {
        "driver": "nft",
        "type": "dripList",
        "describes": {"driver": "nft", "accountId": str(drip_list_id)},
        "isVisible": is_visible,
        "recipients": _receivers_json(receivers),
    }
    if name is not None:
        doc["name"] = name
    if description is not None:
        doc["description"] = description
    if latest_voting_round_id is not None:
        doc["latestVotingRoundId"] = latest_voting_round_id

    return nft_driver_metadata_parser.parse_latest(doc)


def build_sub_list_metadata(
    receivers: Sequence[MetadataSplitsReceiver],
    *,
    parent: ListLink,
    root: ListLink,
) -> SubListMetadataV1:
    return immutable_splits_metadata_parser.parse_latest(
        {
            "driver": "immutable-splits",
            "type": "subList",
            "recipients": _receivers_json(receivers),
            "parent": parent.to_dict(),
            "root": root.to_dict(),
        }
    )


def _stream_json(account_id: int, entry: StreamEntry) -> dict:
    receiver_driver = driver_of(entry.receiver_account_id)
    label = _STREAM_RECEIVER_DRIVERS.get(receiver_driver)
    if label is None:
        raise DripsError(
            f"Unsupported recipient driver: {receiver_driver.label}",
            receiver_account_id=entry.receiver_account_id,
        )

    config: dict = {
        "raw": str(encode_stream_config(entry.config)),
        "dripId": str(entry.config.stream_id),
        "amountPerSecond": str(entry.config.amount_per_second),
        "durationSeconds": entry.config.duration_seconds,
    }
    if entry.config.start:
        config["startTimestamp"] = entry.config.start

    stream: dict = {
        "id": encode_stream_id(str(account_id), entry.token_address, str(entry.config.stream_id)),
        "initialDripsConfig": config,
        "receiver": {"driver": label, "accountId": str(entry.receiver_account_id)},
        "archived": entry.archived,
    }
    if entry.name is not None:
        stream["name"] = entry.name
    if entry.description is not None:
        stream["description"] = entry.description
    return stream


def build_streams_metadata(
    account_id: int,
    streams: Sequence[StreamEntry],
    *,
    timestamp: int,
    name: str | None = None,
    description: str | None = None,
    emoji: str | None = None,
) -> AddressDriverAccountMetadataV1:
    """Address-driver metadata for ``account_id``, streams grouped by token."""

    by_token: dict[str, list[dict]] = {}
    for entry in streams:
        by_token.setdefault(entry.token_address.lower(), []).append(_stream_json(account_id, entry))

    doc: dict = {
        "describes": {"driver": "address", "accountId": str(account_id)},
        "assetConfigs": [{"tokenAddress": token, "streams": items} for token, items in by_token.items()],
        "timestamp": timestamp,
        "writtenByAddress": address_of(account_id),
    }
    for key, value in (("name", name), ("description", description), ("emoji", emoji)):
        if value is not None:
            doc[key] = value

    return address_driver_metadata_parser.parse_latest(doc)
