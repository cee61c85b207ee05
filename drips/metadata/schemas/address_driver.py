"""drips.metadata.schemas.address_driver

Address-driver account metadata: the streams an address has configured, grouped
by token.
"""

from __future__ import annotations

from typing import Literal

from pydantic import StrictBool, StrictStr

from drips.metadata.schemas.common import BigInt, EthAddress, MetadataModel, Number


class StreamConfigMetadata(MetadataModel):
    raw: StrictStr
    drip_id: StrictStr
    amount_per_second: BigInt
    duration_seconds: Number  # 0 = runs until funds run out
    # Absent: use the block timestamp of the stream's first setStreams event.
    start_timestamp: Number | None = None


class DripsUser(MetadataModel):
    driver: Literal["address", "nft", "repo"]
    account_id: StrictStr


class StreamMetadata(MetadataModel):
    id: StrictStr
    initial_drips_config: StreamConfigMetadata
    receiver: DripsUser
    archived: StrictBool
    name: StrictStr | None = None
    description: StrictStr | None = None


class AssetConfigMetadata(MetadataModel):
    token_address: EthAddress
    streams: list[StreamMetadata]


class AddressDescribes(MetadataModel):
    driver: Literal["address"]
    account_id: StrictStr


class AddressDriverAccountMetadataV1(MetadataModel):
    describes: AddressDescribes
    name: StrictStr | None = None
    description: StrictStr | None = None
    emoji: StrictStr | None = None
    asset_configs: list[AssetConfigMetadata]
    timestamp: Number
    written_by_address: EthAddress


AddressDriverAccountMetadata = AddressDriverAccountMetadataV1
