"""drips.metadata.schemas

Schema versions per family, newest first.

Adding a version: define the model next to its predecessor, then prepend it
here. Never edit a released version; documents written with it still exist.
"""

from __future__ import annotations

from drips.metadata.parser import SchemaVersion, VersionedParser, schema_version
from drips.metadata.schemas.address_driver import AddressDriverAccountMetadataV1
from drips.metadata.schemas.immutable_splits_driver import SubListMetadataV1
from drips.metadata.schemas.nft_driver import (
    NftDriverAccountMetadataV1,
    NftDriverAccountMetadataV2,
    NftDriverAccountMetadataV3,
    NftDriverAccountMetadataV4,
    NftDriverAccountMetadataV5,
    NftDriverAccountMetadataV6,
    NftDriverAccountMetadataV7,
)
from drips.metadata.schemas.repo_driver import (
    RepoDriverAccountMetadataV1,
    RepoDriverAccountMetadataV2,
    RepoDriverAccountMetadataV3,
    RepoDriverAccountMetadataV4,
    RepoDriverAccountMetadataV5,
)

ADDRESS_DRIVER_VERSIONS: tuple[SchemaVersion, ...] = (
    schema_version("v1", AddressDriverAccountMetadataV1),
)

REPO_DRIVER_VERSIONS: tuple[SchemaVersion, ...] = (
    schema_version("v5", RepoDriverAccountMetadataV5),
    schema_version("v4", RepoDriverAccountMetadataV4),
    schema_version("v3", RepoDriverAccountMetadataV3),
    schema_version("v2", RepoDriverAccountMetadataV2),
    schema_version("v1", RepoDriverAccountMetadataV1),
)

NFT_DRIVER_VERSIONS: tuple[SchemaVersion, ...] = (
    schema_version("v7", NftDriverAccountMetadataV7),
    schema_version("v6", NftDriverAccountMetadataV6),
    schema_version("v5", NftDriverAccountMetadataV5),
    schema_version("v4", NftDriverAccountMetadataV4),
    schema_version("v3", NftDriverAccountMetadataV3),
    schema_version("v2", NftDriverAccountMetadataV2),
    schema_version("v1", NftDriverAccountMetadataV1),
)

IMMUTABLE_SPLITS_VERSIONS: tuple[SchemaVersion, ...] = (
    schema_version("v1", SubListMetadataV1),
)

address_driver_metadata_parser: VersionedParser = VersionedParser("address-driver", ADDRESS_DRIVER_VERSIONS)
repo_driver_metadata_parser: VersionedParser = VersionedParser("repo-driver", REPO_DRIVER_VERSIONS)
nft_driver_metadata_parser: VersionedParser = VersionedParser("nft-driver", NFT_DRIVER_VERSIONS)
immutable_splits_metadata_parser: VersionedParser = VersionedParser("immutable-splits", IMMUTABLE_SPLITS_VERSIONS)

PARSERS_BY_FAMILY: dict[str, VersionedParser] = {
    p.family: p
    for p in (
        address_driver_metadata_parser,
        repo_driver_metadata_parser,
        nft_driver_metadata_parser,
        immutable_splits_metadata_parser,
    )
}

__all__ = [
    "PARSERS_BY_FAMILY",
    "address_driver_metadata_parser",
    "immutable_splits_metadata_parser",
    "nft_driver_metadata_parser",
    "repo_driver_metadata_parser",
]
