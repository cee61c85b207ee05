"""drips.metadata

Off-chain metadata documents: schemas, versioned parsing, builders.
"""

from .parser import NoSchemaMatchedError, ParsedDocument, SchemaVersion, VersionedParser, schema_version
from .schemas import (
    PARSERS_BY_FAMILY,
    address_driver_metadata_parser,
    immutable_splits_metadata_parser,
    nft_driver_metadata_parser,
    repo_driver_metadata_parser,
)

__all__ = [
    "PARSERS_BY_FAMILY",
    "NoSchemaMatchedError",
    "ParsedDocument",
    "SchemaVersion",
    "VersionedParser",
    "address_driver_metadata_parser",
    "immutable_splits_metadata_parser",
    "nft_driver_metadata_parser",
    "repo_driver_metadata_parser",
    "schema_version",
]
