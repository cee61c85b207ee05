"""drips.codec.metadata_key

On-chain account metadata entries.

The ledger stores ``(bytes32 key, bytes value)`` pairs. The value is a content
hash pointing at the off-chain document; the key says what kind of pointer it is.
"""

from __future__ import annotations

from dataclasses import dataclass

from drips.core.exceptions import MetadataKeyError

USER_METADATA_KEY = "ipfs"

_KEY_BYTES = 32


@dataclass(frozen=True, slots=True)
class AccountMetadataEntry:
    key: str  # 0x-prefixed, 32 bytes
    value: str  # 0x-prefixed UTF-8 bytes


def encode_metadata_key_value(key: str, value: str) -> AccountMetadataEntry:
    key_bytes = key.encode("utf-8")
    if len(key_bytes) > _KEY_BYTES - 1:
        raise MetadataKeyError(
            f'Metadata key "{key}" is too long: {len(key_bytes)} bytes (max {_KEY_BYTES - 1})',
            key=key,
            length=len(key_bytes),
        )

    return AccountMetadataEntry(
        key="0x" + key_bytes.ljust(_KEY_BYTES, b"\x00").hex(),
        value="0x" + value.encode("utf-8").hex(),
    )
