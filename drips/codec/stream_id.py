"""drips.codec.stream_id

Off-chain stream identifiers: ``<senderAccountId>-<tokenAddress>-<dripId>``.

The token address is always lowercased so that ids compare as plain strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from eth_utils import is_address

from drips.core.exceptions import InvalidStreamIdError

_NUMERIC = re.compile(r"^\d+$")


@dataclass(frozen=True, slots=True)
class StreamIdParts:
    sender_account_id: str
    token_address: str
    drip_id: str


def _valid(sender_account_id: str, token_address: str, drip_id: str) -> bool:
    return bool(_NUMERIC.match(sender_account_id) and _NUMERIC.match(drip_id) and is_address(token_address))


def encode_stream_id(sender_account_id: str, token_address: str, drip_id: str) -> str:
    sender_account_id, drip_id = str(sender_account_id), str(drip_id)
    if not _valid(sender_account_id, token_address, drip_id):
        raise InvalidStreamIdError(
            "Invalid stream id components",
            sender_account_id=sender_account_id,
            token_address=token_address,
            drip_id=drip_id,
        )
    return f"{sender_account_id}-{token_address.lower()}-{drip_id}"


def decode_stream_id(stream_id: str) -> StreamIdParts:
    parts = stream_id.split("-")
    if len(parts) != 3:
        raise InvalidStreamIdError("Invalid stream ID format", stream_id=stream_id, parts=parts)

    sender, token, drip_id = parts[0], parts[1].lower(), parts[2]
    if not _valid(sender, token, drip_id):
        raise InvalidStreamIdError("Invalid stream ID", stream_id=stream_id)

    return StreamIdParts(sender_account_id=sender, token_address=token, drip_id=drip_id)
