from __future__ import annotations

import pytest

from drips.codec.stream_id import StreamIdParts, decode_stream_id, encode_stream_id
from drips.core.exceptions import InvalidStreamIdError


def test_encode_lowercases_token(address: str) -> None:
    assert encode_stream_id("42", address, "7") == f"42-{address.lower()}-7"


def test_decode(address: str) -> None:
    parts = decode_stream_id(f"42-{address}-7")
    assert parts == StreamIdParts(sender_account_id="42", token_address=address.lower(), drip_id="7")


@pytest.mark.parametrize(
    ("sender", "token", "drip_id"),
    [
        ("abc", "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "1"),
        ("1", "0x1234", "1"),
        ("1", "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed", "-1"),
    ],
)
def test_encode_rejects_bad_components(sender: str, token: str, drip_id: str) -> None:
    with pytest.raises(InvalidStreamIdError):
        encode_stream_id(sender, token, drip_id)


@pytest.mark.parametrize("stream_id", ["", "1-2", "1-0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed-1-2", "x-0x00-1"])
def test_decode_rejects_malformed(stream_id: str) -> None:
    with pytest.raises(InvalidStreamIdError):
        decode_stream_id(stream_id)
