"""drips.codec

Bit layouts and string encodings. Pure functions, no I/O.
"""

from .account_id import address_of, calc_address_account_id, driver_of, text_identifier_of
from .stream_config import amount_per_second_of, decode_stream_config, encode_stream_config

__all__ = [
    "address_of",
    "amount_per_second_of",
    "calc_address_account_id",
    "decode_stream_config",
    "driver_of",
    "encode_stream_config",
    "text_identifier_of",
]
