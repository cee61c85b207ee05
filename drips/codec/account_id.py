"""drips.codec.account_id

Account id bit layout.

Every account id names its driver in the top 32 bits::

    driverTag: 32 | payload: 224

Address driver payload::

    zero: 64 | address: 160

Repo driver payload::

    forgeId: 8 | name: 216   (name = right-padded bytes, or a hash for long names)

Classification helpers here never touch the network. They only read bits.
"""

from __future__ import annotations

from eth_utils import is_address, to_checksum_address

from drips.codec.orcid import is_valid_orcid
from drips.core.constants import DRIVER_TAG_MASK, DRIVER_TAG_SHIFT, UINT256_MAX
from drips.core.exceptions import MalformedAccountIdError, ReservedBitsError, UnknownDriverError
from drips.core.types import DriverTag

ADDRESS_BITS = 160
ADDRESS_MASK = (1 << ADDRESS_BITS) - 1
# Bits 160..223 of an address-driver id.
ADDRESS_RESERVED_MASK = ((1 << DRIVER_TAG_SHIFT) - 1) ^ ADDRESS_MASK

REPO_NAME_BITS = 216
REPO_NAME_BYTES = REPO_NAME_BITS // 8
REPO_NAME_MASK = (1 << REPO_NAME_BITS) - 1
REPO_FORGE_MASK = 0xFF

_TAGS_BY_VALUE = {t.value: t for t in DriverTag}


def require_account_id(account_id: int) -> int:
    if isinstance(account_id, bool) or not isinstance(account_id, int):
        raise MalformedAccountIdError(f"Account id must be an int, got {type(account_id).__name__}")
    if account_id < 0 or account_id > UINT256_MAX:
        raise MalformedAccountIdError(
            f"Account id {account_id} is outside the uint256 range",
            account_id=account_id,
        )
    return account_id


def driver_of(account_id: int) -> DriverTag:
    raw = (require_account_id(account_id) >> DRIVER_TAG_SHIFT) & DRIVER_TAG_MASK
    tag = _TAGS_BY_VALUE.get(raw)
    if tag is None:
        raise UnknownDriverError(
            f"Unknown driver tag {raw} for account id {account_id}",
            account_id=account_id,
            tag=raw,
        )
    return tag


def address_of(account_id: int) -> str:
    """Checksummed address of an address-driver account."""

    driver = driver_of(account_id)
    if driver is not DriverTag.ADDRESS:
        raise UnknownDriverError(
            f"Account id {account_id} belongs to the {driver.label} driver, not the address driver",
            account_id=account_id,
            tag=int(driver),
        )

    if account_id & ADDRESS_RESERVED_MASK:
        raise ReservedBitsError(
            "Invalid address driver id: bits 160-223 must be zero",
            account_id=account_id,
        )

    return to_checksum_address(f"0x{account_id & ADDRESS_MASK:040x}")


def calc_address_account_id(address: str) -> int:
    """Account id the address driver assigns to ``address``."""

    if not isinstance(address, str) or not is_address(address):
        raise MalformedAccountIdError(f"{address} is not a valid address", address=address)
    return (int(DriverTag.ADDRESS) << DRIVER_TAG_SHIFT) | int(address, 16)


def repo_forge_of(account_id: int) -> int:
    driver = driver_of(account_id)
    if driver not in (DriverTag.REPO, DriverTag.REPO_SUB_ACCOUNT):
        raise UnknownDriverError(
            f"Account id {account_id} is not a repo driver account",
            account_id=account_id,
            tag=int(driver),
        )
    return (account_id >> REPO_NAME_BITS) & REPO_FORGE_MASK


def text_identifier_of(account_id: int) -> str | None:
    """ORCID iD embedded in a repo-driver account id, if there is one.

    ``None`` is an answer, not an error: hashed project names decode to noise.
    """

    try:
        if driver_of(account_id) is not DriverTag.REPO:
            return None
    except (MalformedAccountIdError, UnknownDriverError):
        return None

    raw = (account_id & REPO_NAME_MASK).to_bytes(REPO_NAME_BYTES, "big")
    try:
        text = raw.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError:
        return None

    return text if is_valid_orcid(text) else None
