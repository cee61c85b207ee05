"""drips.codec.orcid

ORCID iD checks (ISO 7064 MOD 11-2).

Sixteen characters: fifteen digits and a check character that may be ``X``.
"""

from __future__ import annotations

import re

from drips.core.exceptions import InvalidOrcidError

# Canonical hyphenated form, as stored in repo-driver account ids. ASCII digits
# only, and always used with fullmatch.
ORCID_PATTERN = re.compile(r"[0-9]{4}-[0-9]{4}-[0-9]{4}-[0-9]{3}[0-9X]")

_BARE_PATTERN = re.compile(r"[0-9]{15}[0-9X]")


def orcid_check_digit(base_digits: str) -> str:
    total = 0
    for ch in base_digits[:15]:
        total = (total + int(ch)) * 2
    result = (12 - total % 11) % 11
    return "X" if result == 10 else str(result)


def is_valid_orcid(orcid_id: str) -> bool:
    """Strict check of the hyphenated form plus check digit."""

    if not ORCID_PATTERN.fullmatch(orcid_id):
        return False
    bare = orcid_id.replace("-", "")
    return orcid_check_digit(bare) == bare[15]


def assert_valid_orcid(orcid_id: str) -> None:
    """Lenient input check: hyphens and whitespace are ignored, ``x`` is accepted."""

    if not isinstance(orcid_id, str):
        raise InvalidOrcidError("Invalid ORCID: expected string.", orcid_id=orcid_id)

    bare = re.sub(r"[-\s]", "", orcid_id).upper()
    if not _BARE_PATTERN.fullmatch(bare):
        raise InvalidOrcidError("Invalid ORCID format.", orcid_id=orcid_id)

    expected = orcid_check_digit(bare)
    if expected != bare[15]:
        raise InvalidOrcidError(
            "Invalid ORCID checksum.",
            orcid_id=orcid_id,
            expected=expected,
            actual=bare[15],
        )


def normalize_orcid(orcid_id: str) -> str:
    trimmed = (orcid_id or "").strip()
    if not trimmed:
        raise InvalidOrcidError("ORCID is empty.", orcid_id=orcid_id)
    return trimmed
