from __future__ import annotations

import pytest

from drips.codec.orcid import assert_valid_orcid, is_valid_orcid, normalize_orcid, orcid_check_digit
from drips.core.exceptions import InvalidOrcidError


def test_check_digit_known_ids() -> None:
    assert orcid_check_digit("000000021825009") == "7"
    assert orcid_check_digit("000000015109370") == "0"
    assert orcid_check_digit("000000021694233") == "X"


@pytest.mark.parametrize("orcid_id", ["0000-0002-1825-0097", "0000-0001-5109-3700", "0000-0002-1694-233X"])
def test_is_valid_orcid_accepts_canonical_form(orcid_id: str) -> None:
    assert is_valid_orcid(orcid_id)


@pytest.mark.parametrize(
    "orcid_id",
    [
        "0000-0002-1825-0098",  # wrong check digit
        "0000000218250097",  # not hyphenated
        "0000-0002-1694-233x",  # lowercase check char
        "0000-0002-1825-009",
        "0000-0002-1825-0097\n",  # trailing newline
        "\u0660" * 4 + "-0002-1825-0097",  # Arabic-Indic digits
        "",
    ],
)
def test_is_valid_orcid_rejects(orcid_id: str) -> None:
    assert not is_valid_orcid(orcid_id)


def test_assert_valid_orcid_is_lenient_about_layout() -> None:
    assert_valid_orcid("0000000218250097")
    assert_valid_orcid(" 0000-0002-1694-233x ")


def test_assert_valid_orcid_reports_format_and_checksum() -> None:
    with pytest.raises(InvalidOrcidError, match="format"):
        assert_valid_orcid("0000-0002-1825")
    with pytest.raises(InvalidOrcidError, match="checksum") as e:
        assert_valid_orcid("0000-0002-1825-0098")
    assert e.value.meta["expected"] == "7"
    assert e.value.meta["actual"] == "8"


def test_assert_valid_orcid_rejects_non_strings() -> None:
    with pytest.raises(InvalidOrcidError):
        assert_valid_orcid(18250097)  # type: ignore[arg-type]


def test_normalize_orcid() -> None:
    assert normalize_orcid("  0000-0002-1825-0097 ") == "0000-0002-1825-0097"
    with pytest.raises(InvalidOrcidError):
        normalize_orcid("   ")


def test_assert_valid_orcid_rejects_non_ascii_digits() -> None:
    with pytest.raises(InvalidOrcidError, match="format"):
        assert_valid_orcid("\u0660" * 4 + "-0002-1825-0097")
    with pytest.raises(InvalidOrcidError, match="format"):
        assert_valid_orcid("0000-0002-1825-009\uff17")  # fullwidth seven
