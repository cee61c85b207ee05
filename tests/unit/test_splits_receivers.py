from __future__ import annotations

import pytest

from drips.codec.account_id import calc_address_account_id
from drips.core.exceptions import (
    DripsError,
    InvalidProjectUrlError,
    InvalidWeightError,
    ReceiverCountError,
    ReceiverOrderError,
    ReceiverResolutionError,
    TotalWeightError,
)
from drips.core.types import DriverTag, SplitsReceiver
from drips.metadata.schemas.common import (
    AddressDriverSplitReceiver,
    DripListSplitReceiver,
    OrcidSplitReceiver,
    RepoDriverSplitReceiver,
    SubListSplitReceiver,
)
from drips.receivers import (
    AccountIdResolver,
    AddressReceiver,
    DriverAccountIdResolver,
    DripListReceiver,
    EcosystemMainAccountReceiver,
    OrcidReceiver,
    ProjectReceiver,
    SubListReceiver,
    format_splits_receivers,
    parse_splits_receivers,
)
from drips.receivers.projects import destruct_project_url

NFT = int(DriverTag.NFT) << 224
SPLITS = int(DriverTag.IMMUTABLE_SPLITS) << 224
REPO = int(DriverTag.REPO) << 224


class FixedResolver:
    """Resolves by lookup; stands in for chain-backed resolution."""

    def __init__(self, ids: dict[object, int]) -> None:
        self.ids = ids

    def resolve(self, receiver) -> int:
        return self.ids[receiver]


def _fake_repo_account_id(forge: str, name: str) -> int:
    return REPO | (sum(name.encode()) << 8) | (1 if forge == "github" else 2)


def test_concrete_scenario_sorts_by_id() -> None:
    out = format_splits_receivers([SplitsReceiver(5, 600_000), SplitsReceiver(2, 400_000)])
    assert out == [SplitsReceiver(2, 400_000), SplitsReceiver(5, 600_000)]


def test_concrete_scenario_fails_total_weight() -> None:
    with pytest.raises(TotalWeightError) as e:
        format_splits_receivers([SplitsReceiver(5, 600_000), SplitsReceiver(2, 400_001)])
    assert e.value.meta == {"expected": 1_000_000, "actual": 1_000_001}


@pytest.mark.parametrize("last", [399_999, 400_001])
def test_sum_must_be_exact(last: int) -> None:
    with pytest.raises(TotalWeightError):
        format_splits_receivers([SplitsReceiver(1, 600_000), SplitsReceiver(3, last)])


def test_same_id_twice_fails_order_check() -> None:
    with pytest.raises(ReceiverOrderError):
        format_splits_receivers([SplitsReceiver(7, 500_000), SplitsReceiver(7, 500_000)])


@pytest.mark.parametrize("weight", [0, -1, 1_000_001, 0.5])
def test_weight_bounds(weight: float) -> None:
    with pytest.raises(InvalidWeightError):
        format_splits_receivers([SplitsReceiver(1, weight)])  # type: ignore[arg-type]


def test_single_full_weight_receiver() -> None:
    assert format_splits_receivers([SplitsReceiver(9, 1_000_000)]) == [SplitsReceiver(9, 1_000_000)]


def test_empty_is_empty() -> None:
    assert format_splits_receivers([]) == []
    result = parse_splits_receivers([], FixedResolver({}))
    assert result.on_chain == []
    assert result.metadata == []


def test_more_than_200_receivers_fail() -> None:
    receivers = [AddressReceiver(address=f"0x{i:040x}", weight=1) for i in range(201)]
    with pytest.raises(ReceiverCountError) as e:
        parse_splits_receivers(receivers, FixedResolver({}))
    assert e.value.actual == 201


def test_parse_with_lookup_resolver_sorts_and_pairs_metadata() -> None:
    a = DripListReceiver(account_id=NFT | 5, weight=600_000)
    b = SubListReceiver(account_id=SPLITS | 2, weight=400_000)
    result = parse_splits_receivers([a, b], FixedResolver({a: NFT | 5, b: SPLITS | 2}))

    assert result.on_chain == [SplitsReceiver(NFT | 5, 600_000), SplitsReceiver(SPLITS | 2, 400_000)]
    assert [type(m) for m in result.metadata] == [DripListSplitReceiver, SubListSplitReceiver]
    assert [m.account_id for m in result.metadata] == [str(NFT | 5), str(SPLITS | 2)]


def test_two_descriptions_resolving_to_one_id_fail() -> None:
    a = AddressReceiver(address="0x" + "11" * 20, weight=500_000)
    b = DripListReceiver(account_id=NFT | 1, weight=500_000)
    with pytest.raises(ReceiverOrderError):
        parse_splits_receivers([a, b], FixedResolver({a: 42, b: 42}))


def test_resolver_failures_are_wrapped() -> None:
    a = AddressReceiver(address="0x" + "11" * 20, weight=1_000_000)

    with pytest.raises(ReceiverResolutionError) as e:
        parse_splits_receivers([a], FixedResolver({}))
    assert isinstance(e.value.__cause__, KeyError)


def test_driver_resolver_all_variants(address: str) -> None:
    resolver = DriverAccountIdResolver(_fake_repo_account_id)
    assert isinstance(resolver, AccountIdResolver)

    receivers = [
        AddressReceiver(address=address, weight=100_000),
        ProjectReceiver(url="https://github.com/drips-network/app", weight=200_000),
        OrcidReceiver(orcid_id="0000-0002-1825-0097", weight=300_000),
        DripListReceiver(account_id=NFT | 3, weight=150_000),
        SubListReceiver(account_id=SPLITS | 4, weight=150_000),
        EcosystemMainAccountReceiver(account_id=NFT | 9, weight=100_000),
    ]
    result = parse_splits_receivers(receivers, resolver)

    ids = [r.account_id for r in result.on_chain]
    assert ids == sorted(ids)
    assert len(set(ids)) == 6
    assert sum(r.weight for r in result.on_chain) == 1_000_000

    by_id = {m.account_id: m for m in result.metadata}
    assert isinstance(by_id[str(calc_address_account_id(address))], AddressDriverSplitReceiver)
    assert isinstance(by_id[str(NFT | 9)], DripListSplitReceiver)
    assert isinstance(by_id[str(SPLITS | 4)], SubListSplitReceiver)

    project = by_id[str(_fake_repo_account_id("github", "drips-network/app"))]
    assert isinstance(project, RepoDriverSplitReceiver)
    assert project.source.owner_name == "drips-network"
    assert project.source.repo_name == "app"

    orcid = by_id[str(_fake_repo_account_id("orcid", "0000-0002-1825-0097"))]
    assert isinstance(orcid, OrcidSplitReceiver)
    assert orcid.orcid_id == "0000-0002-1825-0097"


def test_driver_resolver_rejects_wrong_driver_for_list_ids() -> None:
    resolver = DriverAccountIdResolver(_fake_repo_account_id)
    with pytest.raises(ReceiverResolutionError, match="nft"):
        resolver.resolve(DripListReceiver(account_id=SPLITS | 1, weight=1))
    with pytest.raises(ReceiverResolutionError, match="immutable-splits"):
        resolver.resolve(SubListReceiver(account_id=NFT | 1, weight=1))
    with pytest.raises(ReceiverResolutionError):
        resolver.resolve(EcosystemMainAccountReceiver(account_id=0, weight=1))


def test_driver_resolver_rejects_bad_inputs() -> None:
    resolver = DriverAccountIdResolver(_fake_repo_account_id)
    with pytest.raises(ReceiverResolutionError):
        resolver.resolve(AddressReceiver(address="nope", weight=1))
    with pytest.raises(ReceiverResolutionError, match="checksum"):
        resolver.resolve(OrcidReceiver(orcid_id="0000-0002-1825-0098", weight=1))
    with pytest.raises(ReceiverResolutionError, match="format"):
        resolver.resolve(OrcidReceiver(orcid_id="\u0660" * 4 + "-0002-1825-0097", weight=1))
    with pytest.raises(InvalidProjectUrlError):
        resolver.resolve(ProjectReceiver(url="https://gitlab.com/a/b", weight=1))
    with pytest.raises(ReceiverResolutionError):
        resolver.resolve(object())  # type: ignore[arg-type]


def test_engine_errors_from_resolver_pass_through_unwrapped() -> None:
    resolver = DriverAccountIdResolver(_fake_repo_account_id)
    with pytest.raises(InvalidProjectUrlError):
        parse_splits_receivers([ProjectReceiver(url="ftp://example.org/x", weight=1_000_000)], resolver)


def test_destruct_project_url() -> None:
    src = destruct_project_url("https://github.com/drips-network/app")
    assert (src.forge, src.owner_name, src.repo_name, src.name) == ("github", "drips-network", "app", "drips-network/app")
    with pytest.raises(DripsError):
        destruct_project_url("")
