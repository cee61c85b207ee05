"""drips.receivers.resolver

Receiver description -> account id.

Addresses and already-known list ids resolve locally. Repo-driver ids depend on
the deployed driver, so project and ORCID resolution is delegated to whatever
can ask the chain (or a cache of it).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from drips.codec.account_id import calc_address_account_id, driver_of
from drips.codec.orcid import assert_valid_orcid, normalize_orcid
from drips.core.exceptions import AccountIdError, InvalidOrcidError, ReceiverResolutionError
from drips.core.types import DriverTag
from drips.receivers.models import (
    AddressReceiver,
    DripListReceiver,
    EcosystemMainAccountReceiver,
    OrcidReceiver,
    ProjectReceiver,
    SplitsReceiverDescription,
    SubListReceiver,
)
from drips.receivers.projects import Forge, destruct_project_url

# (forge, name) -> repo-driver account id
RepoAccountIdCalculator = Callable[[Forge, str], int]

_EXPECTED_DRIVER: dict[type, DriverTag] = {
    DripListReceiver: DriverTag.NFT,
    EcosystemMainAccountReceiver: DriverTag.NFT,
    SubListReceiver: DriverTag.IMMUTABLE_SPLITS,
}


@runtime_checkable
class AccountIdResolver(Protocol):
    def resolve(self, receiver: SplitsReceiverDescription) -> int: ...


class DriverAccountIdResolver:
    """Resolver backed by the driver layouts plus a repo-driver calculator."""

    def __init__(self, repo_account_id: RepoAccountIdCalculator) -> None:
        self._repo_account_id = repo_account_id

    def resolve(self, receiver: SplitsReceiverDescription) -> int:
        if isinstance(receiver, AddressReceiver):
            if not receiver.address:
                raise ReceiverResolutionError("Address receiver must have an address", receiver=receiver)
            try:
                return calc_address_account_id(receiver.address)
            except AccountIdError as e:
                raise ReceiverResolutionError(str(e), receiver=receiver) from e

        if isinstance(receiver, ProjectReceiver):
            if not receiver.url:
                raise ReceiverResolutionError("Project receiver must have a url", receiver=receiver)
            source = destruct_project_url(receiver.url)
            return self._repo_account_id(source.forge, source.name)

        if isinstance(receiver, OrcidReceiver):
            if not receiver.orcid_id:
                raise ReceiverResolutionError("ORCID receiver must have an ORCID iD", receiver=receiver)
            try:
                assert_valid_orcid(receiver.orcid_id)
            except InvalidOrcidError as e:
                raise ReceiverResolutionError(str(e), receiver=receiver) from e
            return self._repo_account_id("orcid", normalize_orcid(receiver.orcid_id))

        if isinstance(receiver, (DripListReceiver, SubListReceiver, EcosystemMainAccountReceiver)):
            if not receiver.account_id:
                raise ReceiverResolutionError(f"{receiver.type} receiver must have an accountId", receiver=receiver)
            expected = _EXPECTED_DRIVER[type(receiver)]
            try:
                actual = driver_of(receiver.account_id)
            except AccountIdError as e:
                raise ReceiverResolutionError(str(e), receiver=receiver) from e
            if actual is not expected:
                raise ReceiverResolutionError(
                    f"{receiver.type} receiver must be a {expected.label} driver account, got {actual.label}",
                    receiver=receiver,
                )
            return receiver.account_id

        raise ReceiverResolutionError(
            f"Unsupported receiver type: {getattr(receiver, 'type', type(receiver).__name__)}",
            receiver=receiver,
        )
