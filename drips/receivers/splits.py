"""drips.receivers.splits

Split receivers: resolve -> sort -> one strictly-increasing walk.

Invariants the ledger enforces, checked here first:
- at most MAX_SPLIT_RECEIVERS entries
- every weight in (0, TOTAL_SPLIT_WEIGHT]
- account ids strictly ascending (no duplicates)
- weights sum to exactly TOTAL_SPLIT_WEIGHT
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from drips.codec.account_id import require_account_id
from drips.core.constants import MAX_SPLIT_RECEIVERS, TOTAL_SPLIT_WEIGHT
from drips.core.exceptions import (
    DripsError,
    InvalidWeightError,
    ReceiverCountError,
    ReceiverOrderError,
    ReceiverResolutionError,
    TotalWeightError,
)
from drips.core.types import SplitsReceiver
from drips.metadata.schemas.common import (
    AddressDriverSplitReceiver,
    DripListSplitReceiver,
    MetadataSplitsReceiver,
    OrcidSplitReceiver,
    RepoDriverSplitReceiver,
    SubListSplitReceiver,
)
from drips.receivers.models import (
    AddressReceiver,
    DripListReceiver,
    EcosystemMainAccountReceiver,
    OrcidReceiver,
    ProjectReceiver,
    SplitsReceiverDescription,
    SubListReceiver,
)
from drips.receivers.projects import destruct_project_url
from drips.receivers.resolver import AccountIdResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedSplitsReceivers:
    on_chain: list[SplitsReceiver] = field(default_factory=list)
    metadata: list[MetadataSplitsReceiver] = field(default_factory=list)


def _check_count(n: int) -> None:
    if n > MAX_SPLIT_RECEIVERS:
        raise ReceiverCountError("splits", n, MAX_SPLIT_RECEIVERS)


def _walk(ordered: Iterable[SplitsReceiver]) -> list[SplitsReceiver]:
    out: list[SplitsReceiver] = []
    total = 0
    prev: int | None = None

    for r in ordered:
        if isinstance(r.weight, bool) or not isinstance(r.weight, int) or r.weight <= 0 or r.weight > TOTAL_SPLIT_WEIGHT:
            raise InvalidWeightError(
                f"Invalid weight: {r.weight}. Must be in (0, {TOTAL_SPLIT_WEIGHT}]",
                account_id=r.account_id,
                weight=r.weight,
            )

        if prev is not None and r.account_id <= prev:
            raise ReceiverOrderError(
                f"Splits receivers not strictly sorted or deduplicated: {r.account_id} after {prev}",
                account_id=r.account_id,
                previous_account_id=prev,
            )

        total += r.weight
        prev = r.account_id
        out.append(r)

    if total != TOTAL_SPLIT_WEIGHT:
        raise TotalWeightError(
            f"Total weight must be exactly {TOTAL_SPLIT_WEIGHT}, but got {total}",
            expected=TOTAL_SPLIT_WEIGHT,
            actual=total,
        )

    return out


def format_splits_receivers(receivers: Sequence[SplitsReceiver]) -> list[SplitsReceiver]:
    """Validate already-resolved ``(account_id, weight)`` pairs and sort them."""

    if not receivers:
        return []
    _check_count(len(receivers))
    for r in receivers:
        require_account_id(r.account_id)
    return _walk(sorted(receivers, key=lambda r: r.account_id))


def to_metadata_receiver(account_id: int, receiver: SplitsReceiverDescription) -> MetadataSplitsReceiver:
    """Re-tag a description with its resolved id, in the shape metadata stores."""

    base = {"weight": receiver.weight, "accountId": str(account_id)}

    if isinstance(receiver, ProjectReceiver):
        source = destruct_project_url(receiver.url)
        return RepoDriverSplitReceiver.model_validate(
            {
                **base,
                "type": "repoDriver",
                "source": {
                    "forge": source.forge,
                    "url": receiver.url,
                    "ownerName": source.owner_name,
                    "repoName": source.repo_name,
                },
            }
        )
    if isinstance(receiver, (DripListReceiver, EcosystemMainAccountReceiver)):
        # Ecosystem main accounts are nft-driver accounts, like drip lists.
        return DripListSplitReceiver.model_validate({**base, "type": "dripList"})
    if isinstance(receiver, SubListReceiver):
        return SubListSplitReceiver.model_validate({**base, "type": "subList"})
    if isinstance(receiver, AddressReceiver):
        return AddressDriverSplitReceiver.model_validate({**base, "type": "address"})
    if isinstance(receiver, OrcidReceiver):
        return OrcidSplitReceiver.model_validate({**base, "type": "orcid", "orcidId": receiver.orcid_id})

    raise ReceiverResolutionError(
        f"Unsupported receiver type: {getattr(receiver, 'type', type(receiver).__name__)}",
        receiver=receiver,
    )


def parse_splits_receivers(
    receivers: Sequence[SplitsReceiverDescription],
    resolver: AccountIdResolver,
) -> ParsedSplitsReceivers:
    """Resolve, validate and order split receivers.

    Returns the on-chain pairs and, in the same order, the metadata receivers
    that describe them.
    """

    if not receivers:
        return ParsedSplitsReceivers()

    _check_count(len(receivers))

    resolved: list[tuple[int, SplitsReceiverDescription]] = []
    for r in receivers:
        try:
            account_id = resolver.resolve(r)
        except DripsError:
            raise
        except Exception as e:
            raise ReceiverResolutionError(f"Failed to resolve {r.type} receiver: {e}", receiver=r) from e
        resolved.append((require_account_id(account_id), r))

    resolved.sort(key=lambda pair: pair[0])

    on_chain = _walk(SplitsReceiver(account_id=account_id, weight=r.weight) for account_id, r in resolved)
    metadata = [to_metadata_receiver(account_id, r) for account_id, r in resolved]

    logger.debug("splits_receivers_parsed", extra={"count": len(on_chain)})
    return ParsedSplitsReceivers(on_chain=on_chain, metadata=metadata)
