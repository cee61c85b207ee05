"""drips.receivers.models

Split receiver descriptions, as callers state them (before resolution).

A description says *who* should receive; the resolver turns it into an
account id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class AddressReceiver:
    address: str
    weight: int
    type: Literal["address"] = "address"


@dataclass(frozen=True, slots=True)
class ProjectReceiver:
    url: str
    weight: int
    type: Literal["project"] = "project"


@dataclass(frozen=True, slots=True)
class OrcidReceiver:
    orcid_id: str
    weight: int
    type: Literal["orcid"] = "orcid"


@dataclass(frozen=True, slots=True)
class DripListReceiver:
    account_id: int
    weight: int
    type: Literal["drip-list"] = "drip-list"


@dataclass(frozen=True, slots=True)
class SubListReceiver:
    account_id: int
    weight: int
    type: Literal["sub-list"] = "sub-list"


@dataclass(frozen=True, slots=True)
class EcosystemMainAccountReceiver:
    account_id: int
    weight: int
    type: Literal["ecosystem-main-account"] = "ecosystem-main-account"


KnownAccountReceiver = DripListReceiver | SubListReceiver | EcosystemMainAccountReceiver

SplitsReceiverDescription = (
    AddressReceiver | ProjectReceiver | OrcidReceiver | DripListReceiver | SubListReceiver | EcosystemMainAccountReceiver
)
