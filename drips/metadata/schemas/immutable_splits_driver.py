"""drips.metadata.schemas.immutable_splits_driver

Sub-list metadata. Sub-lists are immutable splits configurations hanging off a
drip list or ecosystem; ``parent`` and ``root`` link them back up the tree.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, StrictStr

from drips.metadata.schemas.common import (
    AddressDriverSplitReceiver,
    DripListSplitReceiver,
    MetadataModel,
    RepoSubAccountDriverSplitReceiver,
    SubListSplitReceiver,
)


class ListLink(MetadataModel):
    account_id: StrictStr
    driver: Literal["nft", "immutable-splits"]
    type: Literal["dripList", "ecosystem", "subList"]


SubListRecipient = Annotated[
    AddressDriverSplitReceiver | DripListSplitReceiver | RepoSubAccountDriverSplitReceiver | SubListSplitReceiver,
    Field(discriminator="type"),
]


class SubListMetadataV1(MetadataModel):
    driver: Literal["immutable-splits"]
    type: Literal["subList"]
    recipients: list[SubListRecipient]
    parent: ListLink
    root: ListLink


SubListMetadata = SubListMetadataV1
