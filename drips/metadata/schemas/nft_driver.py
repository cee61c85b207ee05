"""drips.metadata.schemas.nft_driver

NFT-driver metadata: drip lists and, from v6 on, ecosystems.

v1  drip list with untyped ``projects``
v2  ``projects`` receivers gain a ``type`` tag, drip lists allowed
v3  ``description``
v4  ``latestVotingRoundId``
v5  ``isVisible``
v6  ``projects``/``isDripList`` retired; ``type`` selects dripList or ecosystem,
    receivers move to ``recipients``
v7  drip lists may split to ORCID iDs
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from pydantic import Field, StrictBool, StrictStr

from drips.metadata.schemas.common import (
    AddressDriverSplitReceiver,
    DripListSplitReceiver,
    EmojiAvatar,
    MetadataModel,
    OrcidSplitReceiver,
    RepoDriverSplitReceiver,
    RepoSubAccountDriverSplitReceiver,
    SubListSplitReceiver,
    TrueFlag,
    UntypedAddressSplitReceiver,
    UntypedRepoDriverSplitReceiver,
)


class NftDescribes(MetadataModel):
    driver: Literal["nft"]
    account_id: StrictStr


class NftDriverAccountMetadataV1(MetadataModel):
    driver: Literal["nft"]
    describes: NftDescribes
    is_drip_list: TrueFlag
    projects: list[
        Annotated[UntypedRepoDriverSplitReceiver | UntypedAddressSplitReceiver, Field(union_mode="left_to_right")]
    ]
    name: StrictStr | None = None


class NftDriverAccountMetadataV2(NftDriverAccountMetadataV1):
    projects: list[
        Annotated[
            DripListSplitReceiver | RepoDriverSplitReceiver | AddressDriverSplitReceiver,
            Field(discriminator="type"),
        ]
    ]


class NftDriverAccountMetadataV3(NftDriverAccountMetadataV2):
    description: StrictStr | None = None


class NftDriverAccountMetadataV4(NftDriverAccountMetadataV3):
    latest_voting_round_id: StrictStr | None = None


class NftDriverAccountMetadataV5(NftDriverAccountMetadataV4):
    is_visible: StrictBool


class _ListBaseV6(NftDriverAccountMetadataV5):
    absent_keys: ClassVar[frozenset[str]] = frozenset({"isDripList", "projects"})

    is_drip_list: None = None
    projects: None = None


EcosystemRecipient = Annotated[
    RepoSubAccountDriverSplitReceiver | SubListSplitReceiver,
    Field(discriminator="type"),
]

DripListRecipientV6 = Annotated[
    RepoDriverSplitReceiver | SubListSplitReceiver | AddressDriverSplitReceiver | DripListSplitReceiver,
    Field(discriminator="type"),
]

DripListRecipientV7 = Annotated[
    RepoDriverSplitReceiver
    | SubListSplitReceiver
    | AddressDriverSplitReceiver
    | DripListSplitReceiver
    | OrcidSplitReceiver,
    Field(discriminator="type"),
]


class EcosystemMetadataV6(_ListBaseV6):
    type: Literal["ecosystem"]
    recipients: list[EcosystemRecipient]
    color: StrictStr
    avatar: EmojiAvatar


class DripListMetadataV6(_ListBaseV6):
    type: Literal["dripList"]
    recipients: list[DripListRecipientV6]


class DripListMetadataV7(DripListMetadataV6):
    recipients: list[DripListRecipientV7]


# Ecosystems did not change in v7.
EcosystemMetadataV7 = EcosystemMetadataV6

NftDriverAccountMetadataV6 = Annotated[EcosystemMetadataV6 | DripListMetadataV6, Field(discriminator="type")]
NftDriverAccountMetadataV7 = Annotated[EcosystemMetadataV7 | DripListMetadataV7, Field(discriminator="type")]
