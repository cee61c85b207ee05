"""drips.metadata.schemas.repo_driver

Repo-driver (project) metadata, v1 through v5.

v1  untyped receivers
v2  receivers gain a ``type`` tag
v3  dependencies may include drip lists
v4  ``emoji`` replaced by ``avatar``
v5  ``isVisible``
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal

from pydantic import Field, StrictBool, StrictStr

from drips.metadata.schemas.common import (
    AddressDriverSplitReceiver,
    Avatar,
    DripListSplitReceiver,
    MetadataModel,
    RepoDriverSplitReceiver,
    Source,
    UntypedAddressSplitReceiver,
    UntypedRepoDriverSplitReceiver,
)


class RepoDescribes(MetadataModel):
    driver: Literal["repo"]
    account_id: StrictStr


class RepoDriverAccountSplitsV1(MetadataModel):
    maintainers: list[UntypedAddressSplitReceiver]
    dependencies: list[
        Annotated[UntypedRepoDriverSplitReceiver | UntypedAddressSplitReceiver, Field(union_mode="left_to_right")]
    ]


class RepoDriverAccountSplitsV2(MetadataModel):
    maintainers: list[AddressDriverSplitReceiver]
    dependencies: list[
        Annotated[RepoDriverSplitReceiver | AddressDriverSplitReceiver, Field(discriminator="type")]
    ]


class RepoDriverAccountSplitsV3(MetadataModel):
    maintainers: list[AddressDriverSplitReceiver]
    dependencies: list[
        Annotated[
            DripListSplitReceiver | RepoDriverSplitReceiver | AddressDriverSplitReceiver,
            Field(discriminator="type"),
        ]
    ]


class RepoDriverAccountMetadataV1(MetadataModel):
    driver: Literal["repo"]
    describes: RepoDescribes
    source: Source
    emoji: StrictStr
    color: StrictStr
    description: StrictStr | None = None
    splits: RepoDriverAccountSplitsV1


class RepoDriverAccountMetadataV2(RepoDriverAccountMetadataV1):
    splits: RepoDriverAccountSplitsV2


class RepoDriverAccountMetadataV3(RepoDriverAccountMetadataV2):
    splits: RepoDriverAccountSplitsV3


class RepoDriverAccountMetadataV4(RepoDriverAccountMetadataV3):
    absent_keys: ClassVar[frozenset[str]] = frozenset({"emoji"})

    emoji: None = None
    avatar: Avatar


class RepoDriverAccountMetadataV5(RepoDriverAccountMetadataV4):
    is_visible: StrictBool


RepoDriverAccountMetadata = (
    RepoDriverAccountMetadataV5
    | RepoDriverAccountMetadataV4
    | RepoDriverAccountMetadataV3
    | RepoDriverAccountMetadataV2
    | RepoDriverAccountMetadataV1
)
