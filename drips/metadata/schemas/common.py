"""drips.metadata.schemas.common

Building blocks shared by every metadata family.

Documents are camelCase JSON; models are snake_case with aliases. Scalars are
strict (no "1" -> 1 coercion), unknown keys are ignored, and keys a version
retired must be absent.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal

from eth_utils import is_address
from pydantic import (
    AfterValidator,
    AllowInfNan,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel


def _require_address(v: str) -> str:
    if not is_address(v):
        raise ValueError(f"{v} is not a valid address")
    return v


def _bigint_from_str(v: Any) -> Any:
    if isinstance(v, str):
        try:
            return int(v, 10)
        except ValueError:
            raise ValueError(f"{v!r} is not an integer string") from None
    return v


# JSON numbers: NaN and infinities are not numbers here.
Number = StrictInt | Annotated[StrictFloat, AllowInfNan(False)]
EthAddress = Annotated[StrictStr, AfterValidator(_require_address)]
# Accepts a decimal string or an int; always serialized back as a string.
BigInt = Annotated[StrictInt, BeforeValidator(_bigint_from_str), PlainSerializer(str, return_type=str)]


def _require_true(v: bool) -> bool:
    if v is not True:
        raise ValueError("must be true")
    return v


# JSON ``true``; 1 and false are rejected.
TrueFlag = Annotated[StrictBool, AfterValidator(_require_true)]


class MetadataModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)

    # camelCase keys an older version had and this version forbids.
    absent_keys: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_retired_and_null_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        present = sorted(k for k in cls.absent_keys if k in data)
        if present:
            raise ValueError(f"keys must be absent in this version: {', '.join(present)}")

        # Optional keys are omitted, never null.
        aliases = {f.alias or name for name, f in cls.model_fields.items()}
        nulls = sorted(k for k, v in data.items() if v is None and k in aliases)
        if nulls:
            raise ValueError(f"keys must not be null: {', '.join(nulls)}")
        return data

    def to_json_dict(self) -> dict[str, Any]:
        """Document as it is uploaded: camelCase keys, unset optionals omitted."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Sources and avatars
# ---------------------------------------------------------------------------


class GitHubSource(MetadataModel):
    forge: Literal["github"]
    repo_name: StrictStr
    owner_name: StrictStr
    url: StrictStr


Source = GitHubSource


class EmojiAvatar(MetadataModel):
    type: Literal["emoji"]
    emoji: StrictStr


class ImageAvatar(MetadataModel):
    type: Literal["image"]
    cid: StrictStr


Avatar = Annotated[EmojiAvatar | ImageAvatar, Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Split receivers
# ---------------------------------------------------------------------------


class UntypedAddressSplitReceiver(MetadataModel):
    """Pre-tagging receiver shape (repo-driver v1, nft-driver v1)."""

    weight: Number
    account_id: StrictStr


class UntypedRepoDriverSplitReceiver(UntypedAddressSplitReceiver):
    source: Source


class AddressDriverSplitReceiver(MetadataModel):
    type: Literal["address"]
    weight: Number
    account_id: StrictStr


class RepoDriverSplitReceiver(MetadataModel):
    type: Literal["repoDriver"]
    weight: Number
    account_id: StrictStr
    source: Source


class DripListSplitReceiver(MetadataModel):
    type: Literal["dripList"]
    weight: Number
    account_id: StrictStr


class SubListSplitReceiver(MetadataModel):
    type: Literal["subList"]
    weight: Number
    account_id: StrictStr


class RepoSubAccountDriverSplitReceiver(MetadataModel):
    type: Literal["repoSubAccountDriver"]
    weight: Number
    account_id: StrictStr
    source: Source


class OrcidSplitReceiver(MetadataModel):
    type: Literal["orcid"]
    weight: Number
    account_id: StrictStr
    orcid_id: StrictStr


MetadataSplitsReceiver = (
    AddressDriverSplitReceiver
    | RepoDriverSplitReceiver
    | DripListSplitReceiver
    | SubListSplitReceiver
    | RepoSubAccountDriverSplitReceiver
    | OrcidSplitReceiver
)
