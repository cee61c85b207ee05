"""drips.metadata.parser

Versioned parsing.

Each document family is an ordered list of schema versions, newest first.
Reading tries them in order; writing only ever uses the newest, so the library
never persists a document it could not read back.

There is no migration here. An old document parses as its old version.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from drips.core.exceptions import NoSchemaMatchedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SchemaVersion(Generic[T]):
    name: str
    validate: Callable[[Any], T]


@dataclass(frozen=True, slots=True)
class ParsedDocument(Generic[T]):
    version: str
    document: T


def schema_version(name: str, schema: Any) -> SchemaVersion[Any]:
    """Wrap a pydantic model or annotated union as a version validator."""

    adapter: TypeAdapter[Any] = TypeAdapter(schema)
    return SchemaVersion(name=name, validate=adapter.validate_python)


class VersionedParser(Generic[T]):
    """Chain of responsibility over schema versions, newest first."""

    def __init__(self, family: str, versions: Sequence[SchemaVersion[Any]]) -> None:
        if not versions:
            raise ValueError(f"{family}: at least one schema version is required")
        names = [v.name for v in versions]
        if len(set(names)) != len(names):
            raise ValueError(f"{family}: duplicate version names: {names}")

        self.family = family
        self.versions: tuple[SchemaVersion[Any], ...] = tuple(versions)

    @property
    def latest(self) -> SchemaVersion[Any]:
        return self.versions[0]

    def prepend(self, version: SchemaVersion[Any]) -> VersionedParser[T]:
        """New parser with ``version`` as the newest."""

        return VersionedParser(self.family, (version, *self.versions))

    def match(self, data: Any) -> ParsedDocument[T]:
        errors: list[tuple[str, Exception]] = []
        for version in self.versions:
            try:
                doc = version.validate(data)
            except (ValidationError, ValueError) as e:
                errors.append((version.name, e))
                continue

            logger.debug("metadata_version_matched", extra={"family": self.family, "version": version.name})
            return ParsedDocument(version=version.name, document=doc)

        logger.warning(
            "metadata_no_version_matched",
            extra={"family": self.family, "versions": [name for name, _ in errors]},
        )
        raise NoSchemaMatchedError(self.family, errors) from errors[0][1]

    def parse_any(self, data: Any) -> T:
        return self.match(data).document

    def parse_latest(self, data: Any) -> T:
        """Validate against the newest version only. Use before persisting."""

        try:
            return self.latest.validate(data)
        except (ValidationError, ValueError) as e:
            raise NoSchemaMatchedError(self.family, [(self.latest.name, e)]) from e
