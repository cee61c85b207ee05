"""drips.receivers.projects

Project URLs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from drips.core.exceptions import InvalidProjectUrlError

Forge = Literal["github", "orcid"]

SUPPORTED_FORGES: tuple[str, ...] = ("github", "orcid")

_REPO_URL = re.compile(r"^(?:https?://)?(?:www\.)?(github|gitlab)\.com/([^/]+)/([^/]+)")


@dataclass(frozen=True, slots=True)
class ProjectSource:
    forge: Forge
    owner_name: str
    repo_name: str

    @property
    def name(self) -> str:
        return f"{self.owner_name}/{self.repo_name}"


def destruct_project_url(url: str) -> ProjectSource:
    m = _REPO_URL.match(url or "")
    if m is None:
        raise InvalidProjectUrlError(f"Unsupported repository url: {url}.", url=url)

    forge = m.group(1)
    if forge not in SUPPORTED_FORGES:
        raise InvalidProjectUrlError(f"Unsupported forge: {forge}.", url=url, forge=forge)

    return ProjectSource(forge=forge, owner_name=m.group(2), repo_name=m.group(3))  # type: ignore[arg-type]
