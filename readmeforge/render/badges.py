"""Badge line generation for rendered README files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List
from urllib.parse import quote

from ..models import ProjectMetadata

_GITHUB_REPO = re.compile(r"github\.com[/:]([^/]+/[^/.]+)")
# Characters JavaScript's encodeURIComponent leaves untouched besides "_.-~".
_URI_COMPONENT_SAFE = "!*'()"


@dataclass
class BadgeBuilder:
    """Builds registry, license and GitHub badges from project metadata."""

    separator: str = " "

    def build(self, metadata: ProjectMetadata) -> List[str]:
        badges: List[str] = []
        name = metadata.name
        project_type = metadata.project_type

        if project_type == "node" and name and not name.startswith("."):
            badges.append(
                f"[![npm version](https://img.shields.io/npm/v/{name}.svg)]"
                f"(https://www.npmjs.com/package/{name})"
            )
            badges.append(
                f"[![npm downloads](https://img.shields.io/npm/dm/{name}.svg)]"
                f"(https://www.npmjs.com/package/{name})"
            )

        if project_type == "rust" and name:
            badges.append(
                f"[![Crates.io](https://img.shields.io/crates/v/{name}.svg)]"
                f"(https://crates.io/crates/{name})"
            )
            badges.append(
                f"[![Crates.io](https://img.shields.io/crates/d/{name}.svg)]"
                f"(https://crates.io/crates/{name})"
            )

        if project_type == "python" and name:
            badges.append(
                f"[![PyPI version](https://img.shields.io/pypi/v/{name}.svg)]"
                f"(https://pypi.org/project/{name}/)"
            )
            badges.append(
                f"[![PyPI downloads](https://img.shields.io/pypi/dm/{name}.svg)]"
                f"(https://pypi.org/project/{name}/)"
            )

        if metadata.license:
            encoded = quote(metadata.license, safe=_URI_COMPONENT_SAFE)
            badges.append(
                f"[![License: {metadata.license}]"
                f"(https://img.shields.io/badge/License-{encoded}-blue.svg)](LICENSE)"
            )

        repo = github_repo(metadata.repository)
        if repo:
            badges.append(
                f"[![GitHub stars](https://img.shields.io/github/stars/{repo}.svg?style=social)]"
                f"(https://github.com/{repo})"
            )

        return badges

    def render(self, metadata: ProjectMetadata) -> str:
        """Return the badges joined into a single line, or an empty string."""
        return self.separator.join(self.build(metadata))


def github_repo(repository: str) -> str | None:
    """Return ``owner/repo`` for GitHub repository URLs."""
    if not repository or "github.com" not in repository:
        return None
    match = _GITHUB_REPO.search(repository)
    return match.group(1) if match else None


__all__ = ["BadgeBuilder", "github_repo"]
