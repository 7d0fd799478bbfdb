"""README generation from project metadata."""

from __future__ import annotations

import re
from typing import List

from jinja2 import Environment

from .badges import BadgeBuilder
from .constants import (
    API_SCRIPTS,
    CLI_OPTIONS,
    CONTRIBUTING,
    DEFAULT_LICENSE,
    DEFAULT_SECTIONS,
    FALLBACK_FEATURES,
    FOOTER_TEMPLATE,
    GENERIC_FEATURES,
    LICENSE_TEMPLATE,
    SCRIPT_DESCRIPTIONS,
    SECTION_TITLES,
)
from .lint import MarkdownLinter
from .templates import create_environment, template_name
from ..models import ProjectMetadata

_SCHEME = re.compile(r"^[a-z]+://")


class ReadmeGenerator:
    """Renders a metadata record into a complete README document.

    Rendering is pure: the same record always yields the same text.
    """

    def __init__(
        self,
        env: Environment | None = None,
        badges: BadgeBuilder | None = None,
        linter: MarkdownLinter | None = None,
        *,
        show_footer: bool = True,
    ) -> None:
        self.env = env or create_environment()
        self.badges = badges or BadgeBuilder()
        self.linter = linter or MarkdownLinter()
        self.show_footer = show_footer

    def render(self, metadata: ProjectMetadata) -> str:
        lines: List[str] = [f"# {format_title(metadata.name)}", ""]

        badge_line = self.badges.render(metadata)
        if badge_line:
            lines.extend([badge_line, ""])

        description = metadata.description or f"A {metadata.project_type or 'project'} project"
        lines.extend([f"> {description}", ""])

        lines.extend(self._table_of_contents())

        sections = {
            "features": self.features(metadata),
            "installation": self.installation(metadata),
            "usage": self.usage(metadata),
            "api": self.api(metadata),
            "contributing": CONTRIBUTING,
            "license": LICENSE_TEMPLATE.format(license=metadata.license or DEFAULT_LICENSE),
        }
        for name in DEFAULT_SECTIONS:
            lines.extend([f"## {SECTION_TITLES[name]}", "", sections[name], ""])

        if self.show_footer and metadata.author:
            lines.extend(["---", "", FOOTER_TEMPLATE.format(author=metadata.author)])

        return self.linter.lint("\n".join(lines))

    def features(self, metadata: ProjectMetadata) -> str:
        features = list(metadata.features)
        if not features:
            features = list(GENERIC_FEATURES.get(metadata.project_type, FALLBACK_FEATURES))
        return "\n".join(f"- {feature}" for feature in features)

    def installation(self, metadata: ProjectMetadata) -> str:
        npx = "npx" in metadata.run_command or any("bin" in key for key in metadata.scripts)
        return self._render_template(
            "installation",
            metadata,
            npx=npx,
            module_path=_module_path(metadata),
        )

    def usage(self, metadata: ProjectMetadata) -> str:
        if metadata.project_type == "node":
            import_name = to_camel_case(metadata.name)
        else:
            import_name = metadata.name.replace("-", "_")
        return self._render_template(
            "usage",
            metadata,
            npx_run="npx" in metadata.run_command,
            import_name=import_name,
            module_path=_module_path(metadata),
        )

    def api(self, metadata: ProjectMetadata) -> str:
        lines = ["### Available Commands", ""]

        if metadata.project_type == "node" and metadata.scripts:
            lines.append("| Command | Description |")
            lines.append("|---------|-------------|")
            for name, script in metadata.scripts.items():
                if name not in API_SCRIPTS:
                    continue
                lines.append(f"| `npm run {name}` | {describe_script(name, script)} |")
            lines.append("")

        if "npx" in metadata.run_command or metadata.structure.has_bin:
            lines.extend(["### CLI Options", "", "```", f"{metadata.name} [options]", ""])
            lines.append("Options:")
            lines.extend(CLI_OPTIONS)
            lines.append("```")

        return "\n".join(lines)

    def _table_of_contents(self) -> List[str]:
        lines = ["## Table of Contents", ""]
        for name in DEFAULT_SECTIONS:
            title = SECTION_TITLES[name]
            lines.append(f"- [{title}](#{slugify(title)})")
        lines.append("")
        return lines

    def _render_template(self, section: str, metadata: ProjectMetadata, **extra: object) -> str:
        template = self.env.get_template(template_name(section, metadata.project_type))
        return template.render(
            name=metadata.name,
            version=metadata.version,
            repository=metadata.repository,
            install_command=metadata.install_command,
            run_command=metadata.run_command,
            **extra,
        )


def render(metadata: ProjectMetadata, *, show_footer: bool = True) -> str:
    """Return README markdown for ``metadata``."""
    return ReadmeGenerator(show_footer=show_footer).render(metadata)


def format_title(name: str) -> str:
    if not name:
        return "Project"
    spaced = re.sub(r"[-_]", " ", name)
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), spaced)


def to_camel_case(name: str) -> str:
    camel = re.sub(r"[-_](.)", lambda match: match.group(1).upper(), name)
    return camel[:1].lower() + camel[1:]


def describe_script(name: str, script: str) -> str:
    return SCRIPT_DESCRIPTIONS.get(name) or script[:50]


def slugify(title: str) -> str:
    slug = title.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return slug.strip("-")


def _module_path(metadata: ProjectMetadata) -> str:
    # `go install` and Go imports take a module path, not a URL.
    return _SCHEME.sub("", metadata.repository) or metadata.name


__all__ = [
    "ReadmeGenerator",
    "describe_script",
    "format_title",
    "render",
    "slugify",
    "to_camel_case",
]
