"""Build-tool target detection."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict

from ..logging import get_logger

MAKEFILE_NAMES = ("Makefile", "GNUmakefile", "makefile")
MAKE_TARGET_DESCRIPTION = "Makefile target"

_MAKE_TARGET = re.compile(r"^([a-zA-Z_-]+):", re.MULTILINE)

logger = get_logger("build")


def find_makefile(root: Path) -> Path | None:
    for filename in MAKEFILE_NAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def detect_make_targets(root: Path) -> Dict[str, str]:
    """Return ``make <target>`` script entries for the project's Makefile."""
    makefile = find_makefile(root)
    if makefile is None:
        return {}
    try:
        content = makefile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Ignoring unreadable %s: %s", makefile.name, exc)
        return {}

    scripts: Dict[str, str] = {}
    for target in _MAKE_TARGET.findall(content):
        if target.startswith("."):
            continue
        scripts[f"make {target}"] = MAKE_TARGET_DESCRIPTION
    return scripts


__all__ = ["MAKE_TARGET_DESCRIPTION", "detect_make_targets", "find_makefile"]
