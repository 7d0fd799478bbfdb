"""Top-level layout scanner feeding the metadata record."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..models import StructureSummary

_CI_DIRS = {".github"}
_CI_FILES = {".gitlab-ci.yml"}

_ROLE_RULES: tuple[tuple[frozenset[str], str], ...] = (
    (frozenset({"test", "tests", "__tests__", "spec"}), "has_tests"),
    (frozenset({"docs", "documentation"}), "has_docs"),
    (frozenset({"examples", "example"}), "has_examples"),
    (frozenset({"src", "source"}), "has_src"),
    (frozenset({"lib"}), "has_lib"),
    (frozenset({"bin"}), "has_bin"),
    (frozenset({"config"}), "has_config"),
)

_MAIN_FILE_NAMES = {"makefile", "dockerfile"}

logger = get_logger("structure")


def scan_structure(root: Path | str) -> StructureSummary:
    """Summarise the immediate children of ``root``.

    Listing failures produce the empty summary instead of an exception.
    """
    structure = StructureSummary()
    try:
        entries = sorted(Path(root).iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug("Unable to list %s: %s", root, exc)
        return StructureSummary()

    for entry in entries:
        name = entry.name
        is_dir = entry.is_dir()

        if name.startswith("."):
            if (is_dir and name in _CI_DIRS) or (not is_dir and name in _CI_FILES):
                structure.has_ci = True
            continue

        lower = name.lower()
        if is_dir:
            structure.directories.append(name)
            for names, flag in _ROLE_RULES:
                if lower in names:
                    setattr(structure, flag, True)
                    break
        elif lower.endswith(".md") or lower in _MAIN_FILE_NAMES:
            structure.main_files.append(name)

    return structure


__all__ = ["scan_structure"]
