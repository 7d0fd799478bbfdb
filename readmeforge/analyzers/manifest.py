"""Minimal line-oriented parser for TOML-like manifests.

Only the handful of fields read back by the ecosystem detectors need to
survive, so the format is deliberately lossy:

* ``[a.b]`` headers open nested tables; ``[[array]]`` headers are ignored.
* ``key = value`` pairs are coerced from quoted strings, ``true``/``false``
  and numeric literals.
* Arrays, inline tables, multi-line strings and escaped quotes are not
  understood. Such values are kept as their raw trimmed text.

Malformed lines contribute nothing and never raise.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict

_SECTION = re.compile(r"^\[([^\]]+)\]$")
_KEY_VALUE = re.compile(r"^([^=]+)=\s*(.+)$")
_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def parse_manifest(text: str) -> Dict[str, Any]:
    """Return the nested mapping described by ``text``."""
    result: Dict[str, Any] = {}
    current = result

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        section = _SECTION.match(stripped)
        if section:
            current = result
            for part in section.group(1).split("."):
                child = current.get(part)
                if not isinstance(child, dict):
                    child = {}
                    current[part] = child
                current = child
            continue

        pair = _KEY_VALUE.match(stripped)
        if pair:
            key = pair.group(1).strip()
            current[key] = _parse_scalar(pair.group(2).strip())

    return result


def load_manifest(path: Path) -> Dict[str, Any]:
    """Read and parse a manifest file."""
    return parse_manifest(path.read_text(encoding="utf-8"))


def _parse_scalar(value: str) -> Any:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    if value == "true":
        return True
    if value == "false":
        return False
    if _NUMBER.match(value):
        try:
            return int(value)
        except ValueError:
            return float(value)
    return value


__all__ = ["load_manifest", "parse_manifest"]
