"""Configuration loading for readme-forge (.readmeforge.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ReadmeForgeError

CONFIG_FILENAME = ".readmeforge.yml"
DEFAULT_OUTPUT = "README.md"


class ConfigError(ReadmeForgeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReadmeConfig:
    """Rendering options for the generated README."""

    footer: bool = True


@dataclass
class AnalyzerConfig:
    """Detector enablement and Makefile scanning."""

    enabled: List[str] = field(default_factory=list)
    makefile: bool = True


@dataclass
class ForgeConfig:
    """Represents the settings defined in .readmeforge.yml."""

    root: Path
    output: str = DEFAULT_OUTPUT
    readme: ReadmeConfig = field(default_factory=ReadmeConfig)
    analyzers: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    @property
    def output_path(self) -> Path:
        return self.root / self.output


def load_config(config_path: Path) -> ForgeConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ForgeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = _as_str(data.get("output")) or DEFAULT_OUTPUT

    readme = ReadmeConfig()
    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        footer = _as_bool(readme_data.get("footer"))
        if footer is not None:
            readme.footer = footer

    analyzers = AnalyzerConfig()
    analyzer_data = _as_dict(data.get("analyzers"))
    if analyzer_data:
        analyzers.enabled = _as_str_list(analyzer_data.get("enabled"))
        makefile = _as_bool(analyzer_data.get("makefile"))
        if makefile is not None:
            analyzers.makefile = makefile

    return ForgeConfig(root=root, output=output, readme=readme, analyzers=analyzers)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
