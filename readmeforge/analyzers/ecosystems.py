"""Ecosystem detectors for Node, Python, Go and Rust projects."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from .base import Detector
from .manifest import load_manifest
from ..logging import get_logger
from ..models import ProjectMetadata

_GO_MODULE = re.compile(r"^\s*module\s+(.+)$", re.MULTILINE)

logger = get_logger("ecosystems")


class NodeDetector(Detector):
    """Reads package.json metadata, scripts and entry points."""

    name = "node"
    MANIFEST = "package.json"

    def supports(self, root: Path) -> bool:
        return (root / self.MANIFEST).is_file()

    def detect(self, root: Path, current: ProjectMetadata) -> Optional[Dict[str, Any]]:
        if not self.supports(root):
            return None
        try:
            pkg = json.loads((root / self.MANIFEST).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.debug("Ignoring unreadable %s: %s", self.MANIFEST, exc)
            return None
        if not isinstance(pkg, dict):
            logger.debug("Ignoring %s without a top-level object", self.MANIFEST)
            return None

        name = _text(pkg.get("name")) or current.name
        scripts = _string_map(pkg.get("scripts"))

        author = pkg.get("author")
        if isinstance(author, dict):
            author = author.get("name")
        repository = pkg.get("repository")
        if isinstance(repository, dict):
            repository = repository.get("url")

        fields: Dict[str, Any] = {
            "detected": True,
            "project_type": "node",
            "name": name,
            "description": _text(pkg.get("description")),
            "version": _text(pkg.get("version")),
            "author": _text(author),
            "license": _text(pkg.get("license")),
            "repository": _text(repository),
            "homepage": _text(pkg.get("homepage")),
            "keywords": _string_list(pkg.get("keywords")),
            "dependencies": _keys(pkg.get("dependencies")),
            "dev_dependencies": _keys(pkg.get("devDependencies")),
            "scripts": scripts,
            "install_command": "npm install",
        }

        bin_entry = pkg.get("bin")
        main = _text(pkg.get("main"))
        if bin_entry:
            if isinstance(bin_entry, dict):
                bin_name = next(iter(bin_entry), name)
            else:
                bin_name = name
            fields["run_command"] = f"npx {bin_name}"
        elif main:
            fields["run_command"] = f"node {main}"
        if scripts.get("build"):
            fields["build_command"] = "npm run build"
        if scripts.get("test"):
            fields["test_command"] = "npm test"

        features: List[str] = []
        if bin_entry:
            features.append("Executable CLI tool")
        if pkg.get("types") or pkg.get("typings"):
            features.append("TypeScript definitions")
        if scripts.get("test"):
            features.append("Test scripts configured")
        if scripts.get("build"):
            features.append("Build system configured")
        fields["features"] = features

        return fields


class PythonDetector(Detector):
    """Reads pyproject.toml, falling back to setup.py / requirements.txt presence."""

    name = "python"
    PYPROJECT = "pyproject.toml"
    SETUP_SCRIPT = "setup.py"
    REQUIREMENTS = "requirements.txt"

    def supports(self, root: Path) -> bool:
        return any(
            (root / filename).is_file()
            for filename in (self.PYPROJECT, self.SETUP_SCRIPT, self.REQUIREMENTS)
        )

    def detect(self, root: Path, current: ProjectMetadata) -> Optional[Dict[str, Any]]:
        pyproject = root / self.PYPROJECT
        if pyproject.is_file():
            try:
                data = load_manifest(pyproject)
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Ignoring unreadable %s: %s", self.PYPROJECT, exc)
                return None
            return self._from_pyproject(data, current)

        has_setup = (root / self.SETUP_SCRIPT).is_file()
        if has_setup or (root / self.REQUIREMENTS).is_file():
            return {
                "detected": True,
                "project_type": "python",
                "install_command": (
                    "pip install ." if has_setup else "pip install -r requirements.txt"
                ),
            }
        return None

    @staticmethod
    def _from_pyproject(data: Dict[str, Any], current: ProjectMetadata) -> Dict[str, Any]:
        tool = _table(data.get("tool"))
        project = _table(data.get("project")) or _table(tool.get("poetry"))

        name = _text(project.get("name")) or current.name
        fields: Dict[str, Any] = {
            "detected": True,
            "project_type": "python",
            "name": name,
            "description": _text(project.get("description")),
            "version": _text(project.get("version")),
            "license": _text(project.get("license")),
            "keywords": _string_list(project.get("keywords")),
            "install_command": "pip install .",
            "run_command": f"python -m {name.replace('-', '_')}",
        }
        if project.get("authors"):
            fields["author"] = _first_author(project["authors"])
        if "pytest" in tool:
            fields["test_command"] = "pytest"
        return fields


class GoDetector(Detector):
    """Reads the module path declared in go.mod."""

    name = "go"
    MANIFEST = "go.mod"

    def supports(self, root: Path) -> bool:
        return (root / self.MANIFEST).is_file()

    def detect(self, root: Path, current: ProjectMetadata) -> Optional[Dict[str, Any]]:
        if not self.supports(root):
            return None
        try:
            content = (root / self.MANIFEST).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Ignoring unreadable %s: %s", self.MANIFEST, exc)
            return None

        fields: Dict[str, Any] = {
            "detected": True,
            "project_type": "go",
            "install_command": "go install",
            "run_command": "go run .",
            "build_command": "go build",
            "test_command": "go test ./...",
        }
        match = _GO_MODULE.search(content)
        if match:
            module_path = match.group(1).strip()
            fields["name"] = module_path.split("/")[-1] or current.name
            fields["repository"] = (
                f"https://{module_path}" if module_path.startswith("github.com") else ""
            )
        return fields


class RustDetector(Detector):
    """Reads the [package] table of Cargo.toml."""

    name = "rust"
    MANIFEST = "Cargo.toml"

    def supports(self, root: Path) -> bool:
        return (root / self.MANIFEST).is_file()

    def detect(self, root: Path, current: ProjectMetadata) -> Optional[Dict[str, Any]]:
        if not self.supports(root):
            return None
        try:
            data = load_manifest(root / self.MANIFEST)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Ignoring unreadable %s: %s", self.MANIFEST, exc)
            return None

        package = _table(data.get("package"))
        fields: Dict[str, Any] = {
            "detected": True,
            "project_type": "rust",
            "name": _text(package.get("name")) or current.name,
            "description": _text(package.get("description")),
            "version": _text(package.get("version")),
            "license": _text(package.get("license")),
            "repository": _text(package.get("repository")),
            "homepage": _text(package.get("homepage")),
            "keywords": _string_list(package.get("keywords")),
            "install_command": "cargo install --path .",
            "run_command": "cargo run",
            "build_command": "cargo build --release",
            "test_command": "cargo test",
        }
        if package.get("authors"):
            fields["author"] = _first_author(package["authors"])
        return fields


def _text(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def _table(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _keys(value: Any) -> List[str]:
    if isinstance(value, dict):
        return [str(key) for key in value]
    return []


def _string_list(value: Any) -> List[str]:
    # The manifest parser keeps arrays as raw text, so only JSON lists survive here.
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): _text(command) for key, command in value.items()}


def _first_author(value: Any) -> str:
    if isinstance(value, list):
        return _text(value[0]) if value else ""
    return _text(value)


__all__ = ["GoDetector", "NodeDetector", "PythonDetector", "RustDetector"]
