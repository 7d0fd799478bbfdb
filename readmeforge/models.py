"""Core data models shared across readme-forge components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

PROJECT_TYPES = ("node", "python", "go", "rust", "unknown")


@dataclass
class StructureSummary:
    """Top-level layout facts for a project directory."""

    has_tests: bool = False
    has_docs: bool = False
    has_examples: bool = False
    has_src: bool = False
    has_lib: bool = False
    has_bin: bool = False
    has_config: bool = False
    has_ci: bool = False
    main_files: List[str] = field(default_factory=list)
    directories: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasTests": self.has_tests,
            "hasDocs": self.has_docs,
            "hasExamples": self.has_examples,
            "hasSrc": self.has_src,
            "hasLib": self.has_lib,
            "hasBin": self.has_bin,
            "hasConfig": self.has_config,
            "hasCI": self.has_ci,
            "mainFiles": list(self.main_files),
            "directories": list(self.directories),
        }


@dataclass
class ProjectMetadata:
    """Normalized description of a project, consumed by the generator."""

    root: str
    name: str
    project_type: str = "unknown"
    detected: bool = False
    description: str = ""
    version: str = ""
    author: str = ""
    license: str = ""
    repository: str = ""
    homepage: str = ""
    keywords: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    dev_dependencies: List[str] = field(default_factory=list)
    scripts: Dict[str, str] = field(default_factory=dict)
    features: List[str] = field(default_factory=list)
    structure: StructureSummary = field(default_factory=StructureSummary)
    install_command: str = ""
    run_command: str = ""
    build_command: str = ""
    test_command: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the record using the camelCase keys of the JSON output."""
        return {
            "dir": self.root,
            "detected": self.detected,
            "type": self.project_type,
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "author": self.author,
            "license": self.license,
            "repository": self.repository,
            "homepage": self.homepage,
            "keywords": list(self.keywords),
            "dependencies": list(self.dependencies),
            "devDependencies": list(self.dev_dependencies),
            "scripts": dict(self.scripts),
            "features": list(self.features),
            "structure": self.structure.to_dict(),
            "installCommand": self.install_command,
            "runCommand": self.run_command,
            "buildCommand": self.build_command,
            "testCommand": self.test_command,
        }
