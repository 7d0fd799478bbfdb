"""Error types surfaced by readme-forge."""

from __future__ import annotations

from pathlib import Path


class ReadmeForgeError(RuntimeError):
    """Base class for failures that abort a readme-forge run."""


class ForgeEnvironmentError(ReadmeForgeError):
    """The target directory or output location cannot be used."""


class DirectoryNotFoundError(ForgeEnvironmentError):
    """Raised when the directory to analyze does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory not found: {path}")
        self.path = path


class OutputExistsError(ForgeEnvironmentError):
    """Raised when the output file exists and overwriting was not requested."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"{path.name} already exists. Use --force to overwrite, "
            "or --output to specify a different file."
        )
        self.path = path


class AnalysisError(ReadmeForgeError):
    """Raised when analysis or rendering fails unexpectedly."""


__all__ = [
    "AnalysisError",
    "DirectoryNotFoundError",
    "ForgeEnvironmentError",
    "OutputExistsError",
    "ReadmeForgeError",
]
