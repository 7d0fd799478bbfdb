"""Generate README files from local project manifests."""

from .analyzers import analyze
from .render import render

__version__ = "1.0.0"

__all__ = ["__version__", "analyze", "render"]
