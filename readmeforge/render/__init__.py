"""Markdown rendering for analyzed projects."""

from .badges import BadgeBuilder
from .generator import ReadmeGenerator, render
from .lint import MarkdownLinter

__all__ = ["BadgeBuilder", "MarkdownLinter", "ReadmeGenerator", "render"]
