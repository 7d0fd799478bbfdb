"""Tests for the top-level structure scanner."""

from __future__ import annotations

from pathlib import Path

from readmeforge.analyzers.structure import scan_structure
from readmeforge.models import StructureSummary
from tests._fixtures.repo_builder import RepoBuilder


def test_scan_structure_detects_tests_and_ci(repo_builder: RepoBuilder) -> None:
    repo_builder.mkdir(["tests", ".github/workflows"])

    structure = scan_structure(repo_builder.path())

    assert structure.has_tests is True
    assert structure.has_ci is True
    assert structure.directories == ["tests"]


def test_scan_structure_empty_directory_is_all_default(repo_builder: RepoBuilder) -> None:
    assert scan_structure(repo_builder.path()) == StructureSummary()


def test_scan_structure_classifies_directories_case_insensitively(repo_builder: RepoBuilder) -> None:
    repo_builder.mkdir(["Docs", "example", "source", "lib", "bin", "config", "__tests__", "misc"])

    structure = scan_structure(repo_builder.path())

    assert structure.has_docs
    assert structure.has_examples
    assert structure.has_src
    assert structure.has_lib
    assert structure.has_bin
    assert structure.has_config
    assert structure.has_tests
    assert structure.has_ci is False
    assert structure.directories == sorted(
        ["Docs", "example", "source", "lib", "bin", "config", "__tests__", "misc"]
    )


def test_scan_structure_collects_main_files(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "CHANGELOG.md": "# Changes\n",
            "Makefile": "all:\n",
            "Dockerfile": "FROM scratch\n",
            "setup.py": "",
            ".hidden.md": "",
        }
    )

    structure = scan_structure(repo_builder.path())

    assert structure.main_files == ["CHANGELOG.md", "Dockerfile", "Makefile"]
    assert structure.directories == []


def test_scan_structure_gitlab_ci_file_sets_ci(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".gitlab-ci.yml": "stages: []\n"})
    assert scan_structure(repo_builder.path()).has_ci is True


def test_scan_structure_ignores_other_dot_entries(repo_builder: RepoBuilder) -> None:
    repo_builder.mkdir([".git", ".tests"])
    structure = scan_structure(repo_builder.path())
    assert structure == StructureSummary()


def test_scan_structure_missing_directory_returns_defaults(tmp_path: Path) -> None:
    assert scan_structure(tmp_path / "missing") == StructureSummary()


def test_scan_structure_file_path_returns_defaults(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    assert scan_structure(target) == StructureSummary()
