"""CLI entrypoint for readme-forge."""

from __future__ import annotations

import argparse
import json
import os
import sys
import traceback
from pathlib import Path

from . import __version__
from .errors import ReadmeForgeError
from .logging import configure_logging
from .orchestrator import ForgeResult, Orchestrator

_DEBUG_ENV = "DEBUG"

_EPILOG = """\
examples:
  readme-forge                  Generate README for current directory
  readme-forge ./my-project     Generate README for specific directory
  readme-forge -o DOCS.md       Output to custom file
  readme-forge --force          Overwrite existing README

supported projects:
  Node.js (package.json)
  Python (pyproject.toml, setup.py, requirements.txt)
  Go (go.mod)
  Rust (Cargo.toml)
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-forge",
        description="Generate a README.md from the manifests found in a project directory.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"readme-forge {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing output file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (default: README.md inside the project directory).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated README instead of writing it.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the detected project metadata as JSON and exit.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readme-forge."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    debug = bool(os.environ.get(_DEBUG_ENV))
    configure_logging(verbose=bool(args.verbose) or debug, log_file=args.log_file)

    orchestrator = Orchestrator()

    try:
        if args.json:
            metadata = orchestrator.inspect(args.directory)
            print(json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False))
            return
        result = orchestrator.run(
            args.directory,
            output=args.output,
            force=bool(args.force),
            dry_run=bool(args.dry_run),
        )
    except ReadmeForgeError as exc:
        if debug:
            traceback.print_exc()
        parser.exit(1, f"Error: {exc}\n")
    except Exception as exc:  # pragma: no cover - defensive guard
        if debug:
            traceback.print_exc()
        parser.exit(1, f"Error: {exc}\nSet {_DEBUG_ENV}=1 for the full traceback.\n")

    if result.written:
        _print_summary(result)
    else:
        sys.stdout.write(result.content)


def _print_summary(result: ForgeResult) -> None:
    metadata = result.metadata
    if metadata.detected:
        print(f"Detected: {metadata.project_type} project")
        print(f"Name: {metadata.name}")
        if metadata.description:
            print(f"Description: {metadata.description}")
    else:
        print("Could not detect project type; created a basic README template.")
    line_count = len(result.content.splitlines())
    byte_count = len(result.content.encode("utf-8"))
    print(f"Generated: {_relativize(result.path)}")
    print(f"  {line_count} lines, {byte_count} bytes")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
