"""Tests for README rendering."""

from __future__ import annotations

from readmeforge import render
from readmeforge.models import ProjectMetadata, StructureSummary
from readmeforge.render.generator import (
    ReadmeGenerator,
    describe_script,
    format_title,
    slugify,
    to_camel_case,
)
from tests._fixtures.repo_builder import RepoBuilder


def _metadata(**overrides) -> ProjectMetadata:
    fields = {"root": "/tmp/demo", "name": "demo"}
    fields.update(overrides)
    return ProjectMetadata(**fields)


def _section(markdown: str, title: str) -> str:
    _, _, rest = markdown.partition(f"## {title}\n")
    body, _, _ = rest.partition("\n## ")
    return body


def test_render_unknown_record_is_total() -> None:
    markdown = render(_metadata())

    assert markdown.startswith("# Demo\n\n> A unknown project\n")
    assert "## Table of Contents" in markdown
    assert "- Easy to use\n- Well documented" in markdown
    assert "git clone https://github.com/username/demo\ncd demo\n```" in markdown
    assert "# Add usage examples here" in markdown
    assert "This project is licensed under the MIT License" in markdown
    assert "Made with" not in markdown
    assert markdown.endswith("\n")
    assert "\n\n\n" not in markdown


def test_render_sections_in_fixed_order() -> None:
    markdown = render(_metadata(project_type="python"))
    headings = [line for line in markdown.splitlines() if line.startswith("## ")]
    assert headings == [
        "## Table of Contents",
        "## Features",
        "## Installation",
        "## Usage",
        "## API",
        "## Contributing",
        "## License",
    ]


def test_render_table_of_contents_links() -> None:
    markdown = render(_metadata())
    toc = _section(markdown, "Table of Contents")
    assert toc.strip().splitlines() == [
        "- [Features](#features)",
        "- [Installation](#installation)",
        "- [Usage](#usage)",
        "- [API](#api)",
        "- [Contributing](#contributing)",
        "- [License](#license)",
    ]


def test_render_is_idempotent() -> None:
    metadata = _metadata(project_type="node", license="MIT", author="Ada", scripts={"test": "jest"})
    assert render(metadata) == render(metadata)


def test_render_manifest_with_name_version_license(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {"Cargo.toml": '[package]\nname = "foo"\nversion = "1.2.3"\nlicense = "MIT"\n'}
    )

    markdown = render(repo_builder.analyze())

    assert markdown.startswith("# Foo\n")
    assert "(https://img.shields.io/badge/License-MIT-blue.svg)" in markdown
    installation = _section(markdown, "Installation")
    assert "cargo install foo" in installation
    assert 'foo = "1.2.3"' in installation


def test_render_go_project_end_to_end(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"go.mod": "module github.com/acme/widget\n\ngo 1.21\n"})

    markdown = render(repo_builder.analyze())

    assert markdown.startswith("# Widget\n")
    assert "https://img.shields.io/github/stars/acme/widget.svg?style=social" in markdown
    installation = _section(markdown, "Installation")
    assert "go install github.com/acme/widget@latest" in installation
    usage = _section(markdown, "Usage")
    assert 'import "github.com/acme/widget"' in usage
    assert "- Fast and efficient\n- Simple API\n- Well documented" in markdown


def test_render_node_installation_with_npx_block() -> None:
    metadata = _metadata(project_type="node", name="my-cli", run_command="npx my-cli")

    installation = ReadmeGenerator().installation(metadata)

    assert installation == (
        "```bash\n"
        "# Using npm\n"
        "npm install my-cli\n"
        "\n"
        "# Using yarn\n"
        "yarn add my-cli\n"
        "\n"
        "# Using pnpm\n"
        "pnpm add my-cli\n"
        "\n"
        "# Or run directly with npx\n"
        "npx my-cli\n"
        "```"
    )


def test_render_node_installation_without_npx_block() -> None:
    metadata = _metadata(project_type="node", name="lib", run_command="node index.js")

    installation = ReadmeGenerator().installation(metadata)

    assert installation.endswith("pnpm add lib\n```")
    assert "npx" not in installation


def test_render_node_installation_npx_from_bin_script_key() -> None:
    metadata = _metadata(project_type="node", scripts={"build:bin": "pkg ."})
    assert "npx demo" in ReadmeGenerator().installation(metadata)


def test_render_node_usage_programmatic_and_npx() -> None:
    metadata = _metadata(project_type="node", name="my-cool_lib", run_command="npx my-cool_lib")

    usage = ReadmeGenerator().usage(metadata)

    assert usage == (
        "```bash\n"
        "npx my-cool_lib\n"
        "```\n"
        "\n"
        "Or use programmatically:\n"
        "\n"
        "```javascript\n"
        "const myCoolLib = require('my-cool_lib');\n"
        "\n"
        "// Example usage\n"
        "// myCoolLib.doSomething();\n"
        "```"
    )


def test_render_python_usage_uses_underscore_import() -> None:
    usage = ReadmeGenerator().usage(_metadata(project_type="python", name="data-tool"))
    assert "import data_tool\n" in usage
    assert "# data_tool.do_something()" in usage


def test_render_rust_usage_uses_underscore_import() -> None:
    usage = ReadmeGenerator().usage(_metadata(project_type="rust", name="fast-crate"))
    assert usage.startswith("```rust\nuse fast_crate;\n")


def test_render_default_usage_emits_run_command() -> None:
    usage = ReadmeGenerator().usage(_metadata(run_command="make run"))
    assert usage == "```bash\nmake run\n```"


def test_render_default_installation_includes_install_command() -> None:
    metadata = _metadata(repository="https://gitlab.com/a/demo", install_command="pip install .")

    installation = ReadmeGenerator().installation(metadata)

    assert installation == (
        "```bash\n"
        "# Clone the repository\n"
        "git clone https://gitlab.com/a/demo\n"
        "cd demo\n"
        "\n"
        "# Install dependencies\n"
        "pip install .\n"
        "```"
    )


def test_render_api_table_lists_only_test_build_start() -> None:
    metadata = _metadata(
        project_type="node",
        scripts={"test": "jest", "build": "tsc", "lint": "eslint ."},
    )

    api = ReadmeGenerator().api(metadata)

    rows = [line for line in api.splitlines() if line.startswith("| `")]
    assert rows == [
        "| `npm run test` | Run tests |",
        "| `npm run build` | Build the project |",
    ]
    assert "lint" not in api
    assert "### CLI Options" not in api


def test_render_api_cli_options_for_bin_structure() -> None:
    metadata = _metadata(project_type="go", structure=StructureSummary(has_bin=True))

    api = ReadmeGenerator().api(metadata)

    assert api.startswith("### Available Commands\n")
    assert "| Command |" not in api
    assert "### CLI Options" in api
    assert "demo [options]" in api
    assert "  -h, --help     Show help message" in api


def test_render_features_verbatim_with_duplicates() -> None:
    metadata = _metadata(features=["CLI support", "CLI support"])
    assert ReadmeGenerator().features(metadata) == "- CLI support\n- CLI support"


def test_render_footer_only_with_author() -> None:
    markdown = render(_metadata(author="Ada"))
    assert markdown.endswith("---\n\nMade with ❤️ by Ada\n")
    assert "Made with" not in render(_metadata(author="Ada"), show_footer=False)


def test_render_license_paragraph_uses_license() -> None:
    markdown = render(_metadata(license="Apache-2.0"))
    assert "licensed under the Apache-2.0 License" in markdown


def test_render_description_blockquote() -> None:
    markdown = render(_metadata(description="Builds READMEs"))
    assert "\n> Builds READMEs\n" in markdown


def test_format_title() -> None:
    assert format_title("my-cool_project") == "My Cool Project"
    assert format_title("") == "Project"
    assert format_title("@scope/pkg") == "@Scope/Pkg"


def test_to_camel_case() -> None:
    assert to_camel_case("my-package") == "myPackage"
    assert to_camel_case("Foo_bar") == "fooBar"


def test_describe_script_falls_back_to_truncated_command() -> None:
    assert describe_script("dev", "vite") == "Run in development mode"
    assert describe_script("release", "x" * 80) == "x" * 50


def test_slugify_matches_anchor_style() -> None:
    assert slugify("Table of Contents") == "table-of-contents"
    assert slugify("API") == "api"
