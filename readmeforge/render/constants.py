"""Static tables used when rendering README sections."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_SECTIONS: tuple[str, ...] = (
    "features",
    "installation",
    "usage",
    "api",
    "contributing",
    "license",
)

SECTION_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "features": "Features",
        "installation": "Installation",
        "usage": "Usage",
        "api": "API",
        "contributing": "Contributing",
        "license": "License",
    }
)

SCRIPT_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "test": "Run tests",
        "build": "Build the project",
        "start": "Start the application",
        "dev": "Run in development mode",
        "lint": "Run linter",
        "format": "Format code",
    }
)

# Only these npm scripts are listed in the API table, in script order.
API_SCRIPTS = frozenset({"test", "build", "start"})

GENERIC_FEATURES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "node": ("Easy to use API", "Zero/minimal dependencies", "Well documented"),
        "python": ("Pythonic API design", "Type hints support", "Well documented"),
        "go": ("Fast and efficient", "Simple API", "Well documented"),
        "rust": ("Memory safe", "High performance", "Well documented"),
    }
)
FALLBACK_FEATURES: tuple[str, ...] = ("Easy to use", "Well documented")

CLI_OPTIONS: tuple[str, ...] = (
    "  -h, --help     Show help message",
    "  -v, --version  Show version number",
)

CONTRIBUTING = """\
Contributions are welcome! Please feel free to submit a Pull Request.

1. Fork the repository
2. Create your feature branch (`git checkout -b feature/amazing-feature`)
3. Commit your changes (`git commit -m 'Add some amazing feature'`)
4. Push to the branch (`git push origin feature/amazing-feature`)
5. Open a Pull Request

Please make sure to update tests as appropriate and adhere to the existing coding style."""

DEFAULT_LICENSE = "MIT"
LICENSE_TEMPLATE = (
    "This project is licensed under the {license} License - "
    "see the [LICENSE](LICENSE) file for details."
)
FOOTER_TEMPLATE = "Made with ❤️ by {author}"


__all__ = [
    "API_SCRIPTS",
    "CLI_OPTIONS",
    "CONTRIBUTING",
    "DEFAULT_LICENSE",
    "DEFAULT_SECTIONS",
    "FALLBACK_FEATURES",
    "FOOTER_TEMPLATE",
    "GENERIC_FEATURES",
    "LICENSE_TEMPLATE",
    "SCRIPT_DESCRIPTIONS",
    "SECTION_TITLES",
]
