"""Per-ecosystem snippet templates for the installation and usage sections."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from jinja2 import DictLoader, Environment

TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        "installation/node": """\
```bash
# Using npm
npm install {{ name }}

# Using yarn
yarn add {{ name }}

# Using pnpm
pnpm add {{ name }}
{% if npx %}

# Or run directly with npx
npx {{ name }}
{% endif %}
```""",
        "installation/python": """\
```bash
# Using pip
pip install {{ name }}

# Using poetry
poetry add {{ name }}
```""",
        "installation/go": """\
```bash
go install {{ module_path }}@latest
```""",
        "installation/rust": """\
```bash
# Using cargo
cargo install {{ name }}

# Or add to Cargo.toml
```

```toml
[dependencies]
{{ name }} = "{{ version or '*' }}"
```""",
        "installation/default": """\
```bash
# Clone the repository
git clone {{ repository or "https://github.com/username/" ~ name }}
cd {{ name }}
{% if install_command %}

# Install dependencies
{{ install_command }}
{% endif %}
```""",
        "usage/node": """\
{% if npx_run %}
```bash
{{ run_command }}
```

Or use programmatically:

{% endif %}
```javascript
const {{ import_name }} = require('{{ name }}');

// Example usage
// {{ import_name }}.doSomething();
```""",
        "usage/python": """\
```python
import {{ import_name }}

# Example usage
# {{ import_name }}.do_something()
```""",
        "usage/go": """\
```go
import "{{ module_path }}"

func main() {
    // Example usage
}
```""",
        "usage/rust": """\
```rust
use {{ import_name }};

fn main() {
    // Example usage
}
```""",
        "usage/default": """\
```bash
{{ run_command or "# Add usage examples here" }}
```""",
    }
)


def create_environment() -> Environment:
    """Return the Jinja environment that renders the snippet templates."""
    return Environment(
        loader=DictLoader(dict(TEMPLATES)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def template_name(section: str, project_type: str) -> str:
    """Resolve the template for ``section``, falling back to the default variant."""
    name = f"{section}/{project_type}"
    if name in TEMPLATES:
        return name
    return f"{section}/default"


__all__ = ["TEMPLATES", "create_environment", "template_name"]
