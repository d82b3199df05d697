"""Config commands."""

import json
import sys
from pathlib import Path

import cyclopts

app = cyclopts.App(name="config", help="Inspect quakefeed configuration")


@app.command
def show() -> None:
    """Show current effective config."""
    from quakefeed.config import Config

    config = Config()
    print(json.dumps(config.model_dump(mode="json"), indent=2, default=str))


@app.command
def validate(path: Path) -> None:
    """Validate a YAML config file.

    Args:
        path: Path to the config file.
    """
    import yaml

    from quakefeed.config import Config

    if not path.exists():
        print(f"Error: {path} not found", file=sys.stderr)
        sys.exit(1)

    try:
        data = yaml.safe_load(path.read_text()) or {}
        Config.model_validate(data)
        print(f"✓ {path} is valid")
    except Exception as e:
        print(f"✗ {path} is invalid: {e}", file=sys.stderr)
        sys.exit(1)
