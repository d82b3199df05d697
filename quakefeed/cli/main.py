"""Main CLI application using Cyclopts.

The CLI is one caller of the query pipeline: it runs a single fetch and
prints what came back.
"""

import cyclopts
import logfire

from quakefeed.cli.commands import config, fetch
from quakefeed.config import Config, configure_logging

app = cyclopts.App(
    name="quakefeed",
    help="quakefeed - recent earthquakes from a GeoJSON feed",
)

app.command(fetch.app, name="fetch")
app.command(config.app, name="config")


def main() -> None:
    """Console script entry point."""
    configure_logging(Config().logging)
    logfire.configure(send_to_logfire="if-token-present", console=False)
    app()


if __name__ == "__main__":
    main()
