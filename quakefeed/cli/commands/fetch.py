"""Fetch command - runs one earthquake query and prints the result."""

import json
import sys
from typing import Annotated

import cyclopts

from quakefeed.application.query import fetch_earthquake_data
from quakefeed.cli.console import Console
from quakefeed.config import Config

app = cyclopts.App(name="fetch", help="Fetch earthquakes from the feed")


@app.default
def fetch(
    url: str | None = None,
    /,
    *,
    json_output: Annotated[bool, cyclopts.Parameter(name="--json")] = False,
    limit: int | None = None,
) -> None:
    """Fetch earthquakes once and print them.

    Args:
        url: Feed URL. Defaults to the configured feed.request_url.
        json_output: Print one JSON object per line instead of a table.
        limit: Show at most this many earthquakes.
    """
    console = Console()
    config = Config()
    request_url = url or config.feed.request_url

    earthquakes = fetch_earthquake_data(request_url, settings=config.feed)

    if earthquakes is None:
        console.error(
            "No earthquake data available.",
            hint="Check the URL and your connection; details are in the log.",
        )
        sys.exit(1)
    if not earthquakes:
        console.error("The feed returned no earthquakes.")
        sys.exit(1)

    if limit is not None:
        earthquakes = earthquakes[:limit]

    if json_output:
        for quake in earthquakes:
            print(json.dumps(quake.as_dict()))
        return

    console.earthquakes(earthquakes, title=f"{len(earthquakes)} earthquake(s)")
