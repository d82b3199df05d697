"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from collections.abc import Sequence

from rich.console import Console as RichConsole
from rich.table import Table

from quakefeed.domain.earthquake.model.value import Earthquake


def format_magnitude(magnitude: float | None) -> str:
    """One decimal place, or a dash when the feed had no magnitude."""
    if magnitude is None:
        return "-"
    return f"{magnitude:.1f}"


def format_time(quake: Earthquake) -> str:
    """UTC timestamp, or the raw milliseconds when they are out of datetime's range."""
    occurred_at = quake.occurred_at
    if occurred_at is None:
        return f"{quake.time_millis} ms"
    return occurred_at.strftime("%Y-%m-%d %H:%M:%S")


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self) -> None:
        self._console = RichConsole(stderr=False)
        self._err_console = RichConsole(stderr=True)

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def earthquakes(self, earthquakes: Sequence[Earthquake], *, title: str | None = None) -> None:
        """Print earthquakes as a numbered table."""
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("#", style="dim", width=3)
        table.add_column("Mag", justify="right", no_wrap=True)
        table.add_column("Location")
        table.add_column("Time (UTC)", no_wrap=True)
        table.add_column("Details", style="cyan", overflow="fold")

        for i, quake in enumerate(earthquakes, 1):
            table.add_row(
                str(i),
                format_magnitude(quake.magnitude),
                quake.location,
                format_time(quake),
                quake.detail_url,
            )

        self._console.print(table)
