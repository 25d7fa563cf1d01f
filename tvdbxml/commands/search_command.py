"""Search command listing shows that match a name"""

import logging
import sys

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..client import TVDBClient
from ..exceptions import TVDBError
from ..utils import format_air_slot, format_date

logger = logging.getLogger(__name__)
console = Console()


def search_command(client: TVDBClient, query: str, max_results: int):
    """Search shows and print one table row per match

    Args:
        client: TVDB API client
        query: Series name to search for
        max_results: Maximum number of shows to fetch
    """
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task(f"Searching '{query}'...", total=None)
            shows = client.search(query, max_results)
            progress.update(task, completed=True)
    except TVDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.debug("Search failed", exc_info=True)
        sys.exit(1)

    if not shows:
        console.print(f"[yellow]No series found for '{query}'[/yellow]")
        return

    table = Table(title=f"Results for '{query}' ({len(shows)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Network")
    table.add_column("First aired", style="dim")
    table.add_column("Airs")
    table.add_column("Status", style="magenta")
    table.add_column("Episodes", style="blue")

    for show in shows:
        table.add_row(
            show.id,
            show.name,
            show.network or "-",
            format_date(show.first_aired),
            format_air_slot(show.air_day, show.air_time),
            show.status.value,
            str(len(show.episodes)),
        )

    console.print(table)
