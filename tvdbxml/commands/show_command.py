"""Show command printing a series and its episodes"""

import logging
import sys

from rich.console import Console
from rich.table import Table

from ..client import TVDBClient
from ..exceptions import NotFoundError, TVDBError
from ..models import Show
from ..utils import format_air_slot, format_date, format_episode_info

logger = logging.getLogger(__name__)
console = Console()


def _print_details(show: Show):
    console.print(f"[bold green]{show.name}[/bold green] [dim](ID {show.id})[/dim]")
    if show.imdb_id:
        console.print(f"IMDb: {show.imdb_id}")
    console.print(f"Network: {show.network or '-'}")
    console.print(f"Status: {show.status.value}")
    console.print(f"Content rating: {show.content_rating.value}")
    console.print(f"First aired: {format_date(show.first_aired)}")
    console.print(f"Airs: {format_air_slot(show.air_day, show.air_time)}")
    if show.runtime is not None:
        console.print(f"Runtime: {show.runtime} min")
    if show.rating is not None:
        console.print(f"Rating: {show.rating:.1f} ({show.rating_count} votes)")
    if show.genres:
        console.print(f"Genres: {', '.join(show.genres)}")
    if show.actors:
        console.print(f"Actors: {', '.join(show.actors)}")
    if show.description:
        console.print(f"\n{show.description}")


def show_command(
    client: TVDBClient,
    show_id: str,
    imdb: bool = False,
    season: int | None = None,
):
    """Fetch a show and print its details and episode table

    Args:
        client: TVDB API client
        show_id: TheTVDB series id, or an IMDb id when imdb is set
        imdb: Treat show_id as an IMDb id
        season: Only list episodes of this season
    """
    try:
        if imdb:
            show = client.get_show_by_imdb_id(show_id)
        else:
            show = client.get_show(show_id)
    except NotFoundError as e:
        console.print(f"[yellow]{e}[/yellow]")
        sys.exit(1)
    except TVDBError as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.debug("Show lookup failed", exc_info=True)
        sys.exit(1)

    _print_details(show)

    episodes = show.episodes if season is None else show.get_episodes(season)
    if not episodes:
        console.print("\n[yellow]No episodes[/yellow]")
        return

    table = Table(title=f"Episodes ({len(episodes)})")
    table.add_column("Episode", style="cyan")
    table.add_column("First aired", style="dim")
    table.add_column("Rating", style="blue")

    for ep in episodes:
        table.add_row(
            format_episode_info(
                show.name, ep.season_number, ep.episode_number, ep.title
            ),
            format_date(ep.first_aired),
            f"{ep.rating:.1f}" if ep.rating is not None else "-",
        )

    console.print(table)
