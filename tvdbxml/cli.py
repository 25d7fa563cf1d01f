"""
Command Line Interface (CLI) with Click
"""

import logging

import click

from tvdbxml.cli_config import load_config_from_args, setup_context
from tvdbxml.client import TVDBClient
from tvdbxml.commands import search_command, show_command
from tvdbxml.config import Config
from tvdbxml.utils import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=True), help="YAML configuration file"
)
@click.option("--api-key", envvar="TVDB_API_KEY", help="TheTVDB API key")
@click.option("--base-url", envvar="TVDB_BASE_URL", help="TheTVDB service URL")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Log level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx, config, api_key, base_url, log_level):
    """tvdbxml - Look up TV shows on TheTVDB"""

    cfg = load_config_from_args(config, api_key, base_url, log_level)

    setup_logging(cfg.log_level)

    ctx.ensure_object(dict)
    ctx.obj.update(setup_context(cfg))


@cli.command()
@click.argument("query")
@click.option("--results", "-n", type=int, help="Maximum number of shows to return")
@click.pass_context
def search(ctx, query, results):
    """Search shows by name"""
    config: Config = ctx.obj["config"]
    client: TVDBClient = ctx.obj["client"]
    max_results = results if results is not None else config.max_results
    search_command(client, query, max_results)


@cli.command()
@click.argument("show_id")
@click.option("--imdb", is_flag=True, help="SHOW_ID is an IMDb id (tt...)")
@click.option("--season", "-s", type=int, help="Only list episodes of this season")
@click.pass_context
def show(ctx, show_id, imdb, season):
    """Show a series and its episodes"""
    client: TVDBClient = ctx.obj["client"]
    show_command(client, show_id, imdb=imdb, season=season)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
