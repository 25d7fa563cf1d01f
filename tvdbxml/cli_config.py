"""
CLI configuration handler
"""

import sys
from pathlib import Path

from rich.console import Console

from .client import TVDBClient
from .config import Config

console = Console()


def load_config_from_args(
    config_file: str | None,
    api_key: str | None,
    base_url: str | None,
    log_level: str | None,
) -> Config:
    """
    Load configuration from CLI arguments and files

    Command line values override the configuration file and environment.

    Args:
        config_file: Path to config file
        api_key: API key from CLI or TVDB_API_KEY
        base_url: Service URL override from CLI
        log_level: Log level from CLI, None to keep the configured one

    Returns:
        Config object

    Raises:
        SystemExit if configuration is invalid
    """
    overrides = {"api_key": api_key, "base_url": base_url, "log_level": log_level}

    try:
        if config_file:
            cfg = Config.from_env_and_file(Path(config_file), overrides)
        else:
            # Try to load from default file
            default_config = Path("config.yaml")
            if default_config.exists():
                cfg = Config.from_env_and_file(default_config, overrides)
            elif api_key:
                cfg = Config.from_env_and_file(None, overrides)
            else:
                console.print(
                    "[red]Error:[/red] Missing configuration. Use --config, --api-key or TVDB_API_KEY."
                )
                console.print("\nExample:")
                console.print("  tvdbxml --api-key YOUR_KEY search \"Lost\"")
                sys.exit(1)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    return cfg


def setup_context(config: Config) -> dict:
    """
    Setup CLI context with config and client

    Args:
        config: Configuration object

    Returns:
        Dictionary with context objects
    """
    return {
        "config": config,
        "client": TVDBClient.from_config(config),
    }
