"""
Miscellaneous utilities
"""

import logging
from datetime import date, time


def setup_logging(log_level: str = "INFO"):
    """Configure logging system"""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_episode_info(
    series_title: str, season: int | None, episode: int | None, title: str
) -> str:
    """Format episode information for display"""
    if season is None or episode is None:
        return f"{series_title} - {title}"
    return f"{series_title} - S{season:02d}E{episode:02d} - {title}"


def format_date(value: date | None) -> str:
    return value.isoformat() if value else "-"


def format_air_slot(day, at: time | None) -> str:
    """Format the weekly air slot, e.g. 'Thursday 21:00'"""
    parts = []
    if day is not None:
        parts.append(day.value)
    if at is not None:
        parts.append(at.strftime("%H:%M"))
    return " ".join(parts) or "-"
