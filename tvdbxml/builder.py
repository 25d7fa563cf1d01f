"""
Builds Show and Episode objects from TheTVDB XML documents
"""

import logging
import xml.etree.ElementTree as ET
from typing import Tuple

from .coercion import (
    int_or_default,
    optional_float,
    optional_int,
    optional_text,
    parse_content_rating,
    parse_date,
    parse_status,
    parse_time,
    parse_weekday,
    split_pipe_list,
)
from .models import Episode, Show
from .xml_utils import extract, find_series_element

logger = logging.getLogger(__name__)


def build_show(document: ET.Element) -> Show:
    """
    Build a Show from a show-detail document

    Args:
        document: Root element of a /series/{id}/all/ response

    Returns:
        Show with every Episode element of the document attached, in order

    Raises:
        MalformedDocumentError: if the document has no Series element
        FormatError: if a typed field holds unparseable text
    """
    series = find_series_element(document)

    def get(name: str) -> str:
        return extract(series, name)

    show = Show(
        id=get("id"),
        imdb_id=get("IMDB_ID"),
        name=get("SeriesName"),
        language=get("Language"),
        network=get("Network"),
        description=get("Overview"),
        rating=optional_float(get("Rating"), "Rating"),
        rating_count=int_or_default(get("RatingCount"), 0, "RatingCount"),
        runtime=optional_int(get("Runtime"), "Runtime"),
        banner=optional_text(get("banner")),
        fanart=optional_text(get("fanart")),
        poster=optional_text(get("poster")),
        last_updated=optional_int(get("lastupdated"), "lastupdated"),
        zap2it_id=get("zap2it_id"),
        first_aired=parse_date(get("FirstAired"), "FirstAired"),
        air_time=parse_time(get("Airs_Time"), "Airs_Time"),
        air_day=parse_weekday(get("Airs_DayOfWeek"), "Airs_DayOfWeek"),
        status=parse_status(get("Status"), "Status"),
        content_rating=parse_content_rating(get("ContentRating")),
        genres=split_pipe_list(get("Genre")),
        actors=split_pipe_list(get("Actors")),
        episodes=build_episodes(document),
    )
    logger.debug(
        f"Built show {show.id} ({show.name}) with {len(show.episodes)} episodes"
    )
    return show


def build_episodes(document: ET.Element) -> Tuple[Episode, ...]:
    """Build every Episode element of the document, in document order"""
    return tuple(build_episode(element) for element in document.iter("Episode"))


def build_episode(element: ET.Element) -> Episode:
    """Build an Episode from a single Episode element"""

    def get(name: str) -> str:
        return extract(element, name)

    return Episode(
        id=get("id"),
        title=get("EpisodeName"),
        description=get("Overview"),
        episode_number=optional_int(get("EpisodeNumber"), "EpisodeNumber"),
        director=get("Director"),
        filename=get("filename"),
        first_aired=parse_date(get("FirstAired"), "FirstAired"),
        guest_stars=split_pipe_list(get("GuestStars")),
        imdb_id=get("IMDB_ID"),
        language=get("Language"),
        last_updated=int_or_default(get("lastupdated"), 0, "lastupdated"),
        rating=optional_float(get("Rating"), "Rating"),
        rating_count=int_or_default(get("RatingCount"), 0, "RatingCount"),
        season_id=get("seasonid"),
        season_number=optional_int(get("SeasonNumber"), "SeasonNumber"),
        series_id=get("seriesid"),
        thumb_height=optional_int(get("thumb_height"), "thumb_height"),
        thumb_width=optional_int(get("thumb_width"), "thumb_width"),
        writers=split_pipe_list(get("Writer")),
    )
