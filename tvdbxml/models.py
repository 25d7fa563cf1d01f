"""
Data models for tvdbxml
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import List, Tuple


class Status(str, Enum):
    """Airing status of a series"""

    CONTINUING = "Continuing"
    ENDED = "Ended"
    UNKNOWN = "Unknown"


class Weekday(str, Enum):
    """Day of the week a series airs on"""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class ContentRating(str, Enum):
    """US TV parental guideline rating"""

    TV_Y = "TV-Y"
    TV_Y7 = "TV-Y7"
    TV_G = "TV-G"
    TV_PG = "TV-PG"
    TV_14 = "TV-14"
    TV_MA = "TV-MA"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Episode:
    """Represents an episode of a series on TheTVDB"""

    id: str
    title: str
    description: str
    director: str
    filename: str
    imdb_id: str
    language: str
    season_id: str
    series_id: str
    episode_number: int | None = None
    season_number: int | None = None
    first_aired: date | None = None
    last_updated: int = 0
    rating: float | None = None
    rating_count: int = 0
    thumb_height: int | None = None
    thumb_width: int | None = None
    guest_stars: Tuple[str, ...] = ()
    writers: Tuple[str, ...] = ()

    @property
    def label(self) -> str | None:
        """Episode code such as S01E02, None when numbering is missing"""
        if self.season_number is None or self.episode_number is None:
            return None
        return f"S{self.season_number:02d}E{self.episode_number:02d}"


@dataclass(frozen=True)
class Show:
    """Represents a series on TheTVDB together with its episodes"""

    id: str
    name: str
    language: str
    network: str
    description: str
    zap2it_id: str
    imdb_id: str = ""
    rating: float | None = None
    rating_count: int = 0
    runtime: int | None = None
    banner: str | None = None
    fanart: str | None = None
    poster: str | None = None
    last_updated: int | None = None
    first_aired: date | None = None
    air_time: time | None = None
    air_day: Weekday | None = None
    status: Status = Status.UNKNOWN
    content_rating: ContentRating = ContentRating.UNKNOWN
    genres: Tuple[str, ...] = ()
    actors: Tuple[str, ...] = ()
    episodes: Tuple[Episode, ...] = ()

    def seasons(self) -> List[int]:
        """Sorted distinct season numbers present in the episode list"""
        return sorted(
            {ep.season_number for ep in self.episodes if ep.season_number is not None}
        )

    def get_episodes(self, season_number: int) -> List[Episode]:
        """Episodes of one season, in document order"""
        return [ep for ep in self.episodes if ep.season_number == season_number]

    def get_episode(self, season_number: int, episode_number: int) -> Episode | None:
        for ep in self.episodes:
            if (
                ep.season_number == season_number
                and ep.episode_number == episode_number
            ):
                return ep
        return None
