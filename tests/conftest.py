import pytest

from tvdbxml.client import TVDBClient
from tvdbxml.exceptions import TransportError
from tvdbxml.transport import BaseTransport

API_KEY = "TESTKEY"

SHOW_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<Data>
  <Series>
    <id>{show_id}</id>
    <Actors>|Matthew Fox|Evangeline Lilly||Josh Holloway|</Actors>
    <Airs_DayOfWeek>Tuesday</Airs_DayOfWeek>
    <Airs_Time>9:00 PM</Airs_Time>
    <ContentRating>TV-14</ContentRating>
    <FirstAired>2004-09-22</FirstAired>
    <Genre>|Action|Adventure|Drama|</Genre>
    <IMDB_ID>tt0411008</IMDB_ID>
    <Language>en</Language>
    <Network>ABC</Network>
    <Overview>After their plane crashes on a mysterious island...</Overview>
    <Rating>9.1</Rating>
    <RatingCount>1024</RatingCount>
    <Runtime>60</Runtime>
    <SeriesName>{name}</SeriesName>
    <Status>Ended</Status>
    <banner>graphical/73739-g4.jpg</banner>
    <fanart>fanart/original/73739-34.jpg</fanart>
    <lastupdated>1401730018</lastupdated>
    <poster>posters/73739-7.jpg</poster>
    <zap2it_id>SH672362</zap2it_id>
  </Series>
  <Episode>
    <id>127131</id>
    <Director>J.J. Abrams</Director>
    <EpisodeName>Pilot (1)</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <FirstAired>2004-09-22</FirstAired>
    <GuestStars>|Greg Grunberg|Michelle Arthur|</GuestStars>
    <IMDB_ID>tt0636289</IMDB_ID>
    <Language>en</Language>
    <Overview>Stripped of everything, the survivors...</Overview>
    <Rating>8.4</Rating>
    <RatingCount>212</RatingCount>
    <SeasonNumber>1</SeasonNumber>
    <Writer>|J.J. Abrams|Damon Lindelof|</Writer>
    <filename>episodes/73739/127131.jpg</filename>
    <lastupdated>1398112471</lastupdated>
    <seasonid>16270</seasonid>
    <seriesid>{show_id}</seriesid>
    <thumb_height>225</thumb_height>
    <thumb_width>400</thumb_width>
  </Episode>
  <Episode>
    <id>127132</id>
    <Director></Director>
    <EpisodeName>Pilot (2)</EpisodeName>
    <EpisodeNumber>2</EpisodeNumber>
    <FirstAired></FirstAired>
    <GuestStars></GuestStars>
    <Rating></Rating>
    <RatingCount></RatingCount>
    <SeasonNumber>1</SeasonNumber>
    <lastupdated></lastupdated>
    <seasonid>16270</seasonid>
    <seriesid>{show_id}</seriesid>
  </Episode>
  <Episode>
    <id>127133</id>
    <EpisodeName>Man of Science, Man of Faith</EpisodeName>
    <EpisodeNumber>1</EpisodeNumber>
    <SeasonNumber>2</SeasonNumber>
    <seasonid>16271</seasonid>
    <seriesid>{show_id}</seriesid>
  </Episode>
</Data>
"""


def show_xml(show_id: str = "73739", name: str = "Lost") -> str:
    return SHOW_XML.format(show_id=show_id, name=name)


def search_xml(*show_ids: str) -> str:
    entries = "".join(
        f"<Series><seriesid>{sid}</seriesid><SeriesName>Show {sid}</SeriesName></Series>"
        for sid in show_ids
    )
    return f'<?xml version="1.0" encoding="UTF-8" ?><Data>{entries}</Data>'


class FakeTransport(BaseTransport):
    """Serves canned documents by URL and records every request"""

    def __init__(self, responses: dict[str, str] | None = None):
        self.responses = responses or {}
        self.requests: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.requests.append(url)
        if url not in self.responses:
            raise TransportError(f"404 Not Found: {url}", url=url)
        return self.responses[url]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return TVDBClient(API_KEY, transport=transport, base_url="http://tvdb.test")
