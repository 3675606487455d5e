"""Pydantic models describing Stalker and Xtream wire payloads."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class WireModel(BaseModel):
    """Base for payloads that serialise straight into a JSON response."""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class StalkerCategory(WireModel):
    id: str
    title: str
    alias: str

    def to_genre(self) -> dict[str, Any]:
        """Return the ``get_genres`` shape of the category."""

        return {**self.to_payload(), "censored": 0}


class StalkerChannel(WireModel):
    """A live channel as listed by ``get_ordered_list?type=itv``."""

    kind: Literal["channel"] = Field(default="channel", exclude=True)
    id: str
    name: str
    o_name: str
    cmd: str
    logo: str
    category_id: str
    tv_genre_id: str
    xmltv_id: str


class StalkerEmbeddedEpisode(WireModel):
    id: int
    name: str
    cmd: str


class StalkerVodItem(WireModel):
    """A VOD entry; ``is_series`` is ``"1"`` for Ministra-style series."""

    kind: Literal["vod"] = Field(default="vod", exclude=True)
    id: str
    name: str
    o_name: str
    title: str
    cmd: str
    screenshot_uri: str
    cover: str
    description: str
    actors: str
    director: str
    year: str
    genre: str
    genres_str: str
    rating_imdb: str
    rating_kinopoisk: str
    category_id: str
    is_series: int | str = 0
    has_files: int = 1
    series: list[StalkerEmbeddedEpisode] | None = None

    @property
    def flagged_as_series(self) -> bool:
        return str(self.is_series) == "1"


class StalkerSeriesItem(WireModel):
    kind: Literal["series"] = Field(default="series", exclude=True)
    id: str
    name: str
    o_name: str
    title: str
    cmd: str
    screenshot_uri: str
    cover: str
    description: str
    actors: str
    director: str
    year: str
    genres_str: str
    rating_imdb: str
    rating_kinopoisk: str
    category_id: str
    is_series: int = 0
    has_files: int = 0


ContentItem = Annotated[
    Union[StalkerChannel, StalkerVodItem, StalkerSeriesItem],
    Field(discriminator="kind"),
]


class StalkerSeason(WireModel):
    id: str
    name: str
    cmd: str
    description: str
    director: str
    actors: str
    year: str
    genres_str: str
    age: str
    rating_imdb: str
    rating_kinopoisk: str
    screenshot_uri: str
    added: str
    series: list[str] = Field(default_factory=list)


class StalkerEpgProgram(WireModel):
    id: str
    name: str
    start: str
    stop: str
    start_timestamp: int
    stop_timestamp: int
    descr: str
    category: str


class XtreamCategory(WireModel):
    category_id: str
    category_name: str
    parent_id: int = 0


class XtreamLiveStream(WireModel):
    num: int
    name: str
    stream_type: Literal["live"] = "live"
    stream_id: int
    stream_icon: str
    epg_channel_id: str
    added: str
    category_id: str
    custom_sid: str = ""
    direct_source: str = ""
    tv_archive: int = 0
    tv_archive_duration: int = 0
    rating_imdb: str


class XtreamVodStream(WireModel):
    num: int
    name: str
    stream_type: Literal["movie"] = "movie"
    stream_id: int
    stream_icon: str
    added: str
    category_id: str
    custom_sid: str = ""
    direct_source: str = ""
    rating: float
    rating_5based: float
    rating_imdb: str
    container_extension: str
    type: Literal["movie"] = "movie"


class XtreamSeriesItem(WireModel):
    num: int
    name: str
    series_id: int
    cover: str
    plot: str
    cast: str
    director: str
    genre: str
    releaseDate: str
    last_modified: str
    rating: str
    rating_5based: float
    backdrop_path: list[str] = Field(default_factory=list)
    youtube_trailer: str = ""
    episode_run_time: str
    category_id: int


class XtreamVodInfo(WireModel):
    kinopoisk_url: str = ""
    tmdb_id: int
    name: str
    o_name: str
    cover_big: str
    movie_image: str
    releasedate: str
    episode_run_time: int
    youtube_trailer: str = ""
    director: str
    actors: str
    cast: str
    description: str
    plot: str
    age: str
    mpaa_rating: str
    rating_count_kinopoisk: int
    country: str
    genre: str
    backdrop_path: list[str] = Field(default_factory=list)
    duration_secs: int
    duration: str
    video: list[str] = Field(default_factory=list)
    audio: list[str] = Field(default_factory=list)
    bitrate: int
    rating: float
    rating_kinopoisk: str
    rating_imdb: str


class XtreamMovieData(WireModel):
    stream_id: int
    name: str
    added: str
    category_id: str
    container_extension: str
    custom_sid: str = ""
    direct_source: str = ""


class XtreamVodDetails(WireModel):
    info: XtreamVodInfo
    movie_data: XtreamMovieData


class XtreamSeason(WireModel):
    air_date: str
    episode_count: int
    id: int
    name: str
    overview: str
    season_number: int
    cover: str
    cover_big: str


class XtreamEpisodeInfo(WireModel):
    tmdb_id: int
    releasedate: str
    plot: str
    duration_secs: int
    duration: str
    movie_image: str
    bitrate: int
    rating: float


class XtreamEpisode(WireModel):
    id: str
    episode_num: int
    title: str
    container_extension: str
    info: XtreamEpisodeInfo
    custom_sid: str = ""
    added: str
    season: int
    direct_source: str = ""


class XtreamSeriesMeta(WireModel):
    name: str
    cover: str
    plot: str
    cast: str
    director: str
    genre: str
    releaseDate: str
    last_modified: str
    rating: str
    rating_5based: float
    backdrop_path: list[str] = Field(default_factory=list)
    youtube_trailer: str = ""
    episode_run_time: str
    category_id: str


class XtreamSeriesInfo(WireModel):
    seasons: list[XtreamSeason] = Field(default_factory=list)
    info: XtreamSeriesMeta
    episodes: dict[str, list[XtreamEpisode]] = Field(default_factory=dict)


class XtreamEpgListing(WireModel):
    """A short-EPG entry; ``title`` and ``description`` are base64 encoded."""

    id: str
    epg_id: str
    title: str
    lang: str = "en"
    start: str
    end: str
    description: str
    channel_id: str
    start_timestamp: str
    stop_timestamp: str
