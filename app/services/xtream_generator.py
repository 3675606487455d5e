"""Seeded catalog generation for the Xtream Codes player API."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Literal

from ..models import (
    XtreamCategory,
    XtreamEpgListing,
    XtreamEpisode,
    XtreamEpisodeInfo,
    XtreamLiveStream,
    XtreamMovieData,
    XtreamSeason,
    XtreamSeriesInfo,
    XtreamSeriesItem,
    XtreamSeriesMeta,
    XtreamVodDetails,
    XtreamVodInfo,
    XtreamVodStream,
)
from ..scenarios import Scenario
from ..utils import (
    CATALOG_EPOCH,
    b64_text,
    derive_seed,
    plain_timestamp,
    unix_seconds,
    utcnow,
)
from .. import vocabulary


XtreamKind = Literal["live", "vod", "series"]

CATEGORY_ID_BASE = {"live": 100, "vod": 200, "series": 300}
LIVE_STREAM_ID_BASE = 10_000
VOD_STREAM_ID_BASE = 20_000
SERIES_ID_BASE = 30_000
EPISODE_ID_BASE = 50_000

CONTAINER_EXTENSIONS: tuple[str, ...] = ("mkv", "mp4", "avi")

EPG_SLOT_MINUTES = 30
EPG_SLOT_COUNT = 50
EPG_PAST_SLOTS = 6


@dataclass
class XtreamPortalData:
    """Catalog for one ``username:password`` identity plus its lazy caches."""

    scenario: Scenario
    live_categories: list[XtreamCategory] = field(default_factory=list)
    vod_categories: list[XtreamCategory] = field(default_factory=list)
    series_categories: list[XtreamCategory] = field(default_factory=list)
    live_streams: list[XtreamLiveStream] = field(default_factory=list)
    vod_streams: list[XtreamVodStream] = field(default_factory=list)
    series: list[XtreamSeriesItem] = field(default_factory=list)
    vod_details: dict[int, XtreamVodDetails] = field(default_factory=dict)
    series_info: dict[int, XtreamSeriesInfo] = field(default_factory=dict)
    epg: dict[int, list[XtreamEpgListing]] = field(default_factory=dict)

    def categories_for(self, kind: XtreamKind) -> list[XtreamCategory]:
        if kind == "live":
            return self.live_categories
        if kind == "series":
            return self.series_categories
        return self.vod_categories

    def find_vod(self, stream_id: int) -> XtreamVodStream | None:
        return next((s for s in self.vod_streams if s.stream_id == stream_id), None)

    def find_series(self, series_id: int) -> XtreamSeriesItem | None:
        return next((s for s in self.series if s.series_id == series_id), None)

    def vod_details_for(self, stream: XtreamVodStream) -> XtreamVodDetails:
        cached = self.vod_details.get(stream.stream_id)
        if cached is not None:
            return cached
        generated = generate_vod_details(stream, seed=self.scenario.seed)
        return self.vod_details.setdefault(stream.stream_id, generated)

    def series_info_for(self, series: XtreamSeriesItem) -> XtreamSeriesInfo:
        cached = self.series_info.get(series.series_id)
        if cached is not None:
            return cached
        generated = generate_series_info(
            series,
            self.scenario.seasons_per_series,
            self.scenario.episodes_per_season,
            seed=self.scenario.seed,
        )
        return self.series_info.setdefault(series.series_id, generated)

    def epg_for(self, stream_id: int) -> list[XtreamEpgListing]:
        """Return the EPG window of a stream; the first call pins it to the clock."""

        cached = self.epg.get(stream_id)
        if cached is not None:
            return cached
        generated = generate_epg_listings(stream_id, seed=self.scenario.seed)
        return self.epg.setdefault(stream_id, generated)


def _non_negative(value: object) -> int:
    try:
        return max(0, int(value))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


def _past_date(rng: random.Random, years: int) -> str:
    return (CATALOG_EPOCH - timedelta(days=rng.randint(0, 365 * years))).date().isoformat()


def _added(rng: random.Random, spread_seconds: int) -> str:
    return str(unix_seconds(CATALOG_EPOCH) - rng.randint(0, spread_seconds))


def generate_portal_data(scenario: Scenario) -> XtreamPortalData:
    """Synthesise categories and stream listings for a scenario.

    Details, series info and EPG are left empty and filled per id on demand.
    """

    rng = random.Random(scenario.seed)
    per_category = _non_negative(scenario.items_per_category)
    data = XtreamPortalData(
        scenario=scenario,
        live_categories=generate_categories("live", scenario.live_categories),
        vod_categories=generate_categories("vod", scenario.vod_categories),
        series_categories=generate_categories("series", scenario.series_categories),
    )
    data.live_streams = _generate_live_streams(rng, data.live_categories, per_category)
    data.vod_streams = _generate_vod_streams(rng, data.vod_categories, per_category)
    data.series = _generate_series(rng, data.series_categories, per_category)
    return data


def generate_categories(kind: XtreamKind, count: int) -> list[XtreamCategory]:
    names = vocabulary.category_names(kind)
    base = CATEGORY_ID_BASE[kind]
    return [
        XtreamCategory(
            category_id=str(base + index + 1),
            category_name=names[index % len(names)],
            parent_id=0,
        )
        for index in range(_non_negative(count))
    ]


def _generate_live_streams(
    rng: random.Random, categories: list[XtreamCategory], per_category: int
) -> list[XtreamLiveStream]:
    streams: list[XtreamLiveStream] = []
    for category in categories:
        for _ in range(per_category):
            stream_id = LIVE_STREAM_ID_BASE + len(streams)
            streams.append(
                XtreamLiveStream(
                    num=len(streams) + 1,
                    name=f"{vocabulary.company_name(rng)} TV",
                    stream_id=stream_id,
                    stream_icon=f"https://picsum.photos/seed/live-{stream_id}/100/100",
                    epg_channel_id=f"channel-{stream_id}.mock",
                    added=_added(rng, 10_000_000),
                    category_id=category.category_id,
                    rating_imdb=f"{vocabulary.rating(rng, 6.0, 3.0):.1f}",
                )
            )
    return streams


def _generate_vod_streams(
    rng: random.Random, categories: list[XtreamCategory], per_category: int
) -> list[XtreamVodStream]:
    streams: list[XtreamVodStream] = []
    for category in categories:
        for _ in range(per_category):
            stream_id = VOD_STREAM_ID_BASE + len(streams)
            score = vocabulary.rating(rng)
            streams.append(
                XtreamVodStream(
                    num=len(streams) + 1,
                    name=f"{vocabulary.song_name(rng)}: {vocabulary.words(rng, 2)}",
                    stream_id=stream_id,
                    stream_icon=f"https://picsum.photos/seed/vod-{stream_id}/300/450",
                    added=_added(rng, 100_000_000),
                    category_id=category.category_id,
                    rating=score,
                    rating_5based=round(score / 2, 1),
                    rating_imdb=f"{score:.1f}",
                    container_extension=CONTAINER_EXTENSIONS[
                        stream_id % len(CONTAINER_EXTENSIONS)
                    ],
                )
            )
    return streams


def _generate_series(
    rng: random.Random, categories: list[XtreamCategory], per_category: int
) -> list[XtreamSeriesItem]:
    items: list[XtreamSeriesItem] = []
    for category in categories:
        for _ in range(per_category):
            series_id = SERIES_ID_BASE + len(items)
            score = vocabulary.rating(rng)
            items.append(
                XtreamSeriesItem(
                    num=len(items) + 1,
                    name=vocabulary.catch_phrase(rng),
                    series_id=series_id,
                    cover=f"https://picsum.photos/seed/series-{series_id}/300/450",
                    plot=vocabulary.paragraph(rng),
                    cast=vocabulary.full_names(rng, 4),
                    director=vocabulary.full_name(rng),
                    genre=vocabulary.genres(rng),
                    releaseDate=_past_date(rng, 10),
                    last_modified=(
                        CATALOG_EPOCH - timedelta(days=rng.randint(0, 30))
                    ).date().isoformat(),
                    rating=f"{score:.1f}",
                    rating_5based=round(score / 2, 1),
                    backdrop_path=[
                        f"https://picsum.photos/seed/series-bg-{series_id}/1280/720"
                    ],
                    episode_run_time=str(rng.randint(22, 60)),
                    category_id=int(category.category_id),
                )
            )
    return items


def generate_vod_details(stream: XtreamVodStream, *, seed: int = 0) -> XtreamVodDetails:
    """Build the ``get_vod_info`` payload of a VOD stream."""

    rng = random.Random(derive_seed(seed, "vod", stream.stream_id))
    duration_secs = rng.randint(3600, 9000)
    hours, remainder = divmod(duration_secs, 3600)
    info = XtreamVodInfo(
        tmdb_id=rng.randint(100, 999_999),
        name=stream.name,
        o_name=stream.name,
        cover_big=f"https://picsum.photos/seed/vod-big-{stream.stream_id}/500/750",
        movie_image=f"https://picsum.photos/seed/vod-img-{stream.stream_id}/300/450",
        releasedate=_past_date(rng, 20),
        episode_run_time=duration_secs,
        director=vocabulary.full_name(rng),
        actors=vocabulary.full_names(rng, 5),
        cast=vocabulary.full_names(rng, 5),
        description=vocabulary.paragraph(rng),
        plot=vocabulary.paragraph(rng),
        age="16",
        mpaa_rating="PG-13",
        rating_count_kinopoisk=rng.randint(100, 50_000),
        country=rng.choice(vocabulary.COUNTRIES),
        genre=vocabulary.genres(rng),
        backdrop_path=[
            f"https://picsum.photos/seed/vod-backdrop-{stream.stream_id}/1280/720"
        ],
        duration_secs=duration_secs,
        duration=f"{hours}h {remainder // 60}min",
        video=["H.264"],
        audio=["AAC"],
        bitrate=rng.randint(1500, 8000),
        rating=stream.rating,
        rating_kinopoisk=stream.rating_imdb,
        rating_imdb=stream.rating_imdb,
    )
    movie_data = XtreamMovieData(
        stream_id=stream.stream_id,
        name=stream.name,
        added=stream.added,
        category_id=stream.category_id,
        container_extension=stream.container_extension,
    )
    return XtreamVodDetails(info=info, movie_data=movie_data)


def generate_series_info(
    series: XtreamSeriesItem,
    season_count: int,
    episodes_per_season: int,
    *,
    seed: int = 0,
) -> XtreamSeriesInfo:
    """Build seasons and per-season episode lists for ``get_series_info``.

    Episodes are keyed by the season number as a string, as Xtream panels do.
    """

    rng = random.Random(derive_seed(seed, "series", series.series_id))
    seasons: list[XtreamSeason] = []
    episodes: dict[str, list[XtreamEpisode]] = {}
    episode_id = EPISODE_ID_BASE + series.series_id
    per_season = _non_negative(episodes_per_season)

    for number in range(1, _non_negative(season_count) + 1):
        seasons.append(
            XtreamSeason(
                air_date=_past_date(rng, 5),
                episode_count=per_season,
                id=series.series_id * 100 + number,
                name=f"Season {number}",
                overview=vocabulary.sentence(rng),
                season_number=number,
                cover=f"https://picsum.photos/seed/season-{series.series_id}-{number}/300/450",
                cover_big=(
                    f"https://picsum.photos/seed/season-big-{series.series_id}-{number}/500/750"
                ),
            )
        )
        season_episodes: list[XtreamEpisode] = []
        for episode_num in range(1, per_season + 1):
            duration_secs = rng.randint(1200, 3600)
            season_episodes.append(
                XtreamEpisode(
                    id=str(episode_id),
                    episode_num=episode_num,
                    title=f"{series.name} S{number}E{episode_num}",
                    container_extension="mkv",
                    info=XtreamEpisodeInfo(
                        tmdb_id=rng.randint(100, 999_999),
                        releasedate=_past_date(rng, 5),
                        plot=vocabulary.sentence(rng),
                        duration_secs=duration_secs,
                        duration=f"{duration_secs // 60}min",
                        movie_image=f"https://picsum.photos/seed/ep-{episode_id}/300/200",
                        bitrate=rng.randint(1500, 8000),
                        rating=vocabulary.rating(rng, 7.0, 3.0),
                    ),
                    added=_added(rng, 10_000_000),
                    season=number,
                )
            )
            episode_id += 1
        episodes[str(number)] = season_episodes

    meta = XtreamSeriesMeta(
        name=series.name,
        cover=series.cover,
        plot=series.plot,
        cast=series.cast,
        director=series.director,
        genre=series.genre,
        releaseDate=series.releaseDate,
        last_modified=series.last_modified,
        rating=series.rating,
        rating_5based=series.rating_5based,
        backdrop_path=list(series.backdrop_path),
        episode_run_time=series.episode_run_time,
        category_id=str(series.category_id),
    )
    return XtreamSeriesInfo(seasons=seasons, info=meta, episodes=episodes)


def generate_epg_listings(
    stream_id: int, *, seed: int = 0, now: datetime | None = None
) -> list[XtreamEpgListing]:
    """Return half-hour listings around ``now`` with base64 text fields."""

    rng = random.Random(derive_seed(seed, "epg", stream_id))
    anchor = (now or utcnow()).replace(microsecond=0)
    slot = timedelta(minutes=EPG_SLOT_MINUTES)
    first_start = anchor - slot * EPG_PAST_SLOTS

    listings: list[XtreamEpgListing] = []
    for index in range(EPG_SLOT_COUNT):
        start = first_start + slot * index
        stop = start + slot
        listings.append(
            XtreamEpgListing(
                id=str(stream_id * 100 + index),
                epg_id=f"channel-{stream_id}.mock",
                title=b64_text(vocabulary.catch_phrase(rng)),
                start=plain_timestamp(start),
                end=plain_timestamp(stop),
                description=b64_text(vocabulary.sentence(rng)),
                channel_id=f"channel-{stream_id}",
                start_timestamp=str(unix_seconds(start)),
                stop_timestamp=str(unix_seconds(stop)),
            )
        )
    return listings
