"""Seeded catalog generation for the Stalker/Ministra portal protocol."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Literal, Mapping, Sequence

from ..models import (
    ContentItem,
    StalkerCategory,
    StalkerChannel,
    StalkerEmbeddedEpisode,
    StalkerEpgProgram,
    StalkerSeason,
    StalkerSeriesItem,
    StalkerVodItem,
)
from ..scenarios import Scenario
from ..utils import (
    CATALOG_EPOCH,
    category_alias,
    derive_seed,
    iso_timestamp,
    stable_hash,
    unix_seconds,
    utcnow,
)
from .. import vocabulary


ContentKind = Literal["itv", "vod", "series"]

TEST_HLS_STREAMS: tuple[str, ...] = (
    "https://test-streams.mux.dev/x36xhzz/x36xhzz.m3u8",
    "https://devstreaming-cdn.apple.com/videos/streaming/examples/bipbop_4x3/bipbop_4x3_variant.m3u8",
    "https://playertest.longtailvideo.com/adaptive/oceans/oceans.m3u8",
    "https://playertest.longtailvideo.com/adaptive/bbbfull/bbbfull.m3u8",
)

CATEGORY_ID_BASE: Mapping[str, int] = {"itv": 1000, "vod": 2000, "series": 3000}
CHANNEL_ID_BASE = 10_000
VOD_ID_BASE = 20_000
SERIES_ID_BASE = 30_000

EPG_SLOT_MINUTES = 30
EPG_PROGRAM_COUNT = 12
EPG_PAST_SLOTS = 6


@dataclass
class StalkerPortalData:
    """Full synthesised catalog for one MAC address."""

    scenario: Scenario
    itv_categories: list[StalkerCategory] = field(default_factory=list)
    vod_categories: list[StalkerCategory] = field(default_factory=list)
    series_categories: list[StalkerCategory] = field(default_factory=list)
    channels: dict[str, list[StalkerChannel]] = field(default_factory=dict)
    vod: dict[str, list[StalkerVodItem]] = field(default_factory=dict)
    series: dict[str, list[StalkerSeriesItem]] = field(default_factory=dict)
    seasons: dict[str, list[StalkerSeason]] = field(default_factory=dict)
    epg: dict[str, list[StalkerEpgProgram]] = field(default_factory=dict)

    def categories_for(self, kind: str) -> list[StalkerCategory]:
        if kind == "itv":
            return self.itv_categories
        if kind == "series":
            return self.series_categories
        return self.vod_categories

    def items_by_category(self, kind: str) -> Mapping[str, Sequence[ContentItem]]:
        if kind == "itv":
            return self.channels
        if kind == "series":
            return self.series
        return self.vod

    def list_items(self, kind: str, category_id: str = "*") -> list[ContentItem]:
        """Return the items of a kind, either for one category or for all (``*``)."""

        grouped = self.items_by_category(kind)
        if category_id == "*":
            return [item for items in grouped.values() for item in items]
        return list(grouped.get(category_id, ()))

    def find_item(self, item_id: str) -> ContentItem | None:
        """Look an id up across channels, VOD and series, in that order."""

        for grouped in (self.channels, self.vod, self.series):
            for items in grouped.values():
                for item in items:
                    if item.id == item_id:
                        return item
        return None

    def find_vod(self, item_id: str) -> StalkerVodItem | None:
        for items in self.vod.values():
            for item in items:
                if item.id == item_id:
                    return item
        return None

    def seasons_for(self, series: StalkerSeriesItem) -> list[StalkerSeason]:
        """Return the cached seasons of a series, generating them once."""

        cached = self.seasons.get(series.id)
        if cached is not None:
            return cached
        generated = generate_seasons(
            series,
            self.scenario.seasons_per_series,
            self.scenario.episodes_per_season,
            seed=self.scenario.seed,
        )
        return self.seasons.setdefault(series.id, generated)

    def epg_for(self, channel_id: str) -> list[StalkerEpgProgram]:
        cached = self.epg.get(channel_id)
        if cached is not None:
            return cached
        return self.epg.setdefault(channel_id, generate_epg(f"Channel {channel_id}"))


def _non_negative(value: object) -> int:
    try:
        return max(0, int(value))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


def _fraction(value: object) -> float:
    try:
        return min(1.0, max(0.0, float(value)))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0


def cover_url(seed: str, width: int = 300, height: int = 200) -> str:
    return f"https://picsum.photos/seed/{seed}/{width}/{height}"


def logo_url(seed: str) -> str:
    return f"https://picsum.photos/seed/logo-{seed}/100/100"


def generate_portal_data(
    scenario: Scenario, *, now: datetime | None = None
) -> StalkerPortalData:
    """Synthesise the catalog for a scenario.

    All random draws come from one generator seeded with ``scenario.seed`` in a
    fixed order (channels and their EPG, then VOD, then series), so the same
    scenario always yields the same categories, ids, titles and ordering.
    Seasons are not built here; they are created on first request.
    """

    rng = random.Random(scenario.seed)
    epg_now = now or utcnow()
    per_category = _non_negative(scenario.items_per_category)
    data = StalkerPortalData(scenario=scenario)

    data.itv_categories = generate_categories(
        "itv", _non_negative(scenario.live_categories)
    )
    channel_index = 0
    for category in data.itv_categories:
        channels = _generate_channels(rng, category.id, per_category, channel_index)
        data.channels[category.id] = channels
        for channel in channels:
            data.epg[channel.id] = generate_epg(channel.name, rng=rng, now=epg_now)
        channel_index += per_category

    data.vod_categories = generate_categories(
        "vod", _non_negative(scenario.vod_categories)
    )
    vod_index = 0
    for category in data.vod_categories:
        data.vod[category.id] = _generate_vod_items(
            rng, scenario, category.id, per_category, vod_index
        )
        vod_index += per_category

    data.series_categories = generate_categories(
        "series", _non_negative(scenario.series_categories)
    )
    series_index = 0
    for category in data.series_categories:
        data.series[category.id] = _generate_series_items(
            rng, category.id, per_category, series_index
        )
        series_index += per_category

    return data


def generate_categories(kind: ContentKind, count: int) -> list[StalkerCategory]:
    names = vocabulary.category_names(kind)
    base = CATEGORY_ID_BASE[kind]
    categories: list[StalkerCategory] = []
    for index in range(_non_negative(count)):
        title = names[index % len(names)]
        categories.append(
            StalkerCategory(
                id=str(base + index + 1), title=title, alias=category_alias(title)
            )
        )
    return categories


def _generate_channels(
    rng: random.Random, category_id: str, count: int, start_index: int
) -> list[StalkerChannel]:
    channels: list[StalkerChannel] = []
    for offset in range(count):
        channel_id = str(CHANNEL_ID_BASE + start_index + offset)
        name = f"{vocabulary.company_name(rng)} TV"
        channels.append(
            StalkerChannel(
                id=channel_id,
                name=name,
                o_name=name,
                cmd=f"ffrt4://ch/live/{channel_id}/index.m3u8",
                logo=logo_url(f"ch-{channel_id}"),
                category_id=category_id,
                tv_genre_id=category_id,
                xmltv_id=f"channel-{channel_id}.example",
            )
        )
    return channels


def _generate_vod_items(
    rng: random.Random,
    scenario: Scenario,
    category_id: str,
    count: int,
    start_index: int,
) -> list[StalkerVodItem]:
    is_series_fraction = _fraction(scenario.is_series_fraction)
    embedded_fraction = _fraction(scenario.embedded_series_fraction)
    embedded_count = _non_negative(scenario.seasons_per_series) * _non_negative(
        scenario.episodes_per_season
    )

    items: list[StalkerVodItem] = []
    for offset in range(count):
        item_id = str(VOD_ID_BASE + start_index + offset)
        title = f"{vocabulary.song_name(rng)}: {vocabulary.words(rng, 2)}"
        position = offset / count
        is_series = position < is_series_fraction
        has_embedded = not is_series and position < is_series_fraction + embedded_fraction
        items.append(
            StalkerVodItem(
                id=item_id,
                name=title,
                o_name=title,
                title=title,
                cmd=f"ffrt4://vod/{item_id}/index.m3u8",
                screenshot_uri=cover_url(f"vod-{item_id}"),
                cover=cover_url(f"vod-cover-{item_id}", 300, 450),
                description=vocabulary.paragraph(rng),
                actors=vocabulary.full_names(rng, 4),
                director=vocabulary.full_name(rng),
                year=str(CATALOG_EPOCH.year - rng.randint(0, 19)),
                genre=rng.choice(vocabulary.MUSIC_GENRES),
                genres_str=vocabulary.genres(rng),
                rating_imdb=f"{vocabulary.rating(rng):.1f}",
                rating_kinopoisk=f"{vocabulary.rating(rng):.1f}",
                category_id=category_id,
                is_series="1" if is_series else 0,
                has_files=0 if is_series else 1,
                series=(
                    _embedded_episodes(item_id, embedded_count) if has_embedded else None
                ),
            )
        )
    return items


def _embedded_episodes(parent_id: str, count: int) -> list[StalkerEmbeddedEpisode]:
    return [
        StalkerEmbeddedEpisode(
            id=int(parent_id) * 100 + index,
            name=f"Episode {index + 1}",
            cmd=f"ffrt4://vod/{parent_id}/ep{index + 1}/index.m3u8",
        )
        for index in range(count)
    ]


def _generate_series_items(
    rng: random.Random, category_id: str, count: int, start_index: int
) -> list[StalkerSeriesItem]:
    items: list[StalkerSeriesItem] = []
    for offset in range(count):
        item_id = str(SERIES_ID_BASE + start_index + offset)
        title = vocabulary.catch_phrase(rng)
        items.append(
            StalkerSeriesItem(
                id=item_id,
                name=title,
                o_name=title,
                title=title,
                cmd=f"ffrt4://series/{item_id}",
                screenshot_uri=cover_url(f"series-{item_id}"),
                cover=cover_url(f"series-cover-{item_id}", 300, 450),
                description=vocabulary.paragraph(rng),
                actors=vocabulary.full_names(rng, 4),
                director=vocabulary.full_name(rng),
                year=str(CATALOG_EPOCH.year - rng.randint(0, 9)),
                genres_str=vocabulary.genres(rng),
                rating_imdb=f"{vocabulary.rating(rng):.1f}",
                rating_kinopoisk=f"{vocabulary.rating(rng):.1f}",
                category_id=category_id,
            )
        )
    return items


def vod_as_series(item: StalkerVodItem) -> StalkerSeriesItem:
    """Adapt a VOD entry to the series shape the season generator reads."""

    return StalkerSeriesItem(
        id=item.id,
        name=item.name,
        o_name=item.o_name,
        title=item.title,
        cmd=item.cmd,
        screenshot_uri=item.screenshot_uri,
        cover=item.cover,
        description=item.description,
        actors=item.actors,
        director=item.director,
        year=item.year,
        genres_str=item.genres_str or item.genre,
        rating_imdb=item.rating_imdb,
        rating_kinopoisk=item.rating_kinopoisk,
        category_id=item.category_id,
    )


def generate_seasons(
    series: StalkerSeriesItem,
    season_count: int,
    episodes_per_season: int,
    *,
    seed: int = 0,
) -> list[StalkerSeason]:
    """Build the season list of a series, each season listing its episode ids.

    The draws come from a generator derived from ``seed`` and the series id, so
    the result does not depend on which series were expanded before it.
    """

    rng = random.Random(derive_seed(seed, "seasons", series.id))
    seasons: list[StalkerSeason] = []
    for number in range(1, _non_negative(season_count) + 1):
        season_id = f"{series.id}-s{number}"
        added = CATALOG_EPOCH - timedelta(seconds=rng.randint(0, 10_000_000))
        seasons.append(
            StalkerSeason(
                id=season_id,
                name=f"Season {number}",
                cmd=f"ffrt4://series/{series.id}/season/{number}",
                description=vocabulary.sentence(rng),
                director=series.director,
                actors=series.actors,
                year=series.year,
                genres_str=series.genres_str,
                age="16",
                rating_imdb=series.rating_imdb,
                rating_kinopoisk=series.rating_kinopoisk,
                screenshot_uri=cover_url(season_id),
                added=iso_timestamp(added),
                series=[
                    f"{season_id}-e{episode}"
                    for episode in range(1, _non_negative(episodes_per_season) + 1)
                ],
            )
        )
    return seasons


def generate_epg(
    label: str,
    *,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> list[StalkerEpgProgram]:
    """Return consecutive half-hour programs, six of them before ``now``."""

    if rng is None:
        rng = random.Random(stable_hash(f"epg:{label}"))
    anchor = (now or utcnow()).replace(microsecond=0)
    slot = timedelta(minutes=EPG_SLOT_MINUTES)
    first_start = anchor - slot * EPG_PAST_SLOTS

    programs: list[StalkerEpgProgram] = []
    for index in range(EPG_PROGRAM_COUNT):
        start = first_start + slot * index
        stop = start + slot
        programs.append(
            StalkerEpgProgram(
                id=str(index + 1),
                name=f"{label}: {vocabulary.catch_phrase(rng)}",
                start=iso_timestamp(start),
                stop=iso_timestamp(stop),
                start_timestamp=unix_seconds(start),
                stop_timestamp=unix_seconds(stop),
                descr=vocabulary.sentence(rng),
                category=vocabulary.EPG_PROGRAM_TYPES[
                    index % len(vocabulary.EPG_PROGRAM_TYPES)
                ],
            )
        )
    return programs


def stream_index(cmd: str) -> int:
    """Derive a stable index from a command token (sum of its code points)."""

    return sum(ord(char) for char in cmd)


def resolve_stream_url(cmd: str, index: int) -> str:
    """Map a command token to one of the public HLS test streams."""

    if cmd.startswith("ffrt4://"):
        return TEST_HLS_STREAMS[index % len(TEST_HLS_STREAMS)]
    return TEST_HLS_STREAMS[0]
