from __future__ import annotations

import base64
import re
from datetime import datetime, timezone

from app.scenarios import Scenario
from app.services.xtream_generator import (
    CONTAINER_EXTENSIONS,
    generate_epg_listings,
    generate_portal_data,
    generate_vod_details,
)


SMALL = Scenario(
    name="small",
    description="test",
    seed=7,
    live_categories=2,
    vod_categories=2,
    series_categories=2,
    items_per_category=3,
    seasons_per_series=2,
    episodes_per_season=4,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_categories_and_ids():
    data = generate_portal_data(SMALL)

    assert [c.category_id for c in data.live_categories] == ["101", "102"]
    assert [c.category_id for c in data.vod_categories] == ["201", "202"]
    assert [c.category_id for c in data.series_categories] == ["301", "302"]
    assert all(c.parent_id == 0 for c in data.vod_categories)

    assert [s.stream_id for s in data.live_streams] == list(range(10000, 10006))
    assert data.live_streams[0].epg_channel_id == "channel-10000.mock"
    assert data.live_streams[3].category_id == "102"
    assert [s.num for s in data.vod_streams] == [1, 2, 3, 4, 5, 6]


def test_container_extension_cycles_by_stream_id():
    data = generate_portal_data(SMALL)

    for stream in data.vod_streams:
        assert stream.container_extension == CONTAINER_EXTENSIONS[stream.stream_id % 3]


def test_series_category_id_is_integer():
    data = generate_portal_data(SMALL)

    assert data.series[0].series_id == 30000
    assert data.series[0].category_id == 301
    assert isinstance(data.series[0].to_payload()["category_id"], int)


def test_generation_is_deterministic():
    assert generate_portal_data(SMALL) == generate_portal_data(SMALL)


def test_vod_details_are_cached_and_stable():
    data = generate_portal_data(SMALL)
    stream = data.vod_streams[0]

    details = data.vod_details_for(stream)

    assert details is data.vod_details_for(stream)
    assert details == generate_vod_details(stream, seed=SMALL.seed)
    assert details.info.name == stream.name
    assert details.movie_data.stream_id == stream.stream_id


def test_series_info_shape():
    data = generate_portal_data(SMALL)
    series = data.series[1]

    info = data.series_info_for(series)

    assert [season.season_number for season in info.seasons] == [1, 2]
    assert sorted(info.episodes) == ["1", "2"]
    assert len(info.episodes["1"]) == 4
    assert info.episodes["1"][0].id == str(50000 + series.series_id)
    assert info.episodes["2"][0].title.endswith("S2E1")
    assert info.info.category_id == str(series.category_id)


def test_epg_listings_encoding_and_window():
    listings = generate_epg_listings(10001, seed=SMALL.seed, now=NOW)

    assert len(listings) == 50
    first = listings[0]
    assert first.start == "2025-06-01 09:00:00"
    assert first.end == "2025-06-01 09:30:00"
    assert first.start_timestamp == str(int(NOW.timestamp()) - 3 * 3600)
    assert first.epg_id == "channel-10001.mock"
    assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", first.end)
    assert base64.b64decode(first.title).decode("utf-8")
    assert base64.b64decode(first.description).decode("utf-8").endswith(".")


def test_epg_for_caches_per_stream():
    data = generate_portal_data(SMALL)

    assert data.epg_for(10000) is data.epg_for(10000)
