from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import settings
from app.main import (
    build_stalker_store,
    build_xtream_store,
    create_app,
    register_routes,
)
from app.services.stalker_dispatcher import StalkerDispatcher
from app.services.stalker_generator import TEST_HLS_STREAMS
from app.services.xtream_dispatcher import XtreamDispatcher


MAC_COOKIE = {"Cookie": "mac=AA%3ABB%3ACC%3ADD%3AEE%3AFF"}
MINIMAL_COOKIE = {"Cookie": "mac=00:1a:79:00:00:03"}


def build_app() -> FastAPI:
    app = FastAPI()
    register_routes(app)
    app.state.stalker_dispatcher = StalkerDispatcher(build_stalker_store())
    app.state.xtream_dispatcher = XtreamDispatcher(build_xtream_store())
    return app


def test_unknown_stalker_action_returns_soft_error() -> None:
    with TestClient(build_app()) as client:
        response = client.get("/portal.php", params={"action": "nope"})

    assert response.status_code == 200
    assert response.json() == {"js": {"error": "Unknown action: nope"}}


def test_stalker_categories_are_stable_across_apps() -> None:
    params = {"action": "get_categories", "type": "itv"}

    with TestClient(build_app()) as client:
        first = client.get("/portal.php", params=params, headers=MAC_COOKIE).json()
        repeat = client.get("/portal.php", params=params, headers=MAC_COOKIE).json()
    with TestClient(build_app()) as client:
        fresh = client.get("/portal.php", params=params, headers=MAC_COOKIE).json()

    assert first == repeat == fresh
    assert [c["id"] for c in first["js"]] == [str(1001 + n) for n in range(6)]


def test_portal_accepts_post() -> None:
    with TestClient(build_app()) as client:
        response = client.post(
            "/portal.php?action=get_categories", headers=MINIMAL_COOKIE
        )

    assert response.status_code == 200
    assert [c["id"] for c in response.json()["js"]] == ["2001", "2002"]


def test_missing_cookie_uses_zero_mac() -> None:
    app = build_app()
    with TestClient(app) as client:
        client.get("/portal.php", params={"action": "get_categories"})

    assert "00:00:00:00:00:00" in app.state.stalker_dispatcher.store


def test_stalker_proxy_wraps_payload() -> None:
    with TestClient(build_app()) as client:
        response = client.get(
            "/stalker",
            params={
                "macAddress": "00:1A:79:00:00:03",
                "url": "http://portal.example/stalker_portal/c/",
                "action": "get_genres",
            },
        )
        default_mac = client.get("/stalker", params={"action": "handshake"})

    assert response.status_code == 200
    assert [g["id"] for g in response.json()["payload"]["js"]] == ["1001", "1002"]
    assert "token" in default_mac.json()["payload"]["js"]


def test_player_api_vod_info_errors() -> None:
    credentials = {"username": "minimal", "password": "minimal"}
    with TestClient(build_app()) as client:
        missing = client.get(
            "/player_api.php", params={**credentials, "action": "get_vod_info"}
        )
        unknown = client.get(
            "/player_api.php",
            params={**credentials, "action": "get_vod_info", "vod_id": "999999"},
        )

    assert missing.status_code == 400
    assert missing.json() == {"error": "vod_id required"}
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "VOD not found"}


def test_player_api_category_filter() -> None:
    with TestClient(build_app()) as client:
        response = client.get(
            "/player_api.php",
            params={
                "username": "minimal",
                "password": "minimal",
                "action": "get_vod_streams",
                "category_id": "202",
            },
        )

    assert response.status_code == 200
    streams = response.json()
    assert streams
    assert {stream["category_id"] for stream in streams} == {"202"}


def test_xtream_proxy_shapes() -> None:
    with TestClient(build_app()) as client:
        ok = client.get(
            "/xtream",
            params={
                "url": "http://panel.example",
                "username": "minimal",
                "password": "minimal",
                "action": "get_live_categories",
            },
        )
        failed = client.get(
            "/xtream",
            params={"username": "minimal", "password": "minimal", "action": "bogus"},
        )

    assert ok.json()["action"] == "get_live_categories"
    assert [c["category_id"] for c in ok.json()["payload"]] == ["101", "102"]
    assert failed.status_code == 400
    assert failed.json() == {"error": {"error": "Unknown action: bogus"}}


def test_stream_paths_redirect_to_stub() -> None:
    with TestClient(build_app()) as client:
        live = client.get("/live/user1/pass1/10000.m3u8", follow_redirects=False)
        movie = client.get("/movie/user1/pass1/20000.mkv", follow_redirects=False)

    assert live.status_code == 307
    assert live.headers["location"] == settings.stream_stub_url
    assert movie.status_code == 307
    assert settings.stream_stub_url in TEST_HLS_STREAMS


def test_health_and_reset() -> None:
    with TestClient(create_app()) as client:
        client.get(
            "/player_api.php", params={"username": "minimal", "password": "minimal"}
        )
        health = client.get("/health")
        reset = client.post("/reset")
        xtream_store = client.app.state.xtream_dispatcher.store

    assert health.json()["status"] == "ok"
    assert health.json()["server"] == settings.app_name
    assert reset.json()["status"] == "reset"
    assert len(xtream_store) == 0
