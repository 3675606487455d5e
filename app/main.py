"""Entry point for the FastAPI-powered IPTV portal mock."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from . import __version__
from .config import settings
from .scenarios import (
    STALKER_SCENARIOS,
    XTREAM_SCENARIOS,
    resolve_stalker_scenario,
    resolve_xtream_scenario,
)
from .services.data_store import PortalDataStore
from .services.stalker_dispatcher import StalkerDispatcher
from .services.stalker_generator import StalkerPortalData
from .services.stalker_generator import generate_portal_data as generate_stalker_data
from .services.xtream_dispatcher import XtreamDispatcher, XtreamError
from .services.xtream_generator import XtreamPortalData
from .services.xtream_generator import generate_portal_data as generate_xtream_data
from .utils import iso_timestamp, normalize_mac, utcnow

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app: FastAPI


def build_stalker_store() -> PortalDataStore[StalkerPortalData]:
    return PortalDataStore(
        lambda mac: generate_stalker_data(resolve_stalker_scenario(mac)),
        label="stalker",
    )


def build_xtream_store() -> PortalDataStore[XtreamPortalData]:
    return PortalDataStore(
        lambda identity: generate_xtream_data(resolve_xtream_scenario(identity)),
        label="xtream",
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(
        "%s listening on %s (%s)",
        settings.app_name,
        settings.server_url,
        settings.environment,
    )
    for mac, scenario in STALKER_SCENARIOS.items():
        logger.info("Stalker MAC %s -> %s", mac, scenario.description)
    for identity, scenario in XTREAM_SCENARIOS.items():
        logger.info("Xtream login %s -> %s", identity, scenario.description)
    yield


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Deterministic Stalker and Xtream Codes portals for player testing",
        version=__version__,
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    fastapi_app.state.stalker_dispatcher = StalkerDispatcher(
        build_stalker_store(),
        page_size=settings.stalker_page_size,
        epg_size=settings.epg_default_size,
    )
    fastapi_app.state.xtream_dispatcher = XtreamDispatcher(
        build_xtream_store(),
        server_url=settings.server_url,
        server_port=settings.server_port,
    )

    @fastapi_app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s action=%s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            request.query_params.get("action", "-"),
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    register_routes(fastapi_app)
    return fastapi_app


def get_stalker_dispatcher(app: FastAPI) -> StalkerDispatcher:
    dispatcher = getattr(app.state, "stalker_dispatcher", None)
    if not isinstance(dispatcher, StalkerDispatcher):
        raise RuntimeError("Stalker dispatcher not initialised")
    return dispatcher


def get_xtream_dispatcher(app: FastAPI) -> XtreamDispatcher:
    dispatcher = getattr(app.state, "xtream_dispatcher", None)
    if not isinstance(dispatcher, XtreamDispatcher):
        raise RuntimeError("Xtream dispatcher not initialised")
    return dispatcher


def register_routes(fastapi_app: FastAPI) -> None:
    def _xtream_response(params: dict[str, str]) -> tuple[Any, XtreamError | None]:
        dispatcher = get_xtream_dispatcher(fastapi_app)
        try:
            return dispatcher.dispatch(params), None
        except XtreamError as exc:
            return None, exc

    @fastapi_app.api_route("/portal.php", methods=["GET", "POST"])
    def portal(request: Request) -> dict[str, Any]:
        mac = normalize_mac(request.cookies.get("mac"))
        return get_stalker_dispatcher(fastapi_app).dispatch(
            dict(request.query_params), mac
        )

    @fastapi_app.get("/stalker")
    def stalker_proxy(request: Request) -> dict[str, Any]:
        params = dict(request.query_params)
        mac = normalize_mac(params.pop("macAddress", None) or settings.stalker_proxy_mac)
        params.pop("url", None)
        payload = get_stalker_dispatcher(fastapi_app).dispatch(params, mac)
        return {"payload": payload}

    @fastapi_app.get("/player_api.php")
    def player_api(request: Request) -> JSONResponse:
        payload, error = _xtream_response(dict(request.query_params))
        if error is not None:
            return JSONResponse(error.to_payload(), status_code=error.status_code)
        return JSONResponse(payload)

    @fastapi_app.get("/xtream")
    def xtream_proxy(request: Request) -> JSONResponse:
        params = dict(request.query_params)
        params.pop("url", None)
        payload, error = _xtream_response(params)
        if error is not None:
            return JSONResponse(
                {"error": error.to_payload()}, status_code=error.status_code
            )
        return JSONResponse({"payload": payload, "action": params.get("action", "")})

    @fastapi_app.get("/live/{username}/{password}/{stream}")
    @fastapi_app.get("/movie/{username}/{password}/{stream}")
    @fastapi_app.get("/series/{username}/{password}/{stream}")
    def stream_stub(username: str, password: str, stream: str) -> RedirectResponse:
        logger.debug("Stream request %s for %s", stream, username)
        return RedirectResponse(settings.stream_stub_url, status_code=307)

    @fastapi_app.get("/health")
    async def healthcheck() -> dict[str, str]:
        return {
            "status": "ok",
            "server": settings.app_name,
            "timestamp": iso_timestamp(utcnow()),
        }

    @fastapi_app.post("/reset")
    async def reset() -> dict[str, str]:
        get_stalker_dispatcher(fastapi_app).store.reset_all()
        get_xtream_dispatcher(fastapi_app).store.reset_all()
        logger.info("All portal data reset")
        return {"status": "reset", "timestamp": iso_timestamp(utcnow())}


app = create_app()
