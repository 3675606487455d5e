"""Action router for the Stalker/Ministra ``portal.php`` endpoint."""

from __future__ import annotations

import base64
import hashlib
import logging
import math
from typing import Any, Callable, Mapping

from ..models import StalkerSeriesItem
from ..utils import coerce_int
from .data_store import PortalDataStore
from .stalker_generator import (
    StalkerPortalData,
    resolve_stream_url,
    stream_index,
    vod_as_series,
)

logger = logging.getLogger(__name__)

Params = Mapping[str, str]
Handler = Callable[[Params, str], dict[str, Any]]

DEFAULT_PAGE_SIZE = 14
DEFAULT_EPG_SIZE = 12


def handshake_token(mac: str) -> str:
    """Encode the MAC into the session token returned by ``handshake``."""

    return base64.urlsafe_b64encode(mac.encode("utf-8")).decode("ascii")


class StalkerDispatcher:
    """Map the flat ``action`` namespace onto handlers emitting ``{"js": ...}``.

    The dispatcher never fails a request: unknown actions and malformed numbers
    are answered with a soft error or the default value.
    """

    def __init__(
        self,
        store: PortalDataStore[StalkerPortalData],
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        epg_size: int = DEFAULT_EPG_SIZE,
    ) -> None:
        self._store = store
        self._page_size = max(1, page_size)
        self._epg_size = epg_size
        self._handlers: dict[str, Handler] = {
            "handshake": self._handshake,
            "do_auth": self._profile,
            "get_profile": self._profile,
            "get_main_info": self._main_info,
            "get_categories": self._categories,
            "get_genres_vod": self._categories,
            "get_genres_itv": self._categories,
            "get_genres": self._genres,
            "get_ordered_list": self._ordered_list,
            "create_link": self._create_link,
            "favorites": self._favorites,
            "get_short_epg": self._short_epg,
            "get_epg_info": self._short_epg,
        }

    @property
    def store(self) -> PortalDataStore[StalkerPortalData]:
        return self._store

    @property
    def actions(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, params: Params, mac: str) -> dict[str, Any]:
        action = params.get("action", "")
        handler = self._handlers.get(action)
        if handler is None:
            logger.warning("Unknown Stalker action %r from %s", action, mac)
            return {"js": {"error": f"Unknown action: {action}"}}
        return handler(params, mac)

    def _data(self, mac: str) -> StalkerPortalData:
        return self._store.get_portal_data(mac)

    def _handshake(self, params: Params, mac: str) -> dict[str, Any]:
        return {
            "js": {
                "token": handshake_token(mac),
                "random": hashlib.sha1(mac.encode("utf-8")).hexdigest(),
            }
        }

    def _profile(self, params: Params, mac: str) -> dict[str, Any]:
        return {
            "js": {
                "id": 1,
                "name": "Mock STB",
                "mac": mac,
                "status": 0,
                "stb_type": "MAG250",
                "login": "",
                "parent_password": "0000",
                "locale": "en_GB.utf8",
                "timezone": "UTC",
                "fav_itv_on": 1,
            }
        }

    def _main_info(self, params: Params, mac: str) -> dict[str, Any]:
        scenario = self._data(mac).scenario
        return {
            "js": {
                "mac": mac,
                "phone": "",
                "account_info": {
                    "expire_date": scenario.expiry_date,
                    "expires_at": scenario.expires_at,
                    "tariff_plan": scenario.name,
                    "status": scenario.account_status,
                },
            }
        }

    def _categories(self, params: Params, mac: str) -> dict[str, Any]:
        kind = params.get("type") or "vod"
        categories = self._data(mac).categories_for(kind)
        return {"js": [category.to_payload() for category in categories]}

    def _genres(self, params: Params, mac: str) -> dict[str, Any]:
        kind = params.get("type") or "itv"
        categories = self._data(mac).categories_for(kind)
        return {"js": [category.to_genre() for category in categories]}

    def _ordered_list(self, params: Params, mac: str) -> dict[str, Any]:
        movie_id = params.get("movie_id")
        if movie_id:
            return self._seasons(movie_id, mac)

        data = self._data(mac)
        kind = params.get("type") or "vod"
        category = (
            params.get("category") or params.get("genre") or params.get("category_id") or "*"
        )
        page = coerce_int(params.get("p"), default=1) or 1
        page = max(1, page)
        search = (params.get("search") or "").strip().lower()

        items = data.list_items(kind, category)
        if search:
            items = [item for item in items if search in item.name.lower()]

        total_items = len(items)
        offset = (page - 1) * self._page_size
        page_items = items[offset : offset + self._page_size]
        return {
            "js": {
                "data": [item.to_payload() for item in page_items],
                "total_items": total_items,
                "max_page_items": self._page_size,
                "cur_page": page,
                "total_pages": math.ceil(total_items / self._page_size),
                "selected_item": 0,
            }
        }

    def _seasons(self, movie_id: str, mac: str) -> dict[str, Any]:
        data = self._data(mac)
        cached = data.seasons.get(movie_id)
        if cached is None:
            series = self._series_source(data, movie_id)
            if series is None:
                return {"js": []}
            cached = data.seasons_for(series)
        return {"js": [season.to_payload() for season in cached]}

    @staticmethod
    def _series_source(
        data: StalkerPortalData, movie_id: str
    ) -> StalkerSeriesItem | None:
        for items in data.series.values():
            for item in items:
                if item.id == movie_id:
                    return item
        vod = data.find_vod(movie_id)
        if vod is not None:
            return vod_as_series(vod)
        return None

    def _create_link(self, params: Params, mac: str) -> dict[str, Any]:
        cmd = params.get("cmd") or ""
        url = resolve_stream_url(cmd, stream_index(cmd))
        logger.info("create_link for %s: %s -> %s", mac, cmd, url)
        return {"js": {"cmd": url, "streamer_id": "1", "load": "", "error": ""}}

    def _favorites(self, params: Params, mac: str) -> dict[str, Any]:
        fav_action = params.get("fav_action") or "get"
        item_id = params.get("item_id") or ""

        if fav_action in {"add", "set"}:
            if item_id:
                self._store.add_favorite(mac, item_id)
            return {"js": {"error": ""}}
        if fav_action in {"remove", "unset"}:
            if item_id:
                self._store.remove_favorite(mac, item_id)
            return {"js": {"error": ""}}

        data = self._data(mac)
        resolved = []
        for favorite_id in list(self._store.get_favorites(mac)):
            item = data.find_item(favorite_id)
            if item is not None:
                resolved.append(item.to_payload())
        return {"js": {"data": resolved, "total_items": len(resolved)}}

    def _short_epg(self, params: Params, mac: str) -> dict[str, Any]:
        channel_id = params.get("ch_id") or ""
        if not channel_id:
            return {"js": {"data": []}}
        size = coerce_int(params.get("size"), default=self._epg_size)
        size = max(0, size if size is not None else self._epg_size)
        programs = self._data(mac).epg_for(channel_id)
        return {"js": {"data": [program.to_payload() for program in programs[:size]]}}
