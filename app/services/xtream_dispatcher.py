"""Action router for the Xtream Codes ``player_api.php`` endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from ..models import WireModel
from ..scenarios import xtream_identity
from ..utils import coerce_int, plain_timestamp, unix_seconds, utcnow
from .data_store import PortalDataStore
from .xtream_generator import XtreamPortalData

logger = logging.getLogger(__name__)

Params = Mapping[str, str]
Payload = dict[str, Any] | list[dict[str, Any]]
Handler = Callable[[Params, XtreamPortalData], Payload]

DEFAULT_EPG_LIMIT = 12
MAX_EPG_LIMIT = 50


class XtreamError(Exception):
    """Base error carrying the HTTP status an Xtream panel would answer with."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class MissingParameterError(XtreamError):
    status_code = 400


class NotFoundError(XtreamError):
    status_code = 404


class UnknownActionError(XtreamError):
    status_code = 400

    def __init__(self, action: str) -> None:
        super().__init__(f"Unknown action: {action}")
        self.action = action


def _dump(items: Sequence[WireModel]) -> list[dict[str, Any]]:
    return [item.to_payload() for item in items]


class XtreamDispatcher:
    """Resolve the identity from ``username``/``password`` and route on ``action``."""

    def __init__(
        self,
        store: PortalDataStore[XtreamPortalData],
        *,
        server_url: str = "http://localhost:3211",
        server_port: int = 3211,
    ) -> None:
        self._store = store
        self._server_url = server_url.rstrip("/")
        self._server_port = server_port
        self._handlers: dict[str, Handler] = {
            "": self._account_info,
            "get_account_info": self._account_info,
            "get_live_categories": self._live_categories,
            "get_vod_categories": self._vod_categories,
            "get_series_categories": self._series_categories,
            "get_live_streams": self._live_streams,
            "get_vod_streams": self._vod_streams,
            "get_series": self._series,
            "get_vod_info": self._vod_info,
            "get_series_info": self._series_info,
            "get_short_epg": self._short_epg,
        }

    @property
    def store(self) -> PortalDataStore[XtreamPortalData]:
        return self._store

    def dispatch(self, params: Params) -> Payload:
        """Return the response body for a request or raise :class:`XtreamError`."""

        action = params.get("action") or ""
        handler = self._handlers.get(action)
        if handler is None:
            logger.warning("Unknown Xtream action %r", action)
            raise UnknownActionError(action)
        identity = xtream_identity(
            params.get("username", ""), params.get("password", "")
        )
        return handler(params, self._store.get_portal_data(identity))

    def _account_info(self, params: Params, data: XtreamPortalData) -> Payload:
        scenario = data.scenario
        now = utcnow()
        return {
            "user_info": {
                "username": params.get("username", ""),
                "password": params.get("password", ""),
                "message": "",
                "auth": 1,
                "status": scenario.account_status,
                "exp_date": str(scenario.expires_at),
                "is_trial": "0",
                "active_cons": "1",
                "created_at": str(scenario.expires_at - 86_400 * 365),
                "max_connections": "2",
                "allowed_output_formats": ["m3u8", "ts", "rtmp"],
            },
            "server_info": {
                "url": self._server_url,
                "port": str(self._server_port),
                "https_port": "",
                "server_protocol": "http",
                "rtmp_port": "",
                "timezone": "UTC",
                "timestamp_now": unix_seconds(now),
                "time_now": plain_timestamp(now),
            },
        }

    def _live_categories(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(data.live_categories)

    def _vod_categories(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(data.vod_categories)

    def _series_categories(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(data.series_categories)

    @staticmethod
    def _filter_category(items: Sequence[Any], params: Params) -> list[Any]:
        category_id = params.get("category_id") or ""
        if not category_id:
            return list(items)
        return [item for item in items if str(item.category_id) == category_id]

    def _live_streams(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(self._filter_category(data.live_streams, params))

    def _vod_streams(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(self._filter_category(data.vod_streams, params))

    def _series(self, params: Params, data: XtreamPortalData) -> Payload:
        return _dump(self._filter_category(data.series, params))

    def _vod_info(self, params: Params, data: XtreamPortalData) -> Payload:
        raw_id = params.get("vod_id") or ""
        if not raw_id:
            raise MissingParameterError("vod_id required")
        vod_id = coerce_int(raw_id)
        stream = data.find_vod(vod_id) if vod_id is not None else None
        if stream is None:
            raise NotFoundError("VOD not found")
        return data.vod_details_for(stream).to_payload()

    def _series_info(self, params: Params, data: XtreamPortalData) -> Payload:
        raw_id = params.get("series_id") or ""
        if not raw_id:
            raise MissingParameterError("series_id required")
        series_id = coerce_int(raw_id)
        series = data.find_series(series_id) if series_id is not None else None
        if series is None:
            raise NotFoundError("Series not found")
        return data.series_info_for(series).to_payload()

    def _short_epg(self, params: Params, data: XtreamPortalData) -> Payload:
        stream_id = coerce_int(params.get("stream_id"))
        if stream_id is None:
            return {"epg_listings": []}
        limit = coerce_int(params.get("limit"), default=DEFAULT_EPG_LIMIT)
        if limit is None:
            limit = DEFAULT_EPG_LIMIT
        limit = min(MAX_EPG_LIMIT, max(0, limit))
        listings = data.epg_for(stream_id)[:limit]
        return {"epg_listings": _dump(listings)}
