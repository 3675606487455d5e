"""Utility helpers shared by the portal generators and dispatchers."""

from __future__ import annotations

import base64
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import unquote


MAC_RE = re.compile(r"^[0-9a-f]{2}(?::[0-9a-f]{2}){5}$")
ZERO_MAC = "00:00:00:00:00:00"

# Catalog dates hang off a fixed epoch so a scenario always renders the same bytes.
CATALOG_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def category_alias(title: str) -> str:
    """Return the Stalker alias for a category title."""

    return re.sub(r"\s+", "_", title.strip().lower())


def normalize_mac(value: str | None) -> str:
    """Return a lower-cased MAC address, or the all-zero MAC when unusable."""

    if not value:
        return ZERO_MAC
    candidate = unquote(value).strip().strip('"').lower()
    if not MAC_RE.match(candidate):
        return ZERO_MAC
    return candidate


def stable_hash(value: str) -> int:
    """Fold a string into an unsigned 32-bit integer with a 31 multiplier."""

    result = 0
    for char in value:
        result = (result * 31 + ord(char)) & 0xFFFFFFFF
    return result


def derive_seed(seed: int, *parts: object) -> int:
    """Return a child seed for lazily generated structures."""

    return stable_hash(":".join([str(seed), *(str(part) for part in parts)]))


def coerce_int(value: Any, *, default: int | None = None) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def unix_seconds(moment: datetime) -> int:
    return int(moment.timestamp())


def iso_timestamp(moment: datetime) -> str:
    """Format a datetime like JavaScript's ``toISOString``."""

    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def plain_timestamp(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DD HH:MM:SS`` in UTC."""

    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def b64_text(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
