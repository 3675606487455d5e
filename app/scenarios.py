"""Named portal scenarios and the identity-to-scenario resolvers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Literal, Mapping

from .utils import stable_hash


AccountStatus = Literal["Active", "Disabled"]


@dataclass(frozen=True)
class Scenario:
    """Describes the size and account state of a simulated portal."""

    name: str
    description: str
    seed: int
    live_categories: int
    vod_categories: int
    series_categories: int
    items_per_category: int
    seasons_per_series: int
    episodes_per_season: int
    is_series_fraction: float = 0.0
    embedded_series_fraction: float = 0.0
    account_status: AccountStatus = "Active"
    expiry_date: str = "2099-12-31"

    @property
    def expires_at(self) -> int:
        """Return the expiry date as Unix seconds (midnight UTC)."""

        try:
            parsed = datetime.strptime(self.expiry_date, "%Y-%m-%d")
        except ValueError:
            return 0
        return int(parsed.replace(tzinfo=timezone.utc).timestamp())

    @property
    def is_expired(self) -> bool:
        return self.expires_at < int(datetime.now(timezone.utc).timestamp())


_DEFAULT = Scenario(
    name="default",
    description="Balanced portal: 8 categories, 40 items each",
    seed=1001,
    live_categories=8,
    vod_categories=8,
    series_categories=8,
    items_per_category=40,
    seasons_per_series=3,
    episodes_per_season=8,
)
_LARGE = Scenario(
    name="large",
    description="Large catalog: 20 categories, 200 items each",
    seed=9999,
    live_categories=20,
    vod_categories=20,
    series_categories=20,
    items_per_category=200,
    seasons_per_series=5,
    episodes_per_season=12,
)
_MINIMAL = Scenario(
    name="minimal",
    description="Minimal portal: 2 categories, 5 items (edge case testing)",
    seed=3003,
    live_categories=2,
    vod_categories=2,
    series_categories=2,
    items_per_category=5,
    seasons_per_series=1,
    episodes_per_season=3,
)

STALKER_SCENARIOS: Mapping[str, Scenario] = {
    "00:1a:79:00:00:01": _DEFAULT,
    "00:1a:79:ff:ff:ff": _LARGE,
    "00:1a:79:00:00:02": Scenario(
        name="series-heavy",
        description="Series-heavy portal: many series with deep seasons",
        seed=2002,
        live_categories=3,
        vod_categories=5,
        series_categories=15,
        items_per_category=30,
        seasons_per_series=6,
        episodes_per_season=10,
    ),
    "00:1a:79:00:00:03": _MINIMAL,
    "00:1a:79:00:00:04": Scenario(
        name="is-series",
        description="VOD with is_series=1 flag (Ministra plugin flow testing)",
        seed=4004,
        live_categories=4,
        vod_categories=6,
        series_categories=4,
        items_per_category=20,
        seasons_per_series=3,
        episodes_per_season=6,
        is_series_fraction=0.6,
    ),
    "00:1a:79:00:00:05": Scenario(
        name="embedded-series",
        description="VOD with embedded series[] arrays",
        seed=5005,
        live_categories=4,
        vod_categories=6,
        series_categories=4,
        items_per_category=20,
        seasons_per_series=2,
        episodes_per_season=5,
        embedded_series_fraction=0.5,
    ),
}

XTREAM_SCENARIOS: Mapping[str, Scenario] = {
    "user1:pass1": _DEFAULT,
    "large:large": _LARGE,
    "series:series": Scenario(
        name="series-heavy",
        description="Series-heavy: 15 series categories, 6 seasons x 10 episodes",
        seed=2002,
        live_categories=3,
        vod_categories=4,
        series_categories=15,
        items_per_category=30,
        seasons_per_series=6,
        episodes_per_season=10,
    ),
    "minimal:minimal": _MINIMAL,
    # Expired accounts keep the Active status; clients detect expiry via exp_date.
    "expired:expired": Scenario(
        name="expired",
        description="Expired account: tests subscription expiry UI flow",
        seed=4004,
        live_categories=4,
        vod_categories=4,
        series_categories=4,
        items_per_category=10,
        seasons_per_series=2,
        episodes_per_season=5,
        expiry_date="2020-01-01",
    ),
    "inactive:inactive": Scenario(
        name="inactive",
        description="Disabled account: tests account disabled UI flow",
        seed=5005,
        live_categories=4,
        vod_categories=4,
        series_categories=4,
        items_per_category=10,
        seasons_per_series=2,
        episodes_per_season=5,
        account_status="Disabled",
        expiry_date="2020-01-01",
    ),
}

_AUTO = Scenario(
    name="auto",
    description="",
    seed=0,
    live_categories=6,
    vod_categories=6,
    series_categories=6,
    items_per_category=30,
    seasons_per_series=3,
    episodes_per_season=8,
)


def mac_to_seed(mac: str) -> int:
    """Sum the octets of a MAC address; unparsable octets count as zero."""

    total = 0
    for octet in mac.lower().split(":"):
        try:
            total += int(octet, 16)
        except ValueError:
            continue
    return total


def xtream_identity(username: str, password: str) -> str:
    return f"{username}:{password}".lower()


def resolve_stalker_scenario(mac: str) -> Scenario:
    """Return the scenario for a MAC, falling back to a MAC-seeded default."""

    key = mac.lower()
    scenario = STALKER_SCENARIOS.get(key)
    if scenario is not None:
        return scenario
    return replace(
        _AUTO,
        description=f"Auto-generated from MAC {key}",
        seed=mac_to_seed(key),
    )


def resolve_xtream_scenario(identity: str) -> Scenario:
    """Return the scenario for a ``username:password`` key, hashing unknown keys."""

    key = identity.lower()
    scenario = XTREAM_SCENARIOS.get(key)
    if scenario is not None:
        return scenario
    return replace(
        _AUTO,
        description=f"Auto-generated for {key}",
        seed=stable_hash(key),
    )
