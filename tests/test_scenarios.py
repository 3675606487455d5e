from __future__ import annotations

from app.scenarios import (
    STALKER_SCENARIOS,
    Scenario,
    mac_to_seed,
    resolve_stalker_scenario,
    resolve_xtream_scenario,
    xtream_identity,
)
from app.utils import stable_hash


def test_named_stalker_scenarios_are_case_insensitive():
    assert resolve_stalker_scenario("00:1A:79:00:00:01").name == "default"
    assert resolve_stalker_scenario("00:1a:79:ff:ff:ff").name == "large"
    assert resolve_stalker_scenario("00:1a:79:00:00:04").is_series_fraction > 0


def test_unknown_mac_is_seeded_by_octet_sum():
    scenario = resolve_stalker_scenario("AA:BB:CC:DD:EE:FF")

    assert scenario.name == "auto"
    assert scenario.seed == 0xAA + 0xBB + 0xCC + 0xDD + 0xEE + 0xFF
    assert scenario == resolve_stalker_scenario("aa:bb:cc:dd:ee:ff")


def test_mac_to_seed_skips_bad_octets():
    assert mac_to_seed("zz:01:02") == 3
    assert mac_to_seed("") == 0


def test_xtream_identity_lowercases():
    assert xtream_identity("USER1", "Pass1") == "user1:pass1"
    assert xtream_identity("", "") == ":"


def test_named_xtream_scenarios():
    assert resolve_xtream_scenario(xtream_identity("user1", "pass1")).name == "default"
    inactive = resolve_xtream_scenario("inactive:inactive")
    assert inactive.account_status == "Disabled"


def test_unknown_xtream_identity_uses_rolling_hash():
    scenario = resolve_xtream_scenario("Foo:Bar")

    assert scenario.name == "auto"
    assert scenario.seed == stable_hash("foo:bar")
    assert resolve_xtream_scenario(":").seed == stable_hash(":")


def test_expiry_helpers():
    expired = resolve_xtream_scenario("expired:expired")
    assert expired.expires_at == 1577836800
    assert expired.is_expired
    assert not STALKER_SCENARIOS["00:1a:79:00:00:01"].is_expired


def test_bad_expiry_date_is_zero():
    scenario = Scenario(
        name="broken",
        description="",
        seed=1,
        live_categories=1,
        vod_categories=1,
        series_categories=1,
        items_per_category=1,
        seasons_per_series=1,
        episodes_per_season=1,
        expiry_date="someday",
    )
    assert scenario.expires_at == 0
