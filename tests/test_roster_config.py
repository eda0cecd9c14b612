import pytest

from tourneydfs.config import get_rules, get_rules_by_key, iter_rules, max_consecutive_failures
from tourneydfs.config.settings import MAX_FAILURES_DEFAULT, MAX_FAILURES_ENV, SEED_ENV, default_seed


def test_get_rules_handles_site_and_sport_uppercase():
    rules = get_rules("fd", "nba5")
    assert rules.site == "FD"
    assert rules.roster_order == ("PG", "SG", "SF", "PF", "C")
    assert rules.salary_cap == pytest.approx(33_333.33, abs=0.01)
    assert rules.salary_floor == 25_000


def test_get_rules_by_key_string_alias():
    rules = get_rules_by_key("FD_NFL")
    assert rules.salary_cap == 60_000
    assert rules.key == "FD_NFL"


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("FD", "CURLING")


def test_get_rules_by_key_rejects_malformed_key():
    with pytest.raises(ValueError):
        get_rules_by_key("FDNBA")


def test_every_rule_set_has_floor_below_cap():
    for rules in iter_rules():
        assert 0 <= rules.salary_floor < rules.salary_cap


def test_distinct_slots_keeps_roster_order():
    rules = get_rules("FD", "NBA")
    assert rules.distinct_slots() == ("PG", "SG", "SF", "PF", "C")


def test_slot_eligibility_uses_slot_positions():
    rules = get_rules("FD", "NFL")
    assert rules.is_eligible(["WR"], "FLEX")
    assert rules.is_eligible(["D"], "DEF")
    assert not rules.is_eligible(["QB"], "FLEX")
    assert rules.is_eligible(["QB"], "QB")


def test_max_consecutive_failures_reads_environment(monkeypatch):
    monkeypatch.delenv(MAX_FAILURES_ENV, raising=False)
    assert max_consecutive_failures() == MAX_FAILURES_DEFAULT

    monkeypatch.setenv(MAX_FAILURES_ENV, "250")
    assert max_consecutive_failures() == 250

    monkeypatch.setenv(MAX_FAILURES_ENV, "-3")
    assert max_consecutive_failures() == 1

    monkeypatch.setenv(MAX_FAILURES_ENV, "lots")
    assert max_consecutive_failures() == MAX_FAILURES_DEFAULT


def test_default_seed_is_optional(monkeypatch):
    monkeypatch.delenv(SEED_ENV, raising=False)
    assert default_seed() is None
    monkeypatch.setenv(SEED_ENV, "42")
    assert default_seed() == 42


def test_slot_positions_use_single_position_codes():
    # pool positions are split on "/", so combined codes could never match
    for rules in iter_rules():
        for allowed in rules.slot_positions.values():
            assert all("/" not in code for code in allowed)
    assert get_rules("FD", "MLB").is_eligible(["1B"], "C1B")
