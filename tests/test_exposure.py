import pytest

from tourneydfs.generator import ExposureCapError, ExposureTracker
from tourneydfs.models import PlayerRecord


def _pool() -> list[PlayerRecord]:
    return [
        PlayerRecord(player_id="a", positions=["PG"], salary=5000, liked=0.5),
        PlayerRecord(player_id="b", positions=["SG"], salary=5000, liked=0.1),
        PlayerRecord(player_id="c", positions=["SF"], salary=5000),
    ]


def test_from_pool_sets_ceiling_caps_for_liked_players_only():
    tracker = ExposureTracker.from_pool(_pool(), 4)

    assert set(tracker.records) == {"a", "b"}
    assert tracker.records["a"].max == 2
    assert tracker.records["b"].max == 1
    assert all(record.count == 0 for record in tracker.records.values())
    assert "c" not in tracker


def test_cap_ignores_float_noise():
    pool = [PlayerRecord(player_id="a", positions=["PG"], salary=5000, liked=0.07)]
    tracker = ExposureTracker.from_pool(pool, 100)
    assert tracker.records["a"].max == 7


def test_non_liked_players_are_always_satisfiable():
    tracker = ExposureTracker.from_pool(_pool(), 1)
    assert tracker.is_satisfiable("c")
    assert tracker.is_satisfiable("unknown")


def test_record_acceptance_increments_once_per_lineup():
    pool = _pool()
    tracker = ExposureTracker.from_pool(pool, 4)

    tracker.record_acceptance(pool)

    assert tracker.records["a"].count == 1
    assert tracker.records["b"].count == 1
    assert tracker.is_satisfiable("a")
    assert not tracker.is_satisfiable("b")
    assert tracker.would_overexpose(pool)
    assert not tracker.would_overexpose([pool[0], pool[2]])


def test_record_acceptance_refuses_to_pass_cap():
    pool = _pool()
    tracker = ExposureTracker.from_pool(pool, 4)
    tracker.record_acceptance(["b"])

    with pytest.raises(ExposureCapError):
        tracker.record_acceptance(["a", "b"])

    # a failed acceptance leaves every count untouched
    assert tracker.records["a"].count == 0
    assert tracker.records["b"].count == 1


def test_snapshot_is_detached_from_tracker():
    tracker = ExposureTracker.from_pool(_pool(), 10)
    snapshot = tracker.snapshot()
    tracker.record_acceptance(["a"])
    assert snapshot["a"].count == 0
    assert tracker.records["a"].count == 1
    assert tracker.records["a"].remaining == 4
    assert tracker.records["a"].fulfilled == pytest.approx(0.2)
