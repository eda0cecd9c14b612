import pytest
from pydantic import ValidationError

from tourneydfs.models import PlayerRecord


def test_player_record_is_frozen():
    record = PlayerRecord(
        player_id="p1",
        name="Test Player",
        team="BOS",
        positions=["PG"],
        salary=9000,
    )

    assert record.player_id == "p1"
    assert record.positions == ["PG"]
    assert record.liked is None
    assert not record.is_liked

    with pytest.raises((TypeError, ValidationError)):
        record.player_id = "p2"  # type: ignore[attr-defined]


def test_player_record_normalizes_positions():
    record = PlayerRecord(player_id="p1", positions=[" pg", "sg "], salary=5000, liked=0.25)
    assert record.positions == ["PG", "SG"]
    assert record.is_liked


@pytest.mark.parametrize("liked", [0.0, -0.1, 1.01])
def test_player_record_rejects_liked_outside_unit_interval(liked):
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", positions=["PG"], salary=5000, liked=liked)


def test_player_record_requires_positions_and_salary():
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", positions=[], salary=5000)
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", positions=[" "], salary=5000)
    with pytest.raises(ValidationError):
        PlayerRecord(player_id="p1", positions=["PG"], salary=0)
