from tourneydfs.config import get_rules
from tourneydfs.generator import BuildOutput, ExposureRecord, LineupResult
from tourneydfs.models import PlayerRecord
from tourneydfs.report import (
    format_currency,
    format_exposure_table,
    format_lineups,
    format_metadata,
    lineup_summary,
    render_report,
    sort_by_salary,
)


def _lineup(lineup_id: str, salaries: list[int]) -> LineupResult:
    players = tuple(
        PlayerRecord(player_id=f"{lineup_id}-{idx}", positions=["PG"], salary=salary)
        for idx, salary in enumerate(salaries)
    )
    return LineupResult(lineup_id=lineup_id, players=players, slots=("PG",) * len(players))


def test_format_currency():
    assert format_currency(58_000) == "$58,000.00"
    assert format_currency(33_333.5) == "$33,333.50"
    assert format_currency(-5) == "-$5.00"


def test_lineup_summary_includes_key_and_salary():
    lineup = _lineup("L001", [1000, 2500])
    assert lineup_summary(lineup) == "L001-0-L001-1 ($3,500.00)"


def test_lineups_sorted_by_salary_descending():
    low = _lineup("A", [1000])
    high = _lineup("B", [3000])
    assert sort_by_salary([low, high]) == [high, low]
    assert format_lineups([low, high])[0].startswith("B-0")


def test_metadata_reports_actual_count_and_shortfall():
    lines = format_metadata(25_000, 33_333, 3, 5, 0.5)
    assert lines[0] == "salaryFloor = $25,000.00"
    assert lines[1] == "salaryCap = $33,333.00"
    assert lines[2] == "Generated 3 lineups in 0.500s"
    assert "stopped 2 short" in lines[3]
    assert len(format_metadata(25_000, 33_333, 5, 5, 0.5)) == 3


def test_exposure_table_lists_liked_players():
    exposures = {
        "b": ExposureRecord(player_id="b", liked=0.2, max=2, count=1),
        "a": ExposureRecord(player_id="a", liked=0.5, max=5, count=5),
    }
    lines = format_exposure_table(exposures, 10)
    assert lines[0].split() == ["player", "count", "max", "target", "actual"]
    assert lines[1].split() == ["a", "5", "5", "50%", "50%"]
    assert lines[2].split() == ["b", "1", "2", "20%", "10%"]
    assert format_exposure_table({}, 10) == []


def test_render_report_combines_sections():
    output = BuildOutput(
        lineups=[_lineup("L001", [12_000, 14_000])],
        exposures={"x": ExposureRecord(player_id="x", liked=0.5, max=1, count=0)},
        rules=get_rules("FD", "NBA5"),
        requested=2,
    )
    text = render_report(output)
    assert "($26,000.00)" in text
    assert "Generated 1 lineups" in text
    assert "stopped 1 short" in text
    assert "target" in text
