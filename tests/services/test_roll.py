"""Tests for RollService — the parse/evaluate/render pipeline."""

from dicectl.domain.history import RollHistory
from dicectl.domain.notation import RollLimits
from dicectl.output.dice import AsciiRenderer
from tests.conftest import sequence_service


class TestRoll:
    def test_roll_2d6(self) -> None:
        result = sequence_service([3, 4]).roll("2d6")
        assert result.ok
        assert result.op == "roll"
        assert result.data["outcomes"] == [3, 4]
        assert result.data["total"] == 7
        assert result.data["rendered"] == "You rolled 7 (3, 4)"

    def test_roll_with_modifier(self) -> None:
        result = sequence_service([10]).roll("1d20+3")
        assert result.data["notation"] == "1d20+3"
        assert result.data["modifier"] == 3
        assert result.data["total"] == 13

    def test_roll_records_history(self) -> None:
        history = RollHistory()
        svc = sequence_service([3, 4, 6], history=history)
        svc.roll("2d6")
        svc.roll("d6")
        assert [r.total for r in history] == [7, 6]
        assert svc.history is history

    def test_parse_error(self) -> None:
        svc = sequence_service([])
        result = svc.roll("2x6")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail == {"notation": "2x6"}
        assert len(svc.history) == 0

    def test_validation_error(self) -> None:
        result = sequence_service([]).roll("0d6")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"

    def test_limits_applied(self) -> None:
        svc = sequence_service([1, 1, 1], limits=RollLimits(max_count=2))
        result = svc.roll("3d6")
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"

    def test_swapping_renderer_changes_only_rendered(self) -> None:
        text = sequence_service([3, 4]).roll("2d6")
        ascii_ = sequence_service([3, 4], renderer=AsciiRenderer()).roll("2d6")
        assert text.data["rendered"] != ascii_.data["rendered"]
        strip = lambda d: {k: v for k, v in d.items() if k != "rendered"}  # noqa: E731
        assert strip(text.data) == strip(ascii_.data)


class TestRollMany:
    def test_rolls_each_notation_times_times(self) -> None:
        svc = sequence_service([1, 2, 3, 4, 5, 6])
        result = svc.roll_many(["d6", "2d6"], times=2)
        assert result.ok
        assert result.op == "roll_many"
        totals = [r["total"] for r in result.data["rolls"]]
        assert totals == [1, 2, 7, 11]
        assert [r["notation"] for r in result.data["rolls"]] == ["1d6", "1d6", "2d6", "2d6"]

    def test_summary(self) -> None:
        result = sequence_service([2, 5]).roll_many(["d6", "d6+1"])
        summary = result.data["summary"]
        assert summary["rolls"] == 2
        assert summary["lowest"] == 2
        assert summary["highest"] == 6
        assert summary["mean"] == 4.0

    def test_stops_at_first_invalid_notation(self) -> None:
        svc = sequence_service([4])
        result = svc.roll_many(["d6", "nope", "d6"])
        assert not result.ok
        assert result.op == "roll_many"
        assert result.error is not None
        assert result.error.detail["notation"] == "nope"
        assert len(svc.history) == 1


class TestParse:
    def test_oversized_modifier_is_validation_error(self) -> None:
        result = sequence_service([1]).roll("1d6+" + "9" * 5000)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"

    def test_parse(self) -> None:
        result = sequence_service([]).parse("d20 - 1")
        assert result.ok
        assert result.data == {"notation": "1d20-1", "count": 1, "sides": 20, "modifier": -1}

    def test_parse_does_not_roll(self) -> None:
        svc = sequence_service([])
        svc.parse("2d6")
        assert len(svc.history) == 0

    def test_parse_error(self) -> None:
        result = sequence_service([]).parse("2d")
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
