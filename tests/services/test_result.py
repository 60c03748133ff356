"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from dicectl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="roll", data={"total": 7})
        assert result.ok is True
        assert result.op == "roll"
        assert result.data == {"total": 7}
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="PARSE_ERROR", message="Invalid dice notation: '2x6'")
        result = ServiceResult(ok=False, op="roll", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="roll",
            data={"outcomes": [3, 4]},
            meta={"seed": 42},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["outcomes"] == [3, 4]
        assert parsed["meta"]["seed"] == 42

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="roll")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="VALIDATION_ERROR", message="bad", detail={"notation": "0d6"})
        assert error.detail["notation"] == "0d6"

    def test_default_detail(self) -> None:
        error = ServiceError(code="PARSE_ERROR", message="bad")
        assert error.detail == {}
