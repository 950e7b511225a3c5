"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from monthpick.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"value": "2024-06"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"value": "2024-06"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNPARSEABLE", message="No pattern matched 'x'")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNPARSEABLE"

    def test_with_warnings(self) -> None:
        result = ServiceResult(ok=True, op="format", warnings=["2019-06 is below minimum"])
        assert len(result.warnings) == 1

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"i18n": {"formats": ["YYYY-MM"]}})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "describe"
        assert parsed["data"]["i18n"]["formats"] == ["YYYY-MM"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="parse")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="OUT_OF_RANGE",
            message="2019-06 is below minimum",
            detail={"value": "2019-06", "reason": "below minimum"},
        )
        assert error.detail["reason"] == "below minimum"

    def test_default_detail(self) -> None:
        error = ServiceError(code="BAD_VALUE", message="bad")
        assert error.detail == {}


class TestBuilders:
    def test_success(self) -> None:
        result = ServiceResult.success("format", {"text": "06.2019"}, ("out of range",))
        assert result.ok is True
        assert result.data == {"text": "06.2019"}
        assert result.warnings == ["out of range"]

    def test_failure(self) -> None:
        result = ServiceResult.failure("parse", ErrorCode.UNPARSEABLE, "No pattern matched")
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(code="UNPARSEABLE", message="No pattern matched")

    def test_codes_serialize_as_text(self) -> None:
        result = ServiceResult.failure("describe", ErrorCode.CONFIG_ERROR, "bad", {"k": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["error"]["code"] == "CONFIG_ERROR"
        assert parsed["error"]["detail"] == {"k": 1}
