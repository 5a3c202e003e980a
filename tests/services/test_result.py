"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from dumpctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="dump_system", data={"fields": ["hostname"]})
        assert result.ok is True
        assert result.op == "dump_system"
        assert result.data == {"fields": ["hostname"]}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_FIELD", message="unrecognized field: x")
        result = ServiceResult(ok=False, op="dump_disk", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_FIELD"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="dump_iface", data={"fields": ["rx_bytes"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["fields"] == ["rx_bytes"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="dump_system")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
