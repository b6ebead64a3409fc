"""Tests for akamai_appsec.utils.exceptions and akamai_appsec.utils.validation."""

from __future__ import annotations

import pytest

from akamai_appsec.utils.exceptions import (
    ApiError,
    AppSecError,
    ErrorCategory,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from akamai_appsec.utils.validation import BLANK, is_blank, validate_required


class TestExceptionClasses:
    def test_base_error_to_dict(self) -> None:
        exc = AppSecError("test message", code="TEST_CODE")
        assert exc.to_dict() == {
            "error": "TEST_CODE",
            "message": "test message",
            "category": ErrorCategory.TRANSPORT.value,
            "details": {},
        }
        assert str(exc) == "test message"

    def test_validation_error_lists_fields_sorted(self) -> None:
        exc = ValidationError({"version": BLANK, "config_id": BLANK})
        assert list(exc.errors) == ["config_id", "version"]
        assert exc.message == "struct validation: config_id: cannot be blank; version: cannot be blank."
        assert exc.category is ErrorCategory.VALIDATION
        assert exc.details == {"fields": ["config_id", "version"]}

    @pytest.mark.parametrize(
        ("exc_type", "code", "category"),
        [
            (RequestBuildError, "REQUEST_BUILD_ERROR", ErrorCategory.REQUEST),
            (TransportError, "TRANSPORT_ERROR", ErrorCategory.TRANSPORT),
            (ResponseDecodeError, "RESPONSE_DECODE_ERROR", ErrorCategory.TRANSPORT),
        ],
    )
    def test_codes_and_categories(self, exc_type, code, category) -> None:
        exc = exc_type("boom")
        assert isinstance(exc, AppSecError)
        assert exc.code == code
        assert exc.category is category

    def test_api_error_equality_ignores_instance(self) -> None:
        a = ApiError(type="t", title="T", detail="d", instance="one", status_code=500)
        b = ApiError(type="t", title="T", detail="d", instance="two", status_code=500)
        c = ApiError(type="t", title="T", detail="d", status_code=404)
        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_api_error_problem_omits_empty_optional_fields(self) -> None:
        assert ApiError(title="T").problem() == {"type": "", "title": "T", "detail": ""}


class TestValidation:
    @pytest.mark.parametrize("value", [None, 0, "", "   ", [], {}, False])
    def test_blank_values(self, value) -> None:
        assert is_blank(value)

    @pytest.mark.parametrize("value", [1, -3, "AAAA_81230", ["x"], True])
    def test_present_values(self, value) -> None:
        assert not is_blank(value)

    def test_validate_required_passes(self) -> None:
        assert validate_required({"config_id": 43253, "policy_id": "AAAA_81230"}) is None

    def test_validate_required_collects_all_failures(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_required({"config_id": 0, "version": 15, "policy_id": ""})
        assert exc_info.value.errors == {"config_id": BLANK, "policy_id": BLANK}
