"""Unit tests for custom exception classes.

Tests the exception hierarchy, default error codes, message handling,
and details propagation for all custom exceptions in the WBS engine.
"""

import pytest

from wbs_engine.exceptions import (
    AxisDefinitionError,
    InputValidationError,
    MutationError,
    WBSEngineError,
)
from wbs_engine.models import ErrorResponse


class TestWBSEngineError:
    def test_base_error_attributes(self):
        err = WBSEngineError("Something failed", error_code="ERR_TEST", details={"key": "value"})
        assert err.message == "Something failed"
        assert err.error_code == "ERR_TEST"
        assert err.details == {"key": "value"}
        assert str(err) == "Something failed"

    def test_base_error_defaults(self):
        err = WBSEngineError("Minimal error")
        assert err.error_code == "ERR_UNKNOWN"
        assert err.details is None

    def test_is_exception_subclass(self):
        assert isinstance(WBSEngineError("test"), Exception)


class TestSubclassErrorCodes:
    """Each subclass must carry its own default error_code."""

    def test_input_validation_error_code(self):
        err = InputValidationError("bad date")
        assert err.error_code == "ERR_INPUT_001"
        assert err.message == "bad date"
        assert isinstance(err, WBSEngineError)

    def test_axis_definition_error_code(self):
        err = AxisDefinitionError("bad axis")
        assert err.error_code == "ERR_AXIS_001"
        assert isinstance(err, WBSEngineError)

    def test_mutation_error_code(self):
        err = MutationError("bad field")
        assert err.error_code == "ERR_MUT_001"
        assert isinstance(err, WBSEngineError)


class TestDetailsPropagation:
    def test_details_kept(self):
        err = InputValidationError("bad date", details={"invalid_parts": ["month"]})
        assert err.details == {"invalid_parts": ["month"]}

    @pytest.mark.parametrize("cls", [InputValidationError, AxisDefinitionError, MutationError])
    def test_catchable_as_base(self, cls):
        with pytest.raises(WBSEngineError):
            raise cls("failure")


class TestErrorResponse:
    def test_from_exception(self):
        err = InputValidationError("bad date", details={"invalid_parts": ["day"]})
        body = ErrorResponse.from_exception(err, path="/api/v1/wbs/mutations/date")
        assert body.error_code == "ERR_INPUT_001"
        assert body.message == "bad date"
        assert body.details == {"invalid_parts": ["day"]}
        assert body.path == "/api/v1/wbs/mutations/date"

    def test_json_body(self):
        data = ErrorResponse.from_exception(MutationError("bad field")).model_dump(mode="json")
        assert data["error_code"] == "ERR_MUT_001"
        assert data["path"] is None
        assert isinstance(data["timestamp"], str)
