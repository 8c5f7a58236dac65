"""
Tests for the error types and the context helpers.
"""

import httpx
import pytest
from pydantic import TypeAdapter, ValidationError

from upstash_kafka.exceptions import (
    AlreadyInitializedError,
    ApiError,
    ConfigurationError,
    ErrorKind,
    InternalError,
    InvalidDataError,
    UpstashError,
    context,
    kind_of,
    wrap_error,
)


def _validation_error() -> ValidationError:
    try:
        TypeAdapter(int).validate_python("not a number")
    except ValidationError as e:
        return e
    raise AssertionError("expected a validation error")


@pytest.mark.unit
class TestUpstashError:
    """Test the base exception class."""

    def test_basic_exception_creation(self):
        error = UpstashError("Something broke")

        assert str(error) == "Something broke"
        assert error.message == "Something broke"
        assert error.code == "NA"
        assert error.kind == ErrorKind.INTERNAL
        assert error.details == {}
        assert error.cause is None

    def test_display_text_is_message_only(self):
        error = ApiError("Invalid response from GET /v2/kafka/clusters", detail="EOF while parsing", status_code=502)

        assert str(error) == "Invalid response from GET /v2/kafka/clusters"
        assert "EOF" not in str(error)
        assert "502" not in str(error)

    def test_explicit_code_and_kind(self):
        error = UpstashError("Bad input", kind=ErrorKind.INVALID_DATA, code="E42")

        assert error.kind == ErrorKind.INVALID_DATA
        assert error.code == "E42"

    def test_to_dict_with_cause(self):
        cause = ValueError("Original error")
        error = InternalError("Wrapped", details={"key": "value"}, cause=cause)

        result = error.to_dict()

        assert result["error"] == "INTERNAL"
        assert result["message"] == "Wrapped"
        assert result["code"] == "NA"
        assert result["details"]["key"] == "value"
        assert result["details"]["cause"] == "Original error"
        assert result["details"]["cause_type"] == "ValueError"
        # to_dict must not mutate the error's own details
        assert "cause" not in error.details

    def test_to_dict_without_cause(self):
        result = InternalError("No cause").to_dict()

        assert "cause" not in result["details"]
        assert "cause_type" not in result["details"]

    def test_from_builder(self):
        error = UpstashError.from_builder("Handler", "a client")

        assert isinstance(error, InternalError)
        assert str(error) == "Handler cannot be constructed without a client"

    def test_from_builder_is_internal_from_any_class(self):
        error = ApiError.from_builder("Handler", "a client")

        assert type(error) is InternalError
        assert error.kind == ErrorKind.INTERNAL


@pytest.mark.unit
class TestErrorKinds:
    """Test the kind carried by each subclass."""

    def test_subclass_kinds(self):
        assert InternalError("x").kind == ErrorKind.INTERNAL
        assert InvalidDataError("x").kind == ErrorKind.INVALID_DATA
        assert ApiError("x").kind == ErrorKind.API_ERROR

    def test_api_error_detail_defaults_to_message(self):
        error = ApiError("Remote failure")

        assert error.detail == "Remote failure"
        assert error.status_code is None
        assert error.to_dict()["details"]["detail"] == "Remote failure"

    def test_api_error_status_code(self):
        error = ApiError("Invalid response", detail="missing field", status_code=404)

        assert error.detail == "missing field"
        assert error.status_code == 404
        assert error.details["status_code"] == 404

    def test_already_initialized_is_internal(self):
        error = AlreadyInitializedError("provisioning")

        assert isinstance(error, InternalError)
        assert error.kind == ErrorKind.INTERNAL
        assert error.details["target"] == "provisioning"
        assert "already initialized" in str(error)

    def test_configuration_error(self):
        error = ConfigurationError("UPSTASH_EMAIL not set", variable="UPSTASH_EMAIL")

        assert isinstance(error, InternalError)
        assert error.details == {"variable": "UPSTASH_EMAIL"}


@pytest.mark.unit
class TestWrapError:
    """Test wrapping lower-level failures."""

    def test_transport_failure_is_internal(self):
        cause = httpx.ConnectError("Connection refused")

        error = wrap_error(cause, "Http execution failure")

        assert isinstance(error, InternalError)
        assert str(error) == "Http execution failure"
        assert error.cause is cause

    def test_invalid_url_is_internal(self):
        assert kind_of(httpx.InvalidURL("Invalid port: 'abc'")) == ErrorKind.INTERNAL

    def test_decode_failure_is_api_error(self):
        cause = _validation_error()

        error = wrap_error(cause, "Invalid response")

        assert isinstance(error, ApiError)
        assert str(error) == "Invalid response"
        assert error.detail == str(cause)

    def test_explicit_kind_overrides(self):
        error = wrap_error(ValueError("bad"), "Rejected locally", ErrorKind.INVALID_DATA)

        assert isinstance(error, InvalidDataError)

    def test_upstash_error_passes_through(self):
        original = ApiError("Already wrapped")

        assert wrap_error(original, "Outer message") is original


@pytest.mark.unit
class TestContext:
    """Test the context manager form."""

    def test_wraps_and_chains(self):
        with pytest.raises(InternalError) as exc_info:
            with context("Invalid route"):
                raise httpx.InvalidURL("Invalid port: 'abc'")

        assert str(exc_info.value) == "Invalid route"
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    def test_reraises_upstash_error_unchanged(self):
        original = ApiError("Inner")

        with pytest.raises(ApiError) as exc_info:
            with context("Outer"):
                raise original

        assert exc_info.value is original

    def test_no_error(self):
        with context("Unused"):
            value = 1 + 1

        assert value == 2
