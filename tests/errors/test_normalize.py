"""Tests for wrap/extract normalization of arbitrary failures."""

from __future__ import annotations

import logging

import pytest

from packages.service_errors.codes import constants as codes
from packages.service_errors.errors import (
    Detail,
    OpaqueFailure,
    ServiceError,
    StructuredFailure,
    append_details,
    classify,
    extract_error,
    fixed_trace,
    use_trace_provider,
)
from packages.service_errors.logging import ErrorFieldsFilter


def test_classify_tags_service_error_as_structured() -> None:
    """A ServiceError should classify as structured, carrying itself."""
    error = ServiceError(codes.NOT_FOUND, "missing")

    tagged = classify(error)

    assert isinstance(tagged, StructuredFailure)
    assert tagged.error is error


def test_classify_follows_explicit_cause_chain() -> None:
    """An exception raised from a ServiceError should classify as structured."""
    inner = ServiceError(codes.CONFLICT, "taken")
    try:
        try:
            raise inner
        except ServiceError as exc:
            raise RuntimeError("wrapper") from exc
    except RuntimeError as outer:
        tagged = classify(outer)

    assert isinstance(tagged, StructuredFailure)
    assert tagged.error is inner


def test_classify_tags_plain_values_as_opaque() -> None:
    """Plain exceptions and non-exception values should classify as opaque."""
    failure = ValueError("bad")

    assert classify(failure) == OpaqueFailure(failure=failure)
    assert isinstance(classify("text failure"), OpaqueFailure)


def test_classify_stops_on_cause_cycles() -> None:
    """Cyclic cause chains should terminate as opaque."""
    first = RuntimeError("a")
    second = RuntimeError("b")
    first.__cause__ = second
    second.__cause__ = first

    assert isinstance(classify(first), OpaqueFailure)


def test_append_details_mutates_structured_error_in_call_order() -> None:
    """Structured failures should be extended in place and returned."""
    error = ServiceError(codes.BAD_REQUEST, "invalid", [Detail(message="first")])

    result = append_details(error, Detail(message="second"), Detail(message="third"))

    assert result is error
    assert [item.message for item in error.details] == ["first", "second", "third"]
    assert error.code == codes.BAD_REQUEST


def test_append_details_records_attach_site_traces() -> None:
    """Details appended via the normalizer should get fresh traces."""
    error = ServiceError(codes.BAD_REQUEST, "invalid")

    with use_trace_provider(fixed_trace("boundary")):
        append_details(error, Detail(field="email", message="m", trace="factory"))

    assert error.trace_of_field("email") == "boundary"


def test_append_details_wraps_opaque_failure_with_unknown_sentinel() -> None:
    """Opaque failures should become UNKNOWN_ERROR errors keeping the cause."""
    failure = ValueError("db row malformed")
    detail = Detail(field="row", message="row 7 is malformed")

    result = append_details(failure, detail)

    assert isinstance(result, ServiceError)
    assert result.code == codes.UNKNOWN_ERROR
    assert result.message == "db row malformed"
    assert result.details == (detail,)
    assert result.cause is failure
    assert result.__cause__ is failure
    assert result.render() == "row 7 is malformed"


def test_append_details_on_opaque_failure_without_details() -> None:
    """Wrapping without details should render the failure text."""
    result = append_details(KeyError("user"))

    assert result.details == ()
    assert result.render() == "'user'"


def test_extract_error_returns_structured_error_unchanged() -> None:
    """extract_error should preserve identity for structured failures."""
    error = ServiceError(codes.FORBIDDEN, "nope")

    assert extract_error(error) is error


def test_extract_error_unwraps_explicit_cause() -> None:
    """extract_error should return the ServiceError an exception wraps."""
    inner = ServiceError(codes.GONE, "gone")
    outer = LookupError("wrapper")
    outer.__cause__ = inner

    assert extract_error(outer) is inner


def test_extract_error_synthesizes_internal_error_with_trace() -> None:
    """Opaque failures should become INTERNAL_ERROR errors with a trace."""
    failure = TimeoutError("upstream timed out")

    result = extract_error(failure)

    assert result.code == codes.INTERNAL_ERROR
    assert result.message == "upstream timed out"
    assert result.details == ()
    assert result.cause is failure
    assert result.trace_of() != ""


def test_sentinels_differ_between_entry_points() -> None:
    """The wrap and extract paths should stay distinguishable by code."""
    failure = RuntimeError("x")

    assert append_details(failure).code != extract_error(failure).code


def test_empty_failure_text_falls_back_to_type_name() -> None:
    """Failures rendering to empty text should use their type name."""
    assert extract_error(RuntimeError()).message == "RuntimeError"


def test_non_exception_failure_is_kept_as_cause_only() -> None:
    """Non-exception failures should not be chained as ``__cause__``."""
    result = extract_error("plain text failure")

    assert result.message == "plain text failure"
    assert result.cause == "plain text failure"
    assert result.__cause__ is None


def test_opaque_coercion_is_logged_at_debug(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Coercing an opaque failure should emit one debug log line."""
    caplog.handler.addFilter(ErrorFieldsFilter())
    with caplog.at_level(logging.DEBUG, logger="packages.service_errors.errors.normalize"):
        extract_error(ValueError("x"))

    assert [item.getMessage() for item in caplog.records] == [
        "Coerced unstructured failure"
    ]
    assert caplog.records[0].error_fields == {
        "error_code": codes.INTERNAL_ERROR,
        "detail_count": 0,
        "sentinel": codes.INTERNAL_ERROR,
        "failure_type": "ValueError",
    }


def test_none_is_not_a_failure() -> None:
    """Both entry points should refuse None instead of inventing an error."""
    with pytest.raises(TypeError):
        extract_error(None)
    with pytest.raises(TypeError):
        append_details(None, Detail(message="m"))
