"""Tests for the client error hierarchy."""

import httpx
import pytest

from maccas_client.mcdapi import errors


@pytest.mark.parametrize(
    "error",
    [
        errors.MissingTokenError("auth"),
        errors.InvalidParameterError("offset", "eight"),
        errors.TransportError("failed", httpx.ConnectError("refused")),
        errors.DeserializationError("bad body", 500, b"oops"),
    ],
)
def test_all_errors_share_base_class(error: errors.ClientError):
    """Every error can be caught as ClientError."""
    assert isinstance(error, errors.ClientError)


def test_missing_token_error_names_the_slot():
    """The message and attribute name the missing token."""
    error = errors.MissingTokenError("login")
    assert error.token_name == "login"
    assert str(error) == "no login token set"
    assert error.status_code is None


def test_invalid_parameter_error_is_value_error():
    """Input coercion failures are also ValueErrors."""
    error = errors.InvalidParameterError("offer_id", "abc")
    assert isinstance(error, ValueError)
    assert error.name == "offer_id"
    assert error.value == "abc"
    assert "offer_id" in str(error)


def test_transport_error_keeps_cause_without_status():
    """Transport errors expose the original httpx error and no status."""
    cause = httpx.ReadTimeout("timed out")
    error = errors.TransportError("GET /x failed", cause)
    assert error.cause is cause
    assert error.status_code is None


def test_deserialization_error_exposes_status_and_content():
    """Deserialization errors carry the HTTP status and raw body."""
    error = errors.DeserializationError("bad body", 401, b"<html/>")
    assert error.status_code == 401
    assert error.content == b"<html/>"
