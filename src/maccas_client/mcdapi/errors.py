"""Errors raised by the vendor API client.

Every failure surfaces as a subclass of :class:`ClientError` so callers can
tell a missing precondition, bad input, an unreachable server and an
unexpected reply apart without inspecting library-specific exceptions.
"""

import httpx


class ClientError(Exception):
    """Base error for vendor API client failures."""

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response that caused the error, if one arrived."""
        return None


class MissingTokenError(ClientError):
    """Raised when a token-gated call is made before its token is set."""

    def __init__(self, token_name: str):
        super().__init__(f"no {token_name} token set")
        self.token_name = token_name


class InvalidParameterError(ClientError, ValueError):
    """Raised when a parameter cannot be coerced to the type the API expects."""

    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be an integer, got {value!r}")
        self.name = name
        self.value = value


class TransportError(ClientError):
    """Raised when the request could not be completed by the transport.

    Covers connection, DNS, TLS, timeout and protocol failures. The original
    httpx exception is kept on :attr:`cause`.
    """

    def __init__(self, message: str, cause: httpx.HTTPError):
        super().__init__(message)
        self.cause = cause


class DeserializationError(ClientError):
    """Raised when a response body is not JSON or does not match its schema."""

    def __init__(self, message: str, status_code: int, content: bytes):
        super().__init__(message)
        self._status_code = status_code
        self.content = content

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response whose body failed to parse."""
        return self._status_code
