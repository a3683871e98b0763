"""Vendor mobile API client package.

Provides an async HTTP client for the vendor's mobile backend that mimics
the Android app's request fingerprint and returns Pydantic-validated
response types. Interpreting the vendor status block is left to callers.

Exports:
    ApiClient: Async client with one coroutine per endpoint.
    ClientResponse: Status code, headers and parsed body of a response.
    ClientError: Base of the error hierarchy, see ``errors``.
    types: Module containing Pydantic models for API responses.
    payloads: Module containing Pydantic models for request bodies.
    DEFAULT_BASE_URL: Production API base URL.
"""

from . import payloads, types
from .client import DEFAULT_BASE_URL, ApiClient, ClientResponse, generate_device_id
from .errors import (
    ClientError,
    DeserializationError,
    InvalidParameterError,
    MissingTokenError,
    TransportError,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiClient",
    "ClientError",
    "ClientResponse",
    "DeserializationError",
    "InvalidParameterError",
    "MissingTokenError",
    "TransportError",
    "generate_device_id",
    "payloads",
    "types",
]
