"""Configuration and logging setup for applications hosting the API client."""

import json
import logging
import os
import pathlib

import httpx
import pydantic
import structlog

from .mcdapi import DEFAULT_BASE_URL, ApiClient

CONFIG_ENV_VAR = "MACCAS_CLIENT_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_TIMEOUT = 30.0

logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for the vendor API client."""

    base_url: str = pydantic.Field(DEFAULT_BASE_URL, description="Base URL for the API")
    client_id: str = pydantic.Field(description="Client id issued to the mobile app")
    client_secret: str | None = pydantic.Field(
        None,
        description="Client secret used for the token exchange",
        repr=False,
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output.

    The client logs request timing and failures as key-value events, so one
    line per request renders as `timestamp=... level=debug msg="API request
    completed" path=... status_code=...`.
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str) -> ClientConfig:
    """Load client settings (base URL, client id, secret, timeout) from a JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create the shared async transport with the configured timeout.

    The caller owns the returned client and must close it.
    """
    return httpx.AsyncClient(timeout=config.timeout)


def create_client(config: ClientConfig, http_client: httpx.AsyncClient) -> ApiClient:
    """Construct an API client from validated config over a shared transport."""
    api_client = ApiClient(
        base_url=config.base_url,
        http_client=http_client,
        client_id=config.client_id,
    )
    logger.info("Created API client", base_url=api_client.base_url)
    return api_client


def create_client_from_path(
    http_client: httpx.AsyncClient,
    config_path: str | None = None,
) -> ApiClient:
    """Create an API client using a config path or environment default."""
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    config = load_config(resolved_path)
    configure_logging(config.log_level)
    return create_client(config, http_client)
