"""Vendor mobile API client.

Provides an async HTTP client that replays the mobile app's request
fingerprint and returns responses validated against Pydantic models.

Token slots are plain attributes read once when a request is built. Calls
issued concurrently with :meth:`ApiClient.set_auth_token` or
:meth:`ApiClient.set_login_token` use whichever value was current when they
started; callers that need stricter ordering must serialize token updates
themselves.
"""

import base64
import re
import secrets
import string
import time
import uuid
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
import pydantic
import structlog

from .errors import (
    DeserializationError,
    InvalidParameterError,
    MissingTokenError,
    TransportError,
)
from .payloads import (
    ActivationRequest,
    Credentials,
    DealStackRemovalRequest,
    LoginRefreshRequest,
    LoginRequest,
    RegistrationRequest,
    to_wire,
)
from .types import (
    ActivationResponse,
    CustomerPointResponse,
    LoginRefreshResponse,
    LoginResponse,
    OfferDealStackResponse,
    OfferDetailsResponse,
    OfferResponse,
    RegistrationResponse,
    RestaurantLocationResponse,
    RestaurantResponse,
    TokenResponse,
)

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://ap-prod.api.mcd.com"

# The backend rejects requests that do not look like they came from this
# build of the Android app.
USER_AGENT = "MCDSDK/20.0.14 (Android; 31; en-AU) GMA/6.2"
SOURCE_APP = "GMA"
MARKET_ID = "AU"
LANGUAGE = "en-AU"

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"

DEVICE_ID_LENGTH = 16
_DEVICE_ID_ALPHABET = string.ascii_letters + string.digits

T = TypeVar("T", bound=pydantic.BaseModel)


@dataclass(frozen=True)
class ClientResponse(Generic[T]):
    """HTTP status, headers and parsed body of a vendor API response.

    A non-2xx status is not an error here; vendor-level failures are
    reported in ``body.status`` and left to the caller.
    """

    status_code: int
    headers: httpx.Headers
    body: T


def generate_device_id() -> str:
    """Return a random 16 character alphanumeric device id."""
    return "".join(secrets.choice(_DEVICE_ID_ALPHABET) for _ in range(DEVICE_ID_LENGTH))


def _basic_auth(username: str, password: str) -> str:
    credentials = f"{username}:{password}".encode()
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _to_int(name: str, value: int | str) -> int:
    # Optional sign and ASCII digits only; the query string sends str(value).
    if isinstance(value, bool) or not _INTEGER_PATTERN.fullmatch(str(value)):
        raise InvalidParameterError(name, value)
    return int(value)


class ApiClient:
    """Client for the vendor's mobile backend REST API.

    Each public coroutine maps to exactly one endpoint. The ``httpx.AsyncClient``
    is borrowed, not owned: it may be shared between clients and is never
    closed here. Timeouts and connection pooling are its responsibility.

    Typical call order is :meth:`security_auth_token`, then
    :meth:`set_login_token` and :meth:`customer_login`, then
    :meth:`set_auth_token` before any other call. The client does not enforce
    it beyond refusing to send a gated request whose token is unset.
    """

    def __init__(self, base_url: str, http_client: httpx.AsyncClient, client_id: str):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API (e.g., "https://ap-prod.api.mcd.com").
            http_client: Shared async transport used to send every request.
            client_id: Client id issued to the mobile app.

        Raises:
            ValueError: If base_url is empty.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.client_id = client_id
        self._http = http_client
        self._login_token: str | None = None
        self._auth_token: str | None = None

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self.base_url!r}, client_id={self.client_id!r})"

    @property
    def login_token(self) -> str | None:
        return self._login_token

    @property
    def auth_token(self) -> str | None:
        return self._auth_token

    def set_login_token(self, login_token: str | None) -> None:
        """Store the pre-authentication token used by login and registration.

        Passing None clears the slot.
        """
        self._login_token = login_token

    def set_auth_token(self, auth_token: str | None) -> None:
        """Store the session token used by every post-login call.

        Passing None clears the slot.
        """
        self._auth_token = auth_token

    def _require_login_token(self) -> str:
        if self._login_token is None:
            raise MissingTokenError("login")
        return self._login_token

    def _require_auth_token(self) -> str:
        if self._auth_token is None:
            raise MissingTokenError("auth")
        return self._auth_token

    def _default_headers(self) -> dict[str, str]:
        return {
            "accept-encoding": "gzip",
            "accept-charset": "UTF-8",
            "accept-language": LANGUAGE,
            "content-type": JSON_CONTENT_TYPE,
            "mcd-clientid": self.client_id,
            "mcd-uuid": str(uuid.uuid4()),
            "user-agent": USER_AGENT,
            "mcd-sourceapp": SOURCE_APP,
            "mcd-marketid": MARKET_ID,
        }

    def _build_request(
        self,
        method: str,
        resource: str,
        *,
        token: str | None = None,
        headers: dict[str, str] | None = None,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
    ) -> httpx.Request:
        """Build a request carrying the mobile app's fixed header set.

        Args:
            method: HTTP method.
            resource: Path relative to the base URL, without a leading slash.
            token: Bearer token to send, if the endpoint is gated.
            headers: Extra headers; these replace defaults with the same name.
            params: Ordered query parameters.
            json: JSON body.

        Returns:
            Request ready to be sent through the shared transport.
        """
        request_headers = self._default_headers()
        if headers:
            request_headers.update(headers)
        if token is not None:
            request_headers["authorization"] = f"Bearer {token}"

        return self._http.build_request(
            method,
            f"{self.base_url}/{resource}",
            headers=request_headers,
            params=params,
            json=json,
        )

    async def _send(
        self,
        request: httpx.Request,
        response_type: type[T],
    ) -> ClientResponse[T]:
        """Send a request and validate the response body.

        Args:
            request: Request built by :meth:`_build_request`.
            response_type: Model the body is expected to match.

        Returns:
            Response envelope with the validated body.

        Raises:
            TransportError: If the request could not be completed.
            DeserializationError: If the body is not JSON or does not match
                response_type.
        """
        start_time = time.time()
        path = request.url.path
        logger.debug(
            "Making API request",
            method=request.method,
            path=path,
            params=str(request.url.params),
        )

        try:
            response = await self._http.send(request)
        except httpx.HTTPError as exc:
            duration = time.time() - start_time
            logger.exception(
                "API request failed",
                method=request.method,
                path=path,
                duration_seconds=round(duration, 3),
            )
            msg = f"{request.method} {path} failed: {exc}"
            raise TransportError(msg, exc) from exc

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=request.method,
            path=path,
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        try:
            body = response_type.model_validate_json(response.content)
        except pydantic.ValidationError as exc:
            logger.warning(
                "Failed to deserialize API response",
                path=path,
                status_code=response.status_code,
                expected=response_type.__name__,
                error_count=exc.error_count(),
            )
            msg = (
                f"{request.method} {path} returned a body that does not match "
                f"{response_type.__name__} (HTTP {response.status_code})"
            )
            raise DeserializationError(msg, response.status_code, response.content) from exc

        return ClientResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=body,
        )

    # -----------------------------------------------------------------------
    # Authentication
    # -----------------------------------------------------------------------

    async def security_auth_token(self, client_secret: str) -> ClientResponse[TokenResponse]:
        """Exchange the app's client credentials for a login token.

        Args:
            client_secret: Client secret paired with the client id.

        Returns:
            Response whose body carries the token to pass to set_login_token.
        """
        request = self._build_request(
            "POST",
            "v1/security/auth/token",
            headers={
                "content-type": FORM_CONTENT_TYPE,
                "authorization": _basic_auth(self.client_id, client_secret),
                "mcd-clientsecret": client_secret,
            },
            params=[("grantType", "client_credentials")],
        )
        return await self._send(request, TokenResponse)

    async def customer_login(
        self,
        login_username: str,
        login_password: str,
        sensor_data: str,
    ) -> ClientResponse[LoginResponse]:
        """Log a customer in with email and password.

        A fresh device id is generated for every call.

        Args:
            login_username: Customer email address.
            login_password: Customer password.
            sensor_data: Opaque anti-bot payload from the app's SDK.

        Raises:
            MissingTokenError: If no login token is set.
        """
        token = self._require_login_token()
        body = LoginRequest(
            credentials=Credentials(
                login_username=login_username,
                password=login_password,
                type="email",
            ),
            device_id=generate_device_id(),
        )
        request = self._build_request(
            "POST",
            "exp/v1/customer/login",
            token=token,
            headers={"x-acf-sensor-data": sensor_data},
            json=to_wire(body),
        )
        return await self._send(request, LoginResponse)

    async def customer_login_refresh(
        self,
        refresh_token: str,
    ) -> ClientResponse[LoginRefreshResponse]:
        """Trade a refresh token for a new pair of session tokens."""
        token = self._require_auth_token()
        body = LoginRefreshRequest(refresh_token=refresh_token)
        request = self._build_request(
            "POST",
            "exp/v1/customer/login/refresh",
            token=token,
            json=to_wire(body),
        )
        return await self._send(request, LoginRefreshResponse)

    async def customer_registration(
        self,
        registration: RegistrationRequest,
        sensor_data: str,
    ) -> ClientResponse[RegistrationResponse]:
        """Register a new customer account.

        Raises:
            MissingTokenError: If no login token is set.
        """
        token = self._require_login_token()
        request = self._build_request(
            "POST",
            "exp/v1/customer/registration",
            token=token,
            headers={"x-acf-sensor-data": sensor_data},
            json=to_wire(registration),
        )
        return await self._send(request, RegistrationResponse)

    async def customer_activation(
        self,
        activation: ActivationRequest,
        sensor_data: str,
    ) -> ClientResponse[ActivationResponse]:
        """Activate a registered account and sign it in.

        Raises:
            MissingTokenError: If no login token is set.
        """
        token = self._require_login_token()
        request = self._build_request(
            "PUT",
            "exp/v1/customer/activateandsignin",
            token=token,
            headers={"x-acf-sensor-data": sensor_data},
            json=to_wire(activation),
        )
        return await self._send(request, ActivationResponse)

    # -----------------------------------------------------------------------
    # Offers
    # -----------------------------------------------------------------------

    async def get_offers(
        self,
        distance: int,
        latitude: float,
        longitude: float,
        opt_outs: str,
        timezone_offset_in_minutes: int,
    ) -> ClientResponse[OfferResponse]:
        """List offers available to the customer near a location.

        Args:
            distance: Search radius.
            latitude: Customer latitude.
            longitude: Customer longitude.
            opt_outs: Offer categories to leave out; usually empty.
            timezone_offset_in_minutes: Customer UTC offset (e.g., 480).

        Returns:
            Response whose ``body.response`` is None when no offers apply.
        """
        token = self._require_auth_token()
        params = [
            ("distance", str(distance)),
            ("latitude", str(latitude)),
            ("longitude", str(longitude)),
            ("optOuts", str(opt_outs)),
            ("timezoneOffsetInMinutes", str(timezone_offset_in_minutes)),
        ]
        request = self._build_request("GET", "exp/v1/offers", token=token, params=params)
        return await self._send(request, OfferResponse)

    async def offer_details(self, offer_id: int | str) -> ClientResponse[OfferDetailsResponse]:
        """Fetch the full description of an offer proposition."""
        token = self._require_auth_token()
        request = self._build_request(
            "GET",
            f"exp/v1/offers/details/{offer_id}",
            token=token,
        )
        return await self._send(request, OfferDetailsResponse)

    async def get_offers_dealstack(
        self,
        offset: int,
        store_id: int | str,
    ) -> ClientResponse[OfferDealStackResponse]:
        """Fetch the offers currently applied at a store."""
        token = self._require_auth_token()
        params = [("offset", str(offset)), ("storeId", str(store_id))]
        request = self._build_request(
            "GET",
            "exp/v1/offers/dealstack",
            token=token,
            params=params,
        )
        return await self._send(request, OfferDealStackResponse)

    async def add_to_offers_dealstack(
        self,
        offer_id: int | str,
        offset: int,
        store_id: int | str,
    ) -> ClientResponse[OfferDealStackResponse]:
        """Apply an offer to the deal stack at a store."""
        token = self._require_auth_token()
        params = [("offset", str(offset)), ("storeId", str(store_id))]
        request = self._build_request(
            "POST",
            f"exp/v1/offers/dealstack/{offer_id}",
            token=token,
            params=params,
        )
        return await self._send(request, OfferDealStackResponse)

    async def remove_from_offers_dealstack(
        self,
        offer_id: int | str,
        offer_proposition_id: int | str,
        offset: int | str,
        store_id: int | str,
    ) -> ClientResponse[OfferDealStackResponse]:
        """Remove an offer from the deal stack at a store.

        The body duplicates the query string. The server accepts the request
        without it, but the mobile app always sends it.

        Raises:
            InvalidParameterError: If offer_id or offset is not an integer.
            MissingTokenError: If no auth token is set.
        """
        body = DealStackRemovalRequest(
            store_id=str(store_id),
            offer_id=_to_int("offer_id", offer_id),
            offset=_to_int("offset", offset),
        )
        token = self._require_auth_token()
        params = [
            ("offerId", str(offer_id)),
            ("offset", str(offset)),
            ("storeId", str(store_id)),
        ]
        request = self._build_request(
            "DELETE",
            f"exp/v1/offers/dealstack/offer/{offer_proposition_id}",
            token=token,
            params=params,
            json=to_wire(body),
        )
        return await self._send(request, OfferDealStackResponse)

    # -----------------------------------------------------------------------
    # Restaurants
    # -----------------------------------------------------------------------

    async def restaurant_location(
        self,
        distance: int,
        latitude: float,
        longitude: float,
        filter: str,  # noqa: A002
    ) -> ClientResponse[RestaurantLocationResponse]:
        """Search for restaurants near a location.

        Args:
            distance: Search radius.
            latitude: Search centre latitude.
            longitude: Search centre longitude.
            filter: Detail level of each result (e.g., "summary").
        """
        token = self._require_auth_token()
        params = [
            ("distance", str(distance)),
            ("latitude", str(latitude)),
            ("longitude", str(longitude)),
            ("filter", str(filter)),
        ]
        request = self._build_request(
            "GET",
            "exp/v1/restaurant/location",
            token=token,
            params=params,
        )
        return await self._send(request, RestaurantLocationResponse)

    async def restaurant_information(
        self,
        store_id: int | str,
    ) -> ClientResponse[RestaurantResponse]:
        """Fetch the full record of a restaurant by national store number."""
        token = self._require_auth_token()
        params = [("filter", "full"), ("storeUniqueIdType", "NatlStrNumber")]
        request = self._build_request(
            "GET",
            f"exp/v1/restaurant/{store_id}",
            token=token,
            params=params,
        )
        return await self._send(request, RestaurantResponse)

    # -----------------------------------------------------------------------
    # Loyalty
    # -----------------------------------------------------------------------

    async def get_customer_points(self) -> ClientResponse[CustomerPointResponse]:
        """Fetch the customer's loyalty point balances."""
        token = self._require_auth_token()
        request = self._build_request("GET", "exp/v1/loyalty/customer/points", token=token)
        return await self._send(request, CustomerPointResponse)
