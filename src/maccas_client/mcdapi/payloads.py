"""Request bodies sent to the vendor mobile API.

Serialized with ``to_wire`` so field names match the mobile app's camelCase
JSON exactly.
"""

from typing import Any

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from .types import VendorModel


def to_wire(payload: VendorModel) -> dict[str, Any]:
    """Dump a request model to the JSON-compatible dict sent on the wire."""
    return payload.model_dump(mode="json", by_alias=True)


class Credentials(VendorModel):
    """Login credentials; ``password`` is left out of the JSON when unset."""

    login_username: str
    password: str | None = Field(None, repr=False)
    type: str = "email"

    @model_serializer(mode="wrap")
    def _omit_missing_password(
        self,
        handler: SerializerFunctionWrapHandler,
    ) -> dict[str, Any]:
        data = handler(self)
        if self.password is None:
            data.pop("password", None)
        return data


class LoginRequest(VendorModel):
    credentials: Credentials
    device_id: str


class LoginRefreshRequest(VendorModel):
    refresh_token: str = Field(repr=False)


class DealStackRemovalRequest(VendorModel):
    """Body the mobile app sends when removing an offer from the deal stack."""

    store_id: str
    offer_id: int
    offset: int


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class RegistrationAddress(VendorModel):
    country: str
    zip_code: str


class Audit(VendorModel):
    registration_channel: str


class Device(VendorModel):
    device_id: str
    device_id_type: str
    is_active: str
    os: str
    os_version: str
    timezone: str


class AcceptancePolicies(VendorModel):
    """Accepted policy flags keyed by the vendor's policy number."""

    policy_1: bool = Field(alias="1")
    policy_4: bool = Field(alias="4")


class Policies(VendorModel):
    acceptance_policies: AcceptancePolicies


class PreferenceDetails(VendorModel):
    legacy_id: str | None = None
    mobile_app: str | None = Field(None, alias="MobileApp")
    email: str | None = Field(None, alias="Email")
    enabled: str | None = None


class Preference(VendorModel):
    details: PreferenceDetails
    preference_id: int


class Subscription(VendorModel):
    opt_in_status: str
    subscription_id: str


class RegistrationRequest(VendorModel):
    """New customer account as submitted by the mobile app."""

    address: RegistrationAddress
    audit: Audit
    credentials: Credentials
    device: Device
    email_address: str
    first_name: str
    last_name: str
    opt_in_for_marketing: bool
    policies: Policies
    preferences: list[Preference]
    subscriptions: list[Subscription]


class ActivationRequest(VendorModel):
    """Activation code from the registration email plus the account login."""

    activation_code: str
    credentials: Credentials
