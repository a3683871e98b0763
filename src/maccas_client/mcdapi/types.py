"""Response types for the vendor mobile API.

Pydantic models mirroring the JSON returned by the mobile backend. Field
names are snake_case in Python and camelCase on the wire; the handful of
fields the vendor spells differently carry an explicit alias. Fields the
vendor returns but that are not modelled are typed ``Any`` and passed
through untouched.

Every endpoint wraps its payload in the same envelope::

    {"status": {"code": ..., "type": ..., "message": ...}, "response": ...}

``response`` is frequently ``null`` even on success, so most envelopes
declare it optional. The client never interprets ``status``; callers do.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VendorModel(BaseModel):
    """Base model for vendor JSON with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Status(VendorModel):
    """Vendor status block present on every response."""

    code: int | str
    type: str | None = None
    correlation_id: str | None = Field(None, alias="correlationID")
    message: str | None = None


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


class Token(VendorModel):
    """Pre-authentication token returned by the token exchange."""

    token: str
    expires: int


class TokenResponse(VendorModel):
    status: Status
    response: Token


class AccessTokenResponse(VendorModel):
    """Session tokens issued by login, refresh, registration and activation."""

    access_token: str = Field(repr=False)
    refresh_token: str = Field(repr=False)


class LoginResponse(VendorModel):
    status: Status
    response: AccessTokenResponse


class LoginRefreshResponse(VendorModel):
    status: Status
    response: AccessTokenResponse | None = None


class RegistrationResponse(VendorModel):
    status: Status
    response: AccessTokenResponse | None = None


class ActivationResponse(VendorModel):
    status: Status
    response: AccessTokenResponse | None = None


# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------


class PunchInfo(VendorModel):
    total_punch: int
    current_punch: int


class RecurringInfo(VendorModel):
    """Redemption counters; the vendor omits whichever do not apply."""

    total_redemption_quantity: int | None = None
    current_day_redemption_quantity: int | None = None
    current_week_redemption_quantity: int | None = None
    current_month_redemption_quantity: int | None = None
    max_redemption_quantity: int | None = None
    max_redemption_quantity_per_day: int | None = None
    max_redemption_quantity_per_week: int | None = None
    max_redemption_quantity_per_month: int | None = None


class SaleAmountCondition(VendorModel):
    include_eligible: bool
    minimum: int
    pre_tax_validation: bool
    include_non_product: bool
    exclude_codes: str | None = None
    include_gift_coupons: bool


class Conditions(VendorModel):
    day_of_week_conditions: list[str]
    date_conditions: list[Any]
    sale_amount_conditions: list[SaleAmountCondition]


class Offer(VendorModel):
    """Offer as listed for the customer.

    ``offer_id`` identifies the customer's instance of the offer while
    ``offer_proposition_id`` identifies the offer template.
    """

    offer_id: int
    offer_proposition_id: int
    offer_type: int

    # Validity window
    local_valid_from: str
    local_valid_to: str
    valid_from_utc: str = Field(alias="validFromUTC")
    valid_to_utc: str = Field(alias="validToUTC")

    # Presentation
    name: str
    short_description: str
    long_description: str
    image_base_name: str
    image_base_language: str | None = None

    # Redemption state
    redemption_mode: int
    is_archived: bool
    is_slp_offer: bool = Field(alias="isSLPOffer")
    is_locked: bool
    is_redeemed: bool
    offer_bucket: str
    punch_info: PunchInfo
    recurring_info: RecurringInfo | None = None
    conditions: Conditions

    color_coding_info: int
    isvalid_total_order: bool
    creation_date_utc: str = Field(alias="CreationDateUtc")
    extend_to_eod: bool = Field(alias="extendToEOD")
    is_dynamic_expiration: bool
    daypart_filters: list[Any]


class OfferList(VendorModel):
    offers: list[Offer]


class OfferResponse(VendorModel):
    status: Status
    response: OfferList | None = None


class Action(VendorModel):
    type: int
    discount_type: int
    value: float


class ProductSet(VendorModel):
    alias: str
    quantity: int
    min_quantity: int | None = None
    products: list[str]
    action: Action
    swap_mapping: list[Any]


class FrequencyOfferInfo(VendorModel):
    total_punch: int


class OfferDetails(VendorModel):
    """Full description of a single offer template."""

    order_discount_type: int
    offer_proposition_id: int
    offer_type: int
    offer_bucket: str
    is_locked: bool
    isvalid_total_order: bool
    is_slp_offer: bool = Field(alias="isSLPOffer")
    color_coding_info: int

    local_valid_from: str
    local_valid_to: str
    valid_from_utc: str = Field(alias="validFromUTC")
    valid_to_utc: str = Field(alias="validToUTC")

    name: str
    short_description: str
    long_description: str
    image_base_name: str
    image_base_language: str

    redemption_mode: int
    is_expired: bool
    product_sets: list[ProductSet]
    restaurants: list[Any]
    frequency_offer_info: FrequencyOfferInfo
    recurring_info: RecurringInfo
    conditions: Conditions
    is_dynamic_expiration: bool
    exclusive_tod: bool = Field(alias="exclusiveTOD")
    daypart_filters: list[Any]


class OfferDetailsResponse(VendorModel):
    status: Status
    response: OfferDetails | None = None


# ---------------------------------------------------------------------------
# Deal stack
# ---------------------------------------------------------------------------


class DealStack(VendorModel):
    offer_id: int
    offer_proposition_id: str
    state: str | None = None


class OfferDealStack(VendorModel):
    """Offers applied to the customer's current redemption session."""

    random_code: str
    bar_code_content: str
    expiration_time: str
    deal_stack: list[DealStack] | None = None


class OfferDealStackResponse(VendorModel):
    status: Status
    response: OfferDealStack | None = None


# ---------------------------------------------------------------------------
# Restaurants
# ---------------------------------------------------------------------------


class Address(VendorModel):
    address_line1: str
    city_town: str
    country: str
    postal_zip: str | None = None


class McDeliveries(VendorModel):
    mc_delivery: list[Any]


class Location(VendorModel):
    latitude: float
    longitude: float


class Service(VendorModel):
    end_time: str
    is_open: bool
    service_name: str
    start_time: str


class WeekOpeningHour(VendorModel):
    services: list[Service]
    day_of_week_id: int


class Restaurant(VendorModel):
    """Summary of a restaurant as returned by the location search."""

    restaurant_status: str
    facilities: list[str]
    address: Address
    mc_deliveries: McDeliveries
    location: Location
    name: str
    national_store_number: int
    status: int
    time_zone: str
    week_opening_hours: list[WeekOpeningHour]
    phone_number: str | None = None


class RestaurantLocationList(VendorModel):
    restaurants: list[Restaurant]


class RestaurantLocationResponse(VendorModel):
    status: Status
    response: RestaurantLocationList | None = None


class Technology(VendorModel):
    key: str


class DigitalService(VendorModel):
    key: str
    technologies: list[Technology]


class PointsOfDistribution(VendorModel):
    digital_services: list[DigitalService]
    location_id: int = Field(alias="locationID")
    pod: int


class TableService(VendorModel):
    enable_pos_table_service: bool = Field(alias="enablePOSTableService")
    enable_table_service_eatin: str
    enable_table_service_takeout: str
    minimum_purchase_amount: float
    table_service_enable_map: bool
    table_service_locator_enabled: bool
    table_service_locator_max_number_value: int
    table_service_locator_min_number_value: int
    digital_table_service_mode: str
    table_service_table_number_min_number_value: int
    table_service_table_number_max_number_value: int


class Catalog(VendorModel):
    points_of_distribution: list[PointsOfDistribution]
    table_service: TableService
    outage_product_codes: list[str]


class AutoBagSaleInformation(VendorModel):
    bag_choice_product_code: int
    bag_dummy_product_code: int
    bag_product_code: int
    enabled: bool
    no_bag_product_code: int


class StoreMenuTypeCalendar(VendorModel):
    end_time: str
    menu_type_id: int = Field(alias="menuTypeID")
    start_time: str
    week_day: int


class Order(VendorModel):
    auto_bag_sale_information: AutoBagSaleInformation
    expected_delivery_time: str
    store_menu_type_calendar: list[StoreMenuTypeCalendar]
    minimum_order_value: float
    large_order_allowed: bool
    linked_payment_information: bool
    loyalty_enabled: bool
    maximum_time_minutes: int | None = None
    minimum_time_minutes: int | None = None
    daypart_transition_offset: int
    ready_on_arrival_information: bool
    order_ahead_lane: bool


class Area(VendorModel):
    area_type: str
    capacity: str


class Contact(VendorModel):
    title: str
    name: str


class RestaurantNutrition(VendorModel):
    energy_unit: str
    customer_self_pour: bool
    recalculate_energy_on_grill: bool


class OfferBucket(VendorModel):
    offer_bucket: str
    limit: int


class OfferConfiguration(VendorModel):
    enable_multiple_offers: bool
    offer_buckets: list[OfferBucket]


class StoreType(VendorModel):
    """Store classification; an empty object in every observed response."""


class ServicePayment(VendorModel):
    service_id: int = Field(alias="serviceID")
    sale_type_eat_in: bool
    sale_type_other: bool
    sale_type_take_out: bool
    payment_methods: list[int]


class GeneralStatus(VendorModel):
    start_date: str
    status: int


class AvailableMenuProducts(VendorModel):
    """Product codes available per menu type, keyed by menu type id."""

    menu_type_1: list[int] = Field(alias="1")
    menu_type_2: list[int] = Field(alias="2")
    menu_type_3: list[int] = Field(alias="3")


class FullRestaurantInformation(VendorModel):
    """Complete restaurant record returned by the restaurant lookup."""

    address: Address
    catalog: Catalog
    facilities: list[str]
    national_store_number: int
    name: str
    status: int
    restaurant_status: str
    location: Location
    order: Order
    phone_number: str | None = None
    time_zone: str
    url: str | None = None
    week_opening_hours: list[WeekOpeningHour]

    # Only present on some markets and store types
    accept_offer: bool | None = None
    areas: list[Area] | None = None
    contacts: list[Contact] | None = None
    country_code: str | None = None
    distance: int | None = None
    gbl_number: str | None = None
    id: str | None = None
    is_valid: bool | None = None
    market_code: str | None = None
    now_in_store_local_time_date: str | None = None
    nutrition: RestaurantNutrition | None = None
    offer_configuration: OfferConfiguration | None = None
    special_dayservice: list[Any] | None = None
    status_id: int | None = Field(None, alias="statusID")
    tin_threshold_amout: int | None = None
    store_type: StoreType | None = None
    tod_cutoff_time: str | None = None
    day_part: int | None = None
    np_version: str | None = None
    store_cutoff_time: str | None = None
    legal_name: str | None = None
    service_payments: list[ServicePayment] | None = None
    general_status: GeneralStatus | None = None
    available_menu_products: AvailableMenuProducts | None = None


class InnerRestaurantResponse(VendorModel):
    restaurant: FullRestaurantInformation


class RestaurantResponse(VendorModel):
    status: Status
    response: InnerRestaurantResponse | None = None


# ---------------------------------------------------------------------------
# Loyalty
# ---------------------------------------------------------------------------


class PointInformationResponse(VendorModel):
    total_points: int
    life_time_points: int


class CustomerPointResponse(VendorModel):
    status: Status
    response: PointInformationResponse
