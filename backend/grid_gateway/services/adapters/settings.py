"""
Validated per-tenant adapter settings.

Tenants store a free-form settings mapping; adapters read it through AdapterSettings so
every known key is named and typed. Unknown keys are kept in `extras` (provider-specific
passthrough, e.g. query parameters for a custom endpoint).
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from grid_gateway.config import settings as app_settings
from grid_gateway.core.constants import (
    DEFAULT_BOOKED_STATUS_TOKEN,
    DEFAULT_BOOKINGS_PATH,
    DEFAULT_UNITS_PATH,
    DEFAULT_WIX_FUNCTION,
)
from grid_gateway.core.errors import MappingError


class AdapterSettings(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    # Connection
    source: str | None = None
    api_key: str | None = Field(None, alias="apiKey")
    base_url: str | None = Field(None, alias="baseUrl")
    availability_endpoint: str | None = Field(None, alias="availabilityEndpoint")
    wix_fn: str = DEFAULT_WIX_FUNCTION

    # Where units/bookings live in the payload; `units`/`bookings` are legacy names
    units_path: str | None = None
    units: str | None = None
    bookings_path: str | None = None
    bookings: str | None = None

    # Explicit dot-paths on a unit record
    unit_id: str | None = None
    unit_name: str | None = None
    unit_image: str | None = None
    unit_url: str | None = None
    unit_price: str | None = None

    # Explicit dot-paths on a booking record
    booking_unit_id: str | None = Field(None, alias="booking_unitId")
    booking_start: str | None = None
    booking_end: str | None = None
    booking_status: str | None = None
    status_booked: str = DEFAULT_BOOKED_STATUS_TOKEN

    # GridResponse.metadata
    currency: str | None = None
    timezone: str | None = None

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})

    def resolved_units_path(self) -> str:
        return self.units_path or self.units or DEFAULT_UNITS_PATH

    def resolved_bookings_path(self) -> str:
        return self.bookings_path or self.bookings or DEFAULT_BOOKINGS_PATH

    def response_metadata(self) -> dict[str, str] | None:
        """{currency, timezone} from tenant settings, else process defaults; None when neither is set."""
        meta: dict[str, str] = {}
        currency = self.currency or app_settings.default_currency
        tz = self.timezone or app_settings.default_timezone
        if currency:
            meta["currency"] = currency
        if tz:
            meta["timezone"] = tz
        return meta or None


def parse_adapter_settings(raw: dict[str, Any] | None) -> AdapterSettings:
    """Validate a tenant settings mapping. A wrong-shaped value is a MappingError, not a 500."""
    try:
        return AdapterSettings.model_validate(raw or {})
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MappingError(f"Invalid adapter settings ({fields}). Verify your mapping.") from e
