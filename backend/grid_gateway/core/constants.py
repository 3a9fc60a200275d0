"""
Centralized constants for the grid schema and adapter defaults.

Change defaults here instead of scattering literals across adapters.
"""

# Canonical response schema version tag
GRID_SCHEMA_VERSION = "1.0"

# Day statuses on the wire
STATUS_AVAILABLE = "available"
STATUS_BOOKED = "booked"
STATUS_UNAVAILABLE = "unavailable"
STATUS_PENDING = "pending"
DAY_STATUSES = (STATUS_AVAILABLE, STATUS_BOOKED, STATUS_UNAVAILABLE, STATUS_PENDING)

# Provider booking status that marks a day booked (case-insensitive)
DEFAULT_BOOKED_STATUS_TOKEN = "confirmed"

# Universal adapter defaults when the tenant does not configure paths
DEFAULT_UNITS_PATH = "units"
DEFAULT_BOOKINGS_PATH = "bookings"
DEFAULT_WIX_FUNCTION = "calendar_data"

# Name fallbacks for records without a usable name
UNNAMED_ITEM = "Unnamed"
UNNAMED_BUNDLE = "Unnamed Bundle"

# Booqable API v4: page sizes for the single bounded fetch (no pagination beyond this)
BOOQABLE_BUNDLES_PAGE_SIZE = 100
BOOQABLE_PLANNINGS_PAGE_SIZE = 1000

# Upstream error bodies are truncated to this many characters when not JSON
UPSTREAM_TEXT_LIMIT = 2000
