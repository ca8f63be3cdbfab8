"""Default configuration constants for the Occupancy Planner."""

# Occupancy statuses
STATUS_RESIDENCE = "residence"
STATUS_RENT = "rent"
STATUS_BOTH = "both"
STATUS_SELF_USE = "self-use"

OCCUPANCY_STATUSES = [STATUS_RESIDENCE, STATUS_RENT, STATUS_BOTH, STATUS_SELF_USE]

# Section categories
CATEGORY_RESIDENTIAL = "residential"
CATEGORY_COMMERCIAL = "commercial"

# Statuses applicable to each section category, in display order
CATEGORY_STATUSES = {
    CATEGORY_RESIDENTIAL: [STATUS_RESIDENCE, STATUS_RENT, STATUS_BOTH],
    CATEGORY_COMMERCIAL: [STATUS_SELF_USE, STATUS_RENT, STATUS_BOTH],
}

DEFAULT_INITIAL_STATUS = {
    CATEGORY_RESIDENTIAL: STATUS_RESIDENCE,
    CATEGORY_COMMERCIAL: STATUS_SELF_USE,
}

CATEGORY_LABELS = {
    CATEGORY_RESIDENTIAL: "Residential",
    CATEGORY_COMMERCIAL: "Commercial",
}

# Radio labels per category
STATUS_LABELS = {
    CATEGORY_RESIDENTIAL: {
        STATUS_RESIDENCE: "Owner-occupied",
        STATUS_RENT: "Rented out",
        STATUS_BOTH: "Owner-occupied + Rented",
    },
    CATEGORY_COMMERCIAL: {
        STATUS_SELF_USE: "Self-use",
        STATUS_RENT: "Rented out",
        STATUS_BOTH: "Self-use + Rented",
    },
}

# Lease row usage labels
USAGE_OCCUPIED = "Occupied"
USAGE_RENTED = "Rented"
USAGE_VACANT = "Vacant"
USAGE_DIRECT_USE = "Direct Use"

# Usage select options per category
USAGE_OPTIONS = {
    CATEGORY_RESIDENTIAL: [USAGE_OCCUPIED, USAGE_RENTED, USAGE_VACANT],
    CATEGORY_COMMERCIAL: [USAGE_DIRECT_USE, USAGE_RENTED, USAGE_VACANT],
}

# Business registration (commercial rows only)
BUSINESS_REGISTRATION_OPTIONS = ["", "Registered", "Not registered"]

# Count defaults (stored as digit strings)
DEFAULT_TOTAL_COUNT = "1"
DEFAULT_TENANT_COUNT = "0"
MIN_TOTAL_COUNT = 1

# Property types and the sections each one contains
PROPERTY_TYPES = {
    "Apartment": [CATEGORY_RESIDENTIAL],
    "Detached House": [CATEGORY_RESIDENTIAL],
    "Retail Store": [CATEGORY_COMMERCIAL],
    "Mixed-Use Building": [CATEGORY_RESIDENTIAL, CATEGORY_COMMERCIAL],
}
DEFAULT_PROPERTY_TYPE = "Apartment"

# Logging
LOG_LEVEL = "INFO"
LOG_LEVEL_ENV_VAR = "OCCUPANCY_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
