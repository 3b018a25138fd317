"""
Disaster Reporter - Constants
Report vocabulary, placeholder values, endpoint paths and screen text.
"""

from enum import Enum


class DisasterCategory(str, Enum):
    """Disaster types offered by the report form."""
    TYPHOON = "Typhoon"
    FIRE = "Fire"
    FLOOD = "Flood"
    OTHERS = "Others"


# Picker options as (label, value); the empty value is the unselected prompt
CATEGORY_OPTIONS = [
    ("Select a disaster type", ""),
    ("Typhoon", DisasterCategory.TYPHOON.value),
    ("Fire", DisasterCategory.FIRE.value),
    ("Flood", DisasterCategory.FLOOD.value),
    ("Others", DisasterCategory.OTHERS.value),
]

# =============================================================================
# REPORT DEFAULTS
# =============================================================================

NO_LOCATION = "No location provided"
NO_CATEGORY = "Unspecified"
NO_DESCRIPTION = "No description provided"

STATUS_UNVERIFIED = "unverified"
PRIORITY_NONE = "no priority"
NO_RESCUER = "no rescuer yet"

DEFAULT_FIRST_NAME = "Unknown"
DEFAULT_LAST_NAME = "User"

# =============================================================================
# BACKEND
# =============================================================================

CITIZENS_PATH = "/api/auth/citizens"
REPORTS_PATH = "/api/reports"
IMAGE_FIELD = "disasterImages"

# =============================================================================
# SCREEN TEXT
# =============================================================================

NOTIFICATION_TITLE = "Notification Dito"
MAP_ROUTE = "Map"

ERROR_TITLE = "Error"
SUCCESS_TITLE = "Success"
SUCCESS_MESSAGE = "Report submitted successfully!"
GENERIC_ERROR_MESSAGE = "An error occurred while submitting the report."
NO_LOCAL_USER_MESSAGE = "No logged-in user found!"
CITIZEN_NOT_FOUND_MESSAGE = "Citizen data not found!"

IMAGE_SOURCE_TITLE = "Select Image Source"
IMAGE_SOURCE_MESSAGE = "Choose an option to upload an image"
PERMISSION_TITLE = "Permission Required"

DESCRIPTION_PLACEHOLDER = "Enter a description..."
SUBMIT_LABEL = "Submit"

# Dark theme shared by both screens
THEME = {
    "background": "#071025",
    "text": "#fff",
    "input_background": "#1E2A3A",
    "readonly_background": "#2A3B4C",
    "placeholder": "#CEC6C6",
    "icon": "#D9D9D9",
    "submit": "#D2042D",
    "submit_busy": "#888",
}
