"""
Disaster Reporter - Core Utilities
Central configuration, logging, constants and error types.
"""

from src.core.config import settings, get_settings
from src.core.constants import DisasterCategory, CATEGORY_OPTIONS
from src.core.exceptions import (
    ReportSubmissionError,
    MissingLocalUserError,
    CitizenNotFoundError,
    CitizenLookupError,
    BackendTransportError,
    ReportRejectedError,
    AttachmentError,
)

__all__ = [
    "settings",
    "get_settings",
    "DisasterCategory",
    "CATEGORY_OPTIONS",
    "ReportSubmissionError",
    "MissingLocalUserError",
    "CitizenNotFoundError",
    "CitizenLookupError",
    "BackendTransportError",
    "ReportRejectedError",
    "AttachmentError",
]
