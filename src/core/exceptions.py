"""
Disaster Reporter - Exceptions
Failures of the report submission workflow.
"""

from typing import Optional

from src.core.constants import (
    GENERIC_ERROR_MESSAGE,
    NO_LOCAL_USER_MESSAGE,
    CITIZEN_NOT_FOUND_MESSAGE,
)


class ReportSubmissionError(Exception):
    """Base class for every failure that aborts a report submission."""

    user_message = GENERIC_ERROR_MESSAGE


class MissingLocalUserError(ReportSubmissionError):
    """No logged-in user (or no username) in local storage."""

    user_message = NO_LOCAL_USER_MESSAGE


class CitizenNotFoundError(ReportSubmissionError):
    """The backend has no citizen record for the logged-in username."""

    user_message = CITIZEN_NOT_FOUND_MESSAGE

    def __init__(self, username: str):
        super().__init__(f"No citizen record for username {username!r}")
        self.username = username


class BackendTransportError(ReportSubmissionError):
    """Network failure, or a response body that could not be decoded."""


class CitizenLookupError(ReportSubmissionError):
    """The citizen list endpoint answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(f"Citizen lookup failed with status {status_code}")
        self.status_code = status_code


class ReportRejectedError(ReportSubmissionError):
    """The reports endpoint answered with a non-success status."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        message = f"Backend rejected request with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.status_code = status_code


class AttachmentError(ReportSubmissionError):
    """A local image could not be read for upload."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"Cannot read attachment {uri}: {reason}")
        self.uri = uri
