"""
Backend API Client for Disaster Reporter

Async client for the disaster-response backend: citizen lookup and
report ingestion.

Endpoints:
- GET  /api/auth/citizens  - all citizen accounts
- POST /api/reports        - multipart report with image attachments
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from src.core.config import settings
from src.core.constants import CITIZENS_PATH, REPORTS_PATH
from src.core.exceptions import (
    BackendTransportError,
    CitizenLookupError,
    ReportRejectedError,
)
from .models import Citizen

logger = logging.getLogger(__name__)

# (field name, (filename, content, mime type))
FilePart = Tuple[str, Tuple[str, bytes, str]]


class BackendClient:
    """
    Client for the disaster-response backend.

    Usage:
        async with BackendClient("https://api.example.org") as client:
            citizen = await client.find_citizen("jdoe")
            await client.submit_report(fields, files)

    No timeout is set unless one is given; httpx's default applies.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize backend client.

        Args:
            base_url: Backend root URL, defaults to settings.server_url
            timeout: HTTP request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = (base_url or settings.server_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds

        client_kwargs: Dict[str, Any] = {"base_url": self.base_url}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _parse_citizens(self, payload: Any) -> List[Citizen]:
        """Decode the citizen collection, skipping malformed records."""
        if not isinstance(payload, list):
            raise BackendTransportError(
                f"Expected a list of citizens, got {type(payload).__name__}"
            )

        citizens = []
        for record in payload:
            try:
                citizens.append(Citizen.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Failed to parse citizen record: {e.error_count()} errors")
                continue

        return citizens

    async def get_citizens(self) -> List[Citizen]:
        """
        Fetch every citizen account.

        Returns:
            List of Citizen records

        Raises:
            BackendTransportError: network failure or undecodable body
            CitizenLookupError: non-success status
        """
        logger.info(f"Fetching citizens from {self.base_url}{CITIZENS_PATH}")
        try:
            response = await self._client.get(CITIZENS_PATH)
        except httpx.HTTPError as e:
            raise BackendTransportError(f"Citizen lookup failed: {e}") from e

        if not response.is_success:
            raise CitizenLookupError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise BackendTransportError(f"Citizen list is not valid JSON: {e}") from e

        citizens = self._parse_citizens(payload)
        logger.info(f"Retrieved {len(citizens)} citizens")

        return citizens

    async def find_citizen(self, username: str) -> Optional[Citizen]:
        """Return the first citizen whose username matches, or None."""
        citizens = await self.get_citizens()
        return next((c for c in citizens if c.username == username), None)

    async def submit_report(
        self,
        fields: Dict[str, str],
        files: Optional[List[FilePart]] = None,
    ) -> httpx.Response:
        """
        Post a report as multipart form data.

        Text fields go out as parts without a filename, so the body is
        multipart even when there are no images.

        Args:
            fields: Text fields of the report
            files: Image parts, repeated under the same field name

        Returns:
            The successful response

        Raises:
            BackendTransportError: network failure
            ReportRejectedError: non-success status
        """
        files = files or []
        logger.info(f"Submitting report with {len(files)} attachment(s)")

        parts = [(name, (None, value)) for name, value in fields.items()] + files
        try:
            response = await self._client.post(REPORTS_PATH, files=parts)
        except httpx.HTTPError as e:
            raise BackendTransportError(f"Report upload failed: {e}") from e

        if not response.is_success:
            raise ReportRejectedError(response.status_code, response.text[:200] or None)

        logger.info(f"Report accepted with status {response.status_code}")
        return response
