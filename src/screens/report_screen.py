"""
Report screen for Disaster Reporter
Collects a disaster report from the logged-in citizen and uploads it
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from src.backend.client import BackendClient
from src.core.constants import (
    CATEGORY_OPTIONS,
    DESCRIPTION_PLACEHOLDER,
    DisasterCategory,
    ERROR_TITLE,
    GENERIC_ERROR_MESSAGE,
    IMAGE_SOURCE_MESSAGE,
    IMAGE_SOURCE_TITLE,
    MAP_ROUTE,
    PERMISSION_TITLE,
    SUBMIT_LABEL,
    SUCCESS_MESSAGE,
    SUCCESS_TITLE,
    THEME,
)
from src.core.exceptions import CitizenNotFoundError, MissingLocalUserError
from src.media.image_picker import (
    IMAGE_SOURCE_OPTIONS,
    ImagePicker,
    ImageSource,
    PermissionDeniedError,
    acquire_image,
)
from src.reporting import form_state
from src.reporting.attachments import build_file_parts
from src.reporting.form_state import FormState
from src.reporting.report import Report, build_report
from src.storage.local_store import LocalStore, load_logged_in_user
from .base import Alerter, Navigator

logger = logging.getLogger(__name__)


class SubmissionOutcome(str, Enum):
    """How a press of the submit button ended."""
    SUBMITTED = "submitted"
    FAILED = "failed"
    IGNORED = "ignored"


@dataclass
class SubmissionResult:
    """Result of one submission attempt."""
    outcome: SubmissionOutcome
    report: Optional[Report] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.outcome == SubmissionOutcome.SUBMITTED


class ReportScreen:
    """
    Disaster report form.

    Holds the form state, runs the image capture subflow and performs the
    submission workflow:

    1. read the logged-in username from local storage
    2. look up the matching citizen on the backend
    3. build the report, substituting placeholders for empty fields
    4. upload it with its images as multipart form data
    5. clear the form and go back, or keep it and show an error

    A submission started while another is in flight is ignored.
    """

    def __init__(
        self,
        backend: BackendClient,
        store: LocalStore,
        picker: ImagePicker,
        alerter: Alerter,
        navigator: Navigator,
        route_params: Optional[Dict[str, Any]] = None,
        user_key: Optional[str] = None,
    ):
        """
        Initialize report screen.

        Args:
            backend: Backend API client
            store: Local storage holding the logged-in user
            picker: Camera and gallery access
            alerter: Dialog presenter
            navigator: Screen stack
            route_params: Incoming navigation parameters (may hold "location")
            user_key: Storage key of the logged-in user
        """
        self.backend = backend
        self.store = store
        self.picker = picker
        self.alerter = alerter
        self.navigator = navigator
        self.user_key = user_key

        self.state = FormState()
        self.on_route_params(route_params)

    # ------------------------------------------------------------------
    # Form input
    # ------------------------------------------------------------------

    def on_route_params(self, params: Optional[Dict[str, Any]]) -> None:
        """Apply navigation parameters, e.g. a location picked on the map."""
        location = (params or {}).get("location")
        if location:
            self.state = form_state.set_location(self.state, location)

    def select_category(self, category: Union[DisasterCategory, str, None]) -> None:
        self.state = form_state.select_category(self.state, category)

    def set_description(self, description: str) -> None:
        self.state = form_state.set_description(self.state, description)

    def open_map(self) -> None:
        self.navigator.navigate(MAP_ROUTE)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    async def open_image_options(self) -> bool:
        """Ask for camera or gallery, then run that capture path."""
        labels = [label for label, _ in IMAGE_SOURCE_OPTIONS]
        choice = self.alerter.choose(IMAGE_SOURCE_TITLE, IMAGE_SOURCE_MESSAGE, labels)
        source = dict(IMAGE_SOURCE_OPTIONS).get(choice) if choice else None
        if source is None:
            return False
        return await self.attach_image(source)

    async def attach_image(self, source: ImageSource) -> bool:
        """
        Capture or pick one image and append it to the attachments.

        Returns:
            True if an image was added
        """
        try:
            uri = await acquire_image(self.picker, source)
        except PermissionDeniedError as e:
            self.alerter.alert(PERMISSION_TITLE, str(e))
            return False

        if uri is None:
            return False

        self.state = form_state.add_image(self.state, uri)
        return True

    def delete_image(self, index: int) -> None:
        self.state = form_state.remove_image(self.state, index)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit(self) -> SubmissionResult:
        """
        Run the submission workflow once.

        Returns:
            SubmissionResult; IGNORED if a submission is already running
        """
        if self.state.loading:
            logger.debug("Submission already in progress, ignoring")
            return SubmissionResult(SubmissionOutcome.IGNORED)

        self.state = form_state.begin_submission(self.state)
        try:
            report = await self._send_report(self.state)
        except Exception as e:
            logger.error(f"Error submitting report: {e}", exc_info=True)
            self.alerter.alert(ERROR_TITLE, getattr(e, "user_message", GENERIC_ERROR_MESSAGE))
            return SubmissionResult(SubmissionOutcome.FAILED, error=e)
        finally:
            self.state = form_state.finish_submission(self.state)

        self.alerter.alert(SUCCESS_TITLE, SUCCESS_MESSAGE)
        self.state = form_state.clear_form(self.state)
        self.navigator.go_back()

        return SubmissionResult(SubmissionOutcome.SUBMITTED, report=report)

    async def _send_report(self, form: FormState) -> Report:
        user = await asyncio.to_thread(load_logged_in_user, self.store, self.user_key)
        username = (user or {}).get("username")
        if not username:
            raise MissingLocalUserError("No logged-in user in local storage")

        citizen = await self.backend.find_citizen(username)
        if citizen is None:
            raise CitizenNotFoundError(username)

        report = build_report(citizen, form)
        files = await asyncio.to_thread(build_file_parts, form.images)

        await self.backend.submit_report(report.to_form_fields(), files)
        logger.info(f"Report by {report.reported_by} submitted ({len(files)} image(s))")

        return report

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def render(self) -> Dict[str, Any]:
        """Describe the form as it should currently be displayed."""
        state = self.state
        return {
            "screen": "Report",
            "location": {
                "value": state.location,
                "editable": False,
                "map_route": MAP_ROUTE,
            },
            "category": {
                "options": CATEGORY_OPTIONS,
                "selected": state.category.value if state.category else "",
            },
            "images": [
                {"index": i, "uri": uri} for i, uri in enumerate(state.images)
            ],
            "description": {
                "value": state.description,
                "placeholder": DESCRIPTION_PLACEHOLDER,
            },
            "submit": {
                "label": SUBMIT_LABEL,
                "disabled": state.loading,
                "busy": state.loading,
                "color": THEME["submit_busy"] if state.loading else THEME["submit"],
            },
        }
