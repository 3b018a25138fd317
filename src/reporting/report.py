"""
Disaster report record
Built once per submission from the form state and the reporter's account
"""

from dataclasses import dataclass
from typing import Dict

from src.backend.models import Citizen
from src.core.constants import (
    NO_LOCATION,
    NO_CATEGORY,
    NO_DESCRIPTION,
    STATUS_UNVERIFIED,
    PRIORITY_NONE,
    NO_RESCUER,
)
from .form_state import FormState


@dataclass(frozen=True)
class Report:
    """
    Disaster report as sent to the backend.

    Every field holds a non-empty string; empty form fields are replaced by
    placeholder text when the report is built.
    """
    reporter_id: str
    reported_by: str
    location: str
    disaster_category: str
    disaster_info: str
    disaster_status: str = STATUS_UNVERIFIED
    priority: str = PRIORITY_NONE
    rescuer_id: str = NO_RESCUER
    rescued_by: str = NO_RESCUER

    def to_form_fields(self) -> Dict[str, str]:
        """Text parts of the multipart payload, in wire order."""
        return {
            "reporterId": self.reporter_id,
            "reportedBy": self.reported_by,
            "location": self.location,
            "disasterCategory": self.disaster_category,
            "disasterInfo": self.disaster_info,
            "disasterStatus": self.disaster_status,
            "priority": self.priority,
            "rescuerId": self.rescuer_id,
            "rescuedBy": self.rescued_by,
        }


def build_report(citizen: Citizen, state: FormState) -> Report:
    """
    Assemble a report from the reporter and the current form.

    Args:
        citizen: Backend account of the logged-in user
        state: Current form state

    Returns:
        Report with placeholders for any empty optional field
    """
    return Report(
        reporter_id=citizen.id,
        reported_by=citizen.full_name,
        location=state.location or NO_LOCATION,
        disaster_category=state.category.value if state.category else NO_CATEGORY,
        disaster_info=state.description or NO_DESCRIPTION,
    )
