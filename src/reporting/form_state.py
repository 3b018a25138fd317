"""
Report form state and its transitions

FormState is immutable; every user action produces a new value through
one of the functions below.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from src.core.constants import DisasterCategory


class SubmissionPhase(str, Enum):
    """Where the form is in the submission workflow."""
    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class FormState:
    """Everything the report form holds while the screen is mounted."""
    category: Optional[DisasterCategory] = None
    description: str = ""
    location: str = ""
    images: Tuple[str, ...] = ()
    phase: SubmissionPhase = SubmissionPhase.IDLE

    @property
    def loading(self) -> bool:
        return self.phase == SubmissionPhase.SUBMITTING


def select_category(
    state: FormState,
    category: Union[DisasterCategory, str, None]
) -> FormState:
    """Set the disaster category; an empty value clears the selection."""
    if not category:
        return replace(state, category=None)
    return replace(state, category=DisasterCategory(category))


def set_description(state: FormState, description: str) -> FormState:
    return replace(state, description=description)


def set_location(state: FormState, location: str) -> FormState:
    return replace(state, location=location)


def add_image(state: FormState, uri: str) -> FormState:
    """Append an image reference after the existing ones."""
    return replace(state, images=state.images + (uri,))


def remove_image(state: FormState, index: int) -> FormState:
    """
    Drop the image at index, keeping the others in order.

    An index that matches no image leaves the list as it is.
    """
    images = tuple(uri for i, uri in enumerate(state.images) if i != index)
    return replace(state, images=images)


def clear_form(state: FormState) -> FormState:
    """Reset every field, leaving the submission phase untouched."""
    return FormState(phase=state.phase)


def begin_submission(state: FormState) -> FormState:
    return replace(state, phase=SubmissionPhase.SUBMITTING)


def finish_submission(state: FormState) -> FormState:
    return replace(state, phase=SubmissionPhase.IDLE)
