"""
Disaster Reporter - Reporting Module
Form state, report records and upload payloads.
"""

from src.reporting.form_state import (
    FormState,
    SubmissionPhase,
    select_category,
    set_description,
    set_location,
    add_image,
    remove_image,
    clear_form,
    begin_submission,
    finish_submission,
)
from src.reporting.report import Report, build_report
from src.reporting.attachments import Attachment, build_file_parts

__all__ = [
    # Form state
    "FormState",
    "SubmissionPhase",
    "select_category",
    "set_description",
    "set_location",
    "add_image",
    "remove_image",
    "clear_form",
    "begin_submission",
    "finish_submission",
    # Report
    "Report",
    "build_report",
    # Attachments
    "Attachment",
    "build_file_parts",
]
