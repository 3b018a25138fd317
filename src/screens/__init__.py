"""
Disaster Reporter - Screens Module
Notification and report screens with their host interfaces.
"""

from src.screens.base import Alerter, Navigator, ConsoleAlerter, ConsoleNavigator
from src.screens.notification_screen import NotificationScreen
from src.screens.report_screen import (
    ReportScreen,
    SubmissionOutcome,
    SubmissionResult,
)

__all__ = [
    # Host interfaces
    "Alerter",
    "Navigator",
    "ConsoleAlerter",
    "ConsoleNavigator",
    # Screens
    "NotificationScreen",
    "ReportScreen",
    "SubmissionOutcome",
    "SubmissionResult",
]
