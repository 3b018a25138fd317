"""
Notification screen
"""

from typing import Any, Dict

from src.core.constants import NOTIFICATION_TITLE, THEME


class NotificationScreen:
    """Static placeholder screen for user notifications."""

    title = NOTIFICATION_TITLE

    def render(self) -> Dict[str, Any]:
        return {
            "screen": "Notification",
            "title": self.title,
            "style": {
                "background": THEME["background"],
                "title_color": THEME["text"],
                "title_size": 24,
                "title_weight": "bold",
            },
        }
