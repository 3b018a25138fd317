"""
Interfaces between screens and the host application
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)


class Alerter(ABC):
    """Modal dialogs shown to the user."""

    @abstractmethod
    def alert(self, title: str, message: str) -> None:
        """Show a message with a single dismiss button."""

    @abstractmethod
    def choose(self, title: str, message: str, options: Sequence[str]) -> Optional[str]:
        """Show a message with buttons; return the pressed label or None."""


class Navigator(ABC):
    """Screen stack of the host application."""

    @abstractmethod
    def navigate(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        """Push route onto the stack."""

    @abstractmethod
    def go_back(self) -> None:
        """Return to the previous screen."""


class ConsoleAlerter(Alerter):
    """Prints dialogs to stdout and reads choices from stdin."""

    def __init__(self):
        self.history: List[Dict[str, str]] = []

    def alert(self, title: str, message: str) -> None:
        self.history.append({"title": title, "message": message})
        print(f"[{title}] {message}")

    def choose(self, title: str, message: str, options: Sequence[str]) -> Optional[str]:
        print(f"[{title}] {message}")
        for i, option in enumerate(options, start=1):
            print(f"  {i}. {option}")

        try:
            answer = input("> ").strip()
        except EOFError:
            return None

        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        return None


class ConsoleNavigator(Navigator):
    """Records navigation requests and logs them."""

    def __init__(self):
        self.stack: List[str] = []
        self.went_back = False

    def navigate(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        self.stack.append(route)
        logger.info(f"Navigate to {route} {params or ''}".rstrip())

    def go_back(self) -> None:
        self.went_back = True
        if self.stack:
            self.stack.pop()
        logger.info("Navigate back")
