"""
Disaster Reporter - Backend Module
HTTP access to the disaster-response backend.
"""

from src.backend.client import BackendClient, FilePart
from src.backend.models import Citizen

__all__ = [
    "BackendClient",
    "FilePart",
    "Citizen",
]
