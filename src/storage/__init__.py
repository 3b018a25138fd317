"""
Storage module for Disaster Reporter
SQLite key-value persistence for device-local state
"""

from .local_store import LocalStore, load_logged_in_user, save_logged_in_user
from .models import Base, StoredItem

__all__ = [
    "LocalStore",
    "load_logged_in_user",
    "save_logged_in_user",
    "Base",
    "StoredItem",
]
