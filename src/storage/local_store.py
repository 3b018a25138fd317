"""
Local key-value storage for Disaster Reporter
Persists small values (such as the logged-in user) in SQLite
"""

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, select, delete
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import SQLAlchemyError

from src.core.config import settings
from .models import Base, StoredItem

logger = logging.getLogger(__name__)


class LocalStore:
    """
    Key-value store backed by a single SQLite table.

    Usage:
        store = LocalStore("sqlite:///reporter.db")
        store.set_item("loggedInUser", '{"username": "jdoe"}')
        store.get_item("loggedInUser")
    """

    def __init__(self, database_url: Optional[str] = None):
        """
        Initialize the store and create its table if needed.

        Args:
            database_url: SQLAlchemy URL, defaults to settings.local_store_url
        """
        self.database_url = database_url or settings.local_store_url

        engine_kwargs: Dict[str, Any] = {}
        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        if self.database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every checkout sees an empty database
            engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.database_url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        Base.metadata.create_all(bind=self.engine)

        logger.info(f"Local store opened: {self.database_url}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Context manager for store sessions.

        Yields:
            SQLAlchemy session
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Local store session error: {e}")
            raise
        finally:
            session.close()

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None."""
        with self.get_session() as session:
            item = session.get(StoredItem, key)
            return item.value if item is not None else None

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        with self.get_session() as session:
            item = session.get(StoredItem, key)
            if item is None:
                session.add(StoredItem(key=key, value=value))
            else:
                item.value = value
        logger.debug(f"Stored item {key!r}")

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        with self.get_session() as session:
            session.execute(delete(StoredItem).where(StoredItem.key == key))

    def keys(self) -> list[str]:
        """Return all stored keys in sorted order."""
        with self.get_session() as session:
            return list(session.scalars(select(StoredItem.key).order_by(StoredItem.key)))

    def clear(self) -> None:
        """Remove every stored item."""
        with self.get_session() as session:
            session.execute(delete(StoredItem))
        logger.info("Local store cleared")

    def close(self) -> None:
        """Dispose the underlying engine."""
        self.engine.dispose()


def load_logged_in_user(
    store: LocalStore,
    key: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Read the persisted logged-in user.

    Args:
        store: Local store to read from
        key: Storage key, defaults to settings.logged_in_user_key

    Returns:
        The decoded user object, or None when absent or unreadable
    """
    raw = store.get_item(key or settings.logged_in_user_key)
    if raw is None:
        return None

    try:
        user = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Stored user is not valid JSON: {e}")
        return None

    if not isinstance(user, dict):
        logger.warning("Stored user is not a JSON object")
        return None

    return user


def save_logged_in_user(
    store: LocalStore,
    user: Dict[str, Any],
    key: Optional[str] = None
) -> None:
    """Persist the logged-in user as JSON."""
    store.set_item(key or settings.logged_in_user_key, json.dumps(user))
