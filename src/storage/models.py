"""
SQLAlchemy models for local device storage
"""

from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class StoredItem(Base):
    """
    A single key-value entry.

    Values are opaque strings; callers serialize structured data themselves.
    """
    __tablename__ = "key_value_items"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<StoredItem({self.key!r})>"
