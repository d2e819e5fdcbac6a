"""
Declarative base shared by all ORM models.
"""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Creation timestamp set by the database. Rows here are never updated."""

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
