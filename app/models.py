"""
SQLAlchemy models for the task manager.
Each table is a standalone collection of documents keyed by a 24-character
hexadecimal id; there are no foreign keys between users and tasks.
"""
import secrets
import time
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Status(str, Enum):
    """Task status categories."""
    PENDING = "Pending"
    COMPLETE = "Complete"


class Role(str, Enum):
    """User roles."""
    ADMIN = "Admin"
    GENERAL = "General"


def new_object_id() -> str:
    """Generate a 24-char lowercase hex id: 4 bytes of epoch seconds + 8 random bytes."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    Model for registered users.
    """
    __tablename__ = "users"

    id = Column(String(24), primary_key=True, default=new_object_id)
    username = Column(String(20), nullable=False, unique=True, index=True)
    email = Column(String(254), nullable=False, unique=True)
    password = Column(String(128), nullable=False)
    role = Column(String(20), nullable=False, default=Role.GENERAL.value)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
        }


class Task(Base):
    """
    Model for tasks. `username` references the owner by value.
    """
    __tablename__ = "tasks"

    id = Column(String(24), primary_key=True, default=new_object_id)
    subject = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, index=True)
    username = Column(String(20), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, subject={self.subject}, status={self.status})>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "subject": self.subject,
            "description": self.description,
            "status": self.status,
            "username": self.username,
        }
