"""
User database model.

Defines the User table for authentication and user management.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class User(SQLModel, table=True):
    """
    User model for authentication.

    Owns workout plans; removing a user removes them as well
    (see :meth:`app.db.repositories.user.UserRepository.delete_by_email`).
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    password_hash: str = Field(max_length=255, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utcnow,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
