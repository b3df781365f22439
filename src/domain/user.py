"""User Domain Entity

A registered account. Each user is a tenant: every customer, product and
invoice is owned by exactly one user.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, IdType


class User(BaseModel, table=True):
    """
    User - Tenant account

    Domain Rules:
    - email is unique across all users
    - password_hash is an opaque bcrypt hash, never exposed
    - Never mutated by the invoicing core
    """

    __tablename__ = "users"

    id: int = Field(
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique user identifier, used as tenant id"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Login email (unique)"
    )

    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="bcrypt password hash"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Registration timestamp"
    )
