"""Profile model definitions."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ProfileBase(BaseModel):
    """Base profile fields."""

    email: EmailStr
    full_name: str


class ProfileCreate(ProfileBase):
    """Profile creation model with password."""

    password: str


class Profile(ProfileBase):
    """Profile model without password (for API responses)."""

    id: str = Field(alias="_id", serialization_alias="id")
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}
