"""Daily task model definitions."""
from datetime import datetime

from pydantic import BaseModel, Field


class TaskBase(BaseModel):
    """Base task fields."""

    task_title: str
    task_description: str
    task_category: str


class TaskCreate(TaskBase):
    """Task creation model."""

    pass


class Task(TaskBase):
    """Full task model with database fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    user_id: str
    is_completed: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = {"populate_by_name": True}
