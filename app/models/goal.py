"""Goal model definitions (onboarding questionnaire answers)."""
from datetime import datetime

from pydantic import BaseModel, Field


class GoalBase(BaseModel):
    """Base goal fields."""

    future_aspiration: str
    average_free_time_hours: float = Field(ge=0)
    future_goals: str
    current_actions: str


class GoalCreate(GoalBase):
    """Goal creation model."""

    pass


class Goal(GoalBase):
    """Full goal model with database fields."""

    id: str = Field(alias="_id", serialization_alias="id")
    user_id: str
    created_at: datetime

    model_config = {"populate_by_name": True}
