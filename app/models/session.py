"""Session handle passed explicitly to routes that need a signed-in user."""
from datetime import datetime

from pydantic import BaseModel


class Session(BaseModel):
    """Resolved bearer session."""

    user_id: str
    token_id: str
    expires_at: datetime
