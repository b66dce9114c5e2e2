"""Goal service - persists the onboarding questionnaire answers."""
from datetime import datetime

from app.models.goal import Goal, GoalCreate


class GoalService:
    """Service for handling goal records."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.goals = db["goals"]

    def _doc_to_goal(self, doc: dict) -> Goal:
        """Convert database document to Goal model."""
        return Goal(
            _id=str(doc["_id"]),
            user_id=doc["user_id"],
            future_aspiration=doc["future_aspiration"],
            average_free_time_hours=doc["average_free_time_hours"],
            future_goals=doc["future_goals"],
            current_actions=doc["current_actions"],
            created_at=doc["created_at"],
        )

    async def create_goal(
        self,
        user_id: str,
        goal_create: GoalCreate,
    ) -> Goal:
        """
        Insert one goal record.

        Args:
            user_id: User ID who owns the goal
            goal_create: Questionnaire answers

        Returns:
            Created goal object
        """
        goal_doc = {
            "user_id": user_id,
            "future_aspiration": goal_create.future_aspiration,
            "average_free_time_hours": goal_create.average_free_time_hours,
            "future_goals": goal_create.future_goals,
            "current_actions": goal_create.current_actions,
            "created_at": datetime.utcnow(),
        }

        result = await self.goals.insert_one(goal_doc)
        goal_doc["_id"] = result.inserted_id

        return self._doc_to_goal(goal_doc)
