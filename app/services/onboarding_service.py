"""Onboarding service - the submit sequence at the end of the wizard."""
import logging

from pydantic import BaseModel

from app.models.goal import GoalCreate
from app.services.goal_service import GoalService
from app.services.profile_service import ProfileService
from app.services.task_service import TaskService

logger = logging.getLogger(__name__)


class OnboardingResult(BaseModel):
    """Records written by a completed onboarding."""

    goal_id: str
    task_ids: list[str]


class OnboardingService:
    """Service for completing onboarding."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.profile_service = ProfileService(db)
        self.goal_service = GoalService(db)
        self.task_service = TaskService(db)

    async def complete_onboarding(
        self,
        user_id: str,
        address: str,
        goal_create: GoalCreate,
    ) -> OnboardingResult:
        """
        Save the questionnaire and seed the user's first tasks.

        Steps run in order and stop at the first failure. Earlier steps are
        not rolled back, so retrying after a failure in the goal or task
        insert can write those records twice.

        Args:
            user_id: User ID from the session
            address: Address from the last wizard step
            goal_create: Validated questionnaire answers

        Returns:
            IDs of the created goal and tasks

        Raises:
            ValueError: If the user's profile does not exist
        """
        await self.profile_service.update_address(user_id, address)
        logger.info("Onboarding %s: address saved", user_id)

        goal = await self.goal_service.create_goal(user_id=user_id, goal_create=goal_create)
        logger.info("Onboarding %s: goal %s created", user_id, goal.id)

        tasks = await self.task_service.create_seed_tasks(user_id)
        logger.info("Onboarding %s: %d seed tasks created", user_id, len(tasks))

        return OnboardingResult(goal_id=goal.id, task_ids=[task.id for task in tasks])
