"""Dashboard service - loads the dashboard and toggles its tasks."""
from app.models.dashboard import Dashboard
from app.services.profile_service import ProfileService
from app.services.task_service import TaskService


class DashboardService:
    """Service for the dashboard view."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.profile_service = ProfileService(db)
        self.task_service = TaskService(db)

    async def load(self, user_id: str) -> Dashboard:
        """
        Load the user's profile and tasks.

        Raises:
            ValueError: If profile not found
        """
        profile = await self.profile_service.get_profile(user_id)
        tasks = await self.task_service.list_tasks(user_id)
        return Dashboard(profile=profile, tasks=tasks)

    async def toggle_task(self, dashboard: Dashboard, task_id: str) -> Dashboard:
        """
        Invert one task's completion flag.

        The new value is written first; the returned dashboard only differs
        from the given one once the write has succeeded. On failure the
        exception propagates and ``dashboard`` is left as it was.

        Args:
            dashboard: Currently displayed dashboard
            task_id: Task to toggle

        Returns:
            New dashboard with the task updated

        Raises:
            ValueError: If the task is not on the dashboard or not found
        """
        current = next((task for task in dashboard.tasks if task.id == task_id), None)
        if current is None:
            raise ValueError("Task not found")

        new_value = not current.is_completed
        await self.task_service.set_completion(
            user_id=current.user_id,
            task_id=task_id,
            is_completed=new_value,
        )

        tasks = [
            task.model_copy(update={"is_completed": new_value}) if task.id == task_id else task
            for task in dashboard.tasks
        ]
        return dashboard.model_copy(update={"tasks": tasks})
