"""Dashboard view model."""
from typing import Optional

from pydantic import BaseModel, computed_field

from app.models.profile import Profile
from app.models.task import Task
from app.utils.presentation import format_progress, progress_percentage


class Dashboard(BaseModel):
    """Profile, tasks and the progress figures derived from them."""

    profile: Profile
    tasks: list[Task]

    @computed_field
    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.is_completed)

    @computed_field
    @property
    def total_count(self) -> int:
        return len(self.tasks)

    @computed_field
    @property
    def progress_percentage(self) -> float:
        return progress_percentage(self.completed_count, self.total_count)

    @computed_field
    @property
    def progress_label(self) -> Optional[str]:
        return format_progress(self.progress_percentage)

    @computed_field
    @property
    def show_congratulations(self) -> bool:
        """All tasks done, and there is at least one."""
        return self.total_count > 0 and self.completed_count == self.total_count
