"""Task service - seeding, listing and completing daily tasks."""
import logging
from datetime import datetime, timedelta

from bson import ObjectId

from app.models.task import Task, TaskCreate

logger = logging.getLogger(__name__)

SEED_TASKS = [
    TaskCreate(
        task_title="Morning Reflection",
        task_description="Spend 5 minutes reflecting on your goals and what you want to achieve today",
        task_category="Mindset",
    ),
    TaskCreate(
        task_title="Read for 15 minutes",
        task_description="Read something educational related to your future aspirations",
        task_category="Learning",
    ),
    TaskCreate(
        task_title="Take a small action",
        task_description="Do one small thing today that brings you closer to your goals",
        task_category="Action",
    ),
]


class TaskService:
    """Service for handling daily task operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.tasks = db["tasks"]

    def _doc_to_task(self, doc: dict) -> Task:
        """Convert database document to Task model."""
        return Task(
            _id=str(doc["_id"]),
            user_id=doc["user_id"],
            task_title=doc["task_title"],
            task_description=doc["task_description"],
            task_category=doc["task_category"],
            is_completed=doc.get("is_completed", False),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    async def create_seed_tasks(self, user_id: str) -> list[Task]:
        """
        Insert the starter tasks for a freshly onboarded user.

        Args:
            user_id: User ID who owns the tasks

        Returns:
            Created tasks, in display order
        """
        now = datetime.utcnow()
        # Mongo stores milliseconds; space the timestamps so the order survives.
        task_docs = [
            {
                "user_id": user_id,
                "task_title": seed.task_title,
                "task_description": seed.task_description,
                "task_category": seed.task_category,
                "is_completed": False,
                "created_at": now + timedelta(milliseconds=index),
                "updated_at": now,
            }
            for index, seed in enumerate(SEED_TASKS)
        ]

        result = await self.tasks.insert_many(task_docs)
        for doc, inserted_id in zip(task_docs, result.inserted_ids):
            doc["_id"] = inserted_id

        return [self._doc_to_task(doc) for doc in task_docs]

    async def list_tasks(self, user_id: str) -> list[Task]:
        """
        List a user's tasks, oldest first.

        Args:
            user_id: User ID

        Returns:
            List of tasks ordered by creation time ascending
        """
        cursor = self.tasks.find({"user_id": user_id}).sort("created_at", 1)
        task_docs = await cursor.to_list(length=None)

        return [self._doc_to_task(doc) for doc in task_docs]

    async def set_completion(
        self,
        user_id: str,
        task_id: str,
        is_completed: bool,
    ) -> None:
        """
        Persist a task's completion flag.

        Args:
            user_id: User ID
            task_id: Task ID
            is_completed: New value

        Raises:
            ValueError: If task not found or invalid ID format
        """
        if not ObjectId.is_valid(task_id):
            raise ValueError("Invalid task ID format")
        object_id = ObjectId(task_id)

        result = await self.tasks.update_one(
            {"_id": object_id, "user_id": user_id},
            {"$set": {"is_completed": is_completed, "updated_at": datetime.utcnow()}},
        )
        if result.matched_count == 0:
            raise ValueError("Task not found")

        logger.info("Task %s marked %s", task_id, "completed" if is_completed else "open")
