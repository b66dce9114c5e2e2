"""Profile service - reads and onboarding updates of user profiles."""
from datetime import datetime

from bson import ObjectId

from app.models.profile import Profile


class ProfileService:
    """Service for profile operations."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.profiles = db["profiles"]

    @staticmethod
    def _object_id(user_id: str) -> ObjectId:
        # ObjectId(None) would mint a fresh id
        if not ObjectId.is_valid(user_id):
            raise ValueError("Invalid user ID format")
        return ObjectId(user_id)

    async def get_profile(self, user_id: str) -> Profile:
        """
        Get a profile by user ID.

        Raises:
            ValueError: If profile not found or invalid ID format
        """
        profile_doc = await self.profiles.find_one({"_id": self._object_id(user_id)})
        if not profile_doc:
            raise ValueError("Profile not found")

        return Profile(
            _id=str(profile_doc["_id"]),
            email=profile_doc["email"],
            full_name=profile_doc["full_name"],
            address=profile_doc.get("address"),
            created_at=profile_doc["created_at"],
            updated_at=profile_doc["updated_at"],
        )

    async def update_address(self, user_id: str, address: str) -> None:
        """
        Set the profile's address.

        Setting the same address twice is harmless.

        Raises:
            ValueError: If no profile matches the user ID
        """
        result = await self.profiles.update_one(
            {"_id": self._object_id(user_id)},
            {"$set": {"address": address, "updated_at": datetime.utcnow()}},
        )
        if result.matched_count == 0:
            raise ValueError("Profile not found")
