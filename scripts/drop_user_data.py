"""Drop all data for a specific user, including the profile itself."""
import asyncio
import sys

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient


async def drop_user_data(mongodb_url: str, user_id: str, db_name: str = "daily_journey"):
    """Delete every document that belongs to a user."""
    client = AsyncIOMotorClient(mongodb_url)
    db = client[db_name]

    for collection_name in ["tasks", "goals", "revoked_tokens"]:
        result = await db[collection_name].delete_many({"user_id": user_id})
        print(f"Deleted {result.deleted_count} documents from {collection_name}")

    result = await db["profiles"].delete_one({"_id": ObjectId(user_id)})
    print(f"Deleted {result.deleted_count} documents from profiles")

    client.close()
    print("Done!")


if __name__ == "__main__":
    if len(sys.argv) not in (3, 4):
        print("Usage: python drop_user_data.py <mongodb_url> <user_id> [db_name]")
        sys.exit(1)

    asyncio.run(drop_user_data(*sys.argv[1:]))
