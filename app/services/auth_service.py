"""Authentication service - registration, login and session lookup."""
import logging
from datetime import datetime, timezone
from typing import Optional

from jose import JWTError

from app.models.profile import Profile
from app.models.session import Session
from app.utils.auth import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, db):
        """Initialize service with database connection."""
        self.db = db
        self.profiles = db["profiles"]
        self.revoked_tokens = db["revoked_tokens"]

    async def register_user(self, email: str, password: str, full_name: str) -> Profile:
        """
        Register a new user by creating their profile.

        Args:
            email: User email address
            password: Plain text password
            full_name: User's full name

        Returns:
            Profile object (without password)

        Raises:
            ValueError: If email is already registered
        """
        existing = await self.profiles.find_one({"email": email})
        if existing:
            raise ValueError("Email already registered")

        now = datetime.utcnow()
        profile_doc = {
            "email": email,
            "hashed_password": hash_password(password),
            "full_name": full_name,
            "address": None,
            "created_at": now,
            "updated_at": now,
        }

        result = await self.profiles.insert_one(profile_doc)

        return Profile(
            _id=str(result.inserted_id),
            email=email,
            full_name=full_name,
            created_at=now,
            updated_at=now,
        )

    async def login(self, email: str, password: str) -> str:
        """
        Login user and return JWT token.

        Args:
            email: User email
            password: Plain text password

        Returns:
            JWT access token

        Raises:
            ValueError: If credentials are invalid
        """
        profile_doc = await self.profiles.find_one({"email": email})
        if not profile_doc:
            raise ValueError("Invalid email or password")

        if not verify_password(password, profile_doc["hashed_password"]):
            raise ValueError("Invalid email or password")

        return create_access_token(user_id=str(profile_doc["_id"]))

    async def get_session(self, token: str) -> Optional[Session]:
        """
        Resolve a bearer token into a session.

        Returns None for tokens that are malformed, expired or signed out.
        """
        try:
            claims = decode_access_token(token)
        except JWTError:
            return None

        revoked = await self.revoked_tokens.find_one({"jti": claims["jti"]})
        if revoked:
            return None

        return Session(
            user_id=claims["sub"],
            token_id=claims["jti"],
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )

    async def sign_out(self, session: Session) -> None:
        """Revoke the session's token."""
        await self.revoked_tokens.insert_one({
            "jti": session.token_id,
            "user_id": session.user_id,
            "expires_at": session.expires_at,
            "revoked_at": datetime.utcnow(),
        })
        logger.info("Signed out session %s for user %s", session.token_id, session.user_id)
