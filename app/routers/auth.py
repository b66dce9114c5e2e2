"""Auth router - registration, login, sign-out and the session dependencies."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from app.database import get_database
from app.models.profile import Profile, ProfileCreate
from app.models.session import Session
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService


router = APIRouter(prefix="/auth", tags=["auth"])
security = HTTPBearer(auto_error=False)

AUTH_GATE_URL = "/auth"


class LoginRequest(BaseModel):
    """Login request model."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """Token response model."""

    access_token: str
    token_type: str = "bearer"


class AuthGate(BaseModel):
    """Where an anonymous visitor can sign in or sign up."""

    message: str
    login_url: str
    register_url: str


async def get_optional_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db=Depends(get_database),
) -> Optional[Session]:
    """
    Dependency resolving the caller's session, if any.

    Without bearer credentials nothing is read from the database.
    """
    if credentials is None:
        return None

    service = AuthService(db)
    return await service.get_session(credentials.credentials)


async def get_current_session(
    session: Optional[Session] = Depends(get_optional_session),
) -> Session:
    """
    Dependency requiring a session.

    Raises:
        HTTPException: If there is no valid session (401)
    """
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return session


def redirect_to_auth_gate() -> RedirectResponse:
    """Send an anonymous visitor to the auth gate."""
    return RedirectResponse(url=AUTH_GATE_URL)


@router.get("", response_model=AuthGate)
async def auth_gate():
    """Auth gate - entry point for visitors without a session."""
    return AuthGate(
        message="Sign in or create an account to start your journey.",
        login_url=f"{AUTH_GATE_URL}/login",
        register_url=f"{AUTH_GATE_URL}/register",
    )


@router.post("/register", response_model=Profile, status_code=status.HTTP_201_CREATED)
async def register(profile: ProfileCreate, db=Depends(get_database)):
    """
    Register a new user.

    Raises:
        HTTPException: If email is already registered (400)
    """
    service = AuthService(db)

    try:
        return await service.register_user(
            email=profile.email,
            password=profile.password,
            full_name=profile.full_name,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/login", response_model=TokenResponse)
async def login(login_req: LoginRequest, db=Depends(get_database)):
    """
    Login user and return access token.

    Raises:
        HTTPException: If credentials are invalid (401)
    """
    service = AuthService(db)

    try:
        token = await service.login(
            email=login_req.email,
            password=login_req.password,
        )
        return TokenResponse(access_token=token)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.post("/logout")
async def logout(
    session: Session = Depends(get_current_session),
    db=Depends(get_database),
):
    """Sign out the current session and return to the landing page."""
    service = AuthService(db)
    await service.sign_out(session)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/me", response_model=Profile)
async def get_current_profile(
    session: Session = Depends(get_current_session),
    db=Depends(get_database),
):
    """
    Get the signed-in user's profile.

    Raises:
        HTTPException: If profile not found (404)
    """
    service = ProfileService(db)

    try:
        return await service.get_profile(session.user_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
