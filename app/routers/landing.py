"""Landing router - marketing page for visitors without a session."""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from app.models.landing import Feature, LandingPage
from app.models.session import Session
from app.routers.auth import AUTH_GATE_URL, get_optional_session
from app.utils.presentation import hero_button, secondary_button


router = APIRouter(tags=["landing"])

ONBOARDING_URL = "/onboarding"

LANDING_PAGE = LandingPage(
    headline="Stop Wasting Time. Start Living.",
    tagline=(
        "Transform your free time into purposeful action. Set goals, track progress, "
        "and become who you've always wanted to be."
    ),
    features=[
        Feature(
            title="Define Your Goals",
            description="Share your aspirations and we'll help you create a clear path forward",
        ),
        Feature(
            title="Use Your Time Wisely",
            description="Get personalized daily tasks that fit your schedule and push you forward",
        ),
        Feature(
            title="Track Your Progress",
            description="Watch yourself grow day by day with actionable, achievable tasks",
        ),
    ],
    calls_to_action=[
        hero_button("Start Your Journey", ONBOARDING_URL),
        secondary_button("Learn More", ONBOARDING_URL),
    ],
    closing_headline="Ready to Transform Your Life?",
    closing_tagline=(
        "Join thousands of young people who are turning their dreams into reality, "
        "one small step at a time."
    ),
    closing_call_to_action=hero_button("Get Started Now", AUTH_GATE_URL),
)


@router.get("/", response_model=LandingPage)
async def landing(session: Optional[Session] = Depends(get_optional_session)):
    """
    Landing page.

    - Signed-in users go straight to their dashboard
    - Everyone else gets the marketing page
    """
    if session is not None:
        return RedirectResponse(url="/dashboard")
    return LANDING_PAGE
