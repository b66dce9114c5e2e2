"""Onboarding router - the three-step questionnaire."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from app.database import get_database
from app.models.onboarding import StepView, WizardRequest
from app.models.session import Session
from app.routers.auth import get_current_session, get_optional_session, redirect_to_auth_gate
from app.services.onboarding_service import OnboardingService
from app.utils import wizard
from app.utils.wizard import WizardError


router = APIRouter(prefix="/onboarding", tags=["onboarding"])
logger = logging.getLogger(__name__)


@router.get("", response_model=StepView)
async def start_onboarding(session: Optional[Session] = Depends(get_optional_session)):
    """
    Start the questionnaire at step 1.

    - Visitors without a session are sent to the auth gate
    """
    if session is None:
        return redirect_to_auth_gate()
    return wizard.describe(wizard.start())


@router.post("/next", response_model=StepView)
async def next_step(request: WizardRequest):
    """
    Move to the next step.

    Raises:
        HTTPException: If the current step has blank fields (400)
    """
    try:
        return wizard.describe(wizard.next_step(request.state))
    except WizardError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/back", response_model=StepView)
async def previous_step(request: WizardRequest):
    """Move back one step, keeping the answers."""
    try:
        return wizard.describe(wizard.previous_step(request.state))
    except WizardError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/submit")
async def submit_onboarding(
    request: WizardRequest,
    session: Session = Depends(get_current_session),
    db=Depends(get_database),
):
    """
    Complete onboarding and go to the dashboard.

    - Saves the address on the profile
    - Saves the questionnaire as a goal record
    - Creates the three starter tasks

    Raises:
        HTTPException: If validation or any write fails (400); the client
            stays on the last step and may retry
    """
    try:
        address, goal = wizard.prepare_submission(request.state)
    except WizardError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    service = OnboardingService(db)

    try:
        await service.complete_onboarding(
            user_id=session.user_id,
            address=address,
            goal_create=goal,
        )
    except ValueError as e:
        logger.warning("Onboarding failed for %s: %s", session.user_id, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return RedirectResponse(url="/dashboard", status_code=status.HTTP_303_SEE_OTHER)
