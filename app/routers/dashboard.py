"""Dashboard router - progress overview and task toggling."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.database import get_database
from app.models.dashboard import Dashboard
from app.models.session import Session
from app.routers.auth import get_current_session, get_optional_session, redirect_to_auth_gate
from app.services.dashboard_service import DashboardService


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=Dashboard)
async def get_dashboard(
    session: Optional[Session] = Depends(get_optional_session),
    db=Depends(get_database),
):
    """
    Get the dashboard for the signed-in user.

    - Visitors without a session are sent to the auth gate
    - Tasks are ordered oldest first

    Raises:
        HTTPException: If profile not found (404)
    """
    if session is None:
        return redirect_to_auth_gate()

    service = DashboardService(db)
    try:
        return await service.load(session.user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/tasks/{task_id}/toggle", response_model=Dashboard)
async def toggle_task(
    task_id: str,
    session: Session = Depends(get_current_session),
    db=Depends(get_database),
):
    """
    Flip a task between completed and open.

    Returns the dashboard with the task's new state and updated progress.

    Raises:
        HTTPException: If profile or task not found (404)
    """
    service = DashboardService(db)

    try:
        dashboard = await service.load(session.user_id)
        return await service.toggle_task(dashboard, task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
