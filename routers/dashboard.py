from fastapi import APIRouter, HTTPException, Depends
from services import session_store
from services.analytics import build_dashboard_stats
from auth.dependencies import get_current_user

router = APIRouter(tags=["Dashboard"])


@router.get("/api/dashboard/stats")
async def get_dashboard_stats(current_user: dict = Depends(get_current_user)):
    """
    Practice statistics for the current user (requires authentication)
    """
    try:
        sessions = session_store.find_sessions_by_user(current_user['id'])
        return build_dashboard_stats(sessions)

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
