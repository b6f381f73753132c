from fastapi import APIRouter, HTTPException, Depends, status
from typing import List

from auth.dependencies import get_current_user
from models.interview import InterviewSessionCreate, InterviewSession, SessionSummaryRequest, SessionSummary
from services import session_store
from services.session_summary import summarize_session

router = APIRouter(prefix="/api/sessions", tags=["Sessions"])


@router.post("", response_model=InterviewSession, status_code=status.HTTP_201_CREATED)
async def create_interview_session(
    session: InterviewSessionCreate,
    current_user: dict = Depends(get_current_user)
):
    """
    Save a finished interview
    """
    try:
        return session_store.create_session(current_user['id'], session)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to create session: {e}")


@router.get("", response_model=List[InterviewSession])
async def list_interview_sessions(current_user: dict = Depends(get_current_user)):
    """
    Get all interview sessions for the current user, newest first
    """
    try:
        return session_store.find_sessions_by_user(current_user['id'])
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/summary", response_model=SessionSummary)
async def summarize_interview(
    request: SessionSummaryRequest,
    current_user: dict = Depends(get_current_user)
):
    """
    Aggregate per-answer analyses into the results of an interview.
    Nothing is stored; post the result to /api/sessions to keep it.
    """
    return summarize_session(request.questions, request.answers, request.duration,
                             request.ended_early, request.current_question)


@router.get("/{session_id}", response_model=InterviewSession)
async def get_interview_session(
    session_id: int,
    current_user: dict = Depends(get_current_user)
):
    try:
        session = session_store.get_session(current_user['id'], session_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not session:
        raise HTTPException(status_code=404, detail="Not found")
    return session


@router.delete("/{session_id}")
async def delete_interview_session(
    session_id: int,
    current_user: dict = Depends(get_current_user)
):
    try:
        session_store.delete_session(current_user['id'], session_id)
        return {"ok": True}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
