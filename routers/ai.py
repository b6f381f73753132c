from fastapi import APIRouter, HTTPException, Depends, Request, status

from auth.dependencies import get_current_user
from core.config import DEFAULT_QUESTION_COUNT, GENERATE_QUESTIONS_RATE
from core.errors import HistoryUnavailable
from core.logger import log_event
from models.interview import (
    GenerateQuestionsRequest, GenerateQuestionsResponse, AnalyzeAnswerRequest, AnswerAnalysis
)
from services import session_store
from services.answer_scorer import AnswerScorer, ScoringLexicon
from services.question_bank import QUESTION_POOL
from services.question_selector import QuestionSelector
from services.rate_limiter import limiter

router = APIRouter(prefix="/api/ai", tags=["AI"])

_question_selector = QuestionSelector(
    pool=QUESTION_POOL,
    history_lookup=lambda user_id: session_store.find_sessions_by_user(user_id),
)
_answer_scorer = AnswerScorer(ScoringLexicon())


def get_question_selector() -> QuestionSelector:
    return _question_selector


def get_answer_scorer() -> AnswerScorer:
    return _answer_scorer


@router.post("/generate-questions", response_model=GenerateQuestionsResponse)
@limiter.limit(GENERATE_QUESTIONS_RATE)
async def generate_questions(
    request: Request,
    body: GenerateQuestionsRequest,
    current_user: dict = Depends(get_current_user),
    selector: QuestionSelector = Depends(get_question_selector)
):
    """
    Pick practice questions the user has not been asked before
    """
    if not body.type or not body.role or not body.level:
        raise HTTPException(status_code=400, detail="Missing fields")

    try:
        questions = selector.select_questions(
            current_user['id'],
            body.type,
            body.role,
            body.level,
            body.count or DEFAULT_QUESTION_COUNT
        )
        log_event("ai", "questions_generated", user_id=current_user['id'],
                  type=body.type, role=body.role, level=body.level, returned=len(questions))
        return GenerateQuestionsResponse(questions=questions)

    except HistoryUnavailable as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e) or "Failed to generate questions")


@router.post("/analyze-answer", response_model=AnswerAnalysis)
async def analyze_answer(
    body: AnalyzeAnswerRequest,
    current_user: dict = Depends(get_current_user),
    scorer: AnswerScorer = Depends(get_answer_scorer)
):
    """
    Score a transcript against its question
    """
    analysis = scorer.score(body.question, body.answer)
    log_event("ai", "answer_analyzed", user_id=current_user['id'], answer=body.answer,
              score=analysis.score)
    return analysis
