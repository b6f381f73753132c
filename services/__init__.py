from .database import get_connection
from .session_store import create_session, find_sessions_by_user, get_session, delete_session
from .question_bank import QUESTION_POOL, DEFAULT_ROLE
from .question_selector import QuestionSelector, normalize_level, normalize_type, seen_questions
from .answer_scorer import AnswerScorer, ScoringLexicon
from .session_summary import summarize_session
from .analytics import build_dashboard_stats
