import logging
import random
from typing import Callable, Iterable, List, Mapping, Optional, Set

from core.errors import HistoryUnavailable
from core.logger import log_event
from models.interview import InterviewType, Level
from services.question_bank import DEFAULT_ROLE, QUESTION_POOL

logger = logging.getLogger(__name__)

FALLBACK_TYPE = InterviewType.LEADERSHIP

HistoryLookup = Callable[[object], Iterable[Mapping]]


def normalize_level(level: str) -> Level:
    """entry and mid map to themselves, everything else is senior."""
    value = str(level or "").strip().lower()
    if value == Level.ENTRY.value:
        return Level.ENTRY
    if value == Level.MID.value:
        return Level.MID
    return Level.SENIOR


def normalize_type(interview_type: str) -> InterviewType:
    value = str(interview_type or "").strip().lower()
    try:
        return InterviewType(value)
    except ValueError:
        logger.warning("Unknown interview type %r, using %s pool", interview_type, FALLBACK_TYPE.value)
        return FALLBACK_TYPE


def seen_questions(sessions: Iterable[Mapping]) -> Set[str]:
    """Collect the trimmed question text of every feedback entry in ``sessions``."""
    seen = set()
    for session in sessions:
        for item in session.get("feedback") or []:
            question = item.get("question") if isinstance(item, Mapping) else None
            if question:
                seen.add(str(question).strip())
    return seen


class QuestionSelector:
    """Picks practice questions a user has not been asked before.

    Candidates are gathered in priority tiers:

    1. the exact role and level
    2. the same role at other levels
    3. other roles at the same level
    4. the role-agnostic default bucket at the same level
    5. anything left in any pool, when the tiers above run short

    Each tier is shuffled on its own and the tiers are served in order, so a
    caller always gets the closest unseen questions available.
    """

    def __init__(self, history_lookup: HistoryLookup, pool: Mapping = QUESTION_POOL,
                 rng: Optional[random.Random] = None):
        self.pool = pool
        self.history_lookup = history_lookup
        self.rng = rng or random.Random()

    def _load_seen(self, user_id) -> Set[str]:
        try:
            sessions = list(self.history_lookup(user_id))
        except Exception as e:
            log_event("question_selector", "history_unavailable", log_level=logging.ERROR,
                      user_id=user_id, error=str(e))
            raise HistoryUnavailable(user_id) from e
        return seen_questions(sessions)

    def priority_tiers(self, interview_type: InterviewType, role: str, level: Level) -> List[List[str]]:
        source = self.pool.get(interview_type, {})
        role_levels = source.get(role, {})

        exact = list(role_levels.get(level, ()))

        same_role = []
        for other_level, questions in role_levels.items():
            if other_level != level:
                same_role.extend(questions)

        other_roles = []
        for other_role, levels in source.items():
            if other_role in (role, DEFAULT_ROLE):
                continue
            other_roles.extend(levels.get(level, ()))

        default = []
        if role != DEFAULT_ROLE:
            default = list(source.get(DEFAULT_ROLE, {}).get(level, ()))

        return [exact, same_role, other_roles, default]

    def all_questions(self) -> List[str]:
        """Every question in every pool, in a fixed traversal order."""
        questions = []
        for interview_type in InterviewType:
            for levels in self.pool.get(interview_type, {}).values():
                for bucket in levels.values():
                    questions.extend(bucket)
        return questions

    def select_questions(self, user_id, interview_type: str, role: str, level: str, count: int) -> List[str]:
        if count <= 0:
            return []

        seen = self._load_seen(user_id)
        type_key = normalize_type(interview_type)
        level_key = normalize_level(level)

        taken = set(seen)
        tiers = []
        available = 0
        for tier in self.priority_tiers(type_key, role, level_key):
            fresh = []
            for question in tier:
                key = question.strip()
                if key not in taken:
                    taken.add(key)
                    fresh.append(question)
            tiers.append(fresh)
            available += len(fresh)

        if available < count:
            broadened = []
            for question in self.all_questions():
                if available >= count:
                    break
                key = question.strip()
                if key not in taken:
                    taken.add(key)
                    broadened.append(question)
                    available += 1
            tiers.append(broadened)
            log_event("question_selector", "search_broadened", user_id=user_id,
                      type=type_key.value, role=role, level=level_key.value, added=len(broadened))

        selected = []
        for tier in tiers:
            self.rng.shuffle(tier)
            selected.extend(tier)
        selected = selected[:count]

        if len(selected) < count:
            log_event("question_selector", "pool_exhausted", log_level=logging.WARNING, user_id=user_id,
                      requested=count, returned=len(selected))
        logger.debug("Selected %d questions for user %s (%s/%s/%s)",
                     len(selected), user_id, type_key.value, role, level_key.value)
        return selected
