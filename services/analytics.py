from collections import Counter
from typing import Iterable, List

from services.answer_scorer import round_half_up

TOP_ITEMS = 5


def score_bucket(score: int) -> str:
    if score >= 90:
        return "excellent"
    if score >= 80:
        return "good"
    if score >= 70:
        return "average"
    return "needs_work"


def _top(counter: Counter) -> List[dict]:
    return [{"name": name, "count": count} for name, count in counter.most_common(TOP_ITEMS)]


def build_dashboard_stats(sessions: Iterable[dict]) -> dict:
    """
    Aggregate a user's stored sessions into dashboard numbers.
    Sessions may arrive in any order; history is reported oldest first.
    """
    ordered = sorted(sessions, key=lambda s: s['created_at'])

    distribution = {"excellent": 0, "good": 0, "average": 0, "needs_work": 0}
    by_type = Counter()
    strengths = Counter()
    improvements = Counter()
    for session in ordered:
        distribution[score_bucket(session['score'])] += 1
        by_type[session['type']] += 1
        strengths.update(session.get('strengths') or [])
        improvements.update(session.get('improvements') or [])

    scores = [session['score'] for session in ordered]
    return {
        "total_sessions": len(ordered),
        "average_score": round_half_up(sum(scores) / len(scores)) if scores else 0,
        "best_score": max(scores) if scores else 0,
        "total_practice_seconds": sum(session['duration'] for session in ordered),
        "historical_scores": [
            {"name": f"S{i}", "score": session['score'], "created_at": session['created_at']}
            for i, session in enumerate(ordered, 1)
        ],
        "score_distribution": distribution,
        "sessions_by_type": dict(by_type),
        "top_strengths": _top(strengths),
        "top_improvements": _top(improvements),
    }
