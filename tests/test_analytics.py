from datetime import datetime

from services.analytics import build_dashboard_stats, score_bucket


def session(score, day, type_="technical", strengths=(), improvements=(), duration=600):
    return {
        "score": score,
        "type": type_,
        "duration": duration,
        "strengths": list(strengths),
        "improvements": list(improvements),
        "created_at": datetime(2026, 10, day),
    }


def test_dashboard_stats():
    sessions = [
        session(91, 3, strengths=["Good structure"]),
        session(65, 1, "behavioral", improvements=["Reduce filler words"]),
        session(80, 2, strengths=["Good structure", "Relevant content"]),
    ]

    stats = build_dashboard_stats(sessions)

    assert stats["total_sessions"] == 3
    assert stats["average_score"] == 79
    assert stats["best_score"] == 91
    assert stats["total_practice_seconds"] == 1800
    assert [h["score"] for h in stats["historical_scores"]] == [65, 80, 91]
    assert stats["score_distribution"] == {"excellent": 1, "good": 1, "average": 0, "needs_work": 1}
    assert stats["sessions_by_type"] == {"behavioral": 1, "technical": 2}
    assert stats["top_strengths"][0] == {"name": "Good structure", "count": 2}
    assert stats["top_improvements"] == [{"name": "Reduce filler words", "count": 1}]


def test_dashboard_stats_without_sessions():
    stats = build_dashboard_stats([])

    assert stats["total_sessions"] == 0
    assert stats["average_score"] == 0
    assert stats["historical_scores"] == []


def test_score_bucket_edges():
    assert score_bucket(90) == "excellent"
    assert score_bucket(89) == "good"
    assert score_bucket(70) == "average"
    assert score_bucket(69) == "needs_work"
