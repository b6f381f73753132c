from typing import List, Optional

from models.interview import AnsweredQuestion, SessionSummary, SummaryFeedbackItem
from services.answer_scorer import round_half_up

UNSCORED_ANSWER_SCORE = 70
MISSING_ANSWER = "No answer provided"

COMPLETED_FALLBACK = "Good structure and clear communication. Consider providing more specific examples."
ENDED_EARLY_FALLBACK = "Interview ended early. Consider completing all questions for comprehensive feedback."

STRONG_STRENGTHS = ["Strong communication", "Good structure", "Relevant content"]
WEAK_IMPROVEMENTS = ["Improve answer structure", "Reduce filler words", "Provide more specific examples"]
DEFAULT_IMPROVEMENTS = ["Complete the full interview", "Provide more detailed responses"]


def _answer_score(answer: AnsweredQuestion) -> int:
    if answer.analysis is None or not answer.analysis.score:
        return UNSCORED_ANSWER_SCORE
    return answer.analysis.score


def summarize_session(questions: List[str], answers: List[AnsweredQuestion], duration: int,
                      ended_early: bool = False, current_question: Optional[int] = None) -> SessionSummary:
    """
    Fold per-answer analyses into the results shown when an interview ends.
    Unanalyzed answers count as 70. When the interview ended early only the
    questions up to and including ``current_question`` are included; without
    an index that is every answered question, or the first one.
    """
    scores = [_answer_score(answer) for answer in answers]
    total = sum(scores) / len(scores) if scores else UNSCORED_ANSWER_SCORE

    covered = questions
    if ended_early:
        reached = current_question if current_question is not None else max(len(answers), 1) - 1
        covered = questions[:reached + 1]

    fallback = ENDED_EARLY_FALLBACK if ended_early else COMPLETED_FALLBACK
    feedback = []
    for index, question in enumerate(covered):
        answer = answers[index] if index < len(answers) else None
        analysis = answer.analysis if answer else None
        if analysis is not None:
            text = f"{analysis.feedback.communication} {analysis.feedback.structure} {analysis.feedback.content}"
        else:
            text = fallback
        feedback.append(SummaryFeedbackItem(
            question=question,
            answer=answer.answer if answer else MISSING_ANSWER,
            score=_answer_score(answer) if answer else UNSCORED_ANSWER_SCORE,
            feedback=text,
            analysis=analysis,
        ))

    raw_scores = [answer.analysis.score for answer in answers if answer.analysis is not None]
    if any(score >= 80 for score in raw_scores):
        strengths = list(STRONG_STRENGTHS)
    else:
        strengths = ["Professional start" if ended_early else "Professional demeanor", "Good engagement"]

    if any(score < 70 for score in raw_scores):
        improvements = list(WEAK_IMPROVEMENTS)
    else:
        improvements = list(DEFAULT_IMPROVEMENTS)

    return SessionSummary(
        score=round_half_up(total),
        feedback=feedback,
        duration=duration,
        strengths=strengths,
        improvements=improvements,
    )
