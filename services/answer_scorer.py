import logging
import math
import re
from typing import List, NamedTuple, Sequence, Tuple

from models.interview import AnswerAnalysis, AnswerFeedback, AnswerMetrics

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 150

FILLER_WORDS = ("um", "uh", "like", "you know", "basically", "actually", "sort of", "kind of")

STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "can",
    "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
])

STAR_INDICATORS = (
    ("situation", ("when", "situation", "time", "worked", "job", "project")),
    ("task", ("task", "goal", "objective", "responsibility", "needed")),
    ("action", ("did", "implemented", "created", "developed", "worked", "collaborated")),
    ("result", ("result", "outcome", "achieved", "improved", "successful", "impact")),
)

_PUNCTUATION = re.compile(r"[^\w\s]")


class ScoringLexicon(NamedTuple):
    filler_words: Tuple[str, ...] = FILLER_WORDS
    stop_words: frozenset = STOP_WORDS
    star_indicators: Tuple[Tuple[str, Tuple[str, ...]], ...] = STAR_INDICATORS


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def tokenize(text: str) -> List[str]:
    return text.lower().split()


def count_fillers(tokens: Sequence[str], filler_words: Sequence[str] = FILLER_WORDS) -> int:
    """Count filler words and phrases.

    Single-word fillers must equal a token exactly. Phrases such as
    "you know" match a run of consecutive tokens, so punctuation attached to
    a token ("um,") stops it from matching.
    """
    phrases = [tuple(filler.split()) for filler in filler_words]
    count = 0
    for index in range(len(tokens)):
        for phrase in phrases:
            if tuple(tokens[index:index + len(phrase)]) == phrase:
                count += 1
    return count


def extract_keywords(text: str, stop_words: frozenset = STOP_WORDS) -> List[str]:
    words = _PUNCTUATION.sub("", text.lower()).split()
    return [word for word in words if len(word) > 2 and word not in stop_words]


def keyword_match(question_keywords: Sequence[str], answer_keywords: Sequence[str]) -> int:
    if not question_keywords:
        return 100
    matches = [
        q for q in question_keywords
        if any(a in q or q in a for a in answer_keywords)
    ]
    return round_half_up(len(matches) / len(question_keywords) * 100)


def structure_score(answer: str, star_indicators=STAR_INDICATORS) -> int:
    """25 points for each STAR part the answer touches on."""
    answer_lower = answer.lower()
    score = 0
    for _, indicators in star_indicators:
        if any(indicator in answer_lower for indicator in indicators):
            score += 25
    return score


def overall_score(confidence: int, structure: int, fillers: int, word_count: int) -> int:
    raw = (
        confidence * 0.4
        + structure * 0.3
        + max(0, 100 - fillers * 5) * 0.2
        + min(100, word_count * 2) * 0.1
    )
    return min(100, max(0, round_half_up(raw)))


def build_feedback(confidence: int, structure: int, fillers: int, word_count: int) -> AnswerFeedback:
    if fillers == 0:
        communication = "Excellent communication with no filler words. Clear and confident delivery."
    elif fillers <= 2:
        communication = "Good communication with minimal filler words. Consider pausing instead of using fillers."
    else:
        communication = ("Communication could be improved by reducing filler words. "
                         "Practice pausing and thinking before speaking.")

    if structure >= 75:
        structure_text = "Great use of the STAR method! Your answer is well-structured and easy to follow."
    elif structure >= 50:
        structure_text = "Good structure, but consider using the STAR method more explicitly for better organization."
    else:
        structure_text = ("Consider using the STAR method (Situation, Task, Action, Result) "
                          "to structure your response better.")

    if confidence >= 80:
        content = "Excellent content relevance! Your answer directly addresses the question."
    elif confidence >= 60:
        content = "Good content, but try to be more specific and directly address the key points of the question."
    else:
        content = ("Your answer could be more focused on the specific question. "
                   "Consider rephrasing to better match the question.")

    suggestions = []
    if word_count < 30:
        suggestions.append("Provide more specific examples and details to strengthen your answer.")
    if fillers > 3:
        suggestions.append("Practice speaking without filler words to sound more professional.")
    if structure < 50:
        suggestions.append("Use the STAR method: describe the Situation, explain your Task, "
                           "detail your Actions, and share the Results.")
    if confidence < 70:
        suggestions.append("Focus on directly answering the question with relevant examples.")

    return AnswerFeedback(
        communication=communication,
        structure=structure_text,
        content=content,
        suggestions=suggestions,
    )


class AnswerScorer:
    """Heuristic scoring of a transcript against its question."""

    def __init__(self, lexicon: ScoringLexicon = ScoringLexicon()):
        self.lexicon = lexicon

    def score(self, question: str, answer: str) -> AnswerAnalysis:
        tokens = tokenize(answer)
        word_count = len(tokens)
        speaking_time = round_half_up(word_count / WORDS_PER_MINUTE * 60)
        fillers = count_fillers(tokens, self.lexicon.filler_words)

        confidence = keyword_match(
            extract_keywords(question, self.lexicon.stop_words),
            extract_keywords(answer, self.lexicon.stop_words),
        )
        structure = structure_score(answer, self.lexicon.star_indicators)
        score = overall_score(confidence, structure, fillers, word_count)

        logger.debug("Scored answer: score=%d confidence=%d structure=%d fillers=%d words=%d",
                     score, confidence, structure, fillers, word_count)

        return AnswerAnalysis(
            question=question,
            answer=answer,
            score=score,
            feedback=build_feedback(confidence, structure, fillers, word_count),
            metrics=AnswerMetrics(
                word_count=word_count,
                speaking_time=speaking_time,
                filler_words=fillers,
                confidence=confidence,
            ),
        )
