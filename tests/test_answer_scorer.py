import pytest

from services.answer_scorer import (
    AnswerScorer, count_fillers, extract_keywords, keyword_match, round_half_up, structure_score, tokenize
)

LEAD_QUESTION = "Tell me about a time you led a team."


@pytest.fixture
def scorer():
    return AnswerScorer()


def test_led_a_team_answer(scorer):
    analysis = scorer.score(
        LEAD_QUESTION,
        "I led the team by assigning tasks and we achieved the result of shipping on time.",
    )

    # situation ("time"), task ("tasks") and result ("achieved") match; no action trigger
    assert analysis.metrics.confidence == 60
    assert analysis.metrics.word_count == 16
    assert analysis.metrics.speaking_time == 6
    assert analysis.metrics.filler_words == 0
    assert analysis.score == 70
    assert analysis.feedback.communication.startswith("Excellent communication")
    assert analysis.feedback.structure.startswith("Great use of the STAR method")
    assert analysis.feedback.content.startswith("Good content")
    assert analysis.feedback.suggestions == [
        "Provide more specific examples and details to strengthen your answer.",
        "Focus on directly answering the question with relevant examples.",
    ]


def test_filler_heavy_answer_is_penalized(scorer):
    analysis = scorer.score(
        "How did you ship the release?",
        "um I uh think like basically actually we shipped it",
    )

    assert analysis.metrics.word_count == 10
    assert analysis.metrics.filler_words == 5
    assert analysis.metrics.confidence == 33
    assert analysis.feedback.communication.startswith("Communication could be improved")
    assert "Practice speaking without filler words to sound more professional." in analysis.feedback.suggestions
    # 0.4*33 + 0 + 0.2*75 + 0.1*20
    assert analysis.score == 30


def test_empty_answer(scorer):
    analysis = scorer.score(LEAD_QUESTION, "")

    assert analysis.metrics.word_count == 0
    assert analysis.metrics.speaking_time == 0
    assert analysis.metrics.filler_words == 0
    assert analysis.metrics.confidence == 0
    assert analysis.score == 20
    assert len(analysis.feedback.suggestions) == 3


def test_empty_question_is_fully_relevant(scorer):
    analysis = scorer.score("", "")

    assert analysis.metrics.confidence == 100
    assert analysis.score == 60


def test_full_star_answer():
    answer = ("When I worked on the project, my task was to fix the build. "
              "I implemented caching and the result was a faster pipeline.")
    assert structure_score(answer) == 100


def test_star_group_counts_once():
    assert structure_score("result outcome achieved improved successful impact") == 25


def test_multi_word_fillers_match_consecutive_tokens():
    assert count_fillers(tokenize("You know it was sort of fine")) == 2
    assert count_fillers(tokenize("I know you were kind")) == 0


def test_fillers_must_match_whole_tokens():
    assert count_fillers(tokenize("um, like I said")) == 1


def test_keywords_drop_short_and_stop_words():
    assert extract_keywords("Did you design the API, or was it them?") == ["design", "api"]


def test_keyword_match_uses_containment():
    assert keyword_match(["cache", "design"], ["caching", "designs"]) == 50
    assert keyword_match(["cache"], ["caches"]) == 100
    assert keyword_match([], ["anything"]) == 100
    assert keyword_match(["cache"], []) == 0


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(69.7) == 70
    assert round_half_up(6.4) == 6


@pytest.mark.parametrize("question,answer", [
    ("", "um um um um um um um um um um um um um um um um um um um um um um um um um"),
    ("Explain an LRU cache.", "An LRU cache evicts the least recently used entry. " * 40),
    ("What?", "!!! ??? ..."),
    (LEAD_QUESTION, "When the project needed a goal I implemented it and achieved impact"),
])
def test_score_is_bounded(scorer, question, answer):
    analysis = scorer.score(question, answer)
    assert 0 <= analysis.score <= 100
    assert 0 <= analysis.metrics.confidence <= 100


def test_scoring_is_deterministic(scorer):
    answer = "Basically I worked on a project where the goal was latency, and we improved it."
    assert scorer.score(LEAD_QUESTION, answer) == scorer.score(LEAD_QUESTION, answer)


def test_metrics_serialize_with_camel_case_names(scorer):
    payload = scorer.score(LEAD_QUESTION, "I led a team").model_dump(by_alias=True)
    assert set(payload["metrics"]) == {"wordCount", "speakingTime", "fillerWords", "confidence"}
