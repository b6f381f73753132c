from models.interview import AnsweredQuestion
from services.answer_scorer import AnswerScorer
from services.session_summary import summarize_session

QUESTIONS = [
    "Tell me about a time you led a team.",
    "Describe a project where you influenced without formal authority.",
    "Tell me about a strategic decision that failed. What did you learn?",
]


def answered(question, answer):
    return AnsweredQuestion(question=question, answer=answer, analysis=AnswerScorer().score(question, answer))


def test_completed_interview_averages_scores():
    answers = [
        answered(QUESTIONS[0], "I led the team by assigning tasks and we achieved the result of shipping on time."),
        AnsweredQuestion(question=QUESTIONS[1], answer="I skipped the analysis"),
    ]

    summary = summarize_session(QUESTIONS, answers, duration=420)

    # 70 for the analyzed answer, 70 for the unanalyzed one
    assert summary.score == 70
    assert summary.duration == 420
    assert [item.question for item in summary.feedback] == QUESTIONS
    assert summary.feedback[0].feedback.startswith("Excellent communication with no filler words.")
    assert summary.feedback[1].feedback.startswith("Good structure and clear communication.")
    assert summary.feedback[2].answer == "No answer provided"
    assert summary.strengths == ["Professional demeanor", "Good engagement"]
    assert summary.improvements == ["Complete the full interview", "Provide more detailed responses"]


def test_weak_answers_trigger_improvements():
    answers = [answered(QUESTIONS[0], "")]

    summary = summarize_session(QUESTIONS, answers, duration=30, ended_early=True)

    assert summary.score == 20
    assert len(summary.feedback) == 1
    assert summary.strengths == ["Professional start", "Good engagement"]
    assert summary.improvements == [
        "Improve answer structure", "Reduce filler words", "Provide more specific examples"
    ]


def test_strong_answer_reports_strengths():
    answer = ("When I worked on the project for my team lead, the task was to fix a failing build. "
              "I implemented caching, led a review of the pipeline and we achieved a result: "
              "builds were twice as fast and the team shipped on time every sprint after.")
    summary = summarize_session(QUESTIONS[:1], [answered(QUESTIONS[0], answer)], duration=90)

    assert summary.score >= 80
    assert summary.strengths == ["Strong communication", "Good structure", "Relevant content"]


def test_no_answers_defaults_to_neutral_score():
    summary = summarize_session(QUESTIONS, [], duration=5, ended_early=True)

    assert summary.score == 70
    assert len(summary.feedback) == 1
    assert summary.feedback[0].feedback.startswith("Interview ended early.")


def test_ended_early_includes_the_current_question():
    questions = ["Q1", "Q2", "Q3", "Q4"]
    answers = [
        AnsweredQuestion(question="Q1", answer="first"),
        AnsweredQuestion(question="Q2", answer="second"),
    ]

    summary = summarize_session(questions, answers, duration=200, ended_early=True, current_question=2)

    assert [item.question for item in summary.feedback] == ["Q1", "Q2", "Q3"]
    assert summary.feedback[2].answer == "No answer provided"
    assert summary.feedback[2].feedback.startswith("Interview ended early.")
