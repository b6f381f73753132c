from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime


class InterviewType(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    LEADERSHIP = "leadership"


class Level(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


# ============ QUESTIONS ============

class GenerateQuestionsRequest(BaseModel):
    type: str
    role: str
    level: str
    count: Optional[int] = None


class GenerateQuestionsResponse(BaseModel):
    questions: List[str]


# ============ ANSWER ANALYSIS ============

class AnalyzeAnswerRequest(BaseModel):
    question: str
    answer: str = ""


class AnswerFeedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    communication: str
    structure: str
    content: str
    suggestions: List[str] = []


class AnswerMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    word_count: int = Field(alias="wordCount")
    speaking_time: int = Field(alias="speakingTime")
    filler_words: int = Field(alias="fillerWords")
    confidence: int


class AnswerAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    score: int
    feedback: AnswerFeedback
    metrics: AnswerMetrics


# ============ SESSIONS ============

class FeedbackItem(BaseModel):
    question: str
    answer: str
    feedback: Optional[str] = None


class InterviewSessionCreate(BaseModel):
    type: str
    level: str
    role: str
    duration: int = Field(ge=0)
    score: int = Field(ge=0, le=100)
    feedback: List[FeedbackItem] = []
    strengths: List[str] = []
    improvements: List[str] = []


class InterviewSession(InterviewSessionCreate):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(alias="userId")
    created_at: datetime = Field(alias="createdAt")


# ============ SUMMARY ============

class AnsweredQuestion(BaseModel):
    question: str
    answer: str
    analysis: Optional[AnswerAnalysis] = None


class SessionSummaryRequest(BaseModel):
    questions: List[str]
    answers: List[AnsweredQuestion] = []
    duration: int = Field(default=0, ge=0)
    ended_early: bool = False
    current_question: Optional[int] = Field(default=None, ge=0)


class SummaryFeedbackItem(BaseModel):
    question: str
    answer: str
    score: int
    feedback: str
    analysis: Optional[AnswerAnalysis] = None


class SessionSummary(BaseModel):
    score: int
    feedback: List[SummaryFeedbackItem]
    duration: int
    strengths: List[str]
    improvements: List[str]
