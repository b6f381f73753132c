from .auth import UserCreate, UserLogin, TokenData, UserPublic, AuthResponse
from .interview import (
    InterviewType, Level,
    GenerateQuestionsRequest, GenerateQuestionsResponse,
    AnalyzeAnswerRequest, AnswerFeedback, AnswerMetrics, AnswerAnalysis,
    FeedbackItem, InterviewSessionCreate, InterviewSession,
    AnsweredQuestion, SessionSummaryRequest, SummaryFeedbackItem, SessionSummary
)
