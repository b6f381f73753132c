import os
from dotenv import load_dotenv

load_dotenv()


def _csv_env(name: str, default: str = "") -> list:
    value = os.getenv(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]


# JWT Settings
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me-in-env")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# Database
DATABASE_URL = os.getenv("DATABASE_URL")

# HTTP
CORS_ORIGINS = _csv_env("CORS_ORIGINS", "http://localhost:5173")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
GENERATE_QUESTIONS_RATE = os.getenv("GENERATE_QUESTIONS_RATE", "30/minute")

# Interviews
DEFAULT_QUESTION_COUNT = int(os.getenv("DEFAULT_QUESTION_COUNT", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
