import logging

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse
import redis

from core.config import REDIS_URL, CORS_ORIGINS
from auth.utils import decode_access_token

logger = logging.getLogger(__name__)


def _check_redis(url: str) -> bool:
    try:
        r = redis.from_url(url, socket_connect_timeout=2)
        r.ping()
        return True
    except redis.RedisError as e:
        logger.warning("Redis unavailable for rate limiting (%s), using in-memory storage", e)
        return False


STORAGE_URI = REDIS_URL if _check_redis(REDIS_URL) else "memory://"


def get_identifier(request: Request) -> str:
    """
    Get identifier for rate limiting.
    Uses the bearer token's user if present, otherwise falls back to IP address.
    """
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token_data = decode_access_token(auth_header[len("Bearer "):])
        if token_data is not None:
            return f"user:{token_data.user_id}"

    # Fall back to IP address
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


# Create limiter - use Redis if available, otherwise fall back to in-memory
limiter = Limiter(
    key_func=get_identifier,
    storage_uri=STORAGE_URI,
    strategy="fixed-window"
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Rate limit errors with CORS headers so browsers can read them"""
    origin = request.headers.get("origin", "")

    headers = {}
    if origin in CORS_ORIGINS:
        headers = {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return JSONResponse(
        status_code=429,
        content={
            "error": "Rate limit exceeded",
            "detail": str(exc.detail),
            "retry_after": exc.detail
        },
        headers=headers
    )
