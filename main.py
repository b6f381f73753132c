from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from core.config import CORS_ORIGINS
from core.logger import configure_logging
from routers import ai, auth, dashboard, sessions
from services.rate_limiter import limiter, rate_limit_exceeded_handler

configure_logging()

app = FastAPI(title="IntervYou API")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(ai.router)
app.include_router(sessions.router)
app.include_router(dashboard.router)


@app.get("/")
async def root():
    return {"message": "IntervYou API is running. See /health and /api."}


@app.get("/health")
async def health():
    return {"ok": True}
