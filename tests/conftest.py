import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


TEST_USER = {"id": 1, "username": "ada", "email": "ada@example.com"}


class FakeHistory:
    """Stands in for the session store's find_sessions_by_user."""

    def __init__(self, questions=(), error=None):
        self.questions = list(questions)
        self.error = error
        self.calls = []

    def __call__(self, user_id):
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return [{"feedback": [{"question": q, "answer": "..."} for q in self.questions]}]


@pytest.fixture
def history():
    return FakeHistory()


@pytest.fixture
def app():
    from main import app as fastapi_app
    from auth.dependencies import get_current_user

    fastapi_app.dependency_overrides[get_current_user] = lambda: dict(TEST_USER)
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
