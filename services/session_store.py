import logging
from typing import List, Optional

from psycopg2.extras import Json, RealDictCursor

from models.interview import InterviewSessionCreate
from .database import get_connection

logger = logging.getLogger(__name__)

_SESSION_COLUMNS = """
    id, user_id, type, level, role, duration, score,
    feedback, strengths, improvements, created_at
"""


def create_session(user_id: int, session: InterviewSessionCreate) -> dict:
    """Persist a finished interview and return the stored row"""
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute(f"""
            INSERT INTO interview_sessions
                (user_id, type, level, role, duration, score, feedback, strengths, improvements)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING {_SESSION_COLUMNS}
        """, (
            user_id,
            session.type,
            session.level,
            session.role,
            session.duration,
            session.score,
            Json([item.model_dump() for item in session.feedback]),
            Json(session.strengths),
            Json(session.improvements),
        ))
        row = cursor.fetchone()
        conn.commit()
        logger.info("Stored interview session %s for user %s", row['id'], user_id)
        return row
    finally:
        cursor.close()
        conn.close()


def find_sessions_by_user(user_id: int) -> List[dict]:
    """All sessions of a user, newest first"""
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute(f"""
            SELECT {_SESSION_COLUMNS}
            FROM interview_sessions
            WHERE user_id = %s
            ORDER BY created_at DESC
        """, (user_id,))
        return cursor.fetchall()
    finally:
        cursor.close()
        conn.close()


def get_session(user_id: int, session_id: int) -> Optional[dict]:
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute(f"""
            SELECT {_SESSION_COLUMNS}
            FROM interview_sessions
            WHERE id = %s AND user_id = %s
        """, (session_id, user_id))
        return cursor.fetchone()
    finally:
        cursor.close()
        conn.close()


def delete_session(user_id: int, session_id: int) -> bool:
    conn = get_connection()
    cursor = conn.cursor()
    try:
        cursor.execute("""
            DELETE FROM interview_sessions
            WHERE id = %s AND user_id = %s
        """, (session_id, user_id))
        deleted = cursor.rowcount > 0
        conn.commit()
        return deleted
    finally:
        cursor.close()
        conn.close()
