from typing import Optional

from psycopg2.extras import RealDictCursor

from .database import get_connection


def find_user_by_login(username: str, email: Optional[str] = None) -> Optional[dict]:
    """Find a user whose username or email matches"""
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute("""
            SELECT id, username, email, password_hash, created_at, last_login
            FROM users
            WHERE username = %s OR email = %s
        """, (username, (email or username).lower()))
        return cursor.fetchone()
    finally:
        cursor.close()
        conn.close()


def get_user(user_id: int) -> Optional[dict]:
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute(
            "SELECT id, username, email, created_at, last_login FROM users WHERE id = %s",
            (user_id,)
        )
        return cursor.fetchone()
    finally:
        cursor.close()
        conn.close()


def create_user(username: str, email: str, password_hash: str) -> dict:
    conn = get_connection()
    cursor = conn.cursor(cursor_factory=RealDictCursor)
    try:
        cursor.execute("""
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id, username, email, created_at
        """, (username.strip(), email.strip().lower(), password_hash))
        user = cursor.fetchone()
        conn.commit()
        return user
    finally:
        cursor.close()
        conn.close()


def touch_last_login(user_id: int) -> None:
    conn = get_connection()
    cursor = conn.cursor()
    try:
        cursor.execute("UPDATE users SET last_login = CURRENT_TIMESTAMP WHERE id = %s", (user_id,))
        conn.commit()
    finally:
        cursor.close()
        conn.close()
