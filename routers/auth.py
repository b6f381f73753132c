import logging

from fastapi import APIRouter, HTTPException, Depends, status
from models.auth import UserCreate, UserLogin, AuthResponse, UserPublic
from auth.utils import hash_password, verify_password, create_access_token
from auth.dependencies import get_current_user
from services import user_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _public(user: dict) -> UserPublic:
    return UserPublic(id=user['id'], username=user['username'], email=user['email'])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate):
    """Register a new user"""
    if not user.username.strip() or not user.password:
        raise HTTPException(status_code=400, detail="Missing fields")

    try:
        # Check if username or email already exists
        if user_store.find_user_by_login(user.username.strip(), user.email):
            raise HTTPException(status_code=409, detail="Username or email already exists")

        new_user = user_store.create_user(user.username, user.email, hash_password(user.password))
        logger.info("Registered user %s", new_user['id'])

        return AuthResponse(token=create_access_token(new_user['id']), user=_public(new_user))

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Registration failed")
        raise HTTPException(status_code=500, detail=f"Registration failed: {e}")


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin):
    """Login with username or email and get access token"""
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=400, detail="Missing fields")

    try:
        user = user_store.find_user_by_login(credentials.username)
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        if not verify_password(credentials.password, user['password_hash']):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        user_store.touch_last_login(user['id'])

        return AuthResponse(token=create_access_token(user['id']), user=_public(user))

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail=f"Login failed: {e}")


@router.get("/me", response_model=UserPublic)
async def get_me(current_user: dict = Depends(get_current_user)):
    """Get current user info"""
    return _public(current_user)
