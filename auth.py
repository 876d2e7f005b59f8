import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, Request, Response, status
from jose import JWTError, jwt
from pymongo.database import Database
from config import get_settings
from database import get_db
from database_schemas import USERS_COLLECTION, ROLE_ADMIN

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
COOKIE_NAME = "token"
UNAUTHORIZED_DETAIL = "Unauthorized access!"

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=ALGORITHM)

def decode_access_token(token: str):
    try:
        return jwt.decode(token, get_settings().jwt_secret, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info("Rejected session token: %s", e)
        return None

def verify_token(token: str):
    """Verify and decode JWT token, return payload if valid, None otherwise"""
    return decode_access_token(token)

def cookie_options() -> dict:
    """Cookie attributes for the session token; cross-site only in production."""
    production = get_settings().production
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
    }

def set_session_cookie(response: Response, token: str):
    response.set_cookie(COOKIE_NAME, token, **cookie_options())

def clear_session_cookie(response: Response):
    response.delete_cookie(COOKIE_NAME, **cookie_options())

def unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_DETAIL)

def verify_session(request: Request) -> dict:
    """Route guard: decode the session cookie or reject with 401."""
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        raise unauthorized()
    payload = verify_token(token)
    if not payload or not payload.get("email"):
        raise unauthorized()
    return payload

def require_admin(claims: dict = Depends(verify_session), db: Database = Depends(get_db)) -> dict:
    user = db[USERS_COLLECTION].find_one({"email": claims["email"]})
    if not user or user.get("role") != ROLE_ADMIN:
        logger.warning("Admin access denied for %s", claims["email"])
        raise unauthorized()
    return claims
