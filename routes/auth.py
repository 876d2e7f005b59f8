from fastapi import APIRouter, Response
from schemas.auth import SessionClaims
from auth import create_access_token, set_session_cookie, clear_session_cookie

router = APIRouter(tags=["authentication"])

@router.post("/jwt")
def issue_token(claims: SessionClaims, response: Response):
    """Sign the posted identity claims into a one-hour session cookie."""
    token = create_access_token(claims.model_dump())
    set_session_cookie(response, token)
    return {"success": True}

@router.get("/logout")
def logout(response: Response):
    clear_session_cookie(response)
    return {"success": True}
