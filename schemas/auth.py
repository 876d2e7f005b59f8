from pydantic import BaseModel, ConfigDict

class SessionClaims(BaseModel):
    """Identity claims posted by the client after it signs in; embedded in the session token."""
    model_config = ConfigDict(extra="allow")

    email: str
