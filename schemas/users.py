from pydantic import BaseModel, validator
from typing import Literal, Optional
from database_schemas import ROLE_USER, ROLE_ADMIN

class UserCreate(BaseModel):
    email: str
    name: Optional[str] = None
    photo: Optional[str] = None

    @validator('email')
    def validate_email(cls, v):
        if not v or '@' not in v:
            raise ValueError('A valid email is required')
        return v

class RoleUpdate(BaseModel):
    email: str
    role: Literal[ROLE_USER, ROLE_ADMIN]
