from pydantic import BaseModel, validator
from typing import Optional

class TagCreate(BaseModel):
    name: str
    icon: Optional[str] = None

    @validator('name')
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Tag name cannot be empty')
        return v.strip()

class AnnouncementCreate(BaseModel):
    title: Optional[str] = None
    description: str

    @validator('description')
    def validate_description(cls, v):
        if not v or len(v) < 1:
            raise ValueError('Announcement cannot be empty')
        return v
