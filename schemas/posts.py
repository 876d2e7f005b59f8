from pydantic import BaseModel, validator
from typing import List, Optional

class PostCreate(BaseModel):
    title: str
    description: str
    tags: List[str] = []
    name: Optional[str] = None  # author display name

    @validator('title')
    def validate_title(cls, v):
        if not v or len(v.strip()) < 3:
            raise ValueError('Title must be at least 3 characters long')
        if len(v) > 150:
            raise ValueError('Title must be at most 150 characters long')
        return v

    @validator('description')
    def validate_description(cls, v):
        if not v or len(v) < 1:
            raise ValueError('Description cannot be empty')
        return v

class VoteRequest(BaseModel):
    # checked by the route: an unknown value gets an explanatory message, not a 4xx
    vote_type: Optional[str] = None
    user_email: str

class CommentCreate(BaseModel):
    text: str

    @validator('text')
    def validate_text(cls, v):
        if not v or len(v) < 1:
            raise ValueError('Comment cannot be empty')
        if len(v) > 1000:
            raise ValueError('Comment must be at most 1000 characters long')
        return v

class ReportRequest(BaseModel):
    feedback: str = ""
