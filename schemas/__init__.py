# Schemas package 
from .auth import SessionClaims
from .users import UserCreate, RoleUpdate
from .posts import PostCreate, VoteRequest, CommentCreate, ReportRequest
from .shared import TagCreate, AnnouncementCreate
from .payments import PaymentIntentRequest, PaymentCreate
