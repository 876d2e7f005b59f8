import logging
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional
from pymongo.database import Database
from database import get_db
from database_schemas import POSTS_COLLECTION, USERS_COLLECTION, TIER_BRONZE, BRONZE_POST_LIMIT
from schemas import PostCreate, VoteRequest
from auth import verify_session
from feed_utils import get_feed, get_single_post, get_author_posts, count_author_posts, estimate_post_count
from utils.route_helpers import (
    parse_object_id, parse_tag_filter, parse_page_param, insert_result, update_result, now_ms
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])

VOTE_FIELDS = {"upvote": "upvotes", "downvote": "downvotes"}

# Helper: subscription gate
def can_post(db: Database, email: str) -> bool:
    """Bronze members are limited to BRONZE_POST_LIMIT posts; every other tier is unlimited."""
    user = db[USERS_COLLECTION].find_one({"email": email})
    tier = user.get("subscription") if user else None
    if tier != TIER_BRONZE:
        return True
    return count_author_posts(db, email) < BRONZE_POST_LIMIT

# Helper: tags are a set; repeated references would not survive the tag join
def dedupe_tag_ids(tags: list) -> list:
    tag_ids = []
    for tag in tags:
        tag_id = parse_object_id(tag)
        if tag_id not in tag_ids:
            tag_ids.append(tag_id)
    return tag_ids

@router.get("/posts")
def list_posts(
    tags: Optional[str] = Query(None, description="Comma separated tag ids"),
    page: Optional[str] = None,
    size: Optional[str] = None,
    sort: Optional[str] = Query(None, description="'popularity' or omitted for newest first"),
    db: Database = Depends(get_db),
):
    tag_ids = parse_tag_filter(tags)
    return get_feed(db, tag_ids, sort, parse_page_param(page), parse_page_param(size))

@router.get("/posts-count")
def posts_count(db: Database = Depends(get_db)):
    return {"count": estimate_post_count(db)}

@router.get("/post/{post_id}")
def get_post(post_id: str, db: Database = Depends(get_db)):
    return get_single_post(db, parse_object_id(post_id))

@router.post("/posts")
def create_post(post: PostCreate, db: Database = Depends(get_db), claims: dict = Depends(verify_session)):
    # Quota is checked by the client through /post-ability beforehand
    doc = {
        "email": claims["email"],
        "name": post.name or claims.get("name"),
        "title": post.title,
        "description": post.description,
        "tags": dedupe_tag_ids(post.tags),
        "upvotes": [],
        "downvotes": [],
        "comments": [],
        "timestamp": now_ms(),
    }
    result = db[POSTS_COLLECTION].insert_one(doc)
    logger.info("Post %s created by %s", result.inserted_id, claims["email"])
    return insert_result(result)

@router.get("/posts/{email}")
def list_author_posts(
    email: str,
    page: Optional[str] = None,
    size: Optional[str] = None,
    db: Database = Depends(get_db),
    claims: dict = Depends(verify_session),
):
    if claims["email"] != email:
        raise HTTPException(status_code=403, detail="Forbidden access!")
    return get_author_posts(db, email, parse_page_param(page), parse_page_param(size))

@router.get("/posts-count/{email}")
def author_posts_count(email: str, db: Database = Depends(get_db)):
    return {"count": count_author_posts(db, email)}

@router.get("/post-ability/{email}")
def post_ability(email: str, db: Database = Depends(get_db)):
    return {"status": can_post(db, email)}

@router.post("/votes/{post_id}")
def vote_post(post_id: str, vote: VoteRequest, db: Database = Depends(get_db)):
    field = VOTE_FIELDS.get(vote.vote_type)
    if field is None:
        return {"message": "vote_type must be either 'upvote' or 'downvote'"}
    # Repeated votes by the same user accumulate; upsert creates a bare post for unknown ids
    result = db[POSTS_COLLECTION].update_one(
        {"_id": parse_object_id(post_id)},
        {"$push": {field: {"email": vote.user_email}}},
        upsert=True,
    )
    return update_result(result)
