import logging
from fastapi import APIRouter, Depends
from typing import List, Optional
from pymongo.database import Database
from database import get_db
from database_schemas import COMMENTS_COLLECTION, POSTS_COLLECTION, USERS_COLLECTION
from schemas import CommentCreate, ReportRequest
from auth import verify_session, require_admin
from utils.route_helpers import (
    parse_object_id, parse_page_param, serialize_doc, insert_result, update_result, delete_result, now_ms
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["comments"])

# Helper: run a comment query joined with the commenter's user record (left join)
def find_comments(db: Database, match: dict, page: Optional[int] = None, size: Optional[int] = None) -> List[dict]:
    if size is not None and size <= 0:
        return []
    pipeline = [
        {"$match": match},
        {"$lookup": {
            "from": USERS_COLLECTION,
            "localField": "email",
            "foreignField": "email",
            "as": "author",
        }},
        {"$unwind": {"path": "$author", "preserveNullAndEmptyArrays": True}},
        {"$sort": {"timestamp": -1, "_id": -1}},
    ]
    if size is not None:
        pipeline.append({"$skip": page * size})
        pipeline.append({"$limit": size})
    return [serialize_doc(c) for c in db[COMMENTS_COLLECTION].aggregate(pipeline)]

@router.get("/comments")
def list_comments(page: Optional[str] = None, size: Optional[str] = None, db: Database = Depends(get_db)):
    return find_comments(db, {"reported": {"$ne": True}}, parse_page_param(page), parse_page_param(size))

@router.get("/comments/{post_id}")
def list_post_comments(post_id: str, db: Database = Depends(get_db)):
    """Comments still linked from the post; reported ones are unlinked and so hidden."""
    post = db[POSTS_COLLECTION].find_one({"_id": parse_object_id(post_id)}, {"comments": 1})
    if not post:
        return []
    return find_comments(db, {"_id": {"$in": post.get("comments") or []}})

@router.post("/comments/{post_id}")
def add_comment(post_id: str, comment: CommentCreate, db: Database = Depends(get_db), claims: dict = Depends(verify_session)):
    post_oid = parse_object_id(post_id)
    result = db[COMMENTS_COLLECTION].insert_one({
        "postId": post_oid,
        "email": claims["email"],
        "text": comment.text,
        "timestamp": now_ms(),
    })
    # Second, independent write: a failure here leaves the comment without a backlink
    db[POSTS_COLLECTION].update_one({"_id": post_oid}, {"$push": {"comments": result.inserted_id}})
    return insert_result(result)

@router.delete("/comments/{comment_id}")
def delete_comment(comment_id: str, db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    comment_oid = parse_object_id(comment_id)
    comment = db[COMMENTS_COLLECTION].find_one({"_id": comment_oid})
    result = db[COMMENTS_COLLECTION].delete_one({"_id": comment_oid})
    if comment:
        db[POSTS_COLLECTION].update_one({"_id": comment["postId"]}, {"$pull": {"comments": comment_oid}})
        logger.info("%s deleted comment %s", admin["email"], comment_id)
    return delete_result(result)

@router.post("/report/{comment_id}")
def report_comment(comment_id: str, report: ReportRequest, db: Database = Depends(get_db), claims: dict = Depends(verify_session)):
    comment_oid = parse_object_id(comment_id)
    comment = db[COMMENTS_COLLECTION].find_one({"_id": comment_oid})
    result = db[COMMENTS_COLLECTION].update_one(
        {"_id": comment_oid},
        {"$set": {"reported": True, "feedback": report.feedback}},
    )
    if comment:
        db[POSTS_COLLECTION].update_one({"_id": comment["postId"]}, {"$pull": {"comments": comment_oid}})
        logger.info("Comment %s reported by %s", comment_id, claims["email"])
    return update_result(result)

@router.get("/comments-restore/{comment_id}")
def restore_comment(comment_id: str, db: Database = Depends(get_db)):
    comment_oid = parse_object_id(comment_id)
    comment = db[COMMENTS_COLLECTION].find_one({"_id": comment_oid})
    result = db[COMMENTS_COLLECTION].update_one(
        {"_id": comment_oid},
        {"$unset": {"reported": "", "feedback": ""}},
    )
    if comment and comment.get("reported"):
        # Re-appended at the end, not at its original position
        db[POSTS_COLLECTION].update_one({"_id": comment["postId"]}, {"$push": {"comments": comment_oid}})
    return update_result(result)

@router.get("/reported-comments")
def list_reported_comments(
    page: Optional[str] = None,
    size: Optional[str] = None,
    db: Database = Depends(get_db),
    admin: dict = Depends(require_admin),
):
    return find_comments(db, {"reported": True}, parse_page_param(page), parse_page_param(size))

@router.get("/reported-comments-count")
def reported_comments_count(db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    return {"count": db[COMMENTS_COLLECTION].count_documents({"reported": True})}
