"""
Aggregation pipelines behind the post feed.

Every variant shares one shape: match, join the author (inner join, so posts
whose author no longer resolves drop out), join the tag documents, add the
computed counters, sort, then paginate.
"""

from typing import List, Optional
from bson import ObjectId
from pymongo.database import Database
from database_schemas import POSTS_COLLECTION, USERS_COLLECTION, TAGS_COLLECTION
from utils.route_helpers import serialize_doc

SORT_POPULARITY = "popularity"

def _array_size(field: str) -> dict:
    # missing, null or non-list vote/comment fields count as empty
    return {"$cond": [{"$isArray": f"${field}"}, {"$size": f"${field}"}, 0]}

def join_stages() -> List[dict]:
    return [
        {"$lookup": {
            "from": USERS_COLLECTION,
            "localField": "email",
            "foreignField": "email",
            "as": "author",
        }},
        {"$unwind": "$author"},
        {"$lookup": {
            "from": TAGS_COLLECTION,
            "localField": "tags",
            "foreignField": "_id",
            "as": "tags",
        }},
        {"$addFields": {
            "totalVotes": {"$subtract": [_array_size("upvotes"), _array_size("downvotes")]},
            "commentCount": _array_size("comments"),
        }},
    ]

def sort_stage(sort: Optional[str]) -> dict:
    if sort == SORT_POPULARITY:
        return {"$sort": {"totalVotes": -1, "_id": -1}}
    return {"$sort": {"timestamp": -1, "_id": -1}}

def build_feed_pipeline(match: dict, sort: Optional[str], page: int, size: int) -> List[dict]:
    pipeline = []
    if match:
        pipeline.append({"$match": match})
    pipeline.extend(join_stages())
    pipeline.append(sort_stage(sort))
    pipeline.append({"$skip": page * size})
    pipeline.append({"$limit": size})
    return pipeline

def _run(db: Database, pipeline: List[dict]) -> List[dict]:
    return [serialize_doc(doc) for doc in db[POSTS_COLLECTION].aggregate(pipeline)]

def get_feed(db: Database, tag_ids: List[ObjectId], sort: Optional[str], page: int, size: int) -> List[dict]:
    """Paginated feed, optionally restricted to posts carrying any of tag_ids."""
    if size <= 0:
        return []
    match = {"tags": {"$in": tag_ids}} if tag_ids else {}
    return _run(db, build_feed_pipeline(match, sort, page, size))

def get_single_post(db: Database, post_id: ObjectId) -> List[dict]:
    pipeline = [{"$match": {"_id": post_id}}] + join_stages()
    return _run(db, pipeline)

def get_author_posts(db: Database, email: str, page: int, size: int) -> List[dict]:
    if size <= 0:
        return []
    return _run(db, build_feed_pipeline({"email": email}, None, page, size))

def count_author_posts(db: Database, email: str) -> int:
    return db[POSTS_COLLECTION].count_documents({"email": email})

def estimate_post_count(db: Database) -> int:
    return db[POSTS_COLLECTION].estimated_document_count()
