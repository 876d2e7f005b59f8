import time
from typing import Any
from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException

def now_ms() -> int:
    """Current time as epoch milliseconds, the timestamp unit stored on every document"""
    return int(time.time() * 1000)

def parse_object_id(value: str) -> ObjectId:
    """Parse a document id from a path or body, rejecting malformed ids with 400."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail=f"Invalid id: {value}")

def parse_tag_filter(tags: str | None) -> list[ObjectId]:
    if not tags:
        return []
    return [parse_object_id(t.strip()) for t in tags.split(",") if t.strip()]

def parse_page_param(value: str | None) -> int:
    """Absent, non-numeric or negative values become 0."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(number, 0)

def serialize_doc(value: Any) -> Any:
    """Render ObjectIds as strings, recursing into nested documents and lists."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: serialize_doc(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_doc(v) for v in value]
    return value

def insert_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "insertedId": str(result.inserted_id)}

def update_result(result) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": str(result.upserted_id) if result.upserted_id is not None else None,
    }

def delete_result(result) -> dict:
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}
