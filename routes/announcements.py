from fastapi import APIRouter, Depends
from pymongo.database import Database
from database import get_db
from database_schemas import ANNOUNCEMENTS_COLLECTION, USERS_COLLECTION
from schemas.shared import AnnouncementCreate
from auth import require_admin
from utils.route_helpers import serialize_doc, insert_result, now_ms

router = APIRouter(tags=["announcements"])

WINDOW_MS = 7 * 24 * 60 * 60 * 1000  # 7 days

def recent_window() -> dict:
    return {"timestamp": {"$gte": now_ms() - WINDOW_MS}}

@router.get("/announcements")
def list_announcements(db: Database = Depends(get_db)):
    cursor = db[ANNOUNCEMENTS_COLLECTION].find(recent_window()).sort("timestamp", -1)
    return [serialize_doc(a) for a in cursor]

@router.get("/announcements-count")
def announcements_count(db: Database = Depends(get_db)):
    return {"count": db[ANNOUNCEMENTS_COLLECTION].count_documents(recent_window())}

@router.post("/announcements")
def create_announcement(announcement: AnnouncementCreate, db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    author = db[USERS_COLLECTION].find_one({"email": admin["email"]})
    doc = announcement.model_dump(exclude_none=True)
    doc.update({
        "email": admin["email"],
        "name": author.get("name") if author else None,
        "timestamp": now_ms(),
    })
    return insert_result(db[ANNOUNCEMENTS_COLLECTION].insert_one(doc))
