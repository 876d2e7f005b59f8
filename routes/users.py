import logging
import re
from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from database import get_db
from database_schemas import USERS_COLLECTION, TIER_BRONZE
from schemas.users import UserCreate, RoleUpdate
from auth import require_admin
from utils.route_helpers import serialize_doc, insert_result, update_result, now_ms

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

@router.get("/users")
def list_users(name: str = "", db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    """Admin: all users, optionally filtered by a case-insensitive name match."""
    query = {}
    if name:
        query = {"name": {"$regex": re.escape(name), "$options": "i"}}
    return [serialize_doc(u) for u in db[USERS_COLLECTION].find(query)]

@router.post("/users")
def register_user(user: UserCreate, db: Database = Depends(get_db)):
    users = db[USERS_COLLECTION]
    if users.find_one({"email": user.email}):
        return {"message": "User already exists", "insertedId": None}
    doc = user.model_dump(exclude_none=True)
    doc.update({"subscription": TIER_BRONZE, "timestamp": now_ms()})
    try:
        result = users.insert_one(doc)
    except DuplicateKeyError:
        # lost a race with a concurrent registration of the same email
        return {"message": "User already exists", "insertedId": None}
    logger.info("Registered user %s", user.email)
    return insert_result(result)

@router.get("/user/{email}")
def get_user(email: str, db: Database = Depends(get_db)):
    return serialize_doc(db[USERS_COLLECTION].find_one({"email": email}))

@router.post("/user-role")
def set_user_role(update: RoleUpdate, db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    result = db[USERS_COLLECTION].update_one({"email": update.email}, {"$set": {"role": update.role}})
    logger.info("%s set role of %s to %s", admin["email"], update.email, update.role)
    return update_result(result)
