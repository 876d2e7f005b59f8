from fastapi import APIRouter, Depends
from pymongo.database import Database
from database import get_db
from database_schemas import TAGS_COLLECTION
from schemas.shared import TagCreate
from auth import require_admin
from utils.route_helpers import serialize_doc, insert_result

router = APIRouter(prefix="/tags", tags=["tags"])

@router.get("")
def list_tags(db: Database = Depends(get_db)):
    return [serialize_doc(t) for t in db[TAGS_COLLECTION].find()]

@router.post("")
def create_tag(tag: TagCreate, db: Database = Depends(get_db), admin: dict = Depends(require_admin)):
    result = db[TAGS_COLLECTION].insert_one(tag.model_dump())
    return insert_result(result)
