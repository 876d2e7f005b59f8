import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from config import get_settings
from database_schemas import INDEXES

logger = logging.getLogger(__name__)

_client: Optional[MongoClient] = None

def get_client() -> MongoClient:
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(settings.mongodb_uri)
    return _client

def get_db() -> Database:
    """FastAPI dependency returning the shared database handle."""
    return get_client()[get_settings().database_name]

def init_db():
    db = get_db()
    db.command("ping")
    for collection, keys, options in INDEXES:
        db[collection].create_index(keys, **options)
    logger.info("Connected to MongoDB database %s", db.name)

def close_db():
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB connection closed")
