"""
Shared test fixtures and utilities.

The MongoDB handle is swapped for an in-memory mongomock database through
FastAPI's dependency overrides, so no server is needed.
"""

import os

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["NODE_ENV"] = "development"

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from config import get_settings

get_settings.cache_clear()

from main import app
from database import get_db


@pytest.fixture
def db():
    """Fresh in-memory database for each test."""
    database = mongomock.MongoClient()["post-portal"]
    database["users"].create_index([("email", 1)], unique=True)
    return database


@pytest.fixture
def client(db):
    """Test client bound to the in-memory database."""
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def login(client: TestClient, email: str, **claims) -> None:
    """Obtain a session cookie for email; the client keeps it for later requests."""
    response = client.post("/jwt", json={"email": email, **claims})
    assert response.status_code == 200


def make_user(db, email: str, name: str = "Test User", role: str = "user", subscription: str = "Bronze") -> dict:
    doc = {"email": email, "name": name, "role": role, "subscription": subscription, "timestamp": 1}
    db["users"].insert_one(doc)
    return doc


def make_tag(db, name: str) -> ObjectId:
    return db["tags"].insert_one({"name": name, "icon": f"{name}.svg"}).inserted_id


def make_post(
    db,
    email: str,
    title: str = "A post",
    tags: list | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    timestamp: int = 1,
) -> ObjectId:
    doc = {
        "email": email,
        "name": "Test User",
        "title": title,
        "description": "Body text",
        "tags": tags or [],
        "upvotes": [{"email": f"up{i}@example.com"} for i in range(upvotes)],
        "downvotes": [{"email": f"down{i}@example.com"} for i in range(downvotes)],
        "comments": [],
        "timestamp": timestamp,
    }
    return db["posts"].insert_one(doc).inserted_id


@pytest.fixture
def author(db) -> str:
    """A registered regular user."""
    make_user(db, "author@example.com")
    return "author@example.com"


@pytest.fixture
def admin(db) -> str:
    """A registered administrator."""
    make_user(db, "admin@example.com", name="Admin", role="admin")
    return "admin@example.com"
