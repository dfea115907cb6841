"""Pytest fixtures for the discussions backend."""

import os
import tempfile
from collections.abc import Iterator

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="discussions-logs-"))

import mongomock
import pytest
from bson import ObjectId
from flask import Flask

from forum.db import db_utils
from forum.jwt.jwt_utils import JWTManager
from forum.discussions.repositories.core.repository_factory import RepositoryFactory
from forum.discussions.utils.index.optimizer import ensure_indexes

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture(autouse=True)
def mongo_client() -> Iterator[mongomock.MongoClient]:
    """Fresh in-memory MongoDB per test, with the production indexes."""
    client = mongomock.MongoClient()
    db_utils.set_mongo_client(client)
    RepositoryFactory.reset()
    ensure_indexes()
    yield client
    RepositoryFactory.reset()
    db_utils.set_mongo_client(None)


@pytest.fixture()
def db(mongo_client):
    return db_utils.get_db()


@pytest.fixture()
def make_user(db):
    def _make(username: str) -> dict:
        user = {"_id": ObjectId(), "username": username, "email": f"{username}@example.com"}
        db["users"].insert_one(user)
        return user

    return _make


@pytest.fixture()
def user(make_user) -> dict:
    return make_user("alice")


@pytest.fixture()
def other_user(make_user) -> dict:
    return make_user("bob")


@pytest.fixture(scope="session")
def app() -> Flask:
    from app import create_app

    return create_app({"TESTING": True, "JWT_SECRET_KEY": TEST_JWT_SECRET})


@pytest.fixture()
def client(app: Flask):
    return app.test_client()


@pytest.fixture()
def auth_headers(app: Flask):
    """Bearer header for a user document."""

    def _headers(user: dict) -> dict:
        with app.app_context():
            token = JWTManager.generate_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _headers
