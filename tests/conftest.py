"""
conftest.py - Shared test fixtures for the student API

Provides an in-memory student repository, a repository whose every call
fails like an unreachable MongoDB, and a FastAPI TestClient wired to either
through dependency overrides. The app lifespan is not entered, so no MongoDB
server is needed.
"""

import bson
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from student_api.api.deps import get_student_repository
from student_api.main import app
from student_api.models.student import to_object_id


class InMemoryStudentRepository:
    """
    Same surface as StudentRepository, documents kept in a dict.
    Writes go through bson.encode so values MongoDB cannot store fail the same way.
    """

    def __init__(self):
        self.documents = {}

    def insert(self, document):
        bson.encode(document)
        object_id = ObjectId()
        self.documents[object_id] = {k: v for k, v in document.items() if k != "_id"}
        return str(object_id)

    def find_one(self, student_id):
        object_id = to_object_id(student_id)
        if object_id not in self.documents:
            return None
        return {"id": str(object_id), **self.documents[object_id]}

    def update_fields(self, student_id, fields):
        object_id = to_object_id(student_id)
        current = self.documents.get(object_id)
        if current is None:
            return 0
        bson.encode({"$set": fields})
        updated = {**current, **{k: v for k, v in fields.items() if k not in ("id", "_id")}}
        if updated == current:
            return 0
        self.documents[object_id] = updated
        return 1

    def delete(self, student_id):
        object_id = to_object_id(student_id)
        if self.documents.pop(object_id, None) is None:
            return 0
        return 1


class FailingStudentRepository:
    """Every call raises the error pymongo gives when no server answers."""

    def _fail(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    insert = find_one = update_fields = delete = _fail


@pytest.fixture()
def repo():
    return InMemoryStudentRepository()


@pytest.fixture()
def client(repo):
    app.dependency_overrides[get_student_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def failing_client():
    app.dependency_overrides[get_student_repository] = lambda: FailingStudentRepository()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def create_student(client):
    """Create a student through the API and return its id."""
    def _create(name="John Doe", age=25):
        resp = client.post("/students", json={"name": name, "age": age})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
