"""Shared fixtures: app factory without a live MongoDB, a recording fake service,
and an in-memory mongomock connection for the service tests."""

import mongomock
import pytest
from mongoengine import connect, disconnect, get_connection

from app import create_app
from services import students_service

TEST_DB = "students_test"


class FakeStudentsService:
    """Records every call and returns canned results."""

    def __init__(self):
        self.calls = []
        self.students = [
            {"userId": 1, "name": "Asha Rao", "email": "asha@example.com", "className": "10", "section": "A"},
            {"userId": 2, "name": "Ben Ode", "email": "ben@example.com", "className": "10", "section": "B"},
        ]

    def get_all_students(self, filters):
        self.calls.append(("get_all_students", filters))
        return self.students

    def add_new_student(self, data):
        self.calls.append(("add_new_student", data))
        return {"message": "Student added successfully", "userId": 3}

    def get_student_detail(self, user_id):
        self.calls.append(("get_student_detail", user_id))
        return self.students[0]

    def update_student(self, data):
        self.calls.append(("update_student", data))
        return {"message": "Student updated successfully"}

    def set_student_status(self, data):
        self.calls.append(("set_student_status", data))
        return {"message": "Student disabled successfully"}

    def delete_student(self, user_id):
        self.calls.append(("delete_student", user_id))
        return {"message": "Student deleted successfully"}


@pytest.fixture()
def app():
    return create_app({"TESTING": True, "MONGO_CONNECT": False})


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def fake_service(monkeypatch):
    fake = FakeStudentsService()
    for name in (
        "get_all_students",
        "add_new_student",
        "get_student_detail",
        "update_student",
        "set_student_status",
        "delete_student",
    ):
        monkeypatch.setattr(students_service, name, getattr(fake, name))
    return fake


@pytest.fixture()
def mongo_db():
    connect(TEST_DB, host="mongodb://localhost", mongo_client_class=mongomock.MongoClient)
    yield
    get_connection().drop_database(TEST_DB)
    disconnect()
