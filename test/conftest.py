"""
Shared test fixtures: an in-memory users collection, a recording mailer and
an app wired to both.
"""

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from config import Settings
from main import create_app

TEST_JWT_SECRET = "test-secret-key-for-testing-only"


class FakeCollection:
    """Just enough of a pymongo collection for create/read on users."""

    def __init__(self):
        self.docs = []
        self.unique_fields = set()
        self.fail_with = None

    def create_index(self, keys, unique=False, name=None):
        if unique:
            for field, _ in keys:
                self.unique_fields.add(field)
        return name

    def find_one(self, query):
        if self.fail_with:
            raise self.fail_with
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                return dict(doc)
        return None

    def insert_one(self, doc):
        if self.fail_with:
            raise self.fail_with
        for field in self.unique_fields:
            if any(d.get(field) == doc.get(field) for d in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error: {field}")
        doc = dict(doc)
        doc["_id"] = ObjectId()
        self.docs.append(doc)

        class _Result:
            inserted_id = doc["_id"]

        return _Result()


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class RecordingMailer:
    """Stands in for BrevoMailer; records every send call."""

    def __init__(self, fail_with=None):
        self.sent = []
        self.fail_with = fail_with

    def send(self, to_email, subject, html, reply_to=None, attachments=None):
        self.sent.append({
            "to": to_email,
            "subject": subject,
            "html": html,
            "reply_to": reply_to,
            "attachments": attachments or [],
        })
        if self.fail_with:
            raise self.fail_with
        return "<message-id@relay>"


@pytest.fixture
def settings(tmp_path):
    logo = tmp_path / "logo.png"
    logo.write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return Settings(
        JWT_SECRET=TEST_JWT_SECRET,
        SALT=4,
        TOKEN_TTL_HOURS=24,
        EMAIL_USER="relay@virtuamod.com",
        BREVO_API_KEY="test-api-key",
        CONTACT_INBOX="inbox@virtuamod.com",
        LOGO_PATH=str(logo),
    )


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def users_collection(database):
    return database["users"]


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def app(settings, database, mailer):
    return create_app(settings=settings, database=database, mailer=mailer)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice():
    return {"username": "alice", "email": "a@x.com", "password": "pw1"}
