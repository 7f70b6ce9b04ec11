# backend/repositories/user_repository.py
from datetime import datetime
from typing import Optional
import logging

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from models.user import User
from shared.exceptions import DuplicateCredential

LOG = logging.getLogger("repositories.user")

USERS_COLLECTION = "users"


class UserRepository:
    """Create/read access to the ``users`` collection."""

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def from_database(cls, db) -> "UserRepository":
        return cls(db[USERS_COLLECTION])

    # ------------------------------------------------------------
    # 🔹 Indexes
    # ------------------------------------------------------------
    def ensure_indexes(self):
        self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        LOG.info("✅ Unique index on users.email ensured")

    # ------------------------------------------------------------
    # 🔹 Get user by email
    # ------------------------------------------------------------
    def get_by_email(self, email: str) -> Optional[User]:
        doc = self.collection.find_one({"email": email})
        if not doc:
            return None
        return User(
            id=str(doc["_id"]),
            username=doc.get("username") or "",
            email=doc["email"],
            password=doc["password"],
            created_at=doc.get("created_at"),
        )

    # ------------------------------------------------------------
    # 🔹 Create user
    # ------------------------------------------------------------
    def create(self, username: str, email: str, password_hash: str) -> User:
        user_doc = {
            "username": username,
            "email": email,
            "password": password_hash,
            "created_at": datetime.utcnow().isoformat(),
        }
        try:
            result = self.collection.insert_one(dict(user_doc))
        except DuplicateKeyError:
            LOG.warning(f"⚠️ Concurrent registration rejected by unique index: {email}")
            raise DuplicateCredential()
        LOG.info(f"✅ User created with ID {result.inserted_id}")
        return User(id=str(result.inserted_id), **user_doc)
