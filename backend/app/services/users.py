"""
User persistence:
• UserStore            – what the controller needs from a user repository
• MongoUserRepository  – Motor-backed implementation

Ids are plain integers handed out by a counter document, so they can be
used directly in /users/{id}.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from ..core.security import PasswordHasher
from ..models.user import CreateUserInput, UserRecord, UserUpdate

log = logging.getLogger("users.repository")


class UserStore(Protocol):
    async def create(self, data: CreateUserInput) -> UserRecord: ...

    async def find_by_email(self, email: str) -> Optional[UserRecord]: ...

    async def find_all(self) -> List[UserRecord]: ...

    async def find_by_id(self, user_id: int) -> Optional[UserRecord]: ...

    async def update(self, user_id: int, changes: UserUpdate) -> Optional[UserRecord]: ...

    async def delete(self, user_id: int) -> bool: ...

    async def compare_password(self, plaintext: str, hashed: str) -> bool: ...


def _to_record(doc: Dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=doc["_id"],
        name=doc["name"],
        email=doc["email"],
        password_hash=doc["password_hash"],
    )


class MongoUserRepository:
    """Stores users in ``db.users``; the ``counters`` collection feeds ids."""

    counter_name = "users"

    def __init__(self, db: AsyncIOMotorDatabase, hasher: Optional[PasswordHasher] = None):
        self.db = db
        self.hasher = hasher or PasswordHasher()

    # ────────────────────────── setup ──────────────────────────────────
    async def ensure_indexes(self) -> None:
        # backstop for the controller's check-then-create on e-mail
        await self.db.users.create_index([("email", ASCENDING)], unique=True)

    async def _next_id(self) -> int:
        counter = await self.db.counters.find_one_and_update(
            {"_id": self.counter_name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    # ────────────────────────── CRUD ───────────────────────────────────
    async def create(self, data: CreateUserInput) -> UserRecord:
        doc = {
            "_id": await self._next_id(),
            "name": data.name,
            "email": data.email,
            "password_hash": await self.hasher.hash(data.password),
        }
        await self.db.users.insert_one(doc)
        log.info("Created user %s", doc["_id"])
        return _to_record(doc)

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        doc = await self.db.users.find_one({"email": email})
        return _to_record(doc) if doc else None

    async def find_all(self) -> List[UserRecord]:
        return [_to_record(doc) async for doc in self.db.users.find().sort("_id", ASCENDING)]

    async def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        doc = await self.db.users.find_one({"_id": user_id})
        return _to_record(doc) if doc else None

    async def update(self, user_id: int, changes: UserUpdate) -> Optional[UserRecord]:
        fields = changes.model_dump(exclude_none=True)
        if "password" in fields:
            fields["password_hash"] = await self.hasher.hash(fields.pop("password"))
        if not fields:
            return await self.find_by_id(user_id)
        doc = await self.db.users.find_one_and_update(
            {"_id": user_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_record(doc) if doc else None

    async def delete(self, user_id: int) -> bool:
        res = await self.db.users.delete_one({"_id": user_id})
        return res.deleted_count == 1

    async def compare_password(self, plaintext: str, hashed: str) -> bool:
        return await self.hasher.verify(plaintext, hashed)
