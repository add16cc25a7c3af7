from __future__ import annotations

import os
from typing import Dict, List, Optional

import pytest

os.environ.setdefault("JWT_SECRET", "tests-secret-key-0123456789abcdef0123")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/accounts-tests")

from app.models.user import CreateUserInput, UserRecord, UserUpdate


class StubUserStore:
    """In-memory UserStore that records every call and can be told to fail."""

    def __init__(
        self,
        records: Optional[List[UserRecord]] = None,
        fail_with: Exception | None = None,
        fail_on: Optional[Dict[str, Exception]] = None,
    ):
        self.records = list(records or [])
        # fail_with breaks every call, fail_on only the named ones
        self.fail_with = fail_with
        self.fail_on = dict(fail_on or {})
        self.password_ok = True
        self.calls: List[str] = []

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with
        if name in self.fail_on:
            raise self.fail_on[name]

    async def create(self, data: CreateUserInput) -> UserRecord:
        self._enter("create")
        record = UserRecord(
            id=len(self.records) + 1,
            name=data.name,
            email=data.email,
            password_hash=f"hashed:{data.password}",
        )
        self.records.append(record)
        return record

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        self._enter("find_by_email")
        return next((r for r in self.records if r.email == email), None)

    async def find_all(self) -> List[UserRecord]:
        self._enter("find_all")
        return list(self.records)

    async def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        self._enter("find_by_id")
        return next((r for r in self.records if r.id == user_id), None)

    async def update(self, user_id: int, changes: UserUpdate) -> Optional[UserRecord]:
        self._enter("update")
        return None

    async def delete(self, user_id: int) -> bool:
        self._enter("delete")
        return False

    async def compare_password(self, plaintext: str, hashed: str) -> bool:
        self._enter("compare_password")
        return self.password_ok


class StubSigner:
    def __init__(self, token: str = "fake-token"):
        self.token = token
        self.signed: List[dict] = []

    def sign(self, claims: dict) -> str:
        self.signed.append(claims)
        return self.token


ALICE = UserRecord(id=1, name="Alice", email="a@a.com", password_hash="hashed:123")


@pytest.fixture()
def store() -> StubUserStore:
    return StubUserStore()


@pytest.fixture()
def signer() -> StubSigner:
    return StubSigner()
