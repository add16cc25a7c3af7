"""
Dedicated request/response models for the login endpoint
(kept separate from the general User models).
"""
from typing import Optional

from pydantic import BaseModel

from .user import UserRecord


class LoginInput(BaseModel):
    """
    Payload expected by POST /login
    """
    email: Optional[str] = None
    password: Optional[str] = None


class SessionUser(BaseModel):
    """The slice of a user echoed back next to a fresh token."""
    id: int
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "SessionUser":
        return cls(id=record.id, email=record.email)


class LoginResponse(BaseModel):
    message: str
    token: str
    user: SessionUser
