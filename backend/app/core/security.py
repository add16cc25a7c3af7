from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Protocol, Sequence
from jose import jwt
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool
from .config import Settings


class TokenSigner(Protocol):
    def sign(self, claims: Dict[str, Any]) -> str: ...


class PasswordHasher:
    """passlib wrapper; hashing runs off the event loop."""

    def __init__(self, schemes: Sequence[str] = ("bcrypt",)):
        self._ctx = CryptContext(schemes=list(schemes), deprecated="auto")

    async def hash(self, p: str) -> str:
        return await run_in_threadpool(self._ctx.hash, p)

    async def verify(self, p: str, h: str) -> bool:
        return await run_in_threadpool(self._ctx.verify, p, h)


class JWTSigner:
    def __init__(self, secret: str, algorithm: str = "HS256", expires: int = 900):
        self.secret, self.algorithm, self.expires = secret, algorithm, expires

    @classmethod
    def from_settings(cls, settings: Settings) -> "JWTSigner":
        return cls(settings.jwt_secret, settings.jwt_algorithm, settings.jwt_access_expires)

    def sign(self, claims: Dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + timedelta(seconds=self.expires)}
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)
