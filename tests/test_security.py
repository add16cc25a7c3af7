from __future__ import annotations

from jose import jwt

from app.core.config import Settings
from app.core.security import JWTSigner, PasswordHasher

SECRET = "x" * 32


def test_signed_token_carries_claims_and_expiry():
    signer = JWTSigner(SECRET, expires=60)

    token = signer.sign({"id": 7, "email": "a@a.com"})
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert claims["id"] == 7
    assert claims["email"] == "a@a.com"
    assert claims["exp"] - claims["iat"] == 60


def test_signer_from_settings():
    settings = Settings(jwt_secret=SECRET, jwt_access_expires=120)

    signer = JWTSigner.from_settings(settings)

    assert (signer.secret, signer.algorithm, signer.expires) == (SECRET, "HS256", 120)


async def test_password_hasher_round_trip():
    hasher = PasswordHasher(schemes=("pbkdf2_sha256",))

    hashed = await hasher.hash("correct horse")

    assert await hasher.verify("correct horse", hashed)
    assert not await hasher.verify("battery staple", hashed)
