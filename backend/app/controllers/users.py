# backend/app/controllers/users.py
#
# Request validation and response shaping for the user endpoints.
#
# Each operation validates its input, awaits the repository one call at a
# time and maps the outcome to a status code + JSON body. Expected
# failures are raised as UserServiceError subclasses; everything else is
# caught at the same boundary and reported as a 500.

import logging
import re

from fastapi import status
from fastapi.responses import JSONResponse

from ..core.errors import (
    AuthenticationError,
    NotFoundError,
    UserServiceError,
    ValidationError,
)
from ..core.security import TokenSigner
from ..models.auth import LoginInput, LoginResponse, SessionUser
from ..models.user import CreateUserInput, UserOut
from ..services.users import UserStore

log = logging.getLogger("users")

_INT_ID = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_ID_MIN, _ID_MAX = -(2**63), 2**63 - 1


def _failure(exc: Exception, error: str) -> JSONResponse:
    if isinstance(exc, UserServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())
    log.error("%s: %s", error, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": error, "details": str(exc)},
    )


class UserController:
    def __init__(self, store: UserStore, signer: TokenSigner):
        self.store = store
        self.signer = signer

    # ───────────────────────────── create ────────────────────────────────
    async def create_user(self, payload: CreateUserInput) -> JSONResponse:
        try:
            if not (payload.name and payload.email and payload.password):
                raise ValidationError("Name, email and password are required")

            if await self.store.find_by_email(payload.email) is not None:
                log.info("Registration refused, %s already exists", payload.email)
                raise ValidationError("Email already registered")

            record = await self.store.create(
                CreateUserInput(name=payload.name, email=payload.email, password=payload.password)
            )
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content={
                    "message": "User created successfully",
                    "user": UserOut.from_record(record).model_dump(),
                },
            )
        except Exception as exc:
            return _failure(exc, "Error creating user")

    # ────────────────────────────── login ────────────────────────────────
    async def login(self, payload: LoginInput) -> JSONResponse:
        try:
            if not (payload.email and payload.password):
                raise ValidationError("Email and password are required")

            # same message for both branches: don't reveal which e-mails exist
            record = await self.store.find_by_email(payload.email)
            if record is None:
                raise AuthenticationError("Invalid credentials")
            if not await self.store.compare_password(payload.password, record.password_hash):
                log.warning("Wrong password for user %s", record.id)
                raise AuthenticationError("Invalid credentials")

            token = self.signer.sign({"id": record.id, "email": record.email})
            body = LoginResponse(
                message="Login successful",
                token=token,
                user=SessionUser.from_record(record),
            )
            return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())
        except Exception as exc:
            return _failure(exc, "Error logging in")

    # ────────────────────────────── reads ────────────────────────────────
    # NB: both reads return the stored record as-is, password_hash included.
    async def get_all_users(self) -> JSONResponse:
        try:
            records = await self.store.find_all()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content=[r.model_dump() for r in records],
            )
        except Exception as exc:
            return _failure(exc, "Error fetching users")

    async def get_user_by_id(self, raw_id: str) -> JSONResponse:
        try:
            if not isinstance(raw_id, str) or not _INT_ID.fullmatch(raw_id):
                raise ValidationError("Invalid ID")
            user_id = int(raw_id)

            # ids come from a BSON int64 counter; anything wider cannot exist
            record = await self.store.find_by_id(user_id) if _ID_MIN <= user_id <= _ID_MAX else None
            if record is None:
                raise NotFoundError("User not found")
            return JSONResponse(status_code=status.HTTP_200_OK, content=record.model_dump())
        except Exception as exc:
            return _failure(exc, "Error fetching user")
