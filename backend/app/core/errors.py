"""
Failures the user controller turns into JSON error responses.

Anything that is *not* a ``UserServiceError`` is treated as unexpected and
reported as a 500 with the exception text under ``details``.
"""
from fastapi import status


class UserServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"error": self.message}


class ValidationError(UserServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(UserServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(UserServiceError):
    status_code = status.HTTP_404_NOT_FOUND
