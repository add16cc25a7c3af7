# backend/app/routers/auth.py
#
# Authentication route:
#   • POST /login – JSON body {email, password} → signed token + user
#
# Validation and status mapping live in UserController; the route only
# hands over the parsed body.

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..controllers.users import UserController
from ..core.dependencies import get_user_controller
from ..models.auth import LoginInput

router = APIRouter(tags=["auth"])


@router.post("/login", summary="E-mail + password login")
async def login(
    payload: Optional[LoginInput] = None,
    ctl: UserController = Depends(get_user_controller),
) -> JSONResponse:
    """
    Returns `{message, token, user}` on success, 401 with the same body
    for an unknown e-mail or a wrong password.
    """
    return await ctl.login(payload or LoginInput())
