from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ..controllers.users import UserController
from ..core.dependencies import get_user_controller
from ..models.user import CreateUserInput
router = APIRouter(prefix="/users", tags=["users"])
@router.get("")
async def users(ctl: UserController = Depends(get_user_controller)) -> JSONResponse:
    return await ctl.get_all_users()
@router.post("", status_code=201)
async def create(payload: Optional[CreateUserInput] = None,
                 ctl: UserController = Depends(get_user_controller)) -> JSONResponse:
    return await ctl.create_user(payload or CreateUserInput())
@router.get("/{user_id}")
async def user(user_id: str, ctl: UserController = Depends(get_user_controller)) -> JSONResponse:
    return await ctl.get_user_by_id(user_id)
