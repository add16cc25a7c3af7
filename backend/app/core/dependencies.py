from functools import lru_cache
from fastapi import Depends
from ..controllers.users import UserController
from ..services.database import get_db
from ..services.users import MongoUserRepository, UserStore
from .config import get_settings
from .security import JWTSigner, PasswordHasher, TokenSigner
@lru_cache
def get_password_hasher() -> PasswordHasher: return PasswordHasher()
def get_user_store(hasher: PasswordHasher = Depends(get_password_hasher)) -> UserStore:
    return MongoUserRepository(get_db(), hasher)
def get_token_signer() -> TokenSigner: return JWTSigner.from_settings(get_settings())
def get_user_controller(store: UserStore = Depends(get_user_store),
                        signer: TokenSigner = Depends(get_token_signer)) -> UserController:
    return UserController(store, signer)
