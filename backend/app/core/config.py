from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, MongoDsn
class Settings(BaseSettings):
    app_name: str = "User Accounts API"
    mongo_uri: MongoDsn = "mongodb://mongo:27017/accounts"
    jwt_secret: str = Field(..., min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_access_expires: int = 900
    log_level: str = "INFO"
    model_config = SettingsConfigDict(env_file=".env")
@lru_cache
def get_settings() -> Settings: return Settings()
