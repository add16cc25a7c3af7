from typing import Optional
from pydantic import BaseModel, ConfigDict

class UserRecord(BaseModel):
    """A persisted user, exactly as the repository stores it."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    password_hash: str

class CreateUserInput(BaseModel):
    # presence is checked by the controller, so nothing is required here
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserOut":
        return cls(**record.model_dump(exclude={"password_hash"}))
