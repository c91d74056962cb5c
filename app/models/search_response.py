from pydantic import BaseModel

from models.user import User

class UserResult(BaseModel):
    id: int
    name: str
    age: int
    gender: str
    about: str

    @classmethod
    def from_user(cls, user: User) -> "UserResult":
        return cls(**user.to_dict())
