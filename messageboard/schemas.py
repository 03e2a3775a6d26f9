from pydantic import BaseModel
from typing import List


# users
class UserBase(BaseModel):
    name: str
    type: str


class UserSummary(UserBase):
    id: int

    class Config:
        from_attributes = True


# messages
class MessageOut(BaseModel):
    id: int
    msg: str

    class Config:
        from_attributes = True


class UserWithMessages(UserBase):
    messages: List[MessageOut]

    class Config:
        from_attributes = True
