# schemas/user.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class LoginRequest(BaseModel):
    token: Optional[str] = None


class UserResponse(BaseModel):
    user_id: str
    name: Optional[str]
    email: Optional[str]
    paid: bool
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
