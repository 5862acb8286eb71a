# mylife/UAA/schemas.py
from pydantic import BaseModel, EmailStr
from typing import Optional
import uuid
from datetime import datetime
from mylife.schemas.base import BaseResponse

class UserCreate(BaseModel):
    email: EmailStr
    username: str
    password: str

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class UserRead(BaseModel):
    id: uuid.UUID
    email: EmailStr
    username: str
    is_active: bool
    is_superuser: bool
    created_at: datetime
    profile_id: Optional[uuid.UUID] = None

class RegisterResponse(BaseResponse):
    id: Optional[uuid.UUID] = None
    email: Optional[str] = None
    username: Optional[str] = None
    profile_id: Optional[uuid.UUID] = None

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int

class TokenPayload(BaseModel):
    sub: str
    exp: int
    jti: str
