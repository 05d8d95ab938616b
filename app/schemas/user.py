from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

# Request fields are optional so that a missing value reaches the auth flow
# and is reported with its own message instead of a generic 422.

class SignupIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None

class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class VerifyEmailIn(BaseModel):
    code: Optional[str] = None

class UserOut(BaseModel):
    id: int
    email: str
    name: str
    is_verified: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)

class UserResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: UserOut

class MessageResponse(BaseModel):
    success: bool = True
    message: str
