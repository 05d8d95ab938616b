from typing import Optional

from pydantic import BaseModel

class ForgotPasswordIn(BaseModel):
    email: Optional[str] = None

class ResetPasswordIn(BaseModel):
    password: Optional[str] = None
