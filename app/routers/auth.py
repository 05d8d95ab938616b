from fastapi import APIRouter, Depends, Response

from app.schemas.password_reset import ForgotPasswordIn, ResetPasswordIn
from app.schemas.user import (
    LoginIn,
    MessageResponse,
    SignupIn,
    UserOut,
    UserResponse,
    VerifyEmailIn,
)
from app.services.auth_service import AuthService, get_auth_service
from app.utils.auth import get_current_user_id


router = APIRouter(prefix="/api/auth", tags=["Auth"])


# 註冊
@router.post("/signup", response_model=UserResponse)
def signup(body: SignupIn, response: Response, service: AuthService = Depends(get_auth_service)):
    user = service.signup(body.email, body.password, body.name, response)
    return UserResponse(message="User created successfully", user=UserOut.model_validate(user))


@router.post("/verify-email", response_model=UserResponse)
def verify_email(body: VerifyEmailIn, service: AuthService = Depends(get_auth_service)):
    user = service.verify_email(body.code)
    return UserResponse(message="Email verified successfully", user=UserOut.model_validate(user))


# 登入
@router.post("/login", response_model=UserResponse)
def login(body: LoginIn, response: Response, service: AuthService = Depends(get_auth_service)):
    user = service.login(body.email, body.password, response)
    return UserResponse(message="Logged in successfully", user=UserOut.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, service: AuthService = Depends(get_auth_service)):
    service.logout(response)
    return MessageResponse(message="Logged out successfully")


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(body: ForgotPasswordIn, service: AuthService = Depends(get_auth_service)):
    service.forgot_password(body.email)
    return MessageResponse(message="Password reset link sent to your email")


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password(token: str, body: ResetPasswordIn, service: AuthService = Depends(get_auth_service)):
    service.reset_password(token, body.password)
    return MessageResponse(message="Password reset successfully")


# 取得目前登入的使用者
@router.get("/check-auth", response_model=UserResponse)
def check_auth(user_id: int = Depends(get_current_user_id), service: AuthService = Depends(get_auth_service)):
    user = service.check_auth(user_id)
    return UserResponse(user=UserOut.model_validate(user))
