from datetime import timedelta

from fastapi import Response

from app.utils.auth import SESSION_COOKIE_NAME


class SessionCookie:
    """Puts the session token on (or takes it off) an outgoing response."""

    def __init__(self, secure: bool, max_age: timedelta = timedelta(days=7)):
        self.secure = secure
        self.max_age = max_age

    def bind(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=SESSION_COOKIE_NAME,
            value=token,
            max_age=int(self.max_age.total_seconds()),
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            key=SESSION_COOKIE_NAME,
            httponly=True,
            secure=self.secure,
            samesite="strict",
        )
