"""Errors raised by the auth flow and chat log.

Every error carries a human-readable ``message`` and the HTTP status the API
layer answers with. The front-end only distinguishes success from failure, so
everything is a 400 except a rejected session cookie.
"""


class AppError(Exception):
    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    default_message = "All fields are required"


class ConflictError(AppError):
    default_message = "User already exists"


class InvalidCredentialsError(AppError):
    # same text for unknown email and wrong password
    default_message = "Invalid credentials"


class InvalidOrExpiredTokenError(AppError):
    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    default_message = "User not found"
