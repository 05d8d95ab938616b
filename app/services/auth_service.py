"""
Auth Flow Service

Registration, email verification, login/logout, password reset and the
session check. A user moves from pending-verification to verified exactly
once; verification codes and reset tokens are single-use and cleared as soon
as they are consumed.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from fastapi import Depends, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import Settings, settings
from app.database import get_db
from app.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    InvalidOrExpiredTokenError,
    NotFoundError,
    ValidationError,
)
from app.models.user import User
from app.services.notifications import Notifier, get_notifier
from app.utils.auth import TokenCodec
from app.utils.clock import utcnow
from app.utils.cookies import SessionCookie
from app.utils.hashing import hash_password, verify_password
from app.utils.tokens import generate_reset_token, generate_verification_code, hash_token

logger = logging.getLogger("app.auth")

MAX_CODE_ATTEMPTS = 10


@dataclass(frozen=True)
class AuthConfig:
    jwt_secret: str
    client_url: str
    secure_cookies: bool
    jwt_algorithm: str = "HS256"
    session_ttl: timedelta = timedelta(days=7)
    verification_ttl: timedelta = timedelta(hours=24)
    reset_ttl: timedelta = timedelta(hours=1)
    unverified_grace: timedelta = timedelta(seconds=60)

    @classmethod
    def from_settings(cls, s: Settings) -> "AuthConfig":
        return cls(
            jwt_secret=s.JWT_SECRET,
            client_url=s.CLIENT_URL,
            secure_cookies=s.is_production,
            jwt_algorithm=s.JWT_ALGORITHM,
            session_ttl=timedelta(days=s.SESSION_EXPIRE_DAYS),
            verification_ttl=timedelta(hours=s.VERIFICATION_TOKEN_EXPIRE_HOURS),
            reset_ttl=timedelta(minutes=s.RESET_TOKEN_EXPIRE_MINUTES),
            unverified_grace=timedelta(seconds=s.UNVERIFIED_GRACE_SECONDS),
        )


def _clean(value: str | None) -> str:
    return (value or "").strip()


def _normalize_email(email: str | None) -> str:
    return _clean(email).lower()


class AuthService:
    def __init__(self, db: Session, notifier: Notifier, config: AuthConfig):
        self.db = db
        self.notifier = notifier
        self.config = config
        self.tokens = TokenCodec(config.jwt_secret, algorithm=config.jwt_algorithm, expires=config.session_ttl)
        self.cookies = SessionCookie(secure=config.secure_cookies, max_age=config.session_ttl)

    # 註冊
    def signup(self, email: str | None, password: str | None, name: str | None, response: Response) -> User:
        email = _normalize_email(email)
        name = _clean(name)
        if not email or not password or not name:
            raise ValidationError("All fields are required")

        # an abandoned registration must not keep holding its email
        self.purge_expired_registrations()

        # fast path only; the unique index on users.email is the real guard
        if self.db.query(User).filter(User.email == email).first():
            raise ConflictError("User already exists")

        code = self._new_verification_code()
        user = User(
            email=email,
            password_hash=hash_password(password),
            name=name,
            verification_token=code,
            verification_token_expires_at=utcnow() + self.config.verification_ttl,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User already exists")
        self.db.refresh(user)

        self._start_session(user, response)
        logger.info("User %s signed up, verification pending", user.id)

        self.notifier.send_verification_email(user.email, code)
        return user

    def verify_email(self, code: str | None) -> User:
        code = _clean(code)
        user = None
        if code:
            user = (
                self.db.query(User)
                .filter(
                    User.verification_token == code,
                    User.verification_token_expires_at > utcnow(),
                )
                .first()
            )
        if not user:
            raise InvalidOrExpiredTokenError("Invalid or expired verification code")

        user.is_verified = True
        user.verification_token = None
        user.verification_token_expires_at = None
        self.db.commit()
        self.db.refresh(user)
        logger.info("User %s verified email", user.id)

        self.notifier.send_welcome_email(user.email, user.name)
        return user

    # 登入
    def login(self, email: str | None, password: str | None, response: Response) -> User:
        email = _normalize_email(email)
        if not email or not password:
            raise InvalidCredentialsError()

        user = self.db.query(User).filter(User.email == email).first()
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        self._start_session(user, response)
        user.last_login = utcnow()
        self.db.commit()
        self.db.refresh(user)
        logger.info("User %s logged in", user.id)
        return user

    def logout(self, response: Response) -> None:
        self.cookies.clear(response)

    def forgot_password(self, email: str | None) -> None:
        email = _normalize_email(email)
        if not email:
            raise ValidationError("Email is required")

        user = self.db.query(User).filter(User.email == email).first()
        if not user:
            raise NotFoundError("User not found")

        # 產生一次性 token，取代先前尚未使用的 token
        raw_token = generate_reset_token()
        user.reset_password_token = hash_token(raw_token)
        user.reset_password_expires_at = utcnow() + self.config.reset_ttl
        self.db.commit()
        logger.info("Password reset requested for user %s", user.id)

        self.notifier.send_password_reset_email(user.email, self.reset_url(raw_token))

    def reset_password(self, token: str | None, password: str | None) -> None:
        token = _clean(token)
        if not password:
            raise ValidationError("Password is required")

        user = None
        if token:
            user = (
                self.db.query(User)
                .filter(
                    User.reset_password_token == hash_token(token),
                    User.reset_password_expires_at > utcnow(),
                )
                .first()
            )
        if not user:
            raise InvalidOrExpiredTokenError("Invalid or expired reset token")

        user.password_hash = hash_password(password)
        user.reset_password_token = None
        user.reset_password_expires_at = None
        self.db.commit()
        logger.info("Password reset completed for user %s", user.id)

        self.notifier.send_reset_success_email(user.email)

    def check_auth(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def purge_expired_registrations(self) -> int:
        """Delete unverified users whose code expired more than the grace window ago."""
        cutoff = utcnow() - self.config.unverified_grace
        deleted = (
            self.db.query(User)
            .filter(
                User.is_verified.is_(False),
                User.verification_token_expires_at.is_not(None),
                User.verification_token_expires_at < cutoff,
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info("Purged %d expired unverified registration(s)", deleted)
        return deleted

    def reset_url(self, raw_token: str) -> str:
        return f"{self.config.client_url.rstrip('/')}/reset-password/{raw_token}"

    def _start_session(self, user: User, response: Response) -> None:
        self.cookies.bind(response, self.tokens.issue(user.id))

    def _new_verification_code(self) -> str:
        # 避免與其他尚未驗證的帳號撞號
        now = utcnow()
        for _ in range(MAX_CODE_ATTEMPTS):
            code = generate_verification_code()
            taken = (
                self.db.query(User.id)
                .filter(User.verification_token == code, User.verification_token_expires_at > now)
                .first()
            )
            if not taken:
                return code
        return code


def get_auth_service(db: Session = Depends(get_db), notifier: Notifier = Depends(get_notifier)) -> AuthService:
    return AuthService(db, notifier, AuthConfig.from_settings(settings))
