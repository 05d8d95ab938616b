import logging
from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyCookie
from jose import JWTError, jwt

from app.config import settings
from app.exceptions import InvalidOrExpiredTokenError

logger = logging.getLogger("app.auth")

SESSION_COOKIE_NAME = "token"

session_cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


class TokenCodec:
    """Signs and checks session tokens carrying a user id claim.

    Tokens are self-contained JWTs: ``sub`` holds the user id, ``iat`` and
    ``exp`` bound their lifetime. There is no server-side revocation.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires: timedelta = timedelta(days=7)):
        # an empty HMAC key lets anyone mint a session
        if not secret:
            raise ValueError("JWT_SECRET must be set to a non-empty value")
        self.secret = secret
        self.algorithm = algorithm
        self.expires = expires

    def issue(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.expires,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> int:
        """Return the user id of a valid token.

        Tampering, expiry and malformed claims all raise the same
        InvalidOrExpiredTokenError.
        """
        if not token:
            raise InvalidOrExpiredTokenError()
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return int(payload["sub"])
        except (JWTError, KeyError, TypeError, ValueError):
            raise InvalidOrExpiredTokenError()


def get_token_codec() -> TokenCodec:
    return TokenCodec(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires=timedelta(days=settings.SESSION_EXPIRE_DAYS),
    )


def get_current_user_id(
    token: str | None = Depends(session_cookie_scheme),
    codec: TokenCodec = Depends(get_token_codec),
) -> int:
    try:
        return codec.verify(token)
    except InvalidOrExpiredTokenError:
        logger.info("Rejected session cookie (present=%s)", bool(token))
        raise HTTPException(status_code=401, detail="Unauthorized - invalid or missing token")
