"""
Security helpers.

Password hashing (bcrypt via passlib) and JWT access tokens (python-jose)
with a Redis-backed blacklist of revoked token ids.
"""

import datetime
import logging
import uuid
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from app.core.cache import RedisCache
from app.core.config import settings
from app.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_BYTES = 72


def _bcrypt_input(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_bcrypt_input(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)
    except ValueError:
        # malformed hash
        return False


class AuthContext(BaseModel):
    """Identity of the caller, taken from a validated access token."""
    id: int
    email: str
    name: str = ""
    jti: str
    expires_at: datetime.datetime


class TokenService:
    """Issues, validates and revokes JWT access tokens."""

    def __init__(self, cache: RedisCache, secret_key: str = settings.SECRET_KEY, algorithm: str = settings.ALGORITHM,
                 expires_delta: datetime.timedelta = datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
                 blacklist_prefix: str = settings.BLACKLIST_PREFIX):
        self.cache = cache
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self.blacklist_prefix = blacklist_prefix

    def create_access_token(self, user_id: int, email: str, name: str = "",
                            now: Optional[datetime.datetime] = None) -> str:
        """Sign a token for the user with a fresh random ``jti``."""
        issued_at = now or datetime.datetime.now(datetime.timezone.utc)
        claims = {
            "sub": str(user_id),
            "id": user_id,
            "email": email,
            "name": name,
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> AuthContext:
        """Verify signature, algorithm and expiry and return the caller identity.

        Raises:
            UnauthorizedError: the token is invalid, expired or incomplete.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise UnauthorizedError("token has expired")
        except JWTError as e:
            logger.warning("JWT parsing/validation error: %s", e)
            raise UnauthorizedError("invalid token")

        jti = payload.get("jti")
        user_id = payload.get("id")
        exp = payload.get("exp")
        if not jti or user_id is None or exp is None:
            logger.warning("JWT claims missing jti, id or exp")
            raise UnauthorizedError("invalid token")

        return AuthContext(id=int(user_id), email=payload.get("email", ""), name=payload.get("name", ""), jti=jti,
                           expires_at=datetime.datetime.fromtimestamp(exp, tz=datetime.timezone.utc))

    def blacklist_token(self, jti: str, expires_at: datetime.datetime) -> None:
        """Revoke *jti* until the token would have expired anyway."""
        remaining = expires_at - datetime.datetime.now(datetime.timezone.utc)
        if remaining.total_seconds() < 1:
            logger.info("Token JTI '%s' already expired, not blacklisted", jti)
            return
        self.cache.save(self._key(jti), jti, ttl=remaining)
        logger.info("Token JTI '%s' blacklisted until %s", jti, expires_at.isoformat())

    def is_blacklisted(self, jti: str) -> bool:
        return self.cache.exists(self._key(jti))

    def authenticate(self, token: str) -> AuthContext:
        """Decode *token* and reject it if its ``jti`` has been revoked."""
        context = self.decode_access_token(token)
        if self.is_blacklisted(context.jti):
            logger.warning("Attempt to use blacklisted token JTI: %s", context.jti)
            raise UnauthorizedError("token has been revoked")
        return context

    def _key(self, jti: str) -> str:
        return f"{self.blacklist_prefix}{jti}"
