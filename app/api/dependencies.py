"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from app.core.cache import RedisCache, get_redis_client
from app.core.config import settings
from app.core.errors import UnauthorizedError
from app.core.security import AuthContext, TokenService

# auto_error=False so a missing header goes through our own error envelope
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/user/token", auto_error=False)


def get_cache() -> RedisCache:
    return RedisCache(get_redis_client(settings.REDIS_URL))


def get_token_service(cache: RedisCache = Depends(get_cache)) -> TokenService:
    return TokenService(cache)


def get_current_user(token: Optional[str] = Depends(oauth2_scheme),
                     token_service: TokenService = Depends(get_token_service), ) -> AuthContext:
    """Validate the bearer token and return the caller identity from its claims."""
    if not token:
        raise UnauthorizedError("missing bearer token")
    return token_service.authenticate(token)
