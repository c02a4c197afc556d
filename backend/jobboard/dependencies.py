from fastapi import Cookie

from jobboard.config import settings
from jobboard.errors import Unauthenticated
from jobboard.models.enums import Role
from jobboard.schemas.auth import Identity
from jobboard.utils.security import read_token


async def get_current_identity(
    token: str | None = Cookie(default=None, alias=settings.cookie_name),
) -> Identity:
    if not token:
        raise Unauthenticated()
    claims = read_token(token)
    if claims is None:
        raise Unauthenticated()
    try:
        role = Role(claims["role"])
    except ValueError:
        raise Unauthenticated() from None
    return Identity(subject_id=claims["sub"], role=role)
