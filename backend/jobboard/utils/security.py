from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError
from itsdangerous import BadData, URLSafeTimedSerializer

from jobboard.config import settings

ph = PasswordHasher(time_cost=3, memory_cost=65536, parallelism=4)


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(stored_hash: str, password: str) -> bool:
    try:
        return ph.verify(stored_hash, password)
    except (VerifyMismatchError, InvalidHashError):
        return False


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key=settings.secret_key, salt=settings.token_salt)


def issue_token(subject_id: str, role: str) -> str:
    return _serializer().dumps({"sub": subject_id, "role": role})


def read_token(token: str, max_age: int | None = None) -> dict | None:
    """Return the ``{"sub", "role"}`` claims, or None for any bad token.

    Expired, tampered and malformed tokens are indistinguishable to callers.
    """
    ttl = settings.token_ttl_seconds if max_age is None else max_age
    try:
        data = _serializer().loads(token, max_age=ttl)
    except BadData:
        # covers SignatureExpired, BadSignature and BadPayload
        return None
    if not isinstance(data, dict):
        return None
    if not isinstance(data.get("sub"), str) or not isinstance(data.get("role"), str):
        return None
    return data
