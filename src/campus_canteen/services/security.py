from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

import bcrypt
import jwt
from jwt import PyJWTError

from ..errors import AuthenticationError, ConfigurationError

JWT_ALGORITHM = "HS256"

# bcrypt учитывает только первые 72 байта пароля
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int = 10) -> str:
    """Хеш-заглушка для сверки пароля, когда студента с таким email нет."""
    return hash_password("campus-canteen-placeholder", rounds)


def require_secret(secret: Optional[str]) -> str:
    if not secret:
        raise ConfigurationError("JWT secret not configured")
    return secret


def create_access_token(student_id: int, email: str, secret: Optional[str], expires_days: int = 7) -> str:
    """
    Подписывает HS256-токен {sub, email} сроком на expires_days дней.
    Без секрета не подписываем ничего.
    """
    key = require_secret(secret)
    now = datetime.now(tz=timezone.utc)
    claims = {
        "sub": str(student_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=expires_days),
    }
    return jwt.encode(claims, key, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: Optional[str]) -> Dict[str, Any]:
    key = require_secret(secret)
    try:
        return jwt.decode(token, key, algorithms=[JWT_ALGORITHM], options={"require": ["sub", "exp"]})
    except PyJWTError as exc:
        raise AuthenticationError("invalid token") from exc
