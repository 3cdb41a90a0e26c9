from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable
from passlib.context import CryptContext
import jwt
from ..core.errors import InvalidToken, MissingToken

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"
Clock = Callable[[], datetime]


def hash_password(p: str) -> str:
    # Ensure bcrypt compatibility (72-byte limit)
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.hash(p)


def verify_password(p: str, hashed: str) -> bool:
    p = p.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.verify(p, hashed)


@dataclass(frozen=True)
class Identity:
    id: str
    role: str


class TokenService:
    """Issues and verifies the signed, time-boxed session tokens."""

    def __init__(self, secret: str, *, minutes: int = 60, clock: Clock | None = None):
        self._secret = secret
        self._lifetime = timedelta(minutes=minutes)
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, user_id: str, role: str) -> str:
        now = self._clock()
        payload = {"sub": user_id, "role": str(role), "iat": now, "exp": now + self._lifetime}
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> Identity:
        if not token:
            raise MissingToken()
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM], options={"require": ["exp", "sub"]})
        except jwt.PyJWTError:
            raise InvalidToken()
        role = payload.get("role")
        if not role:
            raise InvalidToken()
        return Identity(id=payload["sub"], role=role)
