from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
import jwt

DEFAULT_BCRYPT_ROUNDS = 10
DEFAULT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60


class PasswordHasher:
    """bcrypt with a fresh salt per hash; the cost is embedded in the hash string."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(plain_password, hashed_password)
        except PasswordValueError:
            # bcrypt refuses NUL bytes; such a password can never match
            return False


class TokenIssuer:
    """
    Stateless JWT signer.

    Tokens are issued but nothing in this service verifies them yet; there is
    no protected route.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        ttl: timedelta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def sign(self, claims: Dict[str, Any]) -> str:
        issued_at = datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self.ttl
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)
