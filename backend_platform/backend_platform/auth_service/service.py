"""
Registration and login against the credential store.
"""
import logging

from .errors import AuthenticationError, ConflictError
from .schemas import LoginResponse, UserPublic
from .security import PasswordHasher, TokenIssuer
from .store import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """
    Holds no state of its own between requests; the store, hasher and token
    issuer are handed in by the caller.

    Expects input that already passed validators.validate_credentials (and,
    for register, validate_password_strength).
    """

    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        email_case_sensitive: bool = True
    ):
        self.store = store
        self.hasher = hasher
        self.token_issuer = token_issuer
        self.email_case_sensitive = email_case_sensitive

    def normalize_email(self, email: str) -> str:
        if self.email_case_sensitive:
            return email
        return email.lower()

    def register(self, email: str, password: str) -> UserPublic:
        """
        Create a user unless the email is taken.

        Raises:
            ConflictError: a user with this email already exists
        """
        email = self.normalize_email(email)

        # No transaction spans the check and the insert; the unique index is the race guard
        if self.store.find_by_email(email) is not None:
            raise ConflictError()

        password_hash = self.hasher.hash(password)
        user = self.store.create(email, password_hash)
        return UserPublic.model_validate(user)

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Check credentials and mint a token.

        Raises:
            AuthenticationError: unknown email or wrong password, deliberately
                indistinguishable
        """
        email = self.normalize_email(email)

        user = self.store.find_by_email(email)
        if user is None:
            raise AuthenticationError()

        if not self.hasher.verify(password, user.password):
            raise AuthenticationError()

        token = self.token_issuer.sign({"id": user.id, "email": user.email})
        return LoginResponse(user=UserPublic.model_validate(user), token=token)
