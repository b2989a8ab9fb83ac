"""
Credential store: the only component that touches the users table.
"""
from typing import Optional, Protocol
from sqlalchemy.orm import Session
import logging

from .models import User

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def create(self, email: str, password_hash: str) -> User:
        ...


class SqlAlchemyUserStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create(self, email: str, password_hash: str) -> User:
        # A concurrent insert of the same email fails here with IntegrityError
        user = User(email=email, password=password_hash)
        try:
            self.db.add(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        logger.debug("Created user id=%s", user.id)
        return user
