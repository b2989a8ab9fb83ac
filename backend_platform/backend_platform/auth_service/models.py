from sqlalchemy import Column, String
from .db import Base
import uuid


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    # Stored as provided; uniqueness is enforced here, not in the service layer
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
