from sqlalchemy import (
    Column,
    Text,
    DateTime,
    JSON,
)
from sqlalchemy.orm import declarative_base
from datetime import datetime


Base = declarative_base()


class UserRow(Base):
    """One document per user, interests embedded."""
    __tablename__ = "users"

    id = Column(Text, primary_key=True)
    email = Column(Text, nullable=False, unique=True, index=True)
    name = Column(Text)
    expertise = Column(Text)
    password_hash = Column(Text, nullable=False)

    interests = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    interests_updated_at = Column(DateTime, nullable=True)
