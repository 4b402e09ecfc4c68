from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from paperpilot.database.db.models import UserRow
from paperpilot.database.db.session import get_session_factory
from paperpilot.errors import StoreError, ValidationError
from paperpilot.model.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """
    User documents keyed by id.

    Registration and sign-in only; interests are written through
    InterestRepository.
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        self.session_factory = session_factory or get_session_factory()

    def create(
        self,
        email: str,
        password_hash: str,
        name: Optional[str] = None,
        expertise: Optional[str] = None,
    ) -> User:
        """
        Insert a new user with an empty interest set.

        Raises ValidationError if the email is already taken.
        """
        user = User(
            email=email,
            name=name,
            expertise=expertise,
            password_hash=password_hash,
        )

        try:
            with self.session_factory() as db:
                exists = db.execute(
                    select(UserRow.id).where(UserRow.email == user.email)
                ).first()
                if exists:
                    raise ValidationError("Email already registered")

                now = datetime.utcnow()
                db.add(
                    UserRow(
                        id=user.id,
                        email=user.email,
                        name=user.name,
                        expertise=user.expertise,
                        password_hash=user.password_hash,
                        interests=[],
                        created_at=now,
                        updated_at=now,
                    )
                )
                db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration
            raise ValidationError("Email already registered")
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to create user {email}: {e}")
            raise StoreError(details=str(e)) from e

        logger.info(f"👤 Registered user {user.id}")
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        try:
            with self.session_factory() as db:
                row = db.get(UserRow, user_id)
                return self._row_to_user(row) if row else None
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load user {user_id}: {e}")
            raise StoreError(details=str(e)) from e

    def get_by_email(self, email: str) -> Optional[User]:
        try:
            with self.session_factory() as db:
                row = db.execute(
                    select(UserRow).where(UserRow.email == email)
                ).scalars().first()
                return self._row_to_user(row) if row else None
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to look up user by email: {e}")
            raise StoreError(details=str(e)) from e

    @staticmethod
    def _row_to_user(row: UserRow) -> User:
        return User(
            id=row.id,
            email=row.email,
            name=row.name,
            expertise=row.expertise,
            password_hash=row.password_hash,
            interests=list(row.interests or []),
            created_at=row.created_at,
            updated_at=row.updated_at,
            interests_updated_at=row.interests_updated_at,
        )
