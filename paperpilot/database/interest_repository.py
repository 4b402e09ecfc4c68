from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from paperpilot.config import Config
from paperpilot.database.db.models import UserRow
from paperpilot.database.db.session import get_session_factory
from paperpilot.errors import StoreError, UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def validate_interests(value: Any, max_interests: int = 10) -> List[str]:
    """
    Normalize an incoming interest payload.

    - a single string is treated as a one-element list
    - every element must be a non-empty string (after trimming)
    - duplicates are dropped, first occurrence wins
    - at most ``max_interests`` unique values
    """
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValidationError("Interests must be a string or a list of strings")

    cleaned: List[str] = []
    seen = set()
    for item in value:
        if not isinstance(item, str):
            raise ValidationError("Each interest must be a string")
        item = item.strip()
        if not item:
            raise ValidationError("Interests cannot be empty")
        if item in seen:
            continue
        seen.add(item)
        cleaned.append(item)

    if len(cleaned) > max_interests:
        raise ValidationError(f"At most {max_interests} interests are allowed")

    return cleaned


class InterestRepository:
    """
    Sole writer of a user's interest set.
    """

    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        max_interests: Optional[int] = None,
    ):
        self.session_factory = session_factory or get_session_factory()
        self.max_interests = max_interests or Config.max_interests

    def get(self, user_id: str) -> List[str]:
        interests, _ = self.get_with_timestamp(user_id)
        return interests

    def get_with_timestamp(self, user_id: str) -> Tuple[List[str], Optional[datetime]]:
        try:
            with self.session_factory() as db:
                row = db.get(UserRow, user_id)
                if not row:
                    raise UserNotFoundError()
                return list(row.interests or []), row.interests_updated_at
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load interests for {user_id}: {e}")
            raise StoreError(details=str(e)) from e

    def set(self, user_id: str, interests: Any) -> List[str]:
        """
        Replace the stored interests (no merge). Validation happens before
        anything is written.
        """
        cleaned = validate_interests(interests, self.max_interests)

        try:
            with self.session_factory() as db:
                row = db.get(UserRow, user_id)
                if not row:
                    raise UserNotFoundError()

                now = datetime.utcnow()
                row.interests = cleaned
                row.interests_updated_at = now
                row.updated_at = now
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to update interests for {user_id}: {e}")
            raise StoreError(details=str(e)) from e

        logger.info(f"📌 user={user_id} interests={cleaned}")
        return cleaned
