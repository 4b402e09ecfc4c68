from .interest_repository import InterestRepository, validate_interests
from .user_repository import UserRepository

__all__ = ["InterestRepository", "UserRepository", "validate_interests"]
