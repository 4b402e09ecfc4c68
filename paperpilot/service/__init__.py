from .auth_service import AuthService, TokenService, hash_password, verify_password
from .collab_service import RoomManager
from .llm_service import LLMService
from .query_optimizer import QueryOptimizer
from .recommendation_service import RecommendationService, deduplicate_papers

__all__ = [
    "AuthService",
    "LLMService",
    "QueryOptimizer",
    "RecommendationService",
    "RoomManager",
    "TokenService",
    "deduplicate_papers",
    "hash_password",
    "verify_password",
]
