from functools import lru_cache
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import sessionmaker

from paperpilot.config import Config
from paperpilot.crawler import SearchClient, build_search_client
from paperpilot.database.db import session as db_session
from paperpilot.database.interest_repository import InterestRepository
from paperpilot.database.user_repository import UserRepository
from paperpilot.errors import AuthError
from paperpilot.service.auth_service import AuthService, TokenService
from paperpilot.service.collab_service import RoomManager
from paperpilot.service.llm_service import LLMService
from paperpilot.service.query_optimizer import QueryOptimizer
from paperpilot.service.recommendation_service import RecommendationService

bearer_scheme = HTTPBearer(auto_error=False)

_room_manager = RoomManager()


def get_session_factory() -> sessionmaker:
    return db_session.get_session_factory()


def get_user_repo(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> UserRepository:
    """Return a UserRepository (stateless, safe to create per-request)."""
    return UserRepository(session_factory)


def get_interest_repo(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> InterestRepository:
    return InterestRepository(session_factory, max_interests=Config.max_interests)


def get_token_service() -> TokenService:
    return TokenService(
        secret=Config.auth.jwt_secret,
        algorithm=Config.auth.jwt_algorithm,
        expire_minutes=Config.auth.token_expire_minutes,
    )


def get_auth_service(
    users: UserRepository = Depends(get_user_repo),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(users, tokens)


@lru_cache
def get_llm_service() -> LLMService:
    return LLMService.from_settings(Config)


@lru_cache
def get_search_client() -> SearchClient:
    return build_search_client(Config)


def get_query_optimizer(
    llm: LLMService = Depends(get_llm_service),
) -> QueryOptimizer:
    return QueryOptimizer(llm)


def get_recommendation_service(
    interests: InterestRepository = Depends(get_interest_repo),
    optimizer: QueryOptimizer = Depends(get_query_optimizer),
    search_client: SearchClient = Depends(get_search_client),
) -> RecommendationService:
    return RecommendationService(interests, optimizer, search_client, Config)


def get_room_manager() -> RoomManager:
    return _room_manager


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Resolve the bearer token to a user id."""
    if credentials is None or not credentials.credentials:
        raise AuthError("No token provided")
    return tokens.verify(credentials.credentials)
