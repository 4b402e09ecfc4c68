from .auth import (
    RegisterRequest,
    SigninRequest,
    TokenResponse,
)
from .interests import (
    InterestsResponse,
    UpdateInterestsRequest,
    UpdateInterestsResponse,
)
from .recommendation import (
    RecommendationsResponse,
    ResearchersResponse,
)

__all__ = [
    "RegisterRequest",
    "SigninRequest",
    "TokenResponse",
    "InterestsResponse",
    "UpdateInterestsRequest",
    "UpdateInterestsResponse",
    "RecommendationsResponse",
    "ResearchersResponse",
]
