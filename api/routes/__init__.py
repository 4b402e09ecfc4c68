from .auth import router as auth_router
from .collab import router as collab_router
from .interests import router as interests_router
from .recommendations import router as recommendations_router

__all__ = [
    "auth_router",
    "collab_router",
    "interests_router",
    "recommendations_router",
]
