from .models import Base, UserRow
from .session import get_engine, get_session_factory

__all__ = ["Base", "UserRow", "get_engine", "get_session_factory"]
