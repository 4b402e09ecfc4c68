from .paper import Paper, RecentPaper, Researcher
from .user import User

__all__ = ["Paper", "RecentPaper", "Researcher", "User"]
