from .config import Config, Settings

__all__ = ["Config", "Settings"]
