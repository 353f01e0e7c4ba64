from .session import GameSession, utcnow
from .library import GameLibrary, FilterOption

__all__ = ["GameSession", "GameLibrary", "FilterOption", "utcnow"]
