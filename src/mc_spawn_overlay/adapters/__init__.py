"""Game command adapters (e.g., minescript integration)."""

from .game_command import EchoGameCommandAdapter, GameCommandAdapter, MinescriptCommand
from .live_minecraft import MinescriptGameCommandAdapter, MinescriptObserverLocator, MinescriptUnavailableError

__all__ = [
    "EchoGameCommandAdapter",
    "GameCommandAdapter",
    "MinescriptCommand",
    "MinescriptGameCommandAdapter",
    "MinescriptObserverLocator",
    "MinescriptUnavailableError",
]
