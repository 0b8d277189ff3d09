"""Boundary for game command transport integrations."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class MinescriptCommand:
    """Command payload directed to the running game."""

    command: str


class GameCommandAdapter(Protocol):
    """Interface to send commands to Minecraft, e.g. via minescript."""

    def send(self, payload: MinescriptCommand) -> str | None:
        """Dispatch a command payload to the running game instance."""


class EchoGameCommandAdapter:
    """Fallback adapter for offline runs; records what would have been sent."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    def send(self, payload: MinescriptCommand) -> str:
        self.sent.append(payload.command)
        return f"executed: {payload.command}"
