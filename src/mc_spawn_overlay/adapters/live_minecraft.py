"""Live Minecraft adapters backed by the minescript mod.

Both adapters import ``minescript`` lazily so the rest of the package stays usable, and
testable, where the mod is not installed.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from mc_spawn_overlay.adapters.game_command import GameCommandAdapter, MinescriptCommand

logger = logging.getLogger("mc_spawn_overlay.adapters.live_minecraft")


class MinescriptUnavailableError(RuntimeError):
    """Raised when minescript is not installed or has no supported API."""


def _import_minescript() -> Any:
    try:
        return importlib.import_module("minescript")
    except Exception as exc:  # noqa: BLE001
        raise MinescriptUnavailableError(
            "Unable to import minescript. Install it and ensure Minecraft + the mod are running."
        ) from exc


@dataclass(slots=True)
class MinescriptGameCommandAdapter(GameCommandAdapter):
    """Adapter that dispatches commands through a locally-imported `minescript` module."""

    command_prefix: str = "/"
    _executor: Callable[[str], Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._executor = self._resolve_executor()

    def send(self, payload: MinescriptCommand) -> str | None:
        command = payload.command
        if self.command_prefix and not command.startswith(self.command_prefix):
            command = f"{self.command_prefix}{command}"

        result = self._executor(command)
        return "" if result is None else str(result)

    @staticmethod
    def _resolve_executor() -> Callable[[str], Any]:
        module = _import_minescript()
        for attr in ("execute", "run", "command", "chat_command"):
            fn = getattr(module, attr, None)
            if callable(fn):
                return fn

        raise MinescriptUnavailableError(
            "Imported minescript but found no supported API (expected execute/run/command/chat_command)."
        )


class MinescriptObserverLocator:
    """Locates the local player through minescript; other observers are never found."""

    def __init__(self) -> None:
        module = _import_minescript()
        self._position = getattr(module, "player_position", None)
        if not callable(self._position):
            raise MinescriptUnavailableError("Imported minescript but it does not expose player_position().")
        player_name = getattr(module, "player_name", None)
        self._player_name: Callable[[], str] | None = player_name if callable(player_name) else None

    def local_player(self) -> str | None:
        if self._player_name is None:
            return None
        try:
            return str(self._player_name())
        except Exception:  # noqa: BLE001
            return None

    def position_of(self, observer_id: str) -> tuple[float, float, float] | None:
        local = self.local_player()
        if local is not None and local != observer_id:
            return None
        try:
            x, y, z = self._position()
        except Exception:  # noqa: BLE001 - a missing player is an expected condition.
            logger.debug("observer_position_unavailable", extra={"observer_id": observer_id}, exc_info=True)
            return None
        return float(x), float(y), float(z)
