"""Per-observer overlay sessions and the registry that owns them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from mc_spawn_overlay.config import Settings
from mc_spawn_overlay.models import BlockPos, DisplayMode, ScanPoint
from mc_spawn_overlay.render import RenderSink
from mc_spawn_overlay.scanner import VolumeScanner, block_origin
from mc_spawn_overlay.world.reader import ObserverLocator

HORIZONTAL_CENTER = 0.5


def marker_position(origin: BlockPos, point: ScanPoint, *, nudge: float) -> tuple[float, float, float]:
    """World coordinates of a marker: centred on the block, just above its top face."""
    ox, oy, oz = origin
    x, y, z = point.offset
    return (
        ox + x + HORIZONTAL_CENTER,
        oy + y + point.height + nudge,
        oz + z + HORIZONTAL_CENTER,
    )


class UpdateOutcome(str, Enum):
    SKIPPED = "skipped"
    RENDERED = "rendered"
    SESSION_REMOVED = "session_removed"


@dataclass(slots=True)
class UpdateReport:
    outcome: UpdateOutcome
    points: int = 0


class DisplaySession:
    """Enabled flag and display mode for one observer.

    Sessions start disabled. ``update`` does nothing until the session is shown; a mode
    change only becomes visible on the next update.
    """

    def __init__(self, registry: SessionRegistry, observer_id: str, mode: DisplayMode) -> None:
        self._registry = registry
        self.observer_id = observer_id
        self._mode = mode
        self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    def show(self) -> UpdateReport:
        self._enabled = True
        return self.update()

    def hide(self) -> None:
        if not self._enabled:
            return
        self._enabled = False

    def toggle(self) -> bool:
        """Flip the enabled state and return the state it had before."""
        previous = self._enabled
        if previous:
            self.hide()
        else:
            self.show()
        return previous

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    def set_mode(self, mode: DisplayMode) -> None:
        self._mode = mode

    def cycle_mode(self) -> DisplayMode:
        self._mode = self._mode.next()
        return self._mode

    def update(self) -> UpdateReport:
        if not self._enabled:
            return UpdateReport(UpdateOutcome.SKIPPED)
        return self._registry.render(self)


class SessionRegistry:
    """Owns one ``DisplaySession`` per observer and drives their scans."""

    def __init__(
        self,
        *,
        scanner: VolumeScanner,
        sink: RenderSink,
        locator: ObserverLocator,
        settings: Settings,
        logger: logging.Logger | None = None,
    ) -> None:
        self._scanner = scanner
        self._sink = sink
        self._locator = locator
        self._settings = settings
        self._logger = logger or logging.getLogger("mc_spawn_overlay.session")
        self._sessions: dict[str, DisplaySession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, observer_id: object) -> bool:
        return observer_id in self._sessions

    def get(self, observer_id: str) -> DisplaySession | None:
        return self._sessions.get(observer_id)

    def session_for(self, observer_id: str) -> DisplaySession:
        session = self._sessions.get(observer_id)
        if session is None:
            session = DisplaySession(self, observer_id, self._settings.default_mode)
            self._sessions[observer_id] = session
            self._logger.info("session_created", extra={"observer_id": observer_id, "mode": session.mode.value})
        return session

    def remove(self, observer_id: str) -> None:
        if self._sessions.pop(observer_id, None) is not None:
            self._logger.info("session_removed", extra={"observer_id": observer_id})

    def clear(self) -> None:
        for observer_id in list(self._sessions):
            self.remove(observer_id)

    def tick(self) -> dict[str, UpdateReport]:
        """Run one update for every registered session."""
        return {observer_id: session.update() for observer_id, session in list(self._sessions.items())}

    def render(self, session: DisplaySession) -> UpdateReport:
        position = self._locator.position_of(session.observer_id)
        if position is None:
            self.remove(session.observer_id)
            return UpdateReport(UpdateOutcome.SESSION_REMOVED)

        origin = block_origin(position)
        points = 0
        for point in self._scanner.scan(origin, self._settings.radius, session.mode):
            x, y, z = marker_position(origin, point, nudge=self._settings.marker_nudge)
            self._sink.emit(session.observer_id, x, y, z, point.color)
            points += 1

        self._logger.debug(
            "session_rendered",
            extra={"observer_id": session.observer_id, "mode": session.mode.value, "points": points},
        )
        return UpdateReport(UpdateOutcome.RENDERED, points)
