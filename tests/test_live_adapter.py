from __future__ import annotations

import sys
import types

import pytest

from mc_spawn_overlay.adapters.live_minecraft import (
    MinescriptGameCommandAdapter,
    MinescriptObserverLocator,
    MinescriptUnavailableError,
)


class _FakeMinescriptModule(types.SimpleNamespace):
    def __init__(self, name: str = "Steve", position=(1.5, 64.0, -2.25)):
        super().__init__()
        self.calls: list[str] = []
        self._name = name
        self._pos = position

    def execute(self, command: str) -> str:
        self.calls.append(command)
        return f"ok:{command}"

    def player_name(self) -> str:
        return self._name

    def player_position(self):
        if self._pos is None:
            raise RuntimeError("not in world")
        return list(self._pos)


def test_minescript_adapter_dispatches_command(monkeypatch) -> None:
    fake = _FakeMinescriptModule()
    monkeypatch.setitem(sys.modules, "minescript", fake)

    adapter = MinescriptGameCommandAdapter(command_prefix="/")
    response = adapter.send(types.SimpleNamespace(command="particle minecraft:dust 1 0 0 1 0 0 0"))

    assert response == "ok:/particle minecraft:dust 1 0 0 1 0 0 0"
    assert fake.calls == ["/particle minecraft:dust 1 0 0 1 0 0 0"]


def test_minescript_adapter_without_api(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "minescript", types.SimpleNamespace())

    with pytest.raises(MinescriptUnavailableError):
        MinescriptGameCommandAdapter()


def test_locator_finds_local_player_only(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "minescript", _FakeMinescriptModule())
    locator = MinescriptObserverLocator()

    assert locator.position_of("Steve") == (1.5, 64.0, -2.25)
    assert locator.position_of("Alex") is None


def test_locator_reports_missing_player(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "minescript", _FakeMinescriptModule(position=None))

    assert MinescriptObserverLocator().position_of("Steve") is None
