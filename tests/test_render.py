from __future__ import annotations

from mc_spawn_overlay.adapters import EchoGameCommandAdapter
from mc_spawn_overlay.models import RED, Color
from mc_spawn_overlay.render import ParticleCommandSink, RecordingRenderSink, dust_particle_command


class FailingAdapter:
    def __init__(self) -> None:
        self.calls = 0

    def send(self, payload):
        self.calls += 1
        raise RuntimeError("boom")


def test_dust_particle_command_format() -> None:
    command = dust_particle_command("Steve", 0.5, 64.2, -3.5, Color(255, 255, 0))

    assert command == "particle minecraft:dust 1.000 1.000 0.000 1 0.50 64.20 -3.50 0 0 0 0 1 force Steve"


def test_particle_sink_sends_through_adapter() -> None:
    adapter = EchoGameCommandAdapter()
    sink = ParticleCommandSink(adapter, particle_size=0.5)

    sink.emit("Alex", 1.5, 70.2, 2.5, RED)

    assert adapter.sent == ["particle minecraft:dust 1.000 0.000 0.000 0.5 1.50 70.20 2.50 0 0 0 0 1 force Alex"]


def test_particle_sink_tolerates_transport_failures() -> None:
    adapter = FailingAdapter()
    sink = ParticleCommandSink(adapter)

    sink.emit("Alex", 0.5, 1.0, 0.5, RED)
    sink.emit("Alex", 1.5, 1.0, 0.5, RED)

    assert adapter.calls == 2
    assert sink.failures == 2


def test_recording_sink_keeps_order() -> None:
    sink = RecordingRenderSink()
    sink.emit("a", 1.0, 2.0, 3.0, RED)
    sink.emit("b", 4.0, 5.0, 6.0, RED)

    assert [point.addressee for point in sink.points] == ["a", "b"]
