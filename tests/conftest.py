from __future__ import annotations

import pytest

from mc_spawn_overlay.world import GridWorld


@pytest.fixture
def world() -> GridWorld:
    return GridWorld()
