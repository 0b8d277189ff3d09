"""Spawn-light overlay: marks where hostile mobs can spawn around a player."""

__version__ = "0.1.0"
