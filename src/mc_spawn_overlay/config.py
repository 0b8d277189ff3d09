"""Runtime configuration for the spawn overlay."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mc_spawn_overlay.models import DisplayMode


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_SPAWN_OVERLAY_", env_file=".env", extra="ignore")

    app_name: str = "mc-spawn-overlay"
    log_level: str = "INFO"
    radius: int = Field(default=16, description="Scan radius in blocks; zero or less scans nothing.")
    default_mode: DisplayMode = DisplayMode.SPAWNABLE
    update_interval_seconds: float = Field(default=1.0, gt=0)
    marker_nudge: float = Field(
        default=0.2,
        description="Vertical lift above the block surface so markers do not z-fight with it.",
    )
    particle_size: float = Field(default=1.0, gt=0)
    minecraft_adapter: str = Field(default="echo", description="echo or minescript")
    minescript_command_prefix: str = "/"
    snapshot_path: str | None = None


settings = Settings()
