"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dataset
    dataset_path: str = Field(
        default="data/network.json",
        description="JSON file with {nodes: [{name, group}], links: [{source, target}]}"
    )

    # Force layout parameters
    layout_iterations: int = 300
    layout_repulsion: float = 1000.0
    layout_attraction: float = 0.1
    layout_damping: float = 0.9
    layout_softening: float = 0.1  # Added to pairwise distance in repulsion
    layout_initial_extent: float = Field(
        default=40.0,
        description="Side of the cube (centered at origin) used for initial placement"
    )
    layout_seed: int | None = Field(
        default=None,
        description="Seed for initial placement; unset means a different layout each run"
    )

    # Bodies and hover
    node_radius: float = 1.2
    highlight_scale: float = 1.3  # Relative to the body's original scale
    highlight_lighten: float = 0.3  # Fraction of the way toward white
    hover_max_sessions: int = Field(
        default=256,
        description="Viewers tracked for hover at once; the least recently active is dropped first"
    )
    tooltip_offset_x: int = 15
    tooltip_offset_y: int = -10

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False


def get_test_settings() -> Settings:
    """Get test environment settings."""
    return Settings(
        layout_seed=42,
        api_debug=True,
    )


# Global settings instance
settings = Settings()
