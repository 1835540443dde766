"""API configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    api_title: str = "Wind Rose API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Default rendering values
    default_center_x: float = 100.0
    default_center_y: float = 80.0
    surface_width: int = 300
    surface_height: int = 300

    class Config:
        env_prefix = "WINDROSE_"


settings = Settings()
