"""
Configuration settings for the Triangle Test Generator
"""
from pydantic_settings import BaseSettings
from pathlib import Path


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Triangle Test Generator"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    FRONTEND_DIR: Path = BASE_DIR / "frontend"

    # Form defaults
    DEFAULT_WIDTH_MIN: int = 1
    DEFAULT_WIDTH_MAX: int = 10
    DEFAULT_HEIGHT_MIN: int = 1
    DEFAULT_HEIGHT_MAX: int = 10
    DEFAULT_STRATEGY: str = "Bva"

    # Report settings
    LOG_FILENAME: str = "ExecuteLog.txt"
    UNKNOWN_TESTER: str = "Unknown"
    DATE_FORMAT: str = "%d/%m/%Y"
    TIME_FORMAT: str = "%H:%M:%S"
    SEPARATOR_WIDTH: int = 50

    # Sessions kept in memory
    MAX_SESSIONS: int = 100

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
