"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the problem body defaults.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Root logging level (DEBUG, INFO, WARNING, ERROR).
        package_log_level: Level for easyresults_web loggers; follows log_level when unset.
        problem_type: URI reference written to the "type" member of problem bodies.
        problem_media_type: Content type of problem responses.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "EasyResults Web"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    package_log_level: Optional[str] = None
    problem_type: str = "about:blank"
    problem_media_type: str = "application/problem+json"


settings = Settings()
