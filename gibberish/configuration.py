"""The configuration module."""

import tomllib
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Gibberish Detector"
    log_level: str = "INFO"

    models_directory: Path = Path(__file__).parent / "models"
    default_model: str = "en"
    use_cache: bool = True

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 7123
    api_max_requests_per_interval: int = Field(10, ge=1)
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)
    api_max_text_length: int = Field(100_000, ge=1)


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """
    Load configuration from the configuration file.

    Args:
        configuration_file (Path, optional): TOML file with settings.
            Defaults to `config.toml` in the working directory.

    Returns:
        Configuration: Loaded settings or defaults if the file does not exist.
    """
    if not configuration_file.exists():
        return Configuration()
    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
