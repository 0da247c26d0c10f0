"""Configuration management for Locator Warden."""

from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file at import time
load_dotenv()

PACKAGE_DIR = Path(__file__).parent
DEFAULT_REGISTRY_PATH = PACKAGE_DIR / "locators" / "catalog.py"
DEFAULT_TEST_DATA_PATH = PACKAGE_DIR / "testdata.py"

Environment = Literal["development", "staging", "production"]


class EnvironmentConfig(BaseModel):
    """Target application environment."""

    name: Environment = "development"
    base_urls: dict[str, str] = Field(default_factory=lambda: {
        "development": "https://v0-react-frontend-application-gold.vercel.app",
        "staging": "https://staging.example.com",
        "production": "https://production.example.com",
    })


class PathsConfig(BaseModel):
    """Files and directories read by the checkers."""

    registry: Path = DEFAULT_REGISTRY_PATH
    test_data: Path = DEFAULT_TEST_DATA_PATH
    scan_dirs: list[str] = Field(default_factory=lambda: ["tests", "pages", "utils", "scripts"])
    page_dirs: list[str] = Field(default_factory=lambda: ["pages", "page_objects", "page-objects"])
    exclude: list[str] = Field(default_factory=lambda: ["validate-*", "validate_*"])
    results_dir: Path = Path("test-results")


class TimeoutsConfig(BaseModel):
    """Timeouts in milliseconds."""

    short: int = 5000
    medium: int = 10000
    long: int = 30000
    very_long: int = 60000
    default: Literal["short", "medium", "long", "very_long"] = "medium"

    @property
    def default_ms(self) -> int:
        return getattr(self, self.default)


class RetryConfig(BaseModel):
    """Bounded retry for flaky clicks."""

    max_attempts: int = 3
    backoff_seconds: float = 1.0


class Config(BaseSettings):
    """Main configuration for Locator Warden."""

    model_config = SettingsConfigDict(
        env_prefix="LOCATOR_WARDEN_",
        env_nested_delimiter="__",
    )

    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    timeouts: TimeoutsConfig = Field(default_factory=TimeoutsConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment beats values passed in from the YAML file
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def base_url(self) -> str:
        """Base URL of the active environment."""
        return self.environment.base_urls[self.environment.name].rstrip("/")


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file and environment variables."""
    config_data: dict = {}

    # Try to find config file
    if config_path is None:
        for name in ["locator_warden.yaml", "locator_warden.yml", ".locator_warden.yaml"]:
            if Path(name).exists():
                config_path = Path(name)
                break

    # Load from YAML if exists
    if config_path and config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if raw and "locator_warden" in raw:
                config_data = raw["locator_warden"]
            elif raw:
                config_data = raw

    # Environment variables override YAML
    return Config(**config_data)
