from pathlib import Path

from pydantic import BaseModel
from pydantic_settings_yaml import YamlBaseSettings
from pydantic_settings import SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class InputSettings(BaseModel):
    path: Path


class SelfCheckSettings(BaseModel):
    enabled: bool = True
    fixture: Path
    expected_distance_sum: int
    expected_similarity_score: int

    def fixture_path(self) -> Path:
        """Relative fixture paths are taken from the package directory."""
        if self.fixture.is_absolute():
            return self.fixture
        return PACKAGE_DIR / self.fixture


class Settings(YamlBaseSettings):
    input: InputSettings
    self_check: SelfCheckSettings

    model_config = SettingsConfigDict(
        yaml_file = PACKAGE_DIR / "config.yaml",
        yaml_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_prefix="",
    )


def load_config() -> Settings:
    """
    Load settings from config.yaml, then overlay any
    environment variables (e.g. INPUT__PATH or SELF_CHECK__ENABLED).
    """
    return Settings()
