"""Application settings powered by Pydantic BaseSettings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stencil_config.constants import DEFAULT_API_HOST, DEFAULT_ENV_FILE_NAME


class StencilSettings(BaseSettings):
    """Process-level settings for locating and defaulting theme config."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    theme_path: Path = Field(
        default_factory=Path.cwd, validation_alias="STENCIL_THEME_PATH"
    )
    env_file: Path | None = Field(default=None, validation_alias="STENCIL_ENV_FILE")
    api_host: str = Field(default=DEFAULT_API_HOST, validation_alias="STENCIL_API_HOST")

    def resolve_env_file(self, theme_path: Path) -> Path:
        """Return the env file used when no explicit path is given."""
        if self.env_file is not None:
            return self.env_file
        return theme_path / DEFAULT_ENV_FILE_NAME


def get_settings() -> StencilSettings:
    """Get a settings instance."""
    return StencilSettings()
