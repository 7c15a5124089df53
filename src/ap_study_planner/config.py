"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


def _find_project_root() -> Path:
    """Find project root by locating pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return Path(__file__).resolve().parent.parent.parent


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from settings.yaml."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        """Not used - we implement __call__ instead."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        """Load settings from YAML file."""
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}

        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # Flatten nested structure to match Settings field names
        flattened = {}
        if "server" in data:
            flattened["host"] = data["server"].get("host")
            flattened["port"] = data["server"].get("port")
        if "remote" in data:
            remote = data["remote"]
            flattened["remote_enabled"] = remote.get("enabled")
            flattened["remote_model"] = remote.get("model")
            flattened["remote_timeout_seconds"] = remote.get("timeout_seconds")
        if "sessions" in data:
            flattened["session_history_limit"] = data["sessions"].get("history_limit")
        if "logging" in data:
            flattened["log_level"] = data["logging"].get("level")
            flattened["log_json"] = data["logging"].get("json")

        return {k: v for k, v in flattened.items() if v is not None}


class Settings(BaseSettings):
    """Application settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # OpenAI (optional: without a key only the local engine runs)
    openai_api_key: str | None = Field(default=None)
    remote_enabled: bool = Field(default=True)
    remote_model: str = Field(default="gpt-4o-mini")
    remote_timeout_seconds: float = Field(default=20.0, gt=0)

    # Sessions
    session_history_limit: int = Field(default=50, ge=1)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    # Paths
    project_root: Path = Field(default_factory=_find_project_root)

    @property
    def history_dir(self) -> Path:
        d = self.project_root / "data" / "session_history"
        d.mkdir(parents=True, exist_ok=True)
        return d

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include YAML file.

        Priority order (highest to lowest):
        1. init_settings (arguments passed to Settings())
        2. env_settings (environment variables)
        3. dotenv_settings (.env file)
        4. YamlSettingsSource (settings.yaml)
        5. file_secret_settings
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
            file_secret_settings,
        )


class EngineConfig(BaseModel):
    """Explicit generator configuration, fixed at construction time."""

    model_config = ConfigDict(frozen=True)

    remote_enabled: bool = False
    api_key: str | None = None
    model: str = "gpt-4o-mini"
    timeout_seconds: float = Field(default=20.0, gt=0)
    session_history_limit: int = Field(default=50, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EngineConfig":
        return cls(
            remote_enabled=bool(settings.remote_enabled and settings.openai_api_key),
            api_key=settings.openai_api_key,
            model=settings.remote_model,
            timeout_seconds=settings.remote_timeout_seconds,
            session_history_limit=settings.session_history_limit,
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()
