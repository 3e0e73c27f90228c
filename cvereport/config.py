"""Configuration — Pydantic Settings + YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "default.yaml"
OUTPUT_DIR = Path("reports")
SESSIONS_DIR = Path("sessions")


class InsightSettings(BaseSettings):
    """Text-generation endpoint.

    ``CVEREPORT_INSIGHT_*`` environment variables override YAML values. The API
    key is only ever read from the environment.
    """

    model_config = SettingsConfigDict(env_prefix="CVEREPORT_INSIGHT_")

    endpoint: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-2.0-flash"
    api_key: str = ""
    timeout: float = 30.0
    user_agent: str = "cvereport/1.0"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class RenderSettings(BaseSettings):
    output_dir: Path = OUTPUT_DIR
    formats: list[str] = Field(default=["html"])
    embed_insights: bool = False


class TuiSettings(BaseSettings):
    session_log: bool = False
    sessions_dir: Path = SESSIONS_DIR
    max_sessions: int = 20


class Settings(BaseSettings):
    """Root settings — merges defaults, YAML config, and env vars."""

    insight: InsightSettings = Field(default_factory=InsightSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    tui: TuiSettings = Field(default_factory=TuiSettings)
    report_path: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> Settings:
        """Load settings from YAML file, falling back to defaults."""
        data: dict[str, Any] = {}

        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
                if isinstance(raw, dict):
                    data = raw

        insight = data.get("insight")
        if isinstance(insight, dict):
            data["insight"] = InsightSettings(**insight)
        return cls(**data)
