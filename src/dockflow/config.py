"""Application configuration and settings management."""

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DOCKFLOW_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Dockflow Analytics"
    data_root: Path = Field(default=Path("data"), description="Root directory for report exports.")
    currency_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places order totals are rounded to once all lines are summed.",
    )
    order_number_prefix: str = Field(default="ORD", min_length=1)
    order_number_strategy: Literal["random", "sequence"] = Field(
        default="random",
        description="How the 4-digit order number suffix is drawn (random 1000-9999 or a per-day counter).",
    )
    log_level: str = Field(default="INFO", description="Level applied by configure_logging().")

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        level = str(value or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'.")
        return level


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Attach a basic stream handler to the package logger."""

    logger = logging.getLogger("dockflow")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level or settings.log_level)
