"""Configuration management for termformat.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from termformat.domain.models import ImageOptions
from termformat.utils.terminal import supports_true_color

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/termformat.yaml")


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class ImageConfig(BaseModel):
    """Default rendering options for images printed by the CLI."""

    name: str | None = Field(default=None)
    width: str | None = Field(default=None, description="e.g. 10, 100px or 50%")
    height: str | None = Field(default=None, description="e.g. 10, 100px or 50%")
    preserve_aspect_ratio: bool = Field(default=True)

    def to_options(self, **overrides: object) -> ImageOptions:
        """Build ImageOptions from these defaults.

        Keyword overrides replace the configured value unless they are None.
        """
        values = self.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ImageOptions(**values)


class Settings(BaseSettings):
    """Root configuration for termformat.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "TERMFORMAT_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Value of COLORTERM as seen at load time
    colorterm: str = Field(default="")

    # Named styles, each a list of textual attribute specs
    styles: dict[str, list[str] | str] = Field(default_factory=dict)

    # Configuration sections
    image: ImageConfig = Field(default_factory=ImageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def true_color(self) -> bool:
        """Whether the terminal advertises 24-bit color support."""
        return supports_true_color({"COLORTERM": self.colorterm})


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    YAML values are passed as init arguments, so they take precedence over
    TERMFORMAT_* variables and .env entries. COLORTERM, when set, always
    replaces the YAML value.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply environment variable overrides for non-prefixed vars."""
    colorterm = os.environ.get("COLORTERM")
    if colorterm is not None:
        yaml_data["colorterm"] = colorterm
