from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SITECONF_", case_sensitive=False)

    config_path: Path | None = None
    output_format: Literal["flat", "astro"] = "flat"
