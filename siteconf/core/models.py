"""Domain models for the site build configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class OutputMode(str, Enum):
    """Build strategy used by the site generator."""

    STATIC = "static"
    SERVER = "server"
    HYBRID = "hybrid"


class BuildConfiguration(BaseModel):
    """Immutable settings record read by the build tool at startup."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    site: str = Field(..., description="Absolute origin used for canonical URLs")
    base: str = Field(default="/", description="Path prefix the site is mounted under")
    output_mode: OutputMode = Field(
        default=OutputMode.STATIC,
        alias="outputMode",
        description="Pre-render at build time or render per request",
    )
    assets_dir_name: str = Field(
        default="_astro",
        alias="assetsDirName",
        description="Directory for bundled assets, relative to the build output",
    )

    @field_validator("site")
    @classmethod
    def _check_site(cls, value: str) -> str:
        # stored verbatim; AnyHttpUrl would append a trailing slash
        try:
            _HTTP_URL.validate_python(value)
        except PydanticValidationError as e:
            reason = e.errors()[0]["msg"]
            raise ValueError(
                f"site must be an absolute http(s) URL, got: {value!r} ({reason})"
            ) from e
        return value

    @field_validator("base")
    @classmethod
    def _check_base(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"base must start with '/', got: {value!r}")
        if value.startswith("//"):
            raise ValueError(f"base must be a path, not a network location: {value!r}")
        return value

    @field_validator("assets_dir_name")
    @classmethod
    def _check_assets_dir_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("assetsDirName must not be empty")
        if "\x00" in value:
            raise ValueError("assetsDirName must not contain NUL bytes")
        if "\\" in value:
            raise ValueError(f"assetsDirName must use '/' separators: {value!r}")
        path = PurePosixPath(value)
        if path.is_absolute():
            raise ValueError(f"assetsDirName must be relative: {value!r}")
        if not path.parts or "." in value.split("/"):
            raise ValueError(f"assetsDirName must name a subdirectory: {value!r}")
        if ".." in path.parts:
            raise ValueError(f"assetsDirName must not traverse upwards: {value!r}")
        return value

    @property
    def is_prerendered(self) -> bool:
        """Whether the build runs a pre-render pass."""
        return self.output_mode in (OutputMode.STATIC, OutputMode.HYBRID)

    @property
    def site_root(self) -> str:
        """Origin joined with the base path, e.g. ``https://example.org/docs/``."""
        return self.site.rstrip("/") + self.base

    def to_astro(self) -> dict[str, Any]:
        """Nested mapping in the shape the build tool's config file uses."""
        return {
            "site": self.site,
            "base": self.base,
            "output": self.output_mode.value,
            "build": {"assets": self.assets_dir_name},
        }
