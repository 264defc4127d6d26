"""Build configuration provider."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from .core.errors import ValidationError
from .core.models import BuildConfiguration

logger = logging.getLogger(__name__)

# https://astro.build/config
SITE = "https://burrow-io.github.io"
BASE = "/"
OUTPUT = "static"
ASSETS_DIR_NAME = "assets"

_BUILD_KEYS = frozenset({"assets"})


def _describe(exc: PydanticValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "config"
        msg = err["msg"]
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        messages.append(f"{field}: {msg}")
    return messages


def define_config(
    *,
    site: str,
    base: str = BASE,
    output: str = OUTPUT,
    build: Mapping[str, Any] | None = None,
) -> BuildConfiguration:
    """Validate a nested configuration and return the immutable record.

    Args:
        site: Absolute origin of the deployed site
        base: Path prefix the site is mounted under
        output: Output mode name (static, server or hybrid)
        build: Build options; only ``assets`` is recognised

    Returns:
        Validated build configuration

    Raises:
        ValidationError: If any field violates its constraint
    """
    if build is not None and not isinstance(build, Mapping):
        raise ValidationError([f"build: expected a mapping, got {type(build).__name__}"])
    build = dict(build or {})
    unknown = sorted(map(str, set(build) - _BUILD_KEYS))
    if unknown:
        raise ValidationError(f"build.{key}: unknown option" for key in unknown)

    fields: dict[str, Any] = {"site": site, "base": base, "outputMode": output}
    if "assets" in build:
        fields["assetsDirName"] = build["assets"]

    try:
        config = BuildConfiguration.model_validate(fields)
    except PydanticValidationError as exc:
        raise ValidationError(_describe(exc)) from exc

    logger.debug(
        f"Configured {config.site_root} ({config.output_mode.value}, "
        f"assets in {config.assets_dir_name!r})"
    )
    return config


def load_configuration() -> BuildConfiguration:
    """Return the site's build configuration."""
    return define_config(
        site=SITE,
        base=BASE,
        output=OUTPUT,
        build={"assets": ASSETS_DIR_NAME},
    )
