"""Reading configurations from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .core.errors import ValidationError
from .core.models import BuildConfiguration
from .provider import define_config

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_KEYS = frozenset({"site", "base", "output", "build"})


def read_mapping(path: Path) -> dict[str, Any]:
    """Parse a configuration file into a mapping.

    Args:
        path: YAML (.yaml/.yml) or JSON (.json) file

    Returns:
        Top-level mapping of the document
    """
    if not path.is_file():
        raise FileNotFoundError(f"Configuration not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES and suffix != ".json":
        raise ValidationError([f"{path.name}: unsupported file type {suffix!r}"])

    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text) if suffix in _YAML_SUFFIXES else json.loads(text)
    except (UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValidationError([f"{path.name}: cannot parse: {e}"]) from e

    if not isinstance(data, dict):
        raise ValidationError([f"{path.name}: top level must be a mapping"])
    return data


def load_configuration_file(path: Path | str) -> BuildConfiguration:
    """Load and validate a configuration file."""
    path = Path(path)
    logger.debug(f"Loading configuration from {path}")
    data = read_mapping(path)

    problems = [
        f"{path.name}: unknown option {key!r}" for key in sorted(map(str, set(data) - _KEYS))
    ]
    if "site" not in data:
        problems.append(f"{path.name}: site is required")
    if problems:
        raise ValidationError(problems)

    return define_config(**data)
