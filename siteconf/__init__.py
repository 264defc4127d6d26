"""Siteconf - validated build configuration for the static site.

Exposes the immutable settings record the site generator reads at startup.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import ValidationError
from .core.models import BuildConfiguration, OutputMode
from .loading import load_configuration_file
from .provider import define_config, load_configuration

__all__ = [
    "BuildConfiguration",
    "OutputMode",
    "ValidationError",
    "define_config",
    "load_configuration",
    "load_configuration_file",
]
