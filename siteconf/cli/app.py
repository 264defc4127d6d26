"""Main CLI application."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import ValidationError
from ..core.models import BuildConfiguration
from ..loading import load_configuration_file
from ..provider import load_configuration
from ..settings import Settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="siteconf",
    help="Inspect and validate the static site build configuration.",
    no_args_is_help=True,
)

_FORMATS = ("flat", "astro")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _load(path: Path | None) -> BuildConfiguration:
    try:
        if path is None:
            return load_configuration()
        return load_configuration_file(path)
    except (ValidationError, FileNotFoundError) as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def show(
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="YAML or JSON configuration file (default: built-in configuration).",
            metavar="PATH",
        ),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option(
            "--format",
            help="flat (site, base, outputMode, assetsDirName) or astro (nested).",
            metavar="FORMAT",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Print the configuration as JSON."""
    _configure_logging(verbose)
    settings = get_settings()

    fmt = output_format or settings.output_format
    if fmt not in _FORMATS:
        raise typer.BadParameter(
            f"Must be one of {', '.join(_FORMATS)}, got: {fmt!r}", param_hint="--format"
        )

    config = _load(file or settings.config_path)
    payload = (
        config.to_astro() if fmt == "astro" else config.model_dump(by_alias=True, mode="json")
    )
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def check(
    file: Annotated[
        Path,
        typer.Option("--file", "-f", help="YAML or JSON configuration file.", metavar="PATH"),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Validate a configuration file."""
    _configure_logging(verbose)
    config = _load(file)
    logger.debug(f"Validated {file}: {config.site_root}")
    typer.echo("OK")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
