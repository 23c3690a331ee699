"""CLI commands for gatebadge."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from gatebadge.core.exceptions import GatebadgeError, UnknownStatusError
from gatebadge.core.models import QualityGateStatus
from gatebadge.log import setup_logging


app = typer.Typer(
    name="gatebadge",
    help="Render quality gate status badges as SVG.",
    no_args_is_help=True,
)


def _fail(error: GatebadgeError) -> typer.Exit:
    """Report a library error on stderr and return the exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    return typer.Exit(1)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log rendering and cache activity to stderr.",
    ),
) -> None:
    """Render quality gate status badges as SVG."""
    setup_logging(logging.DEBUG if verbose else None)


@app.command()
def render(
    status: str = typer.Argument(
        ...,
        help="Quality gate status, e.g. ok, warn, error, not-found.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the SVG to this file instead of stdout.",
    ),
) -> None:
    """Render the badge for a quality gate status."""
    from gatebadge.core.services import ImageService

    try:
        gate_status = QualityGateStatus.parse(status)
    except UnknownStatusError as e:
        raise _fail(e) from None

    service = ImageService.from_config()
    try:
        with service.image_for(gate_status) as stream:
            content = stream.read()
    except GatebadgeError as e:
        raise _fail(e) from None

    if output is None:
        typer.echo(content.decode("utf-8"), nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(content)
    typer.echo(f"Wrote {gate_status.name} badge to {output} ({len(content)} bytes)")


def main() -> None:
    """Entry point for the CLI."""
    app()
