"""CLI command for serving the janken page."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging, including every round
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


@click.group()
def cli():
    """Janken web page commands."""


@cli.command()
@click.option("--host", default="127.0.0.1", envvar="JANKEN_HOST", show_default=True, help="Host to bind to")
@click.option("--port", default=8000, type=int, envvar="JANKEN_PORT", show_default=True, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Restart on code changes")
@click.option("--verbose", "-v", is_flag=True, help="Log every round (DEBUG level)")
def serve(host: str, port: int, reload: bool, verbose: bool) -> None:
    """Start the web server."""
    import uvicorn

    setup_logging(verbose)

    click.echo(f"Starting janken on http://{host}:{port}")
    uvicorn.run(
        "janken.web.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_config=None,
    )


if __name__ == "__main__":
    cli()
