import sys

import anyio
import click
from pydantic import ValidationError

from greeting_server.config import Settings
from greeting_server.server import build_server
from greeting_server.transport.stdio import run_stdio
from greeting_server.utilities.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level (overrides GREETING_SERVER_LOG_LEVEL)",
)
@click.option(
    "--strict-enums/--permissive-enums",
    default=None,
    help="Reject unknown values for optional enum arguments instead of using their default",
)
def main(log_level: str | None, strict_enums: bool | None) -> None:
    """Run the greeting server over stdio."""
    overrides: dict[str, object] = {}
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if strict_enums is not None:
        overrides["strict_enums"] = strict_enums

    try:
        settings = Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)
    configure_logging(settings.log_level)

    try:
        session = build_server(settings)
        logger.info("Greeting server running on stdio")
        anyio.run(run_stdio, session)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)
