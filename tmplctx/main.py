"""CLI entry point for tmplctx using Click."""

from __future__ import annotations

import logging
import sys

import click
import structlog
import yaml
from pydantic import ValidationError

from tmplctx import __version__
from tmplctx.config import load_inventory, resolve_inventory_path, resolve_log_level
from tmplctx.context import TemplateContext
from tmplctx.errors import ContextError
from tmplctx.ui.terminal import TerminalUI

logger = structlog.get_logger()

SINGLE_LOOKUPS = ("container", "host", "service")
COLLECTION_LOOKUPS = ("containers", "hosts", "services")


def _configure_logging(level: str) -> None:
    """Configure structlog for console output on stderr."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


inventory_option = click.option(
    "--inventory",
    "inventory",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the inventory YAML file. Defaults to TMPLCTX_INVENTORY env or ./inventory.yaml.",
)

log_level_option = click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level. Defaults to TMPLCTX_LOG_LEVEL env or INFO.",
)


@click.group()
@click.version_option(version=__version__, prog_name="tmplctx")
def cli() -> None:
    """tmplctx - resolve hosts, containers and services for templates."""


@cli.command()
@inventory_option
def check_inventory(inventory: str | None) -> None:
    """Validate an inventory file without running any lookup."""
    path = resolve_inventory_path(inventory)
    ui = TerminalUI()
    try:
        cfg = load_inventory(path)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        ui.display_error(str(e))
        sys.exit(1)

    counts = {
        "services": len(cfg.services),
        "containers": len(cfg.containers),
        "hosts": len(cfg.hosts),
    }
    ui.display_summary(counts, cfg.self_identity)


@cli.command()
@inventory_option
@log_level_option
@click.argument("kind", type=click.Choice(SINGLE_LOOKUPS + COLLECTION_LOOKUPS))
@click.argument("args", nargs=-1)
def query(inventory: str | None, log_level: str | None, kind: str, args: tuple[str, ...]) -> None:
    """Run one lookup against the inventory and print the result.

    Examples:

      tmplctx query container

      tmplctx query service web.prod

      tmplctx query services .prod @tier=db

      tmplctx query hosts "@zone=^eu-"
    """
    _configure_logging(resolve_log_level(log_level))
    ui = TerminalUI()

    try:
        ctx = TemplateContext.from_file(resolve_inventory_path(inventory))
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        ui.display_error(str(e))
        sys.exit(1)

    lookup = ctx.template_functions()[kind]
    try:
        if kind in SINGLE_LOOKUPS:
            if len(args) > 1:
                raise click.UsageError(f"{kind} takes at most one identifier")
            entities = [lookup(*args)]
        else:
            entities = lookup(*args)
    except ContextError as e:
        ui.display_error(str(e))
        sys.exit(1)

    logger.debug("query_done", kind=kind, args=list(args), matched=len(entities))
    ui.display_entities(kind if kind in COLLECTION_LOOKUPS else f"{kind}s", entities)


if __name__ == "__main__":
    cli()
