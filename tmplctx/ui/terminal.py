"""Rich-based rendering of lookup results.

Entities are shown as tables with one row per entity. Values are
passed as Text so that label values are never parsed as Rich markup.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tmplctx.models import Container, Host, SelfIdentity, Service

Entity = Container | Host | Service

_COLUMNS: dict[type, tuple[str, ...]] = {
    Container: ("name", "stack", "service", "host_uuid", "state", "health"),
    Host: ("uuid", "name", "hostname", "address"),
    Service: ("name", "stack", "kind", "vip"),
}


def format_labels(labels: Mapping[str, str]) -> str:
    """Render labels as 'key=value' pairs sorted by key."""
    return ", ".join(f"{k}={v}" for k, v in sorted(labels.items()))


class TerminalUI:
    """Terminal output for inventory lookups using Rich."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)

    def display_entities(self, title: str, entities: Sequence[Entity]) -> None:
        """Show entities of one kind as a table."""
        if not entities:
            self._console.print(Text(f"No {title} matched.", style="dim"))
            return

        columns = _COLUMNS[type(entities[0])]
        table = Table(title=title, title_style="bold cyan")
        for col in columns:
            table.add_column(col)
        table.add_column("labels", style="dim")

        for entity in entities:
            row = [Text(str(getattr(entity, col))) for col in columns]
            row.append(Text(format_labels(entity.labels)))
            table.add_row(*row)
        self._console.print(table)

    def display_summary(self, counts: Mapping[str, int], self_identity: SelfIdentity) -> None:
        """Show inventory counts and the self identity."""
        summary = Text()
        for kind, count in counts.items():
            summary.append(f"{kind.capitalize()}: ", style="bold")
            summary.append(f"{count}\n")
        summary.append("Self: ", style="bold")
        summary.append(
            f"container={self_identity.container_name or '-'} "
            f"host={self_identity.host_uuid or '-'} "
            f"service={self_identity.service or '-'} "
            f"stack={self_identity.stack or '-'}"
        )
        self._console.print(Panel(summary, border_style="cyan", title="Inventory OK"))

    def display_error(self, message: str) -> None:
        """Show an error on stderr."""
        self._err_console.print(Text(f"Error: {message}", style="bold red"))
