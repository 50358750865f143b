from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from cart_parser.domain.models import NO_COLUMN, ParseResult, Violation


def _format_column(column: int) -> str:
    return "-" if column == NO_COLUMN else str(column)


def print_violations(
    violations: Sequence[Violation], console: Optional[Console] = None
) -> None:
    """
    Render validation violations as a rich table, in document order.
    """
    console = console or Console()

    if not violations:
        console.print("[green]No violations found.[/green]")
        return

    table = Table(
        title="Cart Validation Violations",
        box=box.ROUNDED,
        caption=f"{len(violations)} violation(s)",
    )
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Row", justify="right", style="magenta")
    table.add_column("Column", justify="right", style="blue")
    table.add_column("Message", style="red")

    for violation in violations:
        table.add_row(
            violation.type.value,
            str(violation.row),
            _format_column(violation.column),
            violation.message,
        )

    console.print(table)


def print_result(result: ParseResult, console: Optional[Console] = None) -> None:
    """
    Render parsed line items as a rich table with the cart total in the caption.
    """
    console = console or Console()

    if not result.items:
        console.print("[yellow]Cart is empty.[/yellow]")
        return

    table = Table(
        title="Cart Items",
        box=box.ROUNDED,
        caption=f"Total: {result.total:,.2f}",
    )
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Product name", style="cyan")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Quantity", justify="right", style="magenta")
    table.add_column("Subtotal", justify="right", style="bold green")

    for item in result.items:
        table.add_row(
            item.id,
            item.name,
            f"{item.price:,.2f}",
            f"{item.quantity:g}",
            f"{item.subtotal:,.2f}",
        )

    console.print(table)


__all__ = ["print_result", "print_violations"]
