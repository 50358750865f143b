"""
Sample cart generator for the cart parser.

Writes a deterministic pseudo-random cart CSV that passes validation, useful
for trying the CLI and for exercising the parser on larger inputs.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

from cart_parser.domain.schema import CART_SCHEMA, DELIMITER

app = typer.Typer(help="Generate a valid sample cart CSV file.")

_ADJECTIVES = ["Mollis", "Scelerisque", "Consectetur", "Condimentum", "Tempor", "Viverra"]
_NOUNS = ["consequat", "lacinia", "adipiscing", "aliquet", "elementum", "pretium"]


def _generate_cart_lines(rows: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    lines = [DELIMITER.join(spec.name for spec in CART_SCHEMA)]
    for _ in range(rows):
        name = f"{rng.choice(_ADJECTIVES)} {rng.choice(_NOUNS)}"
        price = round(rng.uniform(0.5, 500), 2)
        quantity = rng.randint(1, 20)
        lines.append(DELIMITER.join([name, f"{price:.2f}", str(quantity)]))
    return lines


def _write_cart_csv(csv_path: Path, rows: int, seed: int) -> None:
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        f.write("\n".join(_generate_cart_lines(rows, seed)) + "\n")


@app.command()
def main(
    out: Path = typer.Option(Path("samples/generated_cart.csv"), "--out", "-o", help="Output CSV path."),
    rows: int = typer.Option(100, "--rows", "-r", min=0, help="Number of data rows."),
    seed: int = typer.Option(42, "--seed", help="Random seed for reproducible output."),
) -> None:
    _write_cart_csv(out, rows=rows, seed=seed)
    typer.echo(f"Wrote {rows} rows to {out}")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
