"""Demo entry point for calcdemo.

Usage:
    python -m calcdemo          # Output depends on the build defines
    calcdemo any extra args     # Arguments are accepted and ignored
"""

from __future__ import annotations

import typer

from calcdemo.build import BUILD
from calcdemo.calculator import Calculator
from calcdemo.models import BuildConfig, Number, Operand, Variant

BANNER = [
    "Hi, if you can read this, you successfully compiled the example app!",
    "Let's check out the advanced calculator program.",
    "",
]

app = typer.Typer(
    name="calcdemo",
    help="Example app: prints a banner and a few Calculator results",
    add_completion=False,
)


def operand_pair(named_constants: bool) -> tuple[Operand, Operand]:
    """Return the (8, 7) operands, literal or from the Number constants."""
    if named_constants:
        return Operand.of(Number.EIGHT), Operand.of(Number.SEVEN)
    return Operand.of(8), Operand.of(7)


def render_lines(variant: Variant, lhs: Operand, rhs: Operand) -> list[str]:
    """Build the exact stdout lines for a variant."""
    if variant is Variant.HELLO:
        return ["HELLO"]
    if variant is Variant.BYE:
        return ["BYE"]

    results = [
        ("+", Calculator.add(lhs.value, rhs.value)),
        ("*", Calculator.mult(lhs.value, rhs.value)),
        ("-", Calculator.sub(lhs.value, rhs.value)),
    ]
    return BANNER + [f"{lhs.symbol} {op} {rhs.symbol} = {result}" for op, result in results]


def run(config: BuildConfig) -> int:
    """Print the output selected by config. Always returns 0."""
    lhs, rhs = operand_pair(config.named_constants)
    for line in render_lines(config.variant, lhs, rhs):
        typer.echo(line)
    return 0


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def cmd_main() -> None:
    """Run the demo. Extra arguments are ignored."""
    raise typer.Exit(run(BUILD))


if __name__ == "__main__":
    app()
