"""
User Interface Utilities.
Provides rich console outputs, spinners, and the result table.
File: src/encloop/utils/ui.py
"""

from contextlib import contextmanager
from typing import Generator

from rich.console import Console
from rich.table import Table

from ..schemas import RoundTripResult

# Initialize a global console instance
console = Console()


@contextmanager
def spinner(text: str = "Processing...") -> Generator[None, None, None]:
    """
    Context manager that displays a spinning loading animation.

    Usage:
        with spinner("Round-tripping..."):
            run_roundtrip(cfg)
    """
    with console.status(f"[bold green]{text}", spinner="dots"):
        yield


def print_header(title: str, subtitle: str = ""):
    """Prints a styled header."""
    console.rule(f"[bold blue]{title}")
    if subtitle:
        console.print(f"[dim]{subtitle}[/dim]", justify="center")
    console.print()


def print_result(result: RoundTripResult) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("encoding", f"{result.encoding} ({result.codec})")
    table.add_row("repeat", str(result.repeat))
    table.add_row("writes / reads", f"{result.writes} / {result.reads}")
    table.add_row("chars written", f"{result.chars_written:,}")
    table.add_row("chars read", f"{result.chars_read:,}")
    table.add_row("loop time", f"{result.elapsed_s:.4f} s")
    table.add_row("throughput", f"{result.chars_per_second:,.0f} chars/s")
    console.print(table)


def badge_err(msg: str) -> str:
    return f"[ERR] {msg}"
