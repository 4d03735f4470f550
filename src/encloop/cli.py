from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from .config import LoopConfig
from .pipeline import run_benchmark
from .utils.ui import badge_err, print_header, print_result, spinner


app = typer.Typer(add_completion=False, help="Encode/decode round-trip benchmark")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_repeat(value: str) -> int:
    # same accepted forms as Integer.parseInt: optional sign, ASCII digits, 32-bit range
    if not _INT_RE.fullmatch(value):
        raise typer.BadParameter(f"not an integer: {value!r}")
    n = int(value)
    if not -(2 ** 31) <= n < 2 ** 31:
        raise typer.BadParameter(f"out of 32-bit range: {value}")
    return n


# unknown "-N" tokens stay positional so a negative REPEAT reaches LoopConfig
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    encoding: str = typer.Argument("UTF-8", help="Character encoding name"),
    repeat: str = typer.Argument("50", callback=_parse_repeat, metavar="REPEAT", help="Number of write+read passes"),
    record: Optional[Path] = typer.Option(None, "--record", help="Write run artifacts under this directory"),
    temp_dir: Optional[Path] = typer.Option(None, "--temp-dir", help="Directory for the temporary file"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No summary output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log events to stderr"),
):
    """
    Write a 16384-char pseudo-random buffer to a temp file and read it back, REPEAT times.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler()])

    try:
        cfg = LoopConfig(
            encoding=encoding,
            repeat=repeat,
            temp_dir=str(temp_dir) if temp_dir else None,
            record_dir=str(record) if record else None,
        )
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(p) for p in err["loc"]) or "config"
            typer.echo(badge_err(f"{loc}: {err['msg']}"), err=True)
        raise typer.Exit(code=1)

    if quiet:
        run_benchmark(cfg)
        return

    print_header("Encode/Decode Loop", f"{cfg.encoding} x {cfg.repeat}")
    with spinner(f"Round-tripping {cfg.buffer_size} chars..."):
        result, run_dir = run_benchmark(cfg)
    print_result(result)
    if run_dir is not None:
        typer.echo(f"[OK] outputs at: {run_dir}")


if __name__ == "__main__":
    app()
