from __future__ import annotations

import sys

import typer

from pool_sweep.config import get_settings
from pool_sweep.harness import run_sweep
from pool_sweep.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    help="Time a CPU-bound message workload on thread pools of 1 to 10 workers.",
    add_completion=False,
)


@app.command()
def sweep() -> None:
    """
    Warm up, then run one timed trial per pool size and print the results table.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    try:
        run_sweep(settings=settings)
    except KeyboardInterrupt:
        log.warning("Sweep interrupted while waiting for a trial to finish")
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
