from __future__ import annotations

"""
da_square.cli.plan
------------------

Compute blob placements in the DA square from the command line.

Examples
--------
# Three 128-share blobs after one share of prior data
python -m da_square.cli.plan place 1 128 128 128

# Same, as JSON, with (row, col) in a 64-wide square
python -m da_square.cli.plan place 1 128 128 128 --square-size 64 --json

# Subtree width and minimal square size of a single blob
python -m da_square.cli.plan width 129 --threshold 64
"""

import json
from typing import List, Optional

import typer

from ..config import format_config, get_config
from ..errors import LayoutError
from ..rules.planner import plan_blob_placements
from ..rules.square_size import blob_min_square_size
from ..rules.subtree import subtree_width
from . import setup_logging

app = typer.Typer(
    name="da-square-plan",
    add_completion=False,
    no_args_is_help=True,
    help="Compute blob share indexes per the blob share commitment rules.",
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (default: ANIMICA_LOG_LEVEL or WARNING)."
    ),
) -> None:
    setup_logging(log_level)


def _fail(exc: LayoutError, json_out: bool = False) -> None:
    if json_out:
        typer.echo(json.dumps(exc.to_problem(), sort_keys=True), err=True)
    else:
        typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(2)


@app.command("place")
def place(
    cursor: int = typer.Argument(..., min=0, help="Index of the first free share."),
    blob_lens: List[int] = typer.Argument(..., help="Blob lengths in shares, in order."),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Subtree root threshold (default from config)."
    ),
    square_size: Optional[int] = typer.Option(
        None, "--square-size", help="Square side for (row, col) output (default from config)."
    ),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Place blobs one after another starting at CURSOR."""
    cfg = get_config()
    side = square_size if square_size is not None else cfg.max_square_size
    try:
        plan = plan_blob_placements(
            cursor,
            blob_lens,
            subtree_root_threshold=threshold if threshold is not None else cfg.subtree_root_threshold,
        )
        coords = plan.coords(side)
    except LayoutError as exc:
        _fail(exc, json_out)
        return

    if json_out:
        out = plan.to_dict()
        for blob, (row, col) in zip(out["blobs"], coords):
            blob["row"], blob["col"] = row, col
        typer.echo(json.dumps(out, indent=2, sort_keys=True))
        return

    typer.secho(f"{'#':>3} {'index':>8} {'len':>8} {'width':>6} {'pad':>6}  row,col", bold=True)
    for i, (p, (row, col)) in enumerate(zip(plan.placements, coords)):
        typer.echo(f"{i:>3} {p.index:>8} {p.length:>8} {p.width:>6} {p.padding:>6}  {row},{col}")
    typer.echo(f"shares used: {plan.shares_used}")


@app.command("width")
def width(
    share_count: int = typer.Argument(..., min=0, help="Blob length in shares."),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Subtree root threshold (default from config)."
    ),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON."),
) -> None:
    """Subtree width and minimal square size for one blob."""
    t = threshold if threshold is not None else get_config().subtree_root_threshold
    try:
        w = subtree_width(share_count, t)
        s = blob_min_square_size(share_count)
    except LayoutError as exc:
        _fail(exc, json_out)
        return

    if json_out:
        typer.echo(json.dumps({"shareCount": share_count, "threshold": t, "width": w, "minSquareSize": s}))
        return
    typer.echo(f"subtree width: {w}")
    typer.echo(f"min square size: {s}")


@app.command("config")
def show_config() -> None:
    """Print the effective configuration."""
    typer.echo(format_config())


def get_app() -> typer.Typer:
    return app


if __name__ == "__main__":
    app()
