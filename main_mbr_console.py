"""Mini README: Command line front end for the granule bounding engine.

This script exposes a Typer CLI that bounds geometry given either as
``"lat lon ..."`` token strings or as a JSON file holding structured granule
geometry. Results are printed as a JSON ``[west, south, east, north]`` list;
``west > east`` means the box crosses the antimeridian.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from granule_mbr import MbrError, compute_granule_mbr, compute_mbr, compute_umm_mbr
from granule_mbr.logging_utils import configure_root_logger

cli = typer.Typer(help="Compute minimum bounding rectangles for granule geometry.")


def _emit(box: List[float]) -> None:
    typer.echo(json.dumps(box))


def _fail(reason: object) -> NoReturn:
    typer.echo(f"Error: {reason}", err=True)
    raise typer.Exit(code=1)


@cli.command()
def tokens(
    point: Optional[List[str]] = typer.Option(None, "--point", help="Point as 'lat lon'."),
    line: Optional[List[str]] = typer.Option(None, "--line", help="Line as 'lat lon lat lon ...'."),
    polygon: Optional[List[str]] = typer.Option(
        None, "--polygon", help="Polygon outer ring as 'lat lon lat lon ...'."
    ),
) -> None:
    """Bound token-string geometry supplied on the command line."""

    configure_root_logger()
    spatial = {
        "points": point or [],
        "lines": line or [],
        "polygons": [[ring] for ring in polygon or []],
    }
    try:
        box = compute_mbr(spatial)
    except MbrError as error:
        _fail(error)
    else:
        _emit(box)


@cli.command()
def umm(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file to read."),
) -> None:
    """Bound a structured geometry bundle or a full granule record read from PATH."""

    configure_root_logger()
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        _fail(f"{path} is not valid JSON: {error}")
    if not isinstance(document, dict):
        _fail(f"{path} must hold a JSON object")

    try:
        if "umm" in document or "SpatialExtent" in document:
            box = compute_granule_mbr(document)
        else:
            box = compute_umm_mbr(document)
    except MbrError as error:
        _fail(error)
    else:
        _emit(box)


if __name__ == "__main__":
    cli()
