"""Cell list reader: ``x,y,z`` lines (the csv scene format) → Aggregate."""

from __future__ import annotations

import logging
from pathlib import Path

from dlascene.aggregate.model import DEFAULT_PADDING, Aggregate
from dlascene.errors import AggregateError
from dlascene.utils.geometry import Vec3

logger = logging.getLogger(__name__)


def parse_cells_csv(text: str) -> list[Vec3]:
    """Parse integer ``x,y,z`` lines. Blank lines and ``#`` comments are skipped."""
    cells: list[Vec3] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = [p.strip() for p in line.split(",")]
        if len(parts) != 3:
            raise AggregateError(f"line {lineno}: expected 3 comma-separated values, got {len(parts)}")
        try:
            x, y, z = (int(p) for p in parts)
        except ValueError:
            raise AggregateError(f"line {lineno}: non-integer coordinate in {line!r}") from None
        cells.append(Vec3(x, y, z))
    return cells


def load_aggregate(path: str | Path, padding: int = DEFAULT_PADDING) -> Aggregate:
    """Read a cell file from disk and wrap it as an Aggregate."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise AggregateError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    cells = parse_cells_csv(text)
    if not cells:
        raise AggregateError(f"{path}: no cells found")
    aggregate = Aggregate.from_cells(cells, padding=padding)
    if len(aggregate) != len(cells):
        logger.warning("%s: dropped %d duplicate cell(s)", path, len(cells) - len(aggregate))
    logger.info("Loaded aggregate: %d cells from %s", len(aggregate), path)
    return aggregate
