import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from ansipix.glyphs import RESET, render_cell
from ansipix.model import Canvas

log = logging.getLogger(__name__)


def default_workers() -> int:
    return os.cpu_count() or 1


def render_row(canvas: Canvas, row: int) -> tuple[int, str]:
    """Render one row left to right, terminated by a style reset and newline."""
    background = canvas.background
    line = "".join(render_cell(sample, background) for sample in canvas.row(row))
    return row, line + RESET + "\n"


def render_canvas(canvas: Canvas, workers: int | None = None) -> str:
    """Render every row of the canvas, at most ``workers`` rows in flight at once.

    Rows are dispatched in batches; each batch is fully collected before the
    next one starts. Output is always in row order whatever the completion
    order within a batch.
    """
    if workers is None:
        workers = default_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    log.debug("Rendering %dx%d canvas in batches of %d rows", canvas.width, canvas.height, workers)
    rows = [""] * canvas.height
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for start in range(0, canvas.height, workers):
            batch = range(start, min(start + workers, canvas.height))
            futures = [executor.submit(render_row, canvas, y) for y in batch]
            for future in as_completed(futures):
                y, line = future.result()
                rows[y] = line
    return "".join(rows)
