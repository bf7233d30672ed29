"""
Writing rendered graphs to disk.
"""
from pathlib import Path
import logging

from exceptions import ExportError
from graph import DotGraph

logger = logging.getLogger(__name__)


def write_dot(graph: DotGraph, filepath: str) -> Path:
    """
    Render ``graph`` and write it to ``filepath`` as UTF-8.

    Returns:
        Path that was written

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(filepath)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(graph.render(), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write DOT file: {e}") from e

    logger.info(
        f"Wrote graph {graph.name} with {len(graph.nodes())} nodes "
        f"and {len(graph.edges())} edges to {path}"
    )
    return path
