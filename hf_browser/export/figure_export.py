from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Union

import plotly.graph_objs as go

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("png", "svg", "pdf")

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def _check_format(image_format: str) -> str:
    fmt = (image_format or "").lower().lstrip(".")
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported export format '{image_format}'. Use one of {SUPPORTED_FORMATS}")
    return fmt


def export_filename(x_field: str, y_field: str, image_format: str, stem: str = "heart_failure") -> str:
    """
    Build a filesystem-safe file name like 'heart_failure_age_vs_time.png'.
    """
    fmt = _check_format(image_format)
    name = _UNSAFE.sub("_", f"{stem}_{x_field}_vs_{y_field}")
    return f"{name}.{fmt}"


def figure_to_bytes(figure: go.Figure, image_format: str = "png", scale: float = 2.0) -> bytes:
    """
    Snapshot a rendered figure as image/PDF bytes (uses kaleido).

    The figure is only read, so exporting never changes what is on screen.
    """
    fmt = _check_format(image_format)
    return figure.to_image(format=fmt, scale=scale)


def export_figure(
        figure: go.Figure,
        out_path: Union[str, Path],
        image_format: str | None = None,
) -> Path:
    """
    Write a figure to disk
    :param figure: the figure currently shown
    :param out_path: target file; its suffix picks the format when image_format is None
    :param image_format: png, svg or pdf
    :return: the path written
    """
    out_path = Path(out_path)
    fmt = _check_format(image_format or out_path.suffix)
    if out_path.suffix.lower() != f".{fmt}":
        out_path = out_path.with_suffix(f".{fmt}")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(figure_to_bytes(figure, fmt))

    logger.info("Figure exported", extra={"path": str(out_path), "format": fmt})
    return out_path
