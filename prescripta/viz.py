"""
prescripta.viz
==============

Minimal plotting helpers used by the CLI and for case reports.  Importing
this module pulls in *matplotlib*; nothing else in the package does.

Outputs are PNGs written to the *images/* folder (auto‑created if
needed).  Filenames can be overridden via keyword argument.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import matplotlib.dates as mdates
import matplotlib.pyplot as plt

from .dates import format_date
from .models import Stage
from .prescription import PrescriptionReport
from .timeline import TimelineProjection

# default output dir
_IMG_DIR = Path("images")

_STAGE_COLOURS = {
    Stage.INSTRUCTION: "#3a0ca3",
    Stage.TRIAL: "#f77f00",
    Stage.RECURSE: "#2b9348",
}
_EXPIRED = "#d62828"
_IN_TIME = "#2b9348"


def _save(out_path: str | os.PathLike) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_path, dpi=120, bbox_inches="tight")
    plt.close()
    return out_path


# ---------------------------------------------------------------------
# Plot 1 – projected timeline with window deadlines
# ---------------------------------------------------------------------
def plot_timeline(
    projection: TimelineProjection,
    report: Optional[PrescriptionReport] = None,
    out_path: str | os.PathLike = _IMG_DIR / "timeline.png",
) -> Path:
    """
    Draw every mark of *projection* on a horizontal axis.

    Interruption events are drawn as diamonds, span events as a segment up
    to their end date.  When *report* is given each window deadline is
    drawn as a dashed line, red if that window expired.

    Parameters
    ----------
    projection : TimelineProjection
        Output of :pymeth:`TimelineProjector.project`.
    report : PrescriptionReport, optional
        Windows whose deadlines should be overlaid.
    out_path : str or Path, default='images/timeline.png'
        Where to save the PNG.

    Returns
    -------
    pathlib.Path
        Final image path for convenience.
    """
    width = max(8.0, min(projection.axis_length / 400.0, 24.0))
    plt.figure(figsize=(width, 3))
    plt.hlines(0, 0, projection.axis_length, color="#333", linewidth=1)

    for i, mark in enumerate(projection.marks):
        colour = _STAGE_COLOURS[mark.stage]
        if mark.end_position is not None:
            plt.hlines(0, mark.position, mark.end_position, color=colour, linewidth=4, alpha=0.5)
        plt.scatter([mark.position], [0], color=colour, zorder=3,
                    marker="D" if mark.is_interruption else "o")
        # alternate labels above / below to limit overlap
        offset = 0.4 if i % 2 == 0 else -0.4
        plt.text(mark.position, offset,
                 f"{mark.name}\n{format_date(mark.date)}",
                 ha="center", va="center", fontsize=7, color="#333")

    if report is not None:
        for window in report.windows:
            x = projection.position_of(window.deadline)
            plt.axvline(x, linestyle="--", linewidth=1,
                        color=_EXPIRED if window.expired else _IN_TIME, alpha=0.7)

    plt.ylim(-1, 1)
    plt.yticks([])
    plt.xlabel(f"días desde el hecho × {projection.units_per_day:g}")
    plt.title("Línea Temporal del Proceso Penal")
    plt.tight_layout()
    return _save(out_path)


# ---------------------------------------------------------------------
# Plot 2 – one bar per limitation window
# ---------------------------------------------------------------------
def windows_chart(
    report: PrescriptionReport,
    out_path: str | os.PathLike = _IMG_DIR / "prescription_windows.png",
) -> Path:
    """
    Horizontal bar per window (start → end) with its deadline as a tick.

    Expired windows are drawn red, the rest green.
    """
    plt.figure(figsize=(8, 1 + len(report.windows)))
    labels = []
    for row, window in enumerate(report.windows):
        start = mdates.date2num(window.start_date)
        end = mdates.date2num(window.end_date)
        colour = _EXPIRED if window.expired else _IN_TIME
        plt.barh(row, end - start, left=start, color=colour, edgecolor="#333", alpha=0.8)
        plt.plot([mdates.date2num(window.deadline)] * 2, [row - 0.4, row + 0.4],
                 color="#333", linewidth=2)
        labels.append(window.label)

    plt.yticks(range(len(labels)), labels, fontsize=7)
    plt.gca().invert_yaxis()
    plt.gca().xaxis.set_major_formatter(mdates.DateFormatter("%d/%m/%Y"))
    plt.grid(axis="x", linestyle=":", alpha=0.3)
    plt.title("Análisis de Prescripción por Etapas")
    plt.tight_layout()
    return _save(out_path)
