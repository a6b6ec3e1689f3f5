from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.ticker import FuncFormatter

from .cell import CellKind
from .grid import GridSnapshot
from .statistics import BinnedPoint, PowerLawFit


@dataclass(frozen=True)
class LogLogSpec:
    """Defaults for the binned fire size plot.

    Values should be valid Matplotlib colors.
    """

    color: str = "#FFBF00"  # fire yellow
    alpha: float = 0.7
    fit_color: str = "#E0E0E0"
    xlim: tuple[float, float] = (1.0, 1e5)
    ylim: tuple[float, float] = (1e-6, 1e6)


@dataclass(frozen=True)
class GridSpec:
    """Colors of each cell kind, indexed by ``CellKind`` value."""

    vacant: str = "#1E1E1E"
    tree: str = "#228B22"
    burning: str = "#FF9600"
    decaying: str = "#7F5F00"

    def cmap(self) -> ListedColormap:
        return ListedColormap([self.vacant, self.tree, self.burning, self.decaying])


DEFAULT_LOGLOG = LogLogSpec()
DEFAULT_GRID = GridSpec()


def _format_metrics(metrics: dict[str, Any] | None, *, value_format: str) -> str | None:
    if not metrics:
        return None

    lines: list[str] = []
    for key, value in metrics.items():
        if isinstance(value, (int, float, np.floating, np.integer)):
            rendered = value_format.format(float(value))
        else:
            rendered = str(value)
        lines.append(f"{key}={rendered}")
    return "\n".join(lines)


def _power_of_ten_label(value: float, _pos: int) -> str:
    exponent = np.log10(value)
    if abs(exponent - round(exponent)) < 1e-9:
        return f"{value:,.0f}" if value >= 1 else f"{value:g}"
    return ""


class DistributionPlotter:
    """Render fire statistics with Matplotlib.

    Notes:
    - Binned points are plotted on fixed log-log axes so that successive
      snapshots of a running simulation stay comparable.
    - Only powers of ten are labelled.
    """

    def __init__(self, *, spec: LogLogSpec = DEFAULT_LOGLOG, title: str = "Log-Log Plot (Binned)") -> None:
        self.spec = spec
        self.title = title

    def plot(
        self,
        points: Sequence[BinnedPoint],
        *,
        fit: PowerLawFit | None = None,
        metrics: dict[str, Any] | None = None,
        metrics_value_format: str = "{:.3g}",
        ax: Any | None = None,
    ) -> Any:
        """Scatter binned (size, density) points on log-log axes.

        If ``fit`` is given its line is drawn over the plotted size range.
        """

        spec = self.spec
        xs = np.array([p.size for p in points], dtype=float)
        ys = np.array([p.density for p in points], dtype=float)
        if np.any(xs <= 0) or np.any(ys <= 0):
            raise ValueError("Binned points must have positive size and density")

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(7, 5))

        ax.scatter(xs, ys, color=spec.color, alpha=spec.alpha, label="Log-Binned Data")

        if fit is not None and xs.size:
            line_x = np.array([xs.min(), xs.max()])
            line_y = 10.0 ** (fit.intercept + fit.exponent * np.log10(line_x))
            ax.plot(line_x, line_y, color=spec.fit_color, linestyle="--", label=f"slope {fit.exponent:.2f}")

        ax.set_xscale("log")
        ax.set_yscale("log")
        ax.set_xlim(*spec.xlim)
        ax.set_ylim(*spec.ylim)
        ax.xaxis.set_major_formatter(FuncFormatter(_power_of_ten_label))
        ax.yaxis.set_major_formatter(FuncFormatter(_power_of_ten_label))
        ax.set_xlabel("Fire size (log scale)")
        ax.set_ylabel("Normalized fire count (log scale)")
        ax.set_title(self.title)
        ax.legend(loc="upper right")

        metrics_text = _format_metrics(metrics, value_format=metrics_value_format)
        if metrics_text:
            ax.text(0.02, 0.02, metrics_text, transform=ax.transAxes, ha="left", va="bottom", fontsize=9)
        return ax

    def plot_grid(self, snapshot: GridSnapshot, *, spec: GridSpec = DEFAULT_GRID, ax: Any | None = None) -> Any:
        """Show a grid snapshot, one color per cell kind."""

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(6, 6))
        ax.imshow(
            snapshot.kind,
            cmap=spec.cmap(),
            vmin=int(CellKind.Vacant),
            vmax=int(CellKind.Decaying),
            interpolation="nearest",
        )
        ax.set_xticks([])
        ax.set_yticks([])
        return ax

    def figure(
        self,
        points: Iterable[BinnedPoint],
        snapshot: GridSnapshot,
        *,
        fit: PowerLawFit | None = None,
        metrics: dict[str, Any] | None = None,
    ) -> Any:
        """Grid and distribution side by side, with optional run metrics in the plot corner."""

        fig, axes = plt.subplots(1, 2, figsize=(13, 6))
        self.plot_grid(snapshot, ax=axes[0])
        self.plot(list(points), fit=fit, metrics=metrics, ax=axes[1])
        fig.tight_layout()
        return fig

    def save(self, fig: Any, path: str, *, dpi: int = 150) -> None:
        """Save a Matplotlib figure to disk."""

        fig.savefig(path, dpi=dpi, bbox_inches="tight")
