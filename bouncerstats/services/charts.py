"""SVG chart rendering."""

from __future__ import annotations

import io
from typing import Dict, Optional, Sequence, Tuple

from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

# matplotlib sizes figures in inches
_DPI = 100


class ChartRenderer:
    """Render pie and line charts as SVG text.

    Figures are built with ``matplotlib.figure.Figure`` directly, so no
    pyplot state is shared between requests.
    """

    def __init__(
        self,
        pie_size: Tuple[int, int] = (900, 500),
        line_size: Tuple[int, int] = (850, 500),
        title: str = "Bouncer Statistics",
    ):
        self.pie_size = tuple(pie_size)
        self.line_size = tuple(line_size)
        self.title = title

    @staticmethod
    def _figure(size: Tuple[int, int]):
        width, height = size
        fig = Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)
        return fig, fig.subplots()

    @staticmethod
    def _burn(fig: Figure) -> str:
        buf = io.StringIO()
        fig.savefig(buf, format="svg", bbox_inches="tight")
        return buf.getvalue()

    def pie(self, labels: Sequence[str], values: Sequence[int], title: Optional[str] = None) -> str:
        if len(labels) != len(values):
            raise ValueError(
                f"pie chart needs one value per label ({len(labels)} labels, {len(values)} values)"
            )
        fig, ax = self._figure(self.pie_size)
        ax.set_title(title or self.title)

        if sum(values) <= 0:
            ax.text(0.5, 0.5, "No downloads in this range", ha="center", va="center")
            ax.axis("off")
            return self._burn(fig)

        wedges, _, _ = ax.pie(
            values,
            autopct=lambda pct: f"{pct:.1f}%" if pct > 0 else "",
            startangle=90,
            counterclock=False,
        )
        ax.axis("equal")
        ax.legend(
            wedges,
            [f"{label} ({value:,})" for label, value in zip(labels, values)],
            loc="center left",
            bbox_to_anchor=(1.0, 0.5),
            frameon=False,
        )
        return self._burn(fig)

    def line(self, labels: Sequence[str], series: Dict[str, Sequence[int]]) -> str:
        for name, data in series.items():
            if len(data) != len(labels):
                raise ValueError(
                    f"series {name!r} has {len(data)} points for {len(labels)} labels"
                )
        fig, ax = self._figure(self.line_size)
        x = list(range(len(labels)))

        for name, data in series.items():
            ax.plot(x, list(data), label=name, linewidth=1.2)

        ticks = [i for i, label in enumerate(labels) if label]
        ax.set_xticks(ticks)
        ax.set_xticklabels([labels[i] for i in ticks], rotation=45, ha="right")
        if x:
            ax.set_xlim(0, max(len(x) - 1, 1))
        ax.set_ylim(bottom=0)
        ax.yaxis.set_major_locator(MaxNLocator(integer=True))
        ax.set_xlabel("Date")
        ax.set_ylabel("Download counts a day")
        ax.grid(True, axis="y", linestyle=":", linewidth=0.5)
        if series:
            ax.legend(loc="center left", bbox_to_anchor=(1.0, 0.5), frameon=False)
        return self._burn(fig)


__all__ = ["ChartRenderer"]
