"""CVSS chart helpers — severity bands and pre-computed bar geometry."""

from __future__ import annotations

from cvereport.models.report import CvssComponent

MAX_SCORE = 10.0

# (lower bound, label, fill, border) from the CVSS v3 qualitative scale
_BANDS: list[tuple[float, str, str, str]] = [
    (9.0, "Critical", "#b91c1c", "#991b1b"),
    (7.0, "High", "#ef4444", "#dc2626"),
    (4.0, "Medium", "#f59e0b", "#d97706"),
    (0.1, "Low", "#22c55e", "#16a34a"),
    (0.0, "None", "#94a3b8", "#64748b"),
]

RICH_STYLES = {
    "Critical": "bold red",
    "High": "red",
    "Medium": "yellow",
    "Low": "green",
    "None": "dim",
}


def _band(score: float) -> tuple[float, str, str, str]:
    for band in _BANDS:
        if score >= band[0]:
            return band
    return _BANDS[-1]


def severity_rating(score: float) -> str:
    """Qualitative rating for a CVSS v3 base score."""
    return _band(score)[1]


def severity_style(score: float) -> str:
    return RICH_STYLES[severity_rating(score)]


def cvss_chart(score: float, *, width: int = 480, height: int = 96) -> dict:
    """Pre-compute SVG geometry for a horizontal score bar (no math in templates).

    The x axis spans ``[0, 10]`` with one tick per point.
    """
    score = max(0.0, min(float(score), MAX_SCORE))
    _, label, fill, border = _band(score)
    pad_left, pad_right = 16, 16
    plot_w = width - pad_left - pad_right
    bar_h = 50
    bar_y = (height - 24 - bar_h) / 2
    ticks = [
        {
            "value": v,
            "x": round(pad_left + plot_w * v / MAX_SCORE, 1),
        }
        for v in range(int(MAX_SCORE) + 1)
    ]
    return {
        "width": width,
        "height": height,
        "score": score,
        "label": label,
        "fill": fill,
        "border": border,
        "bar_x": pad_left,
        "bar_y": round(bar_y, 1),
        "bar_w": round(plot_w * score / MAX_SCORE, 1),
        "bar_h": bar_h,
        "axis_y": height - 22,
        "ticks": ticks,
        "tooltip": f"Score: {score:g}",
    }


def bar_cells(score: float, width: int) -> int:
    """Filled cells for a *width*-cell terminal bar."""
    if width <= 0:
        return 0
    score = max(0.0, min(float(score), MAX_SCORE))
    return round(width * score / MAX_SCORE)


def component_tooltip(component: CvssComponent) -> str:
    return f"{component.name}: {component.value}\n{component.description}"
