"""Tests for CVSS chart helpers."""

from __future__ import annotations

import pytest

from cvereport.models.report import CvssComponent
from cvereport.reporting.chart import (
    bar_cells,
    component_tooltip,
    cvss_chart,
    severity_rating,
    severity_style,
)


@pytest.mark.parametrize(("score", "label"), [
    (0.0, "None"),
    (0.1, "Low"),
    (3.9, "Low"),
    (4.0, "Medium"),
    (6.9, "Medium"),
    (7.0, "High"),
    (8.8, "High"),
    (9.0, "Critical"),
    (10.0, "Critical"),
])
def test_severity_rating(score, label):
    assert severity_rating(score) == label


def test_severity_style():
    assert severity_style(8.8) == "red"
    assert severity_style(9.5) == "bold red"


class TestCvssChart:
    def test_geometry(self):
        chart = cvss_chart(8.8, width=480)
        assert chart["label"] == "High"
        assert chart["fill"] == "#ef4444"
        assert chart["bar_x"] == 16
        assert chart["bar_w"] == pytest.approx(448 * 0.88, abs=0.1)
        assert chart["tooltip"] == "Score: 8.8"

    def test_ticks_cover_axis(self):
        ticks = cvss_chart(5.0)["ticks"]
        assert [t["value"] for t in ticks] == list(range(11))
        assert ticks[0]["x"] == 16
        assert ticks[-1]["x"] == 464

    def test_score_clamped(self):
        assert cvss_chart(12.0)["score"] == 10.0
        assert cvss_chart(-1.0)["bar_w"] == 0


class TestBarCells:
    def test_proportional(self):
        assert bar_cells(8.8, 40) == 35
        assert bar_cells(10.0, 40) == 40
        assert bar_cells(0.0, 40) == 0

    def test_zero_width(self):
        assert bar_cells(5.0, 0) == 0


def test_component_tooltip():
    c = CvssComponent(key="AV:N", name="Attack Vector", value="Network", description="Remote")
    assert component_tooltip(c) == "Attack Vector: Network\nRemote"
