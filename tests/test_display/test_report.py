"""Tests for terminal report output."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from cvereport.display.report import cvss_bar, html_to_markup, print_insight, print_report
from cvereport.interaction.modal import Failed, Idle, Pending, Ready


def _console():
    out = StringIO()
    return Console(file=out, force_terminal=True, width=120), out


class TestPrintReport:
    def test_full_report(self, report):
        console, out = _console()
        print_report(report, console)
        output = out.getvalue()
        assert "CVE-2022-3141" in output
        assert "Vulnerability Overview" in output
        assert "Attack Vector" in output
        assert "Step 5 of 5" in output
        assert "Patched Code" in output
        assert "Technical Insights" in output

    def test_single_section(self, report):
        console, out = _console()
        print_report(report, console, sections=["fix"])
        output = out.getvalue()
        assert "The Fix" in output
        assert "Vulnerability Overview" not in output

    def test_single_step(self, report):
        console, out = _console()
        print_report(report, console, sections=["exploit"], step=2)
        output = out.getvalue()
        assert "Step 3 of 5" in output
        assert "Step 1 of 5" not in output

    def test_step_is_clamped(self, report):
        console, out = _console()
        print_report(report, console, sections=["exploit"], step=42)
        assert "Step 5 of 5" in out.getvalue()


class TestPrintInsight:
    def test_ready(self):
        console, out = _console()
        print_insight(Ready("The flaw is here."), console)
        assert "The flaw is here." in out.getvalue()
        assert "AI Insight" in out.getvalue()

    def test_failed(self):
        console, out = _console()
        print_insight(Failed("[HTTP 500]"), console)
        assert "Error:" in out.getvalue()
        assert "[HTTP 500]" in out.getvalue()

    def test_pending_and_idle(self):
        console, out = _console()
        print_insight(Pending(), console)
        print_insight(Idle(), console)
        assert "Generating insight..." in out.getvalue()
        assert "No insight requested." in out.getvalue()


def test_cvss_bar():
    bar = cvss_bar(8.8, width=10)
    assert bar.plain.startswith("█" * 9 + "░")
    assert "8.8 / 10 (High)" in bar.plain


def test_html_to_markup():
    assert html_to_markup("<strong>a</strong> [b]") == r"[bold]a[/bold] \[b]"
