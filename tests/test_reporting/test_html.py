"""Tests for the HTML renderer."""

from __future__ import annotations

import json
import re

from cvereport.interaction.modal import Failed, Ready
from cvereport.interaction.tracker import IntersectionEntry
from cvereport.reporting.context import RenderContext
from cvereport.reporting.html import HtmlRenderer, render_html, step_insight_key, template_vars


def _page_state(html: str) -> dict:
    match = re.search(
        r'<script type="application/json" id="page-state">(.*?)</script>', html, re.S,
    )
    assert match
    return json.loads(match.group(1))


class TestRenderHtml:
    def test_sections_and_anchors(self, page):
        html = render_html(RenderContext.from_page(page))
        for sid in ("overview", "flaw", "exploit", "fix", "reflections"):
            assert f'<section id="{sid}">' in html
            assert f'href="#{sid}"' in html

    def test_content(self, page, report):
        html = render_html(RenderContext.from_page(page))
        assert "CVE-2022-3141" in html
        assert "8.8" in html
        assert "Step 1 of 5" in html
        assert report.exploit_steps[4].title in html

    def test_code_is_escaped(self, page):
        html = render_html(RenderContext.from_page(page))
        assert '<pre class="code-block"><code>' in html
        assert "$this-&gt;db-&gt;prefix" in html

    def test_active_nav_link(self, page):
        page.tracker.handle_entries([IntersectionEntry("fix", True)])
        html = render_html(RenderContext.from_page(page))
        assert 'href="#fix" data-section="fix" class="active"' in html
        assert 'href="#flaw" data-section="flaw" class="active"' not in html

    def test_current_step_visible(self, page):
        page.carousel.advance()
        html = render_html(RenderContext.from_page(page))
        assert '<article class="step" data-index="1">' in html
        assert '<article class="step" data-index="0" hidden>' in html
        assert "Step 2 of 5" in html

    def test_prev_disabled_at_start(self, page):
        html = render_html(RenderContext.from_page(page))
        assert 'id="step-prev" disabled' in html
        assert 'id="step-next" disabled' not in html

    def test_next_disabled_at_end(self, report):
        from cvereport.interaction.page import ReportPage

        html = render_html(RenderContext.from_page(ReportPage(report, start_step=4)))
        assert 'id="step-next" disabled' in html

    def test_initial_state_json(self, page):
        page.header.on_menu_toggle()
        state = _page_state(render_html(RenderContext.from_page(page)))
        assert state == {
            "activeSection": "overview",
            "stepIndex": 0,
            "stepCount": 5,
            "menuOpen": True,
        }

    def test_no_dialogs_without_insights(self, page):
        html = render_html(RenderContext.from_page(page))
        assert "<dialog" not in html
        assert "data-insight=" not in html

    def test_insight_dialogs(self, page):
        insights = {
            "flaw": Ready("Line one\n<script>x</script>"),
            step_insight_key(0): Failed("HTTP 500"),
        }
        html = render_html(RenderContext.from_page(page, insights))
        assert '<dialog id="insight-flaw" data-status="ready">' in html
        assert "Line one<br>&lt;script&gt;x&lt;/script&gt;" in html
        assert '<dialog id="insight-exploit-0" data-status="failed">' in html
        assert "Error: HTTP 500" in html
        assert 'data-insight="flaw"' in html
        assert 'data-insight="fix"' not in html


class TestTemplateVars:
    def test_chart_precomputed(self, page):
        tv = template_vars(RenderContext.from_page(page))
        assert tv["chart"]["label"] == "High"
        assert tv["sections"] == ["overview", "flaw", "exploit", "fix", "reflections"]

    def test_insight_entries(self, page):
        tv = template_vars(RenderContext.from_page(page, {"fix": Ready("ok")}))
        assert tv["insights"] == {"fix": {"status": "ready", "html": "ok"}}


class TestHtmlRenderer:
    def test_writes_file(self, page, tmp_path):
        path = HtmlRenderer().render(RenderContext.from_page(page), tmp_path)
        assert path == tmp_path / "report.html"
        assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
        assert list(tmp_path.glob(".*.tmp")) == []
