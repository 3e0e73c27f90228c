"""Tests for insight prompt builders."""

from __future__ import annotations

import pytest

from cvereport.insight.prompts import (
    build_prompt,
    fix_prompt,
    flaw_prompt,
    overview_prompt,
    step_prompt,
)
from cvereport.models.types import SectionId


class TestPrompts:
    def test_flaw_prompt_contains_code(self, report):
        prompt = flaw_prompt(report)
        assert prompt.startswith("You are a cybersecurity expert.")
        assert "CVE-2022-3141" in prompt
        assert "```php" in prompt
        assert report.flaw.vulnerable_code in prompt

    def test_overview_prompt_lists_metrics(self, report):
        prompt = overview_prompt(report)
        assert report.overview.cvss.vector_string in prompt
        assert "Attack Vector" in prompt

    def test_step_prompt(self, report):
        prompt = step_prompt(report, 3)
        assert "step 4 of 5" in prompt
        assert report.exploit_steps[3].title in prompt

    def test_step_prompt_clamps(self, report):
        assert step_prompt(report, 99) == step_prompt(report, 4)
        assert step_prompt(report, -1) == step_prompt(report, 0)

    def test_fix_prompt(self, report):
        prompt = fix_prompt(report)
        assert report.fix.patched_code in prompt

    def test_build_prompt_dispatch(self, report):
        assert build_prompt("overview", report) == overview_prompt(report)
        assert build_prompt(SectionId.FLAW, report) == flaw_prompt(report)
        assert build_prompt(SectionId.EXPLOIT, report, step_index=2) == step_prompt(report, 2)
        assert build_prompt("fix", report) == fix_prompt(report)

    def test_build_prompt_reflections(self, report):
        with pytest.raises(ValueError):
            build_prompt(SectionId.REFLECTIONS, report)
