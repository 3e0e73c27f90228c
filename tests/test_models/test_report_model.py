"""Tests for the report record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cvereport.models import CvssScore, ExploitStep, ReportModel, SectionId
from cvereport.models.types import SECTION_ORDER


def _minimal(**overrides):
    data = {
        "cveId": "CVE-2000-0001",
        "overview": {
            "text": "Overview text",
            "cvss": {"score": 5.0, "vectorString": "CVSS:3.1/AV:N", "vectorComponents": []},
        },
        "flaw": {"vulnerableCode": "SELECT 1"},
        "exploitSteps": [{"title": "One", "content": "Do it"}],
        "fix": {"vulnerableCode": "a", "patchedCode": "b"},
    }
    data.update(overrides)
    return data


class TestSectionId:
    def test_order(self):
        assert [s.value for s in SECTION_ORDER] == [
            "overview", "flaw", "exploit", "fix", "reflections",
        ]

    def test_anchor(self):
        assert SectionId.FLAW.anchor == "#flaw"

    def test_labels(self):
        assert SectionId.OVERVIEW.label == "Overview"
        assert SectionId.EXPLOIT.label == "The Exploit"
        assert SectionId.REFLECTIONS.label == "Reflections"


class TestReportModel:
    def test_camel_case_input(self):
        model = ReportModel.model_validate(_minimal())
        assert model.cve_id == "CVE-2000-0001"
        assert model.overview.cvss.vector_string == "CVSS:3.1/AV:N"
        assert model.exploit_steps[0].code == ""

    def test_snake_case_input(self):
        data = _minimal()
        data["cve_id"] = data.pop("cveId")
        assert ReportModel.model_validate(data).cve_id == "CVE-2000-0001"

    def test_requires_a_step(self):
        with pytest.raises(ValidationError):
            ReportModel.model_validate(_minimal(exploitSteps=[]))

    def test_score_range(self):
        with pytest.raises(ValidationError):
            CvssScore(score=11.0, vector_string="x")

    def test_frozen(self):
        step = ExploitStep(title="t", content="c")
        with pytest.raises(ValidationError):
            step.title = "changed"

    def test_heading_defaults_to_cve(self):
        model = ReportModel.model_validate(_minimal())
        assert model.heading == "Interactive Analysis: CVE-2000-0001"

    def test_heading_uses_title(self):
        model = ReportModel.model_validate(_minimal(title="Custom"))
        assert model.heading == "Custom"

    def test_to_dict_uses_aliases(self):
        d = ReportModel.model_validate(_minimal()).to_dict()
        assert d["cveId"] == "CVE-2000-0001"
        assert "exploitSteps" in d
        assert d["overview"]["cvss"]["vectorString"] == "CVSS:3.1/AV:N"
