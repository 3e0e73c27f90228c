"""Report record — immutable narrative content for one vulnerability."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    """Frozen base with camelCase aliases (the on-disk shape)."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CvssComponent(_Record):
    """One metric of a CVSS vector, e.g. ``AV:N``."""

    key: str
    name: str
    value: str
    description: str = ""


class CvssScore(_Record):
    score: float = Field(ge=0.0, le=10.0)
    vector_string: str
    vector_components: tuple[CvssComponent, ...] = ()


class Overview(_Record):
    text: str
    cvss: CvssScore


class Flaw(_Record):
    """Vulnerable code and the explanation callout.

    ``explanation`` may embed simple inline markup (``<strong>``, ``<code>``)
    and is rendered unescaped in HTML.
    """

    vulnerable_code: str
    helper_function: str = ""
    explanation: str = ""
    summary: str = ""


class ExploitStep(_Record):
    title: str
    content: str
    code: str = ""


class Fix(_Record):
    vulnerable_code: str
    patched_code: str
    summary: str = ""


class Reflection(_Record):
    icon: str = ""
    title: str
    text: str


class Reference(_Record):
    label: str
    url: str


class ReportModel(_Record):
    """All content shown by the report. Text fields are opaque display strings."""

    cve_id: str
    vulnerability_class: str = "SQL injection"
    title: str = ""
    subtitle: str = ""
    overview: Overview
    flaw: Flaw
    exploit_steps: tuple[ExploitStep, ...]
    fix: Fix
    reflections: tuple[Reflection, ...] = ()
    references: tuple[Reference, ...] = ()

    @field_validator("exploit_steps")
    @classmethod
    def _at_least_one_step(cls, steps: tuple[ExploitStep, ...]) -> tuple[ExploitStep, ...]:
        if not steps:
            raise ValueError("exploit_steps must contain at least one step")
        return steps

    @property
    def heading(self) -> str:
        return self.title or f"Interactive Analysis: {self.cve_id}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True)
