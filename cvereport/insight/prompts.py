"""Prompt builders — pure functions from report content to prompt text."""

from __future__ import annotations

from cvereport.models.report import ReportModel
from cvereport.models.types import SectionId

_EXPERT = "You are a cybersecurity expert."


def overview_prompt(report: ReportModel) -> str:
    cvss = report.overview.cvss
    metrics = "\n".join(
        f"- {c.key} ({c.name}: {c.value}): {c.description}"
        for c in cvss.vector_components
    )
    return (
        f"{_intro(report)} Explain what the CVSS vector {cvss.vector_string} "
        f"(base score {cvss.score}) means for defenders, metric by metric, and "
        f"why the overall severity is justified. Format your response clearly.\n"
        f"Metrics:\n{metrics}"
    )


def flaw_prompt(report: ReportModel) -> str:
    """Explain the vulnerable code and where the flaw is."""
    code = report.flaw.vulnerable_code
    if report.flaw.helper_function:
        code = f"{code}\n\n{report.flaw.helper_function}"
    return (
        f"{_EXPERT} Explain the following PHP code snippet in the context of the "
        f"{report.cve_id} {report.vulnerability_class} vulnerability. Explain what "
        "the code does, where the specific vulnerability is, and why it is a "
        f"security risk. Format your response clearly. Code: ```php\n{code}\n```"
    )


def step_prompt(report: ReportModel, index: int) -> str:
    """Explain one exploit walkthrough step. *index* is clamped into range."""
    steps = report.exploit_steps
    index = max(0, min(index, len(steps) - 1))
    step = steps[index]
    return (
        f"{_intro(report)} This is step {index + 1} of {len(steps)} of a lab "
        f"walkthrough reproducing the vulnerability. Explain what this step achieves, "
        f"what the command or payload does, and what a defender could detect at "
        f"this point. Format your response clearly.\n"
        f"Step: {step.title}\nDescription: {step.content}\nCommand: ```\n{step.code}\n```"
    )


def fix_prompt(report: ReportModel) -> str:
    return (
        f"{_intro(report)} Compare the vulnerable code with the patched "
        "code below. Explain why the patch blocks the attack and whether any "
        "weaknesses remain. Format your response clearly.\n"
        f"Vulnerable code: ```php\n{report.fix.vulnerable_code}\n```\n"
        f"Patched code: ```php\n{report.fix.patched_code}\n```"
    )


def build_prompt(section: SectionId | str, report: ReportModel, step_index: int = 0) -> str:
    """Dispatch to the prompt builder for *section*."""
    section = SectionId(section)
    if section is SectionId.OVERVIEW:
        return overview_prompt(report)
    if section is SectionId.FLAW:
        return flaw_prompt(report)
    if section is SectionId.EXPLOIT:
        return step_prompt(report, step_index)
    if section is SectionId.FIX:
        return fix_prompt(report)
    raise ValueError(f"No insight prompt for section: {section.value}")


def _intro(report: ReportModel) -> str:
    return f"{_EXPERT} The subject is {report.cve_id}, a {report.vulnerability_class} vulnerability."
