"""Built-in report content for CVE-2022-3141 and loading of custom records."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from cvereport.models.report import (
    CvssComponent,
    CvssScore,
    ExploitStep,
    Fix,
    Flaw,
    Overview,
    Reference,
    Reflection,
    ReportModel,
)

logger = logging.getLogger(__name__)


class ReportLoadError(Exception):
    """A report record could not be read or failed validation."""


_GET_ALL_TRANSLATION_BLOCKS = """\
public function get_all_translation_blocks( $language_code ){
    // The query concatenates user input into the table name
    $query = "SELECT original, id, block_type, status FROM `" .
        sanitize_text_field( $this->get_table_name( $language_code ) ) .
        "` WHERE block_type = " . self::BLOCK_TYPE_ACTIVE;

    $dictionary = $this->db->get_results($query, OBJECT_K);
    return $dictionary;
}"""

_GET_TABLE_NAME = """\
public function get_table_name($language_code, ...){
    // This function simply concatenates strings
    return $this->db->prefix . 'trp_dictionary_' .
        strtolower( $default_language ) . '_' .
        strtolower( $language_code );
}"""

_GET_TABLE_NAME_UNVALIDATED = """\
public function get_table_name($language_code, ...){
    // No validation is performed on $language_code
    return $this->db->prefix . 'trp_dictionary_' .
        strtolower( $default_language ) . '_' .
        strtolower( $language_code );
}"""

_IS_VALID_LANGUAGE_CODE = """\
function trp_is_valid_language_code( $language_code ){
    // Whitelists allowed characters: a-z A-Z 0-9 - _
    if ( !empty($language_code) &&
         !preg_match( '/[^A-Za-z0-9\\-_]/', $language_code ) ){
        return true;
    } else {
        return false;
    }
}
// This function is now called before using the language code."""


CVE_2022_3141 = ReportModel(
    cve_id="CVE-2022-3141",
    vulnerability_class="SQL injection",
    title="Interactive Analysis: CVE-2022-3141",
    subtitle=(
        "An in-depth look at the authenticated SQL Injection vulnerability in "
        "the TranslatePress WordPress plugin."
    ),
    overview=Overview(
        text=(
            'CVE-2022-3141 describes a critical SQL injection vulnerability in the '
            '"TranslatePress" WordPress plugin (versions < 2.3.3). It allows an '
            "authenticated user, even with low privileges, to execute arbitrary SQL "
            "commands. The flaw stems from improper sanitization of the 'language "
            "code' input, allowing an attacker to inject malicious SQL syntax and "
            "control the database. This report visualizes the vulnerability's "
            "lifecycle: the flaw, the exploit, and the fix."
        ),
        cvss=CvssScore(
            score=8.8,
            vector_string="CVSS:3.1/AV:N/AC:L/PR:L/UI:N/S:U/C:H/I:H/A:H",
            vector_components=(
                CvssComponent(
                    key="AV:N", name="Attack Vector", value="Network",
                    description="The vulnerability is exploitable remotely.",
                ),
                CvssComponent(
                    key="AC:L", name="Attack Complexity", value="Low",
                    description="No special conditions are required for exploitation.",
                ),
                CvssComponent(
                    key="PR:L", name="Privileges Required", value="Low",
                    description="Requires a low-privileged user account.",
                ),
                CvssComponent(
                    key="UI:N", name="User Interaction", value="None",
                    description="No action is needed from any other user.",
                ),
                CvssComponent(
                    key="S:U", name="Scope", value="Unchanged",
                    description=(
                        "The exploit does not affect components beyond the "
                        "vulnerable one."
                    ),
                ),
                CvssComponent(
                    key="C:H", name="Confidentiality", value="High",
                    description="Attacker can read all data from the database.",
                ),
                CvssComponent(
                    key="I:H", name="Integrity", value="High",
                    description="Attacker can modify or delete all data.",
                ),
                CvssComponent(
                    key="A:H", name="Availability", value="High",
                    description="Attacker can cause a denial of service.",
                ),
            ),
        ),
    ),
    flaw=Flaw(
        vulnerable_code=_GET_ALL_TRANSLATION_BLOCKS,
        helper_function=_GET_TABLE_NAME,
        explanation=(
            "The core issue is that <strong>sanitize_text_field() does not escape "
            "backticks (`)</strong>. An attacker can inject a backtick in the "
            "`language_code` parameter to close the table name prematurely and then "
            "append their own SQL commands."
        ),
        summary=(
            "The vulnerability lies in how the plugin handles user-supplied language "
            "codes. A key function, `sanitize_text_field()`, is misused, failing to "
            "escape backticks (`) and allowing an attacker to break out of the SQL "
            "query."
        ),
    ),
    exploit_steps=(
        ExploitStep(
            title="Step 1: Environment Setup",
            content=(
                "First, we create an isolated lab environment using Docker to host a "
                "WordPress instance with a MariaDB database. This prevents any "
                "unintended impact on a live system."
            ),
            code="docker-compose up -d",
        ),
        ExploitStep(
            title="Step 2: Install Vulnerable Plugin",
            content=(
                "Next, we install a version of the TranslatePress plugin known to be "
                "vulnerable (any version before 2.3.3) onto our WordPress site."
            ),
            code="Access WP Admin > Plugins > Add New > Upload Plugin",
        ),
        ExploitStep(
            title="Step 3: Intercept Request",
            content=(
                "Using a proxy tool like Burp Suite, we intercept the POST request sent "
                "when adding a new language. This allows us to see and modify the "
                "`trp_settings[translation-languages][]` parameter."
            ),
            code=(
                "POST /wp-admin/options.php HTTP/1.1\nHost: localhost\n...\n\n"
                "...&trp_settings[translation-languages][]=en_US&..."
            ),
        ),
        ExploitStep(
            title="Step 4: Inject Payload",
            content=(
                "We craft a time-based blind SQL injection payload and insert it into "
                "the vulnerable parameter. This payload will cause the database to "
                "pause if the injection is successful."
            ),
            code="Payload: ` OR SLEEP(5)#",
        ),
        ExploitStep(
            title="Step 5: Automate with sqlmap",
            content=(
                "To efficiently extract data, we save the request to a file and use "
                "`sqlmap`. This tool automates the process of confirming the "
                "vulnerability and dumping database contents."
            ),
            code='sqlmap -r request.txt -p "trp_settings[translation-languages][]" --dump',
        ),
    ),
    fix=Fix(
        vulnerable_code=_GET_TABLE_NAME_UNVALIDATED,
        patched_code=_IS_VALID_LANGUAGE_CODE,
        summary=(
            "The vulnerability was patched in version 2.3.3 by introducing a new "
            "validation function that whitelists allowed characters for language "
            "codes, effectively blocking malicious input."
        ),
    ),
    reflections=(
        Reflection(
            icon="⚙️",
            title="Technical Insights",
            text=(
                "Security controls are not one-size-fits-all. A function like "
                "`sanitize_text_field` is for preventing XSS, not SQLi. Context is "
                "everything."
            ),
        ),
        Reflection(
            icon="🧗",
            title="Challenges",
            text=(
                "Replicating environments with specific vulnerable software versions "
                "can be challenging but is a critical skill for analysis and "
                "verification."
            ),
        ),
        Reflection(
            icon="🌱",
            title="Personal Growth",
            text=(
                "This analysis bridges theory and practice, solidifying the importance "
                "of manual code review alongside automated tooling."
            ),
        ),
    ),
    references=(
        Reference(label="NVD", url="https://nvd.nist.gov/vuln/detail/CVE-2022-3141"),
        Reference(label="OWASP Injection", url="https://owasp.org/Top10/A03_2021-Injection/"),
    ),
)


def default_report() -> ReportModel:
    """The built-in CVE-2022-3141 record."""
    return CVE_2022_3141


def load_report(path: Path | str | None = None) -> ReportModel:
    """Load a report record from YAML or JSON, or return the built-in one.

    Keys may use either the camelCase shape (``exploitSteps``) or
    snake_case field names.
    """
    if path is None:
        return CVE_2022_3141

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportLoadError(f"Cannot read report file {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ReportLoadError(f"Cannot parse report file {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ReportLoadError(f"Report file {path} must contain a mapping")

    try:
        report = ReportModel.model_validate(raw)
    except ValidationError as exc:
        raise ReportLoadError(f"Invalid report file {path}:\n{exc}") from exc

    logger.debug("Loaded report %s from %s", report.cve_id, path)
    return report
