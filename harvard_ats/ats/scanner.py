from __future__ import annotations

import re

from harvard_ats.schemas.report import Finding

_TABLE_GLYPH_RE = re.compile(r"[\u2500-\u257F]")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_FULL_DATE_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}")
_BOILERPLATE_REFERENCES = "References available upon request"

TABLE_FORMATTING = Finding(
    id="table_formatting",
    message="table formatting may not parse",
    suggestion="Avoid table formatting; ATS parsers may not read content inside table borders correctly.",
)
NON_ASCII = Finding(
    id="non_ascii",
    message="non-ASCII character may not be ATS-friendly",
    suggestion="Replace special characters and symbols with plain ASCII text so every ATS can read them.",
)
BOILERPLATE_REFERENCES = Finding(
    id="boilerplate_references",
    message="remove boilerplate reference line",
    suggestion='Remove "References available upon request" and use the space for relevant content.',
)
DATE_FORMAT = Finding(
    id="date_format",
    message="use MM/YYYY date format",
    suggestion="Use a consistent MM/YYYY date format instead of full dates.",
)

_ATS_FRIENDLY_TIPS = (
    "Use standard section headers: Experience, Education, Skills",
    "Avoid headers, footers, and text boxes",
    "Use simple bullet points, not graphics or special characters",
    "Save in .docx or .pdf format for best compatibility",
    "Use standard fonts like Arial, Calibri, or Times New Roman",
    "Include relevant keywords from the job description",
    "Use consistent date formatting (MM/YYYY)",
    "Avoid tables and columns for main content",
    'Include both acronyms and full terms (e.g., "AI (Artificial Intelligence)")',
    "Use action verbs at the beginning of bullet points",
)


def scan(text: str) -> list[Finding]:
    """Detect ATS-unfriendly patterns in ``text``.

    Each rule reports at most one finding. Findings are returned in a fixed
    order (tables, non-ASCII, boilerplate, dates) so identical input always
    yields an identical list.
    """
    if not text:
        return []

    findings: list[Finding] = []
    if _TABLE_GLYPH_RE.search(text):
        findings.append(TABLE_FORMATTING)
    if _NON_ASCII_RE.search(text):
        findings.append(NON_ASCII)
    if _BOILERPLATE_REFERENCES in text:
        findings.append(BOILERPLATE_REFERENCES)
    if _FULL_DATE_RE.search(text):
        findings.append(DATE_FORMAT)
    return findings


def ats_friendly_tips() -> list[str]:
    return list(_ATS_FRIENDLY_TIPS)
