from __future__ import annotations

import logging
import math
import re

from harvard_ats.ats.renderer import render_plain_text
from harvard_ats.ats.scanner import ats_friendly_tips, scan
from harvard_ats.core.scoring import get_scoring_int
from harvard_ats.schemas.report import CompatibilityReport, ScoreBreakdown
from harvard_ats.schemas.resume import ResumeRecord

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"[A-Za-z][A-Za-z0-9+#]*")

STOPWORDS = {
    # Function words
    "about", "above", "after", "again", "against", "also", "although", "among", "another",
    "because", "been", "before", "being", "below", "between", "both", "could", "does",
    "doing", "down", "during", "each", "either", "every", "from", "further", "have",
    "having", "here", "into", "just", "more", "most", "much", "must", "neither", "only",
    "other", "over", "same", "shall", "should", "since", "some", "such", "than", "that",
    "their", "them", "then", "there", "these", "they", "this", "those", "though",
    "through", "under", "until", "upon", "very", "were", "what", "when", "where",
    "whether", "which", "while", "whom", "whose", "will", "with", "within", "without",
    "would", "your", "yours", "ours",
    # JD / resume structural filler
    "ability", "able", "candidate", "candidates", "experience", "including", "join",
    "looking", "plus", "preferred", "required", "requirements", "responsibilities",
    "role", "skill", "skills", "strong", "team", "using", "work", "years",
}

_GENERIC_SUGGESTIONS = (
    "Use standard section headers (Experience, Education, Skills)",
    "Include more relevant keywords from the job description",
    "Ensure consistent date formatting throughout",
)

# Keyed by gap id; order follows completeness_gaps().
_COMPLETENESS_SUGGESTIONS = {
    "missing_email": "Add an email address to your contact line so recruiters can reach you.",
    "missing_full_name": "Add your full name at the top of the resume.",
    "empty_education": "Add at least one education entry with institution, degree and graduation date.",
    "empty_experience": "Add at least one experience entry with achievement-focused bullet points.",
}


def _tokenize(text: str) -> list[str]:
    return [raw.lower() for raw in TOKEN_RE.findall(text or "")]


def keyword_terms(text: str) -> list[str]:
    """Distinct qualifying keywords of ``text`` in order of first appearance."""
    min_length = get_scoring_int("keyword_relevance.min_token_length", 4)
    seen: dict[str, None] = {}
    for token in _tokenize(text):
        if len(token) >= min_length and token not in STOPWORDS:
            seen.setdefault(token, None)
    return list(seen)


def keyword_coverage(resume_text: str, job_description: str) -> tuple[float | None, list[str]]:
    """Return the share of JD keywords present in the resume and the missing ones.

    The share is ``None`` when the job description has no qualifying keywords.
    """
    terms = keyword_terms(job_description)
    if not terms:
        return None, []
    resume_tokens = set(_tokenize(resume_text))
    missing = [term for term in terms if term not in resume_tokens]
    return (len(terms) - len(missing)) / len(terms), missing


def completeness_gaps(record: ResumeRecord) -> list[str]:
    gaps: list[str] = []
    info = record.personal_info
    if not info.email.strip():
        gaps.append("missing_email")
    if not info.full_name.strip():
        gaps.append("missing_full_name")
    if not record.education:
        gaps.append("empty_education")
    if not record.experience:
        gaps.append("empty_experience")
    return gaps


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _format_optimization(finding_count: int) -> int:
    maximum = get_scoring_int("breakdown.max.format_optimization", 25)
    penalty = get_scoring_int("format_optimization.penalty_per_finding", 5)
    cap = get_scoring_int("format_optimization.max_penalized_findings", 5)
    return _clamp(maximum - penalty * min(finding_count, cap), 0, 25)


def _content_parsing(gap_count: int) -> int:
    maximum = get_scoring_int("breakdown.max.content_parsing", 40)
    deduction = get_scoring_int("content_parsing.deduction_per_gap", 10)
    return _clamp(maximum - deduction * gap_count, 0, 40)


def _keyword_relevance(
    resume_text: str,
    job_description: str | None,
    keyword_signal: float | None,
) -> tuple[int, list[str]]:
    maximum = get_scoring_int("breakdown.max.keyword_relevance", 35)
    neutral = get_scoring_int("keyword_relevance.neutral_default", 20)

    if keyword_signal is not None and math.isfinite(keyword_signal):
        fraction = min(1.0, max(0.0, float(keyword_signal)))
        return _clamp(round(maximum * fraction), 0, 35), []

    if not job_description or not job_description.strip():
        return _clamp(neutral, 0, 35), []

    fraction, missing = keyword_coverage(resume_text, job_description)
    if fraction is None:
        return _clamp(neutral, 0, 35), []
    return _clamp(round(maximum * fraction), 0, 35), missing


def _build_suggestions(finding_suggestions: list[str], gaps: list[str], missing: list[str]) -> list[str]:
    ordered: list[str] = list(finding_suggestions)
    ordered.extend(_COMPLETENESS_SUGGESTIONS[gap] for gap in gaps)
    if missing:
        listed = get_scoring_int("keyword_relevance.max_missing_listed", 5)
        ordered.append(
            "Include job description keywords missing from your resume: "
            + ", ".join(missing[:listed])
        )

    suggestions: list[str] = []
    for suggestion in ordered:
        if suggestion not in suggestions:
            suggestions.append(suggestion)

    minimum = max(3, get_scoring_int("suggestions.minimum", 3))
    for generic in (*_GENERIC_SUGGESTIONS, *ats_friendly_tips()):
        if len(suggestions) >= minimum:
            break
        if generic not in suggestions:
            suggestions.append(generic)
    return suggestions


def score(
    record: ResumeRecord,
    job_description: str | None = None,
    keyword_signal: float | None = None,
) -> CompatibilityReport:
    """Score ``record`` against the ATS rubric.

    ``keyword_signal`` is an externally computed relevance share in [0, 1];
    when it is absent the keyword component falls back to JD token coverage,
    or to the neutral default without a job description.
    """
    resume_text = render_plain_text(record)
    findings = scan(resume_text)
    gaps = completeness_gaps(record)

    format_optimization = _format_optimization(len(findings))
    content_parsing = _content_parsing(len(gaps))
    keyword_relevance, missing = _keyword_relevance(resume_text, job_description, keyword_signal)

    breakdown = ScoreBreakdown(
        content_parsing=content_parsing,
        keyword_relevance=keyword_relevance,
        format_optimization=format_optimization,
    )
    total = _clamp(breakdown.total(), 0, 100)
    suggestions = _build_suggestions([finding.suggestion for finding in findings], gaps, missing)

    logger.debug(
        "ats_score_computed score=%s findings=%s gaps=%s",
        total,
        [finding.id for finding in findings],
        gaps,
    )
    return CompatibilityReport(score=total, breakdown=breakdown, suggestions=suggestions)
