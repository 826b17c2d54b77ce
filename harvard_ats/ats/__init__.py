from .renderer import HTML_FILENAME, contact_line, render_html, render_plain_text
from .scanner import ats_friendly_tips, scan
from .scorer import completeness_gaps, keyword_coverage, keyword_terms, score

__all__ = [
    "scan",
    "ats_friendly_tips",
    "render_plain_text",
    "render_html",
    "contact_line",
    "HTML_FILENAME",
    "score",
    "completeness_gaps",
    "keyword_coverage",
    "keyword_terms",
]
