from __future__ import annotations

from typing import Protocol

from harvard_ats.schemas.resume import ResumeRecord


class KeywordRelevanceProvider(Protocol):
    async def keyword_relevance(self, resume_text: str, job_description: str) -> float:
        """Return the share of job-description keywords covered by the resume, in [0, 1]."""


class ContentEnhancer(Protocol):
    async def enhance(self, record: ResumeRecord, job_description: str | None) -> ResumeRecord:
        """Return a rewritten copy of ``record`` (e.g. STAR-style experience bullets)."""
