from __future__ import annotations

import asyncio
import logging
import math
from typing import Any

from pydantic import BaseModel, ValidationError

from harvard_ats.ats.renderer import render_html, render_plain_text
from harvard_ats.ats.scorer import score
from harvard_ats.core.config import settings
from harvard_ats.enrichment.types import ContentEnhancer, KeywordRelevanceProvider
from harvard_ats.schemas.report import CompatibilityReport
from harvard_ats.schemas.resume import ResumeRecord

logger = logging.getLogger(__name__)


class OptimizedResume(BaseModel):
    record: ResumeRecord
    text: str
    html: str
    report: CompatibilityReport
    enhanced: bool = False


def _timeout(timeout_seconds: float | None) -> float:
    return settings.enrichment_timeout_seconds if timeout_seconds is None else timeout_seconds


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def _validated_signal(raw: Any) -> float | None:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        logger.warning("keyword_enrichment_invalid type=%s", type(raw).__name__)
        return None
    if not math.isfinite(raw):
        logger.warning("keyword_enrichment_invalid value=%s", raw)
        return None
    return float(raw)


async def score_with_enrichment(
    record: ResumeRecord,
    job_description: str | None = None,
    provider: KeywordRelevanceProvider | None = None,
    *,
    timeout_seconds: float | None = None,
) -> CompatibilityReport:
    """Score ``record``, merging an external keyword-relevance signal when available.

    The provider is awaited at most once. Any failure, timeout or invalid
    value falls back to the deterministic baseline instead of propagating.
    """
    signal: float | None = None
    if provider is not None and _has_text(job_description):
        try:
            raw = await asyncio.wait_for(
                provider.keyword_relevance(render_plain_text(record), job_description or ""),
                timeout=_timeout(timeout_seconds),
            )
        except asyncio.TimeoutError:
            logger.warning(
                "keyword_enrichment_timeout provider=%s timeout_s=%s",
                type(provider).__name__,
                _timeout(timeout_seconds),
            )
        except Exception as exc:
            logger.warning("keyword_enrichment_failed provider=%s: %s", type(provider).__name__, exc)
        else:
            signal = _validated_signal(raw)
    return score(record, job_description, keyword_signal=signal)


async def enhance_record(
    record: ResumeRecord,
    job_description: str | None = None,
    enhancer: ContentEnhancer | None = None,
    *,
    timeout_seconds: float | None = None,
) -> tuple[ResumeRecord, bool]:
    """Return ``(record, enhanced)``; the input record is returned unchanged on failure."""
    if enhancer is None:
        return record, False
    try:
        result = await asyncio.wait_for(
            enhancer.enhance(record, job_description if _has_text(job_description) else None),
            timeout=_timeout(timeout_seconds),
        )
    except asyncio.TimeoutError:
        logger.warning("content_enhancement_timeout enhancer=%s", type(enhancer).__name__)
        return record, False
    except Exception as exc:
        logger.warning("content_enhancement_failed enhancer=%s: %s", type(enhancer).__name__, exc)
        return record, False

    if isinstance(result, ResumeRecord):
        return result, True
    try:
        return ResumeRecord.model_validate(result), True
    except ValidationError as exc:
        logger.warning(
            "content_enhancement_invalid enhancer=%s errors=%s",
            type(enhancer).__name__,
            exc.error_count(),
        )
        return record, False


async def optimize_resume(
    record: ResumeRecord,
    job_description: str | None = None,
    *,
    enhancer: ContentEnhancer | None = None,
    provider: KeywordRelevanceProvider | None = None,
    timeout_seconds: float | None = None,
) -> OptimizedResume:
    working, enhanced = await enhance_record(
        record, job_description, enhancer, timeout_seconds=timeout_seconds
    )
    report = await score_with_enrichment(
        working, job_description, provider, timeout_seconds=timeout_seconds
    )
    logger.info(
        "resume_optimized enhanced=%s score=%s suggestions=%s",
        enhanced,
        report.score,
        len(report.suggestions),
    )
    return OptimizedResume(
        record=working,
        text=render_plain_text(working),
        html=render_html(working),
        report=report,
        enhanced=enhanced,
    )
