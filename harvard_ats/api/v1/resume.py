import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from harvard_ats.ats.renderer import HTML_FILENAME, render_html, render_plain_text
from harvard_ats.ats.scorer import score
from harvard_ats.core.rate_limit import rate_limit
from harvard_ats.core.security import require_api_key
from harvard_ats.schemas.api import RenderRequest, RenderTextResponse, ScoreRequest
from harvard_ats.schemas.report import CompatibilityReport

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/resume/render/text", response_model=RenderTextResponse)
@rate_limit()
async def resume_render_text(request: Request, payload: RenderRequest):
    _ = request
    return RenderTextResponse(text=render_plain_text(payload.resume))


@router.post("/resume/render/html", response_class=HTMLResponse)
@rate_limit()
async def resume_render_html(request: Request, payload: RenderRequest):
    _ = request
    return HTMLResponse(
        content=render_html(payload.resume),
        headers={"Content-Disposition": f'attachment; filename="{HTML_FILENAME}"'},
    )


@router.post("/resume/score", response_model=CompatibilityReport)
@rate_limit()
async def resume_score(request: Request, payload: ScoreRequest):
    _ = request
    report = score(payload.resume, payload.job_description)
    logger.info(
        "resume_scored score=%s has_jd=%s",
        report.score,
        bool(payload.job_description and payload.job_description.strip()),
    )
    return report
