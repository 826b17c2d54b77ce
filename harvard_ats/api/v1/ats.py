from fastapi import APIRouter, Depends, Request

from harvard_ats.ats.scanner import ats_friendly_tips, scan
from harvard_ats.core.rate_limit import rate_limit
from harvard_ats.core.security import require_api_key
from harvard_ats.schemas.api import ScanRequest, ScanResponse, TipsResponse

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/ats/scan", response_model=ScanResponse)
@rate_limit()
async def ats_scan(request: Request, payload: ScanRequest):
    _ = request
    return ScanResponse(findings=scan(payload.text))


@router.get("/ats/tips", response_model=TipsResponse)
async def ats_tips():
    return TipsResponse(tips=ats_friendly_tips())
