"""POST /analyze endpoint handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from src.api.schemas import AnalyzeFailure, AnalyzeRequest, AnalyzeSuccess
from src.api.service import run_audit
from src.audit.fetch import PageFetcher
from src.auth.dependencies import require_api_key

router = APIRouter(dependencies=[Depends(require_api_key)])


def _get_fetcher(request: Request) -> PageFetcher:
    return request.app.state.fetcher


@router.post("/analyze")
async def analyze(
    body: AnalyzeRequest,
    fetcher: PageFetcher = Depends(_get_fetcher),
) -> AnalyzeSuccess | AnalyzeFailure:
    return await run_audit(fetcher, body)
