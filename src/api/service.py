"""Service layer: runs page audits for the API routes."""

from __future__ import annotations

import logging

from src.api.schemas import AnalyzeFailure, AnalyzeRequest, AnalyzeSuccess, ErrorDetail
from src.audit.fetch import FetchError, PageFetcher
from src.audit.pipeline import audit_url

logger = logging.getLogger(__name__)


async def run_audit(
    fetcher: PageFetcher,
    body: AnalyzeRequest,
) -> AnalyzeSuccess | AnalyzeFailure:
    """Audit the requested URL, mapping fetch failures to a failure payload."""
    logger.info("audit requested", extra={"url": body.url[:200]})
    try:
        result = await audit_url(body.url, fetcher)
    except FetchError as exc:
        logger.info(
            "audit failed",
            extra={"url": body.url[:200], "kind": exc.kind.value, "status_code": exc.status_code},
        )
        return AnalyzeFailure(error=ErrorDetail(kind=exc.kind, message=exc.message))
    return AnalyzeSuccess(data=result.signals, report=result.report)
