"""API routers for speech performance analysis endpoints."""
import logging

from fastapi import APIRouter

from analysis.models import AnalysisInput, PerformanceReport, StutteringReport, StutteringRequest
from analysis.report import generate_performance_report
from analysis.stuttering import generate_stuttering_report
from config import settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Analysis"])


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "version": settings.APP_VERSION}


# Plain `def` endpoints: the engine is synchronous and runs in the threadpool
@router.post("/v1/performance-report", response_model=PerformanceReport)
def performance_report(data: AnalysisInput) -> PerformanceReport:
    """Analyze one finished recording and return the full report."""
    logger.info(
        "Performance report requested: words=%d volume_samples=%d duration_ms=%.0f",
        len(data.words), len(data.volume_history), data.duration_ms,
    )
    return generate_performance_report(data)


@router.post("/v1/stuttering-report", response_model=StutteringReport)
def stuttering_report(request: StutteringRequest) -> StutteringReport:
    """Fluency profile only, for front-ends that merge it into a later report."""
    logger.info("Stuttering report requested: words=%d", len(request.words))
    return generate_stuttering_report(request.words)
