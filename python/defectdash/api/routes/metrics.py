"""
Classifier routes: rate a raw measurement without touching the remote API.
"""
import logging

from fastapi import APIRouter, Query

from defectdash.core.types import (
    ModuleDistributionRequest,
    ModuleShare,
    ProjectSeverityRequest,
    ProjectSeverityResponse,
    RiskClassification,
    StatusBreakdown,
    StatusBreakdownRequest,
)
from defectdash.services.dashboard.samples import SAMPLE_MODULE_DEFECTS, SAMPLE_STATUS_COUNTS
from defectdash.services.metrics import (
    classify_density,
    classify_dsi,
    classify_ratio,
    derive_project_severity,
    dsi_efficiency,
    dsi_interpretation,
    module_distribution,
    ratio_to_decimal,
    summarize_status_breakdown,
    utc_now,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/metrics")


@router.get("/density", response_model=RiskClassification)
async def density(value: float = Query(..., description="Defects per KLOC")):
    """Classify a defect density."""
    return classify_density(value)


@router.get("/dsi")
async def dsi(value: float = Query(..., description="DSI percentage, 0-100")):
    """Classify a DSI percentage and interpret it."""
    return {
        "classification": classify_dsi(value),
        "interpretation": dsi_interpretation(value),
    }


@router.get("/dsi/efficiency")
async def efficiency(
    actual: int = Query(..., description="Actual severity score"),
    maximum: int = Query(..., description="Maximum severity score"),
):
    """Share of the maximum severity score that was avoided."""
    return {"efficiency": dsi_efficiency(actual, maximum)}


@router.get("/ratio")
async def ratio(value: str = Query(..., description='Ratio such as "95.50%"')):
    """Classify a defect-to-remark ratio."""
    return {
        "classification": classify_ratio(value),
        "decimal": ratio_to_decimal(value),
    }


@router.post("/project-severity", response_model=ProjectSeverityResponse)
async def project_severity(request: ProjectSeverityRequest):
    """Derive a project's severity from its status and schedule."""
    now = request.now or utc_now()
    severity = derive_project_severity(
        request.status, request.start_date, request.end_date, now
    )
    logger.debug(f"Project severity for status={request.status}: {severity.value}")
    return ProjectSeverityResponse(severity=severity, evaluated_at=now)


@router.post("/module-distribution", response_model=list[ModuleShare])
async def modules(request: ModuleDistributionRequest):
    """Each module's share of the defect total, largest first."""
    return module_distribution(request.counts)


@router.post("/status-breakdown", response_model=StatusBreakdown)
async def status_breakdown(request: StatusBreakdownRequest):
    """Defect counts by status for one severity group."""
    return summarize_status_breakdown(request.severity, request.counts)


@router.get("/breakdowns/sample")
async def sample_breakdowns():
    """Module distribution and status breakdowns for the built-in sample data."""
    return {
        "modules": module_distribution(SAMPLE_MODULE_DEFECTS),
        "statuses": [
            summarize_status_breakdown(severity, counts)
            for severity, counts in SAMPLE_STATUS_COUNTS.items()
        ],
    }
