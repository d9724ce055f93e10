from defectdash.services.dashboard.samples import (
    DEFAULT_SAMPLES,
    SAMPLE_MODULE_DEFECTS,
    SAMPLE_STATUS_COUNTS,
    SampleMeasurements,
)
from defectdash.services.dashboard.service import ProjectDashboardService

__all__ = [
    "DEFAULT_SAMPLES",
    "SAMPLE_MODULE_DEFECTS",
    "SAMPLE_STATUS_COUNTS",
    "ProjectDashboardService",
    "SampleMeasurements",
]
