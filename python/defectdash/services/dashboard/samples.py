"""
Static sample data: fallback widget values and distribution breakdowns.
"""
from dataclasses import dataclass

from defectdash.core.types import DefectStatus, ProjectSeverity


@dataclass(frozen=True)
class SampleMeasurements:
    """Fallback values per widget."""
    defect_density: float = 5.2
    dsi_percentage: float = 15.5
    actual_severity_score: int = 31
    maximum_severity_score: int = 200
    remark_ratio: str = "95.50%"


DEFAULT_SAMPLES = SampleMeasurements()


# Defect counts per application module
SAMPLE_MODULE_DEFECTS: dict[str, int] = {
    "Configurations": 77,
    "Project Management": 55,
    "Bench": 58,
    "Defects": 68,
    "Test Cases": 58,
    "Employee": 67,
    "Releases": 34,
    "Project": 22,
    "Main Template": 4,
    "Dashboard": 19,
}

# Defect counts by status, per severity group
SAMPLE_STATUS_COUNTS: dict[ProjectSeverity, dict[DefectStatus, int]] = {
    ProjectSeverity.HIGH: {
        DefectStatus.REOPEN: 3,
        DefectStatus.NEW: 50,
        DefectStatus.OPEN: 5,
        DefectStatus.FIXED: 14,
        DefectStatus.CLOSED: 37,
        DefectStatus.REJECTED: 0,
        DefectStatus.DUPLICATE: 3,
    },
    ProjectSeverity.MEDIUM: {
        DefectStatus.REOPEN: 5,
        DefectStatus.NEW: 126,
        DefectStatus.OPEN: 10,
        DefectStatus.FIXED: 33,
        DefectStatus.CLOSED: 60,
        DefectStatus.REJECTED: 2,
        DefectStatus.DUPLICATE: 1,
    },
    ProjectSeverity.LOW: {
        DefectStatus.REOPEN: 1,
        DefectStatus.NEW: 57,
        DefectStatus.OPEN: 0,
        DefectStatus.FIXED: 10,
        DefectStatus.CLOSED: 24,
        DefectStatus.REJECTED: 1,
        DefectStatus.DUPLICATE: 3,
    },
}
