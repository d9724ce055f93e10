"""
DefectDash Core Module.

Provides configuration, types, errors, and utilities.
"""
from defectdash.core.config import settings
from defectdash.core.errors import (
    APIConnectionError,
    APIError,
    APIResponseError,
    DefectDashError,
    EnvelopeError,
    InvalidKlocError,
    InvalidProjectIdError,
    InvalidStatusError,
    ProjectNotFoundError,
    ValidationError,
)
from defectdash.core.types import (
    ApiProject,
    DefectDensityData,
    DefectSeverityIndexData,
    DefectStatus,
    DefectToRemarkRatioData,
    ErrorResponse,
    FailureEnvelope,
    FetchState,
    Measurement,
    MetricKind,
    ModuleShare,
    Project,
    ProjectCardColor,
    ProjectDashboard,
    ProjectSeverity,
    RiskClassification,
    RiskColor,
    RiskLevel,
    StatusBreakdown,
    SuccessEnvelope,
    WidgetResult,
)

__all__ = [
    # Config
    "settings",
    # Enums
    "DefectStatus",
    "MetricKind",
    "ProjectSeverity",
    "RiskColor",
    "RiskLevel",
    # Models
    "Measurement",
    "RiskClassification",
    "ApiProject",
    "Project",
    "ProjectCardColor",
    "DefectDensityData",
    "DefectSeverityIndexData",
    "DefectToRemarkRatioData",
    "SuccessEnvelope",
    "FailureEnvelope",
    "FetchState",
    "WidgetResult",
    "ProjectDashboard",
    "ModuleShare",
    "StatusBreakdown",
    "ErrorResponse",
    # Errors
    "DefectDashError",
    "APIError",
    "APIConnectionError",
    "APIResponseError",
    "EnvelopeError",
    "ValidationError",
    "InvalidProjectIdError",
    "InvalidKlocError",
    "InvalidStatusError",
    "ProjectNotFoundError",
]
