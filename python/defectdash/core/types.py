"""
Shared Pydantic models for DefectDash.

These types are used across the application for consistent data structures.
Remote API payloads are camelCase on the wire and snake_case in Python.
"""
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# ─────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────

class RiskLevel(str, Enum):
    """Categorical output of every classifier."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskColor(str, Enum):
    """Colour token paired with a risk level."""
    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"

    @property
    def hex(self) -> str:
        return _COLOR_HEX[self]


_COLOR_HEX = {
    RiskColor.GREEN: "#10b981",
    RiskColor.YELLOW: "#facc15",
    RiskColor.RED: "#ef4444",
}


class ProjectSeverity(str, Enum):
    """Severity of a project derived from its lifecycle dates."""
    HIGH = "High Risk"
    MEDIUM = "Medium Risk"
    LOW = "Low Risk"


class MetricKind(str, Enum):
    """Kinds of raw measurement the classifiers accept."""
    DENSITY = "density"
    DSI = "dsi"
    RATIO = "ratio"
    DAYS_UNTIL_DEADLINE = "days_until_deadline"


# ─────────────────────────────────────────────────────────────
# Classification Models
# ─────────────────────────────────────────────────────────────

class Measurement(BaseModel):
    """A raw scalar and the metric it belongs to."""
    model_config = ConfigDict(frozen=True)

    kind: MetricKind
    value: float


class RiskClassification(BaseModel):
    """Result of classifying a measurement."""
    model_config = ConfigDict(frozen=True)

    level: RiskLevel
    color: RiskColor
    description: str
    meaning: str | None = None
    range: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hex(self) -> str:
        return self.color.hex


# ─────────────────────────────────────────────────────────────
# Remote API Payloads
# ─────────────────────────────────────────────────────────────

class APIModel(BaseModel):
    """Base for payloads exchanged with the remote dashboard API."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DefectDensityData(APIModel):
    """Defect density for a project."""
    project_id: int | None = None
    project_name: str | None = None
    client_name: str | None = None
    defects: int = 0
    kloc: float
    defect_density: float
    meaning: str | None = None
    color: str | None = None
    range: str | None = None


class DefectSeverityIndexData(APIModel):
    """Defect severity index for a project."""
    project_id: int | None = None
    project_name: str | None = None
    total_defects: int = 0
    actual_severity_score: int = 0
    maximum_severity_score: int = 0
    dsi_percentage: float
    interpretation: str | None = None


class DefectToRemarkRatioData(APIModel):
    """Defect-to-remark ratio for a project."""
    project_id: int | None = None
    project_name: str | None = None
    defects: int = 0
    remarks: int = 0
    ratio: str  # e.g. "95.50%"
    category: str | None = None
    color: str | None = None


class ApiProject(APIModel):
    """Project record as returned by the remote API."""
    id: int
    project_id: str | None = None
    project_name: str
    description: str | None = None
    project_status: str
    start_date: str  # ISO date string
    end_date: str  # ISO date string
    client_name: str | None = None
    country: str | None = None
    state: str | None = None
    email: str | None = None
    phone_no: str | None = None
    user_id: int | None = None
    user_first_name: str | None = None
    user_last_name: str | None = None
    kloc: float | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def _check_iso_date(cls, value: str) -> str:
        # Reject unparsable dates here rather than during severity derivation
        datetime.fromisoformat(value.strip())
        return value


class Project(APIModel):
    """Project as presented on the dashboard, with derived severity."""
    id: str
    name: str
    severity: ProjectSeverity
    description: str | None = None
    project_status: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    client_name: str | None = None
    country: str | None = None
    state: str | None = None
    email: str | None = None
    phone_no: str | None = None
    user_id: int | None = None
    user_first_name: str | None = None
    user_last_name: str | None = None
    kloc: float | None = None


class ProjectCardColor(APIModel):
    """Summary metrics used to colour a project card."""
    project_name: str | None = None
    severity_index: float | None = None
    reopen_count: int | None = None
    remark_ratio: str | float | None = None
    density_meter: float | None = None
    status: str | None = None
    color_code: str | None = None


# ─────────────────────────────────────────────────────────────
# Envelope Models
# ─────────────────────────────────────────────────────────────

class SuccessEnvelope(APIModel, Generic[T]):
    """Envelope of a successful response; data is always present."""
    status: Literal["success"]
    message: str | None = None
    data: T
    status_code: int | str | None = None


class FailureEnvelope(APIModel):
    """Envelope of a failed response."""
    status: Literal["failure"]
    message: str | None = None
    data: Any = None
    status_code: int | str | None = None


class FetchState(BaseModel, Generic[T]):
    """Outcome of a fail-soft fetch."""
    data: T | None = None
    error: str | None = None
    is_loading: bool = False


# ─────────────────────────────────────────────────────────────
# Dashboard Models
# ─────────────────────────────────────────────────────────────

class WidgetResult(BaseModel):
    """Isolated outcome of a single dashboard widget."""
    widget: str
    outcome: Literal["success", "fallback", "error"]
    value: float | str | None = None
    classification: RiskClassification | None = None
    details: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


class ProjectDashboard(BaseModel):
    """All widgets for a single project."""
    project_id: int
    kloc: float
    widgets: list[WidgetResult]
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


# ─────────────────────────────────────────────────────────────
# Breakdown Models
# ─────────────────────────────────────────────────────────────

class DefectStatus(str, Enum):
    """Lifecycle status of a defect."""
    NEW = "NEW"
    OPEN = "OPEN"
    REOPEN = "REOPEN"
    FIXED = "FIXED"
    CLOSED = "CLOSED"
    REJECTED = "REJECTED"
    DUPLICATE = "DUPLICATE"


class ModuleShare(BaseModel):
    """One module's slice of the defect total."""
    model_config = ConfigDict(frozen=True)

    name: str
    count: int
    percentage: float


class StatusBreakdown(BaseModel):
    """Defect counts by status for one severity group."""
    model_config = ConfigDict(frozen=True)

    severity: ProjectSeverity
    total: int
    counts: dict[DefectStatus, int]
    reopen_count: int
    reopen_percentage: float


# ─────────────────────────────────────────────────────────────
# API Models
# ─────────────────────────────────────────────────────────────

class ProjectSeverityRequest(BaseModel):
    """Request to derive a project's severity."""
    status: str
    start_date: datetime | date
    end_date: datetime | date
    now: datetime | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ACTIVE",
                "start_date": "2025-01-01T00:00:00Z",
                "end_date": "2025-12-31T00:00:00Z",
            }
        }
    )


class ProjectSeverityResponse(BaseModel):
    """Derived project severity."""
    severity: ProjectSeverity
    evaluated_at: datetime


class ModuleDistributionRequest(BaseModel):
    """Defect counts keyed by module name."""
    counts: dict[str, int]


class StatusBreakdownRequest(BaseModel):
    """Defect counts keyed by status for one severity group."""
    severity: ProjectSeverity
    counts: dict[str, int]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "severity": "High Risk",
                "counts": {"NEW": 50, "OPEN": 5, "REOPEN": 3, "CLOSED": 37},
            }
        }
    )


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    code: str
    detail: str | None = None
