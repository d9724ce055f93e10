"""
Classify a Measurement by dispatching on its metric kind.
"""
from defectdash.core.types import (
    Measurement,
    MetricKind,
    RiskClassification,
    RiskColor,
    RiskLevel,
)
from defectdash.services.metrics.density import classify_density
from defectdash.services.metrics.project_severity import ProjectSeverityCalculator
from defectdash.services.metrics.remark_ratio import classify_ratio
from defectdash.services.metrics.severity_index import classify_dsi

_DEADLINE_HIGH = RiskClassification(
    level=RiskLevel.HIGH,
    color=RiskColor.RED,
    description="Overdue or due within a week",
)
_DEADLINE_MEDIUM = RiskClassification(
    level=RiskLevel.MEDIUM,
    color=RiskColor.YELLOW,
    description="Due within a month",
)
_DEADLINE_LOW = RiskClassification(
    level=RiskLevel.LOW,
    color=RiskColor.GREEN,
    description="More than a month left",
)


def classify_days_until_deadline(days: float) -> RiskClassification:
    """Rate the time left before a deadline, using the project severity day limits."""
    if days <= ProjectSeverityCalculator.HIGH_RISK_DAYS:
        return _DEADLINE_HIGH
    elif days <= ProjectSeverityCalculator.MEDIUM_RISK_DAYS:
        return _DEADLINE_MEDIUM
    return _DEADLINE_LOW


_CLASSIFIERS = {
    MetricKind.DENSITY: classify_density,
    MetricKind.DSI: classify_dsi,
    MetricKind.RATIO: classify_ratio,
    MetricKind.DAYS_UNTIL_DEADLINE: classify_days_until_deadline,
}


def classify_measurement(measurement: Measurement) -> RiskClassification:
    """Classify a measurement with the classifier for its kind."""
    return _CLASSIFIERS[measurement.kind](measurement.value)
