"""
Defect Severity Index (DSI) Classifier.

DSI = actual severity score / maximum severity score * 100, where each defect
is weighted by severity (Critical=4, High=3, Medium=2, Low=1). The remote API
computes it; this module classifies the resulting percentage.

Colour bands (3 tiers):
- Low/Green: dsi < 25
- Medium/Yellow: 25 <= dsi < 75
- High/Red: dsi >= 75

Interpretation text (4 tiers, display only):
- <25 "Low risk", 25-49 "Moderate risk", 50-74 "Significant risk", >=75 "High risk"
"""
import math
from collections.abc import Mapping
from typing import Any

from defectdash.core.types import (
    DefectSeverityIndexData,
    RiskClassification,
    RiskColor,
    RiskLevel,
)

SEVERITY_WEIGHTS = {
    "critical": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}
MAX_SEVERITY_WEIGHT = max(SEVERITY_WEIGHTS.values())

_LOW = RiskClassification(
    level=RiskLevel.LOW,
    color=RiskColor.GREEN,
    description="Low severity impact",
)
_MEDIUM = RiskClassification(
    level=RiskLevel.MEDIUM,
    color=RiskColor.YELLOW,
    description="Moderate severity impact",
)
_HIGH = RiskClassification(
    level=RiskLevel.HIGH,
    color=RiskColor.RED,
    description="High severity impact",
)


class SeverityIndexClassifier:
    """Classifies DSI percentages into risk bands and interpretation text."""

    # Colour band thresholds
    MEDIUM_THRESHOLD = 25.0
    HIGH_THRESHOLD = 75.0

    # Interpretation thresholds (finer grain than colour bands)
    INTERPRETATION_BANDS = (
        (25.0, "Low risk"),
        (50.0, "Moderate risk"),
        (75.0, "Significant risk"),
    )
    INTERPRETATION_TOP = "High risk"

    def classify(self, dsi: float) -> RiskClassification:
        """
        Classify a DSI percentage.

        Args:
            dsi: Defect severity index, expected 0-100

        Returns:
            RiskClassification for the colour band
        """
        if dsi < self.MEDIUM_THRESHOLD:
            return _LOW
        elif dsi < self.HIGH_THRESHOLD:
            return _MEDIUM
        else:
            return _HIGH

    def interpret(self, dsi: float) -> str:
        """Human-readable interpretation of a DSI percentage."""
        for upper, text in self.INTERPRETATION_BANDS:
            if dsi < upper:
                return text
        return self.INTERPRETATION_TOP


_classifier = SeverityIndexClassifier()


def classify_dsi(dsi: float) -> RiskClassification:
    """Classify a DSI percentage with the default thresholds."""
    return _classifier.classify(dsi)


def dsi_interpretation(dsi: float) -> str:
    """Interpretation text for a DSI percentage."""
    return _classifier.interpret(dsi)


def dsi_efficiency(actual: int, maximum: int) -> int:
    """
    Share of the maximum severity score that was avoided, as a whole percent.

    Rounds half up. Returns 0 when the maximum is not positive.
    """
    if maximum <= 0:
        return 0
    return math.floor((maximum - actual) * 100 / maximum + 0.5)


def compute_dsi(counts: Mapping[str, int]) -> float:
    """
    Compute a DSI percentage from defect counts keyed by severity.

    Unknown severity names are ignored. No defects gives 0.0.
    """
    actual = 0
    total = 0
    for severity, count in counts.items():
        weight = SEVERITY_WEIGHTS.get(severity.lower())
        if weight is None:
            continue
        actual += weight * count
        total += count

    maximum = total * MAX_SEVERITY_WEIGHT
    if maximum == 0:
        return 0.0
    return actual / maximum * 100


def format_dsi_for_display(data: DefectSeverityIndexData) -> dict[str, Any]:
    """Format a DSI payload for a dashboard card."""
    efficiency = dsi_efficiency(data.actual_severity_score, data.maximum_severity_score)

    return {
        "percentage": f"{data.dsi_percentage:.1f}%",
        "efficiency": f"{efficiency}%",
        "risk_level": classify_dsi(data.dsi_percentage),
        "interpretation": dsi_interpretation(data.dsi_percentage),
        "summary": (
            f"{data.total_defects} defects with "
            f"{data.actual_severity_score}/{data.maximum_severity_score} severity score"
        ),
    }
