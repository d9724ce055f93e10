"""
Defect Density Classifier - Rates defects per KLOC.

Bands:
- Low/Green: density < 7
- Medium/Yellow: 7 <= density <= 10
- High/Red: density > 10
"""
from defectdash.core.types import RiskClassification, RiskColor, RiskLevel

_LOW = RiskClassification(
    level=RiskLevel.LOW,
    color=RiskColor.GREEN,
    description="Low defect density",
    meaning="Good",
    range="0 to 7",
)
_MEDIUM = RiskClassification(
    level=RiskLevel.MEDIUM,
    color=RiskColor.YELLOW,
    description="Moderate defect density",
    meaning="Moderate Quality",
    range="7 to 10",
)
_HIGH = RiskClassification(
    level=RiskLevel.HIGH,
    color=RiskColor.RED,
    description="High defect density",
    meaning="High Risk",
    range="Above 10.0",
)


class DensityClassifier:
    """Classifies defect density (defects per KLOC) into risk bands."""

    # Thresholds
    MEDIUM_THRESHOLD = 7.0
    HIGH_THRESHOLD = 10.0

    def classify(self, density: float) -> RiskClassification:
        """
        Classify a defect density value.

        Args:
            density: Defects per thousand lines of code. Negative values
                are not rejected and land in the Low band.

        Returns:
            RiskClassification for the band the value falls in
        """
        if density < self.MEDIUM_THRESHOLD:
            return _LOW
        elif density <= self.HIGH_THRESHOLD:
            return _MEDIUM
        else:
            return _HIGH


_classifier = DensityClassifier()


def classify_density(density: float) -> RiskClassification:
    """Classify a defect density with the default thresholds."""
    return _classifier.classify(density)
