"""
Defect-to-Remark Ratio Classifier.

The remote API reports the ratio as a percentage string such as "95.50%".

Bands:
- Low/Green: ratio > 98
- Medium/Yellow: 90 <= ratio <= 98
- High/Red: ratio < 90
"""
import logging
import math

from defectdash.core.types import RiskClassification, RiskColor, RiskLevel

logger = logging.getLogger(__name__)

_LOW = RiskClassification(
    level=RiskLevel.LOW,
    color=RiskColor.GREEN,
    description="Excellent ratio",
)
_MEDIUM = RiskClassification(
    level=RiskLevel.MEDIUM,
    color=RiskColor.YELLOW,
    description="Good ratio",
)
_HIGH = RiskClassification(
    level=RiskLevel.HIGH,
    color=RiskColor.RED,
    description="Needs attention",
)


def parse_ratio(ratio: str | float | int) -> float:
    """
    Parse a ratio percentage into a float.

    Accepts "95.50%", "95.5" or a number. Unparsable input gives 0.0.
    """
    if isinstance(ratio, (int, float)):
        value = float(ratio)
    else:
        try:
            value = float(ratio.strip().rstrip("%").strip())
        except (AttributeError, ValueError):
            logger.debug("Unparsable ratio %r, treating as 0", ratio)
            return 0.0

    if math.isnan(value):
        return 0.0
    return value


class RemarkRatioClassifier:
    """Classifies defect-to-remark ratios into risk bands."""

    # Thresholds
    LOW_THRESHOLD = 98.0  # strictly above is Low
    MEDIUM_THRESHOLD = 90.0

    def classify(self, ratio: str | float | int) -> RiskClassification:
        """
        Classify a ratio percentage.

        Args:
            ratio: "NN.NN%" string or number in [0, 100]

        Returns:
            RiskClassification for the band the ratio falls in
        """
        value = parse_ratio(ratio)

        if value > self.LOW_THRESHOLD:
            return _LOW
        elif value >= self.MEDIUM_THRESHOLD:
            return _MEDIUM
        else:
            return _HIGH


_classifier = RemarkRatioClassifier()


def classify_ratio(ratio: str | float | int) -> RiskClassification:
    """Classify a ratio percentage with the default thresholds."""
    return _classifier.classify(ratio)


def ratio_to_decimal(ratio: str | float | int) -> float:
    """Convert a ratio percentage to a progress fraction clamped to [0, 1]."""
    return min(max(parse_ratio(ratio) / 100, 0.0), 1.0)
