"""
Unit tests for the metric classifiers.
"""
import pytest

from defectdash.core.errors import InvalidStatusError
from defectdash.core.types import (
    DefectSeverityIndexData,
    DefectStatus,
    Measurement,
    MetricKind,
    ProjectSeverity,
    RiskColor,
    RiskLevel,
)
from defectdash.services.dashboard import SAMPLE_MODULE_DEFECTS, SAMPLE_STATUS_COUNTS
from defectdash.services.metrics import (
    DensityClassifier,
    classify_days_until_deadline,
    classify_density,
    classify_dsi,
    classify_measurement,
    classify_ratio,
    compute_dsi,
    dsi_efficiency,
    dsi_interpretation,
    format_dsi_for_display,
    module_distribution,
    parse_ratio,
    ratio_to_decimal,
    summarize_status_breakdown,
)


class TestDensityClassifier:
    @pytest.mark.parametrize(
        "density, level, color",
        [
            (5.2, RiskLevel.LOW, RiskColor.GREEN),
            (8.5, RiskLevel.MEDIUM, RiskColor.YELLOW),
            (15.2, RiskLevel.HIGH, RiskColor.RED),
        ],
    )
    def test_scenarios(self, density, level, color):
        result = classify_density(density)
        assert result.level == level
        assert result.color == color

    def test_boundaries(self):
        assert classify_density(6.99).level == RiskLevel.LOW
        assert classify_density(7).level == RiskLevel.MEDIUM
        assert classify_density(10).level == RiskLevel.MEDIUM
        assert classify_density(10.01).level == RiskLevel.HIGH

    def test_negative_is_low(self):
        assert classify_density(-3).level == RiskLevel.LOW

    def test_every_value_gets_one_band(self):
        for tenth in range(0, 300):
            assert classify_density(tenth / 10).level in set(RiskLevel)

    def test_display_fields(self):
        result = classify_density(8.5)
        assert result.meaning == "Moderate Quality"
        assert result.range == "7 to 10"
        assert classify_density(12).range == "Above 10.0"

    def test_custom_thresholds(self):
        class StrictDensity(DensityClassifier):
            MEDIUM_THRESHOLD = 2.0
            HIGH_THRESHOLD = 5.0

        assert StrictDensity().classify(3).level == RiskLevel.MEDIUM


class TestSeverityIndex:
    def test_bands(self):
        assert classify_dsi(24.9).level == RiskLevel.LOW
        assert classify_dsi(25).level == RiskLevel.MEDIUM
        assert classify_dsi(74.9).level == RiskLevel.MEDIUM
        assert classify_dsi(75).level == RiskLevel.HIGH
        assert classify_dsi(100).level == RiskLevel.HIGH

    @pytest.mark.parametrize(
        "dsi, level, text",
        [
            (15.5, RiskLevel.LOW, "Low risk"),
            (57.5, RiskLevel.MEDIUM, "Significant risk"),
            (85.7, RiskLevel.HIGH, "High risk"),
        ],
    )
    def test_scenarios(self, dsi, level, text):
        assert classify_dsi(dsi).level == level
        assert dsi_interpretation(dsi) == text

    def test_interpretation_is_finer_than_colour(self):
        assert dsi_interpretation(25) == "Moderate risk"
        assert dsi_interpretation(49.9) == "Moderate risk"
        assert dsi_interpretation(50) == "Significant risk"
        assert classify_dsi(30).level == classify_dsi(60).level == RiskLevel.MEDIUM

    def test_efficiency(self):
        assert dsi_efficiency(46, 80) == 43  # 42.5 rounds half up
        assert dsi_efficiency(0, 80) == 100
        assert dsi_efficiency(80, 80) == 0

    def test_efficiency_zero_maximum(self):
        assert dsi_efficiency(10, 0) == 0
        assert dsi_efficiency(0, 0) == 0
        assert dsi_efficiency(5, -4) == 0

    def test_efficiency_complements_dsi(self):
        actual, maximum = 37, 120
        dsi = actual / maximum * 100
        assert abs(dsi_efficiency(actual, maximum) + dsi - 100) <= 0.5

    def test_compute_dsi(self):
        # 2 critical + 1 low = 9 of a possible 12
        assert compute_dsi({"Critical": 2, "Low": 1}) == pytest.approx(75.0)
        assert compute_dsi({}) == 0.0
        assert compute_dsi({"unknown": 5}) == 0.0

    def test_format_for_display(self):
        data = DefectSeverityIndexData(
            total_defects=20,
            actual_severity_score=46,
            maximum_severity_score=80,
            dsi_percentage=57.5,
        )
        display = format_dsi_for_display(data)

        assert display["percentage"] == "57.5%"
        assert display["efficiency"] == "43%"
        assert display["risk_level"].level == RiskLevel.MEDIUM
        assert display["summary"] == "20 defects with 46/80 severity score"


class TestRemarkRatio:
    def test_scenario(self):
        result = classify_ratio("95.50%")
        assert result.level == RiskLevel.MEDIUM
        assert result.description == "Good ratio"

    def test_bands(self):
        assert classify_ratio("98.01%").level == RiskLevel.LOW
        assert classify_ratio("98.00%").level == RiskLevel.MEDIUM
        assert classify_ratio("90.00%").level == RiskLevel.MEDIUM
        assert classify_ratio("89.99%").level == RiskLevel.HIGH

    def test_numbers_and_overflow(self):
        assert classify_ratio(100.0).level == RiskLevel.LOW
        assert classify_ratio("101%").level == RiskLevel.LOW
        assert classify_ratio(42).level == RiskLevel.HIGH

    def test_unparsable_is_high(self):
        assert parse_ratio("n/a") == 0.0
        assert parse_ratio("nan%") == 0.0
        assert classify_ratio("n/a").level == RiskLevel.HIGH

    def test_to_decimal(self):
        assert ratio_to_decimal("100.00%") == 1.0
        assert ratio_to_decimal("0.00%") == 0.0
        assert ratio_to_decimal("95.50%") == pytest.approx(0.955)

    def test_to_decimal_is_clamped(self):
        assert ratio_to_decimal("150%") == 1.0
        assert ratio_to_decimal("-5%") == 0.0
        assert ratio_to_decimal("garbage") == 0.0


class TestRiskColor:
    def test_hex_codes(self):
        assert RiskColor.GREEN.hex == "#10b981"
        assert RiskColor.RED.hex == "#ef4444"
        assert classify_ratio("50%").hex == "#ef4444"


class TestMeasurement:
    def test_dispatch_by_kind(self):
        assert classify_measurement(
            Measurement(kind=MetricKind.DENSITY, value=15.2)
        ).level == RiskLevel.HIGH
        assert classify_measurement(
            Measurement(kind=MetricKind.DSI, value=15.5)
        ).level == RiskLevel.LOW
        assert classify_measurement(
            Measurement(kind=MetricKind.RATIO, value=95.5)
        ).level == RiskLevel.MEDIUM

    def test_days_until_deadline(self):
        assert classify_days_until_deadline(-2).level == RiskLevel.HIGH
        assert classify_days_until_deadline(7).level == RiskLevel.HIGH
        assert classify_days_until_deadline(8).level == RiskLevel.MEDIUM
        assert classify_days_until_deadline(30).level == RiskLevel.MEDIUM
        assert classify_days_until_deadline(31).level == RiskLevel.LOW


class TestModuleDistribution:
    def test_sample_modules(self):
        shares = module_distribution(SAMPLE_MODULE_DEFECTS)

        assert [s.name for s in shares[:3]] == ["Configurations", "Defects", "Employee"]
        assert shares[0].count == 77
        assert shares[0].percentage == 16.7
        assert shares[-1].name == "Main Template"
        assert shares[-1].percentage == 0.9

    def test_ties_keep_input_order(self):
        shares = module_distribution({"Bench": 58, "Releases": 10, "Test Cases": 58})
        assert [s.name for s in shares] == ["Bench", "Test Cases", "Releases"]

    def test_half_rounds_up(self):
        shares = module_distribution({"a": 1, "b": 15})
        assert shares[1].percentage == 6.3  # 6.25

    def test_zero_total(self):
        shares = module_distribution({"a": 0, "b": 0})
        assert [s.percentage for s in shares] == [0.0, 0.0]
        assert module_distribution({}) == []


class TestStatusBreakdown:
    @pytest.mark.parametrize(
        "severity, total, reopened, share",
        [
            (ProjectSeverity.HIGH, 112, 3, 2.7),
            (ProjectSeverity.MEDIUM, 237, 5, 2.1),
            (ProjectSeverity.LOW, 96, 1, 1.0),
        ],
    )
    def test_sample_groups(self, severity, total, reopened, share):
        summary = summarize_status_breakdown(severity, SAMPLE_STATUS_COUNTS[severity])
        assert summary.total == total
        assert summary.reopen_count == reopened
        assert summary.reopen_percentage == share

    def test_names_are_case_insensitive_and_missing_are_zero(self):
        summary = summarize_status_breakdown(ProjectSeverity.LOW, {"new": 4, " Reopen ": 1})

        assert summary.total == 5
        assert summary.counts[DefectStatus.NEW] == 4
        assert summary.counts[DefectStatus.CLOSED] == 0
        assert summary.reopen_percentage == 20.0

    def test_empty(self):
        summary = summarize_status_breakdown(ProjectSeverity.HIGH, {})
        assert summary.total == 0
        assert summary.reopen_percentage == 0.0

    def test_unknown_status(self):
        with pytest.raises(InvalidStatusError, match="BLOCKED"):
            summarize_status_breakdown(ProjectSeverity.HIGH, {"BLOCKED": 2})
