from defectdash.services.metrics.breakdown import module_distribution, summarize_status_breakdown
from defectdash.services.metrics.density import DensityClassifier, classify_density
from defectdash.services.metrics.measurement import (
    classify_days_until_deadline,
    classify_measurement,
)
from defectdash.services.metrics.project_severity import (
    ProjectSeverityCalculator,
    derive_project_severity,
    to_project,
    utc_now,
)
from defectdash.services.metrics.remark_ratio import (
    RemarkRatioClassifier,
    classify_ratio,
    parse_ratio,
    ratio_to_decimal,
)
from defectdash.services.metrics.severity_index import (
    SeverityIndexClassifier,
    classify_dsi,
    compute_dsi,
    dsi_efficiency,
    dsi_interpretation,
    format_dsi_for_display,
)

__all__ = [
    "DensityClassifier",
    "ProjectSeverityCalculator",
    "RemarkRatioClassifier",
    "SeverityIndexClassifier",
    "classify_days_until_deadline",
    "classify_density",
    "classify_dsi",
    "classify_measurement",
    "classify_ratio",
    "compute_dsi",
    "derive_project_severity",
    "dsi_efficiency",
    "dsi_interpretation",
    "format_dsi_for_display",
    "module_distribution",
    "parse_ratio",
    "ratio_to_decimal",
    "summarize_status_breakdown",
    "to_project",
    "utc_now",
]
