"""
Project Dashboard Service - Assembles the metric widgets for a project.

Each widget is fetched independently and concurrently. A failing widget
reports its own error (and optionally a sample value) without affecting
the others.
"""
import asyncio

from defectdash.adapters.dashboard_api.client import DashboardAPIClient
from defectdash.core.errors import DefectDashError
from defectdash.core.logging import ContextLogger, get_logger
from defectdash.core.types import ProjectDashboard, WidgetResult
from defectdash.services.dashboard.samples import SampleMeasurements
from defectdash.services.metrics import (
    classify_density,
    classify_dsi,
    classify_ratio,
    dsi_efficiency,
    dsi_interpretation,
    ratio_to_decimal,
)

DENSITY_WIDGET = "defect_density"
DSI_WIDGET = "defect_severity_index"
RATIO_WIDGET = "defect_to_remark_ratio"


def density_widget(value: float, **details) -> WidgetResult:
    """Widget for a density value."""
    return WidgetResult(
        widget=DENSITY_WIDGET,
        outcome="success",
        value=value,
        classification=classify_density(value),
        details=details,
    )


def dsi_widget(value: float, actual: int, maximum: int, **details) -> WidgetResult:
    """Widget for a DSI percentage."""
    return WidgetResult(
        widget=DSI_WIDGET,
        outcome="success",
        value=value,
        classification=classify_dsi(value),
        details={
            "interpretation": dsi_interpretation(value),
            "efficiency": dsi_efficiency(actual, maximum),
            **details,
        },
    )


def ratio_widget(value: str, **details) -> WidgetResult:
    """Widget for a defect-to-remark ratio."""
    return WidgetResult(
        widget=RATIO_WIDGET,
        outcome="success",
        value=value,
        classification=classify_ratio(value),
        details={"progress": ratio_to_decimal(value), **details},
    )


class ProjectDashboardService:
    """Builds project dashboards from the remote API."""

    def __init__(
        self,
        client: DashboardAPIClient,
        fallback: SampleMeasurements | None = None,
    ):
        self.client = client
        self.fallback = fallback

    async def build(self, project_id: int, kloc: float) -> ProjectDashboard:
        """
        Fetch and classify every widget for a project.

        Args:
            project_id: Remote project ID
            kloc: Project size in thousand lines of code

        Returns:
            ProjectDashboard with one WidgetResult per widget
        """
        log = get_logger(__name__, project_id=project_id)
        log.info("Building dashboard")

        widgets = await asyncio.gather(
            self._density(project_id, kloc, log),
            self._dsi(project_id, log),
            self._ratio(project_id, log),
        )

        failed = [w.widget for w in widgets if w.outcome != "success"]
        if failed:
            log.warning(f"Dashboard built with failed widgets: {', '.join(failed)}")

        return ProjectDashboard(project_id=project_id, kloc=kloc, widgets=list(widgets))

    async def _density(self, project_id: int, kloc: float, log: ContextLogger) -> WidgetResult:
        try:
            data = await self.client.get_defect_density(project_id, kloc)
        except DefectDashError as e:
            log.warning(f"Defect density fetch failed: {e.message}")
            fallback = None
            if self.fallback:
                fallback = density_widget(self.fallback.defect_density)
            return self._failed(DENSITY_WIDGET, e, fallback)

        return density_widget(
            data.defect_density,
            defects=data.defects,
            kloc=data.kloc,
        )

    async def _dsi(self, project_id: int, log: ContextLogger) -> WidgetResult:
        try:
            data = await self.client.get_defect_severity_index(project_id)
        except DefectDashError as e:
            log.warning(f"DSI fetch failed: {e.message}")
            fallback = None
            if self.fallback:
                fallback = dsi_widget(
                    self.fallback.dsi_percentage,
                    self.fallback.actual_severity_score,
                    self.fallback.maximum_severity_score,
                )
            return self._failed(DSI_WIDGET, e, fallback)

        return dsi_widget(
            data.dsi_percentage,
            data.actual_severity_score,
            data.maximum_severity_score,
            total_defects=data.total_defects,
        )

    async def _ratio(self, project_id: int, log: ContextLogger) -> WidgetResult:
        try:
            data = await self.client.get_defect_to_remark_ratio(project_id)
        except DefectDashError as e:
            log.warning(f"Defect to remark ratio fetch failed: {e.message}")
            fallback = None
            if self.fallback:
                fallback = ratio_widget(self.fallback.remark_ratio)
            return self._failed(RATIO_WIDGET, e, fallback)

        return ratio_widget(data.ratio, defects=data.defects, remarks=data.remarks)

    @staticmethod
    def _failed(
        widget: str,
        error: DefectDashError,
        fallback: WidgetResult | None,
    ) -> WidgetResult:
        if fallback is None:
            return WidgetResult(widget=widget, outcome="error", error=error.message)
        return fallback.model_copy(update={"outcome": "fallback", "error": error.message})
