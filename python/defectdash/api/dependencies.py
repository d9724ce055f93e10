"""
FastAPI dependencies.
"""
from defectdash.adapters.dashboard_api.client import DashboardAPIClient
from defectdash.core.config import settings
from defectdash.services.dashboard import DEFAULT_SAMPLES, ProjectDashboardService


def get_client() -> DashboardAPIClient:
    """Remote dashboard API client configured from settings."""
    return DashboardAPIClient()


def get_dashboard_service() -> ProjectDashboardService:
    """Dashboard service, with sample fallback when enabled."""
    fallback = DEFAULT_SAMPLES if settings.SAMPLE_FALLBACK_ENABLED else None
    return ProjectDashboardService(get_client(), fallback=fallback)
