"""
Project routes backed by the remote dashboard API.
"""
from fastapi import APIRouter, Depends, Query

from defectdash.adapters.dashboard_api.client import DashboardAPIClient
from defectdash.api.dependencies import get_client, get_dashboard_service
from defectdash.core.config import settings
from defectdash.core.errors import ProjectNotFoundError
from defectdash.core.types import Project, ProjectCardColor, ProjectDashboard
from defectdash.services.dashboard import ProjectDashboardService

router = APIRouter(prefix="/projects")


@router.get("", response_model=list[Project])
async def list_projects(client: DashboardAPIClient = Depends(get_client)):
    """All projects with derived severity."""
    return await client.get_projects()


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: str, client: DashboardAPIClient = Depends(get_client)):
    """A single project."""
    project = await client.get_project_by_id(project_id)
    if not project:
        raise ProjectNotFoundError(project_id)
    return project


@router.get("/{project_id}/card-colors", response_model=list[ProjectCardColor])
async def card_colors(project_id: str, client: DashboardAPIClient = Depends(get_client)):
    """Card colour data for a project."""
    return await client.get_project_card_color(project_id)


@router.get("/{project_id}/dashboard", response_model=ProjectDashboard)
async def project_dashboard(
    project_id: int,
    kloc: float | None = Query(None, gt=0, description="Project size in KLOC"),
    service: ProjectDashboardService = Depends(get_dashboard_service),
):
    """
    Every metric widget for a project.

    Widgets fail independently; the response is 200 even when some fail.
    """
    return await service.build(project_id, kloc or settings.DEFAULT_KLOC)
