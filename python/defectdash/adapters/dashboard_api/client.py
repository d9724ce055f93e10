"""
Remote dashboard API client.

Thin async wrappers around the dashboard endpoints. Each call is independent;
no retries are attempted.
"""
import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

import httpx

from defectdash.adapters.dashboard_api.envelope import unwrap_envelope
from defectdash.core.config import settings
from defectdash.core.errors import (
    APIConnectionError,
    APIResponseError,
    DefectDashError,
    EnvelopeError,
    InvalidKlocError,
    InvalidProjectIdError,
)
from defectdash.core.types import (
    ApiProject,
    DefectDensityData,
    DefectSeverityIndexData,
    DefectToRemarkRatioData,
    FetchState,
    Project,
    ProjectCardColor,
)
from defectdash.services.metrics.project_severity import Clock, to_project, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _validate_project_id(project_id: int) -> None:
    if not project_id or project_id <= 0:
        raise InvalidProjectIdError(project_id)


def _validate_kloc(kloc: float) -> None:
    if not kloc or kloc <= 0:
        raise InvalidKlocError(kloc)


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


class DashboardAPIClient:
    """Client for the remote defect dashboard API."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Clock = utc_now,
    ):
        self.base_url = (base_url or settings.DASHBOARD_API_BASE_URL).rstrip("/")
        self.token = token if token is not None else settings.DASHBOARD_API_TOKEN
        self.timeout = timeout if timeout is not None else settings.DASHBOARD_API_TIMEOUT
        self.clock = clock
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get(
        self,
        path: str,
        data_type: Any,
        *,
        params: dict[str, Any] | None = None,
        default_message: str,
        bad_request_message: str | None = None,
    ) -> Any:
        """
        GET an endpoint and unwrap its envelope.

        Args:
            path: Endpoint path relative to the base URL
            data_type: Expected type of the envelope data
            params: Query parameters
            default_message: Message for failure envelopes without one
            bad_request_message: Fixed message for HTTP 400; the server's
                message is used when not given

        Raises:
            APIConnectionError: No response received
            APIResponseError: Non-2xx status
            EnvelopeError: Malformed envelope or failure status
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers(),
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            server_message = _error_message(e.response)
            logger.warning(f"Dashboard API {path} returned {status_code}: {server_message}")
            if status_code == 400:
                message = bad_request_message or server_message or "Bad request"
                raise APIResponseError(message, status_code) from e
            raise APIResponseError(
                f"API Error ({status_code}): {server_message or 'Server error occurred'}",
                status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Dashboard API unreachable at {url}: {e}")
            raise APIConnectionError() from e

        try:
            payload = response.json()
        except ValueError as e:
            raise EnvelopeError("Malformed response envelope: body is not JSON") from e

        return unwrap_envelope(payload, data_type, default_message)

    # ─────────────────────────────────────────────────────────────
    # Projects
    # ─────────────────────────────────────────────────────────────

    async def get_projects(self) -> list[Project]:
        """Fetch all projects with their derived severity."""
        api_projects: list[ApiProject] = await self._get(
            "/projects",
            list[ApiProject],
            default_message="Failed to fetch projects",
        )
        now = self.clock()
        projects = [to_project(p, now) for p in api_projects]
        logger.info(f"Fetched {len(projects)} projects")
        return projects

    async def get_project_by_id(self, project_id: str) -> Project | None:
        """Find a single project; None when the list does not contain it."""
        projects = await self.get_projects()
        return next((p for p in projects if p.id == str(project_id)), None)

    # ─────────────────────────────────────────────────────────────
    # Metrics
    # ─────────────────────────────────────────────────────────────

    async def get_defect_density(self, project_id: int, kloc: float) -> DefectDensityData:
        """Fetch defect density for a project of the given size in KLOC."""
        _validate_project_id(project_id)
        _validate_kloc(kloc)

        return await self._get(
            f"/dashboard/defect-density/{project_id}",
            DefectDensityData,
            params={"kloc": kloc},
            default_message="Failed to fetch defect density data",
            bad_request_message="Invalid project ID or parameters",
        )

    async def get_defect_severity_index(self, project_id: int) -> DefectSeverityIndexData:
        """Fetch the defect severity index for a project."""
        _validate_project_id(project_id)

        return await self._get(
            f"/dashboard/dsi/{project_id}",
            DefectSeverityIndexData,
            default_message="Failed to fetch defect severity index data",
            bad_request_message="No defects found for the given project ID",
        )

    async def get_defect_to_remark_ratio(self, project_id: int) -> DefectToRemarkRatioData:
        """Fetch the defect-to-remark ratio for a project."""
        _validate_project_id(project_id)

        return await self._get(
            "/dashboard/defect-remark-ratio",
            DefectToRemarkRatioData,
            params={"projectId": project_id},
            default_message="Failed to fetch defect to remark ratio data",
            bad_request_message=(
                "Project not found or no defect data available for the given projectId"
            ),
        )

    # ─────────────────────────────────────────────────────────────
    # Project cards
    # ─────────────────────────────────────────────────────────────

    async def get_project_card_color(self, project_id: str) -> list[ProjectCardColor]:
        """Fetch card colour data for a project."""
        cards: list[ProjectCardColor] = await self._get(
            f"/dashboard/project-card-color/{project_id}",
            list[ProjectCardColor],
            default_message="Failed to fetch project card color data",
        )
        logger.debug(f"Fetched {len(cards)} card color entries for project {project_id}")
        return cards

    async def get_multiple_project_card_colors(
        self, project_ids: list[str]
    ) -> list[ProjectCardColor]:
        """Fetch card colours for several projects concurrently; any failure fails all."""
        results = await asyncio.gather(
            *(self.get_project_card_color(pid) for pid in project_ids)
        )
        return [card for cards in results for card in cards]

    async def get_single_project_card_color(self, project_id: str) -> ProjectCardColor | None:
        """First card colour entry for a project, if any."""
        cards = await self.get_project_card_color(project_id)
        return cards[0] if cards else None

    # ─────────────────────────────────────────────────────────────
    # Fail-soft variants
    # ─────────────────────────────────────────────────────────────

    async def get_defect_density_with_state(
        self, project_id: int, kloc: float
    ) -> FetchState[DefectDensityData]:
        return await fetch_with_state(self.get_defect_density(project_id, kloc))

    async def get_defect_severity_index_with_state(
        self, project_id: int
    ) -> FetchState[DefectSeverityIndexData]:
        return await fetch_with_state(self.get_defect_severity_index(project_id))

    async def get_defect_to_remark_ratio_with_state(
        self, project_id: int
    ) -> FetchState[DefectToRemarkRatioData]:
        return await fetch_with_state(self.get_defect_to_remark_ratio(project_id))


async def fetch_with_state(call: Awaitable[T]) -> FetchState[T]:
    """
    Await a fetch and capture its outcome instead of raising.

    Only DefectDashError is captured; anything else is a bug and propagates.
    """
    try:
        data = await call
    except DefectDashError as e:
        return FetchState(data=None, error=e.message, is_loading=False)
    return FetchState(data=data, error=None, is_loading=False)
