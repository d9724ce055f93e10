"""
Unit tests for the remote dashboard API client and envelope parsing.
"""
import pytest

from defectdash.adapters.dashboard_api import DashboardAPIClient, parse_envelope, unwrap_envelope
from defectdash.core.errors import (
    APIConnectionError,
    APIResponseError,
    EnvelopeError,
    InvalidKlocError,
    InvalidProjectIdError,
)
from defectdash.core.types import (
    DefectDensityData,
    FailureEnvelope,
    ProjectSeverity,
    SuccessEnvelope,
)


class TestEnvelope:
    def test_success(self):
        envelope = parse_envelope(
            {"status": "success", "message": "ok", "data": {"kloc": 1, "defectDensity": 5.2}},
            DefectDensityData,
        )
        assert isinstance(envelope, SuccessEnvelope)
        assert envelope.data.defect_density == 5.2

    def test_status_is_case_insensitive(self):
        data = unwrap_envelope(
            {"status": "Success", "data": {"kloc": 2, "defectDensity": 9}},
            DefectDensityData,
            "failed",
        )
        assert data.kloc == 2

    def test_failure(self):
        envelope = parse_envelope(
            {"status": "failure", "message": "Project Not Found", "data": None},
            DefectDensityData,
        )
        assert isinstance(envelope, FailureEnvelope)

        with pytest.raises(EnvelopeError, match="Project Not Found"):
            unwrap_envelope(
                {"status": "failure", "message": "Project Not Found", "data": None},
                DefectDensityData,
                "default",
            )

    def test_null_message_is_accepted(self):
        data = unwrap_envelope(
            {"status": "success", "message": None, "data": {"kloc": 1, "defectDensity": 5.2}},
            DefectDensityData,
            "failed",
        )
        assert data.defect_density == 5.2

        with pytest.raises(EnvelopeError, match="^No density for project$"):
            unwrap_envelope(
                {"status": "failure", "message": None, "data": None},
                DefectDensityData,
                "No density for project",
            )

    def test_success_without_data_is_failure(self):
        with pytest.raises(EnvelopeError, match="default message"):
            unwrap_envelope({"status": "success", "data": None}, DefectDensityData, "default message")

    @pytest.mark.parametrize(
        "payload",
        [
            ["not", "an", "object"],
            {"message": "missing status", "data": {}},
            {"status": "pending", "data": {}},
            {"status": "success", "data": {"kloc": "many"}},
        ],
    )
    def test_malformed(self, payload):
        with pytest.raises(EnvelopeError):
            parse_envelope(payload, DefectDensityData)


class TestDashboardAPIClient:
    @pytest.mark.asyncio
    async def test_get_projects_derives_severity(self, api_client, mock_api):
        projects = await api_client.get_projects()

        assert [p.name for p in projects] == ["Payments", "Reporting"]
        assert projects[0].severity == ProjectSeverity.MEDIUM
        assert projects[1].severity == ProjectSeverity.LOW
        assert mock_api.requests[0].headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_get_project_by_id(self, api_client):
        project = await api_client.get_project_by_id("2")
        assert project is not None
        assert project.name == "Reporting"

        assert await api_client.get_project_by_id("99") is None

    @pytest.mark.asyncio
    async def test_get_defect_density(self, api_client, mock_api):
        data = await api_client.get_defect_density(1, 10.0)

        assert data.defect_density == 8.5
        assert data.project_name == "Payments"
        request = mock_api.requests[-1]
        assert request.url.path == "/api/dashboard/defect-density/1"
        assert request.url.params["kloc"] == "10.0"

    @pytest.mark.asyncio
    async def test_get_defect_severity_index(self, api_client):
        data = await api_client.get_defect_severity_index(1)
        assert data.dsi_percentage == 57.5
        assert data.maximum_severity_score == 80

    @pytest.mark.asyncio
    async def test_get_defect_to_remark_ratio(self, api_client, mock_api):
        data = await api_client.get_defect_to_remark_ratio(1)

        assert data.ratio == "95.50%"
        assert mock_api.requests[-1].url.params["projectId"] == "1"

    @pytest.mark.asyncio
    async def test_invalid_parameters_skip_request(self, api_client, mock_api):
        with pytest.raises(InvalidProjectIdError):
            await api_client.get_defect_density(0, 10)
        with pytest.raises(InvalidKlocError):
            await api_client.get_defect_density(1, 0)
        with pytest.raises(InvalidProjectIdError):
            await api_client.get_defect_severity_index(-1)

        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_bad_request_uses_endpoint_message(self, api_client, mock_api):
        mock_api.fail("/dashboard/dsi/1", 400, {"status": "failure", "message": "boom"})

        with pytest.raises(APIResponseError) as exc:
            await api_client.get_defect_severity_index(1)

        assert exc.value.status_code == 400
        assert exc.value.message == "No defects found for the given project ID"

    @pytest.mark.asyncio
    async def test_bad_request_without_fixed_message_uses_server_message(self, api_client, mock_api):
        mock_api.fail("/dashboard/project-card-color/5", 400, {"message": "Project Not Found"})

        with pytest.raises(APIResponseError, match="Project Not Found"):
            await api_client.get_project_card_color("5")

    @pytest.mark.asyncio
    async def test_server_error(self, api_client, mock_api):
        mock_api.fail("/dashboard/defect-density/1", 500, {"message": "Database down"})

        with pytest.raises(APIResponseError) as exc:
            await api_client.get_defect_density(1, 2.0)

        assert exc.value.status_code == 500
        assert str(exc.value) == "API Error (500): Database down"

    @pytest.mark.asyncio
    async def test_server_error_without_body(self, api_client, mock_api):
        mock_api.fail("/projects", 503)

        with pytest.raises(APIResponseError, match="Server error occurred"):
            await api_client.get_projects()

    @pytest.mark.asyncio
    async def test_network_error(self, api_client, mock_api):
        mock_api.disconnect("/projects")

        with pytest.raises(APIConnectionError, match="Network error"):
            await api_client.get_projects()

    @pytest.mark.asyncio
    async def test_failure_envelope_with_ok_status(self, api_client, mock_api):
        mock_api.fail("/dashboard/defect-remark-ratio", 200, {"status": "failure", "message": ""})

        with pytest.raises(EnvelopeError, match="Failed to fetch defect to remark ratio data"):
            await api_client.get_defect_to_remark_ratio(1)

    @pytest.mark.asyncio
    async def test_card_colors(self, api_client):
        cards = await api_client.get_multiple_project_card_colors(["1", "2"])
        assert len(cards) == 2
        assert cards[0].reopen_count == 3

        single = await api_client.get_single_project_card_color("1")
        assert single is not None
        assert single.color_code == "#facc15"

    @pytest.mark.asyncio
    async def test_with_state(self, api_client, mock_api):
        state = await api_client.get_defect_density_with_state(1, 10.0)
        assert state.data is not None
        assert state.error is None
        assert state.is_loading is False

        mock_api.disconnect("/dashboard/dsi/1")
        state = await api_client.get_defect_severity_index_with_state(1)
        assert state.data is None
        assert state.error == "Network error: Unable to connect to the server"

        state = await api_client.get_defect_to_remark_ratio_with_state(0)
        assert state.error.startswith("Invalid project ID")

    def test_defaults_from_settings(self):
        client = DashboardAPIClient(token="")
        assert client.base_url == "http://dashboard.test/api"
        assert "Authorization" not in client._headers()

    def test_explicit_zero_timeout_is_kept(self):
        assert DashboardAPIClient(timeout=0).timeout == 0
        assert DashboardAPIClient().timeout == 30.0
