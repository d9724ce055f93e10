"""
Remote dashboard API adapter.
"""
from defectdash.adapters.dashboard_api.client import DashboardAPIClient, fetch_with_state
from defectdash.adapters.dashboard_api.envelope import parse_envelope, unwrap_envelope

__all__ = [
    "DashboardAPIClient",
    "fetch_with_state",
    "parse_envelope",
    "unwrap_envelope",
]
