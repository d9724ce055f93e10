"""
Custom exceptions for DefectDash.

All exceptions inherit from DefectDashError for consistent error handling.
Classifiers never raise; these cover input validation and the remote API
boundary.
"""


class DefectDashError(Exception):
    """Base exception for all DefectDash errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# ─────────────────────────────────────────────────────────────
# Remote API Errors
# ─────────────────────────────────────────────────────────────

class APIError(DefectDashError):
    """Remote dashboard API error."""
    pass


class APIConnectionError(APIError):
    """Request was sent but no response was received."""

    def __init__(self, message: str = "Network error: Unable to connect to the server"):
        super().__init__(message)


class APIResponseError(APIError):
    """Remote API answered with an error status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class EnvelopeError(APIError):
    """Response envelope was malformed or reported failure."""
    pass


# ─────────────────────────────────────────────────────────────
# Validation Errors
# ─────────────────────────────────────────────────────────────

class ValidationError(DefectDashError):
    """Input validation failed."""
    pass


class InvalidProjectIdError(ValidationError):
    """Project ID is not a positive number."""

    def __init__(self, project_id: object):
        self.project_id = project_id
        super().__init__("Invalid project ID. Project ID must be a positive number.")


class InvalidKlocError(ValidationError):
    """KLOC is not a positive number."""

    def __init__(self, kloc: object):
        self.kloc = kloc
        super().__init__("Invalid KLOC value. KLOC must be a positive number.")


class InvalidStatusError(ValidationError):
    """Defect status name is not recognised."""

    def __init__(self, status: object):
        self.status = status
        super().__init__(f"Unknown defect status: {status!r}")


# ─────────────────────────────────────────────────────────────
# Lookup Errors
# ─────────────────────────────────────────────────────────────

class ProjectNotFoundError(DefectDashError):
    """Project not found."""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project '{project_id}' not found")
