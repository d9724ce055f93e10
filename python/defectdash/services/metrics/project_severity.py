"""
Project Severity - Derives a project's risk from its lifecycle dates.

Rules (active projects only; anything else is Low Risk):
- Overdue or ending within 7 days: High Risk
- Ending within 30 days, or more than 75% of the schedule elapsed: Medium Risk
- Otherwise: Low Risk
"""
import math
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

from defectdash.core.types import ApiProject, Project, ProjectSeverity

Clock = Callable[[], datetime]
DateLike = date | datetime | str

ACTIVE_STATUS = "ACTIVE"
_DAY = timedelta(days=1)


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(UTC)


def to_datetime(value: DateLike) -> datetime:
    """
    Normalize a date, datetime or ISO string to an aware UTC datetime.

    Plain dates and naive values are taken as UTC midnight / UTC time.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _ceil_days(delta: timedelta) -> int:
    return math.ceil(delta / _DAY)


class ProjectSeverityCalculator:
    """Computes project severity from status and schedule."""

    # Thresholds
    HIGH_RISK_DAYS = 7
    MEDIUM_RISK_DAYS = 30
    PROGRESS_THRESHOLD = 75.0  # percent of schedule elapsed

    def days_until_end(self, end_date: DateLike, now: datetime) -> int:
        """Whole days until the end date, rounded up. Negative when overdue."""
        return _ceil_days(to_datetime(end_date) - to_datetime(now))

    def progress(self, start_date: DateLike, end_date: DateLike, now: datetime) -> float:
        """Percentage of the schedule that has elapsed (0 for empty schedules)."""
        start = to_datetime(start_date)
        total_duration = _ceil_days(to_datetime(end_date) - start)
        if total_duration <= 0:
            return 0.0
        days_elapsed = _ceil_days(to_datetime(now) - start)
        return days_elapsed / total_duration * 100

    def derive(
        self,
        status: str,
        start_date: DateLike,
        end_date: DateLike,
        now: datetime,
    ) -> ProjectSeverity:
        """
        Derive the severity of a project.

        Args:
            status: Project status; only "ACTIVE" projects can be at risk
            start_date: Project start
            end_date: Project end (deadline)
            now: Evaluation time

        Returns:
            ProjectSeverity
        """
        if status != ACTIVE_STATUS:
            return ProjectSeverity.LOW

        days_left = self.days_until_end(end_date, now)
        progress = self.progress(start_date, end_date, now)

        if days_left < 0:
            # Overdue
            return ProjectSeverity.HIGH
        elif days_left <= self.HIGH_RISK_DAYS:
            return ProjectSeverity.HIGH
        elif days_left <= self.MEDIUM_RISK_DAYS or progress > self.PROGRESS_THRESHOLD:
            return ProjectSeverity.MEDIUM
        else:
            return ProjectSeverity.LOW


_calculator = ProjectSeverityCalculator()


def derive_project_severity(
    status: str,
    start_date: DateLike,
    end_date: DateLike,
    now: datetime,
) -> ProjectSeverity:
    """Derive project severity with the default thresholds."""
    return _calculator.derive(status, start_date, end_date, now)


def to_project(api_project: ApiProject, now: datetime) -> Project:
    """Convert a remote project record to a dashboard project."""
    return Project(
        id=str(api_project.id),
        name=api_project.project_name,
        severity=derive_project_severity(
            api_project.project_status,
            api_project.start_date,
            api_project.end_date,
            now,
        ),
        description=api_project.description,
        project_status=api_project.project_status,
        start_date=api_project.start_date,
        end_date=api_project.end_date,
        client_name=api_project.client_name,
        country=api_project.country,
        state=api_project.state,
        email=api_project.email,
        phone_no=api_project.phone_no,
        user_id=api_project.user_id,
        user_first_name=api_project.user_first_name,
        user_last_name=api_project.user_last_name,
        kloc=api_project.kloc,
    )
