"""
Defect distribution summaries.

- Module distribution: each module's share of all defects, largest first.
- Status breakdown: defects of one severity group counted by lifecycle
  status, with the reopen count pulled out.

Percentages carry one decimal, rounded half up. An empty total gives 0.0.
"""
import math
from collections.abc import Mapping

from defectdash.core.errors import InvalidStatusError
from defectdash.core.types import (
    DefectStatus,
    ModuleShare,
    ProjectSeverity,
    StatusBreakdown,
)


def _share(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return math.floor(count * 1000 / total + 0.5) / 10


def module_distribution(counts: Mapping[str, int]) -> list[ModuleShare]:
    """
    Share of the defect total per module, sorted by count descending.

    Modules with equal counts keep their input order.
    """
    total = sum(counts.values())
    shares = [
        ModuleShare(name=name, count=count, percentage=_share(count, total))
        for name, count in counts.items()
    ]
    return sorted(shares, key=lambda share: share.count, reverse=True)


def _status(name: DefectStatus | str) -> DefectStatus:
    if isinstance(name, DefectStatus):
        return name
    try:
        return DefectStatus(name.strip().upper())
    except ValueError as e:
        raise InvalidStatusError(name) from e


def summarize_status_breakdown(
    severity: ProjectSeverity,
    counts: Mapping[DefectStatus | str, int],
) -> StatusBreakdown:
    """
    Count defects of one severity group by status.

    Status names are matched case-insensitively; missing statuses count as
    zero. The total is the sum over all statuses.

    Raises:
        InvalidStatusError: unknown status name
    """
    by_status = dict.fromkeys(DefectStatus, 0)
    for status, count in counts.items():
        by_status[_status(status)] += count

    total = sum(by_status.values())
    reopened = by_status[DefectStatus.REOPEN]

    return StatusBreakdown(
        severity=severity,
        total=total,
        counts=by_status,
        reopen_count=reopened,
        reopen_percentage=_share(reopened, total),
    )
