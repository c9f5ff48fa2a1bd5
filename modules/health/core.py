"""Service health check.

The service has no external dependencies (files, network, other
services), so the check always reports ``UP``.
"""

from __future__ import annotations

import logging

from domain.models import HealthReport, HealthStatus

logger = logging.getLogger("bubblesort.health")


def health_check(version: str) -> HealthReport:
    """Report the service as operational.

    Args:
        version: Version string to include in the report.

    Returns:
        A HealthReport with status ``UP``.
    """
    report = HealthReport(status=HealthStatus.UP, version=version)
    logger.debug("Health check: %s", report.to_dict())
    return report
