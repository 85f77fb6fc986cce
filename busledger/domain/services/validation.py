"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from busledger.domain.models import (
    Employee,
    Route,
    RouteType,
    VehicleInstallment,
    VehicleInsurance,
    WorkerType,
)


def validate_employees(employees: Iterable[Employee], logger: Logger) -> None:
    """Warn when employees violate the worker-class cost rules.

    Args:
        employees: Employees loaded from the repository.
        logger: Logger used for warnings.
    """
    for employee in employees:
        if (
            employee.worker_type is WorkerType.LOCAL
            and employee.foreign_worker_levy
        ):
            logger.warning(
                f"Local employee {employee.employee_code} carries a levy "
                f"of {employee.foreign_worker_levy}; it is ignored"
            )


def validate_routes(routes: Iterable[Route], logger: Logger) -> None:
    """Warn when owned routes carry a subcontractor cost."""
    for route in routes:
        if (
            route.route_type is RouteType.OWNED
            and route.subcontractor_cost is not None
        ):
            logger.warning(
                f"Owned route {route.name} carries a subcontractor cost "
                f"of {route.subcontractor_cost}; it is ignored"
            )


def validate_terms(
    records: Iterable[VehicleInstallment | VehicleInsurance],
    logger: Logger,
) -> None:
    """Warn when a fixed-term record ends before it starts."""
    for record in records:
        if record.end_date < record.start_date:
            logger.warning(
                f"{type(record).__name__} id={record.id} ends on "
                f"{record.end_date} before its start {record.start_date}"
            )


__all__ = ["validate_employees", "validate_routes", "validate_terms"]
