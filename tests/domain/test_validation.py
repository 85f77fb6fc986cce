"""Tests for domain validation warnings."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from busledger.domain.models import (
    Employee,
    RecordStatus,
    Route,
    RouteType,
    VehicleInstallment,
    VehicleInsurance,
    WorkerType,
)
from busledger.domain.services.validation import (
    validate_employees,
    validate_routes,
    validate_terms,
)


def test_validate_employees_warns_on_local_levy() -> None:
    logger = MagicMock()
    employees = [
        Employee(
            id=1,
            employee_code="E001",
            name="Lim",
            worker_type=WorkerType.LOCAL,
            salary=Decimal("3000"),
            status=RecordStatus.ACTIVE,
            foreign_worker_levy=Decimal("450"),
        ),
        Employee(
            id=2,
            employee_code="E002",
            name="Kumar",
            worker_type=WorkerType.FOREIGN,
            salary=Decimal("2200"),
            status=RecordStatus.ACTIVE,
            foreign_worker_levy=Decimal("450"),
        ),
    ]

    validate_employees(employees, logger)

    logger.warning.assert_called_once()
    assert "E001" in logger.warning.call_args.args[0]


def test_validate_routes_warns_on_owned_route_with_cost() -> None:
    logger = MagicMock()
    routes = [
        Route(
            id=1,
            name="Tampines loop",
            monthly_rate=Decimal("5000"),
            route_type=RouteType.OWNED,
            status=RecordStatus.ACTIVE,
            subcontractor_cost=Decimal("1000"),
        ),
    ]

    validate_routes(routes, logger)

    assert "Tampines loop" in logger.warning.call_args.args[0]


def test_validate_terms_warns_on_inverted_terms() -> None:
    logger = MagicMock()
    records = [
        VehicleInstallment(
            id=1,
            vehicle_id=1,
            monthly_amount=Decimal("1000"),
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
        ),
        VehicleInsurance(
            id=7,
            vehicle_id=1,
            provider="AIG",
            premium=Decimal("1200"),
            start_date=date(2024, 6, 1),
            end_date=date(2024, 1, 1),
        ),
    ]

    validate_terms(records, logger)

    logger.warning.assert_called_once()
    assert "VehicleInsurance id=7" in logger.warning.call_args.args[0]
