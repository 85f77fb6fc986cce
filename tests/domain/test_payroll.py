"""Tests for employer payroll cost rules."""

from decimal import Decimal

import pytest

from busledger.domain.models import Employee, RecordStatus, WorkerType
from busledger.domain.services.payroll import (
    cpf_contribution,
    is_active_employee,
    monthly_employer_cost,
    total_monthly_payroll,
)


def _employee(
    worker_type: WorkerType = WorkerType.LOCAL,
    salary: str = "3000",
    levy: str | None = None,
    status: RecordStatus = RecordStatus.ACTIVE,
    bonus: str = "0",
) -> Employee:
    return Employee(
        id=1,
        employee_code="E001",
        name="Tan Ah Kow",
        worker_type=worker_type,
        salary=Decimal(salary),
        status=status,
        bonus=Decimal(bonus),
        foreign_worker_levy=Decimal(levy) if levy is not None else None,
    )


def test_cpf_contribution_is_seventeen_percent() -> None:
    assert cpf_contribution(Decimal("3000")) == Decimal("510.00")


def test_cpf_contribution_keeps_sub_cent_precision() -> None:
    assert cpf_contribution(Decimal("1234.55")) == Decimal("209.8735")
    assert cpf_contribution(Decimal("3333.33")) == Decimal("566.6661")


def test_local_cost_with_fractional_cpf_is_exact() -> None:
    employee = _employee(salary="3333.33")

    assert monthly_employer_cost(employee) == Decimal("3899.9961")


def test_local_worker_costs_salary_plus_cpf() -> None:
    assert monthly_employer_cost(_employee()) == Decimal("3510.00")


def test_local_worker_ignores_levy() -> None:
    employee = _employee(levy="450")

    assert monthly_employer_cost(employee) == Decimal("3510.00")


def test_foreign_worker_costs_salary_plus_levy() -> None:
    employee = _employee(WorkerType.FOREIGN, salary="2200", levy="450")

    assert monthly_employer_cost(employee) == Decimal("2650")


def test_foreign_worker_without_levy_costs_salary() -> None:
    employee = _employee(WorkerType.FOREIGN, salary="1800")

    assert monthly_employer_cost(employee) == Decimal("1800")


def test_bonus_is_not_a_monthly_cost() -> None:
    employee = _employee(bonus="5000")

    assert monthly_employer_cost(employee) == Decimal("3510.00")


def test_total_monthly_payroll_skips_inactive_employees() -> None:
    employees = [
        _employee(),
        _employee(WorkerType.FOREIGN, salary="2200", levy="450"),
        _employee(salary="9999", status=RecordStatus.INACTIVE),
    ]

    assert total_monthly_payroll(employees) == Decimal("6160.00")


def test_total_monthly_payroll_of_empty_roster_is_zero() -> None:
    assert total_monthly_payroll([]) == Decimal("0")


def test_is_active_employee() -> None:
    assert is_active_employee(_employee())
    assert not is_active_employee(_employee(status=RecordStatus.INACTIVE))


def test_unknown_worker_type_raises() -> None:
    employee = _employee(worker_type="contractor")

    with pytest.raises(ValueError):
        monthly_employer_cost(employee)
