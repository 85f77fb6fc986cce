"""Employer payroll cost rules."""

from collections.abc import Iterable
from decimal import Decimal

from busledger.domain.constants import CPF_RATE
from busledger.domain.models import Employee, RecordStatus, WorkerType
from busledger.utils.decimal_utils import (
    money_or_zero,
    sum_money,
)


def cpf_contribution(salary: Decimal) -> Decimal:
    """Return the flat employer CPF contribution for a salary.

    Args:
        salary: Monthly salary.

    Returns:
        Decimal: Exact 17% of the salary; rounding happens on output.
    """
    return salary * CPF_RATE


def monthly_employer_cost(employee: Employee) -> Decimal:
    """Return the monthly cost of an employee to the company.

    Local workers cost salary plus CPF; foreign workers cost salary plus
    their levy, which defaults to zero when unset.

    Args:
        employee: Employee record.

    Returns:
        Decimal: Monthly employer cost.

    Raises:
        ValueError: If the worker type has no cost rule.
    """
    if employee.worker_type is WorkerType.LOCAL:
        return employee.salary + cpf_contribution(employee.salary)
    if employee.worker_type is WorkerType.FOREIGN:
        return employee.salary + money_or_zero(employee.foreign_worker_levy)
    raise ValueError(f"Unsupported worker type: {employee.worker_type!r}")


def is_active_employee(employee: Employee) -> bool:
    """Return True when the employee counts towards payroll."""
    if employee.status is RecordStatus.ACTIVE:
        return True
    if employee.status is RecordStatus.INACTIVE:
        return False
    raise ValueError(f"Unsupported employee status: {employee.status!r}")


def total_monthly_payroll(employees: Iterable[Employee]) -> Decimal:
    """Sum the monthly employer cost over active employees."""
    return sum_money(
        monthly_employer_cost(employee)
        for employee in employees
        if is_active_employee(employee)
    )


__all__ = [
    "cpf_contribution",
    "monthly_employer_cost",
    "is_active_employee",
    "total_monthly_payroll",
]
