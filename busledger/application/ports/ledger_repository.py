"""Application port for ledger data access."""

from datetime import date
from typing import Protocol

from busledger.domain.models import (
    Customer,
    Employee,
    ExpenseCategory,
    ExpenseEntry,
    IncomeEntry,
    Route,
    Vehicle,
    VehicleInstallment,
    VehicleInsurance,
    VehicleParking,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to the ledger records.

    Implementations raise DataAccessError when a read fails and
    MalformedRecordError when a stored value cannot be parsed.
    """

    def fetch_customers(self) -> list[Customer]:
        """Return all customers ordered by name."""

    def fetch_routes(self) -> list[Route]:
        """Return all routes ordered by name."""

    def fetch_income_entries(self) -> list[IncomeEntry]:
        """Return all income entries, most recent billing period first."""

    def fetch_income_entries_between(
        self,
        start_period: str,
        end_period: str,
    ) -> list[IncomeEntry]:
        """Return income entries whose billing period lies in the range.

        Args:
            start_period: First billing period key (YYYY-MM), inclusive.
            end_period: Last billing period key (YYYY-MM), inclusive.
        """

    def fetch_expense_categories(self) -> list[ExpenseCategory]:
        """Return all expense categories ordered by name."""

    def fetch_expense_entries(self) -> list[ExpenseEntry]:
        """Return all expense entries, most recent expense date first."""

    def fetch_expense_entries_between(
        self,
        start_date: date,
        end_date: date,
    ) -> list[ExpenseEntry]:
        """Return expense entries dated within the inclusive range."""

    def fetch_vehicles(self) -> list[Vehicle]:
        """Return all vehicles ordered by registration number."""

    def fetch_vehicle_installments(self) -> list[VehicleInstallment]:
        """Return every vehicle installment."""

    def fetch_vehicle_insurance(self) -> list[VehicleInsurance]:
        """Return every vehicle insurance policy."""

    def fetch_vehicle_parking(self) -> list[VehicleParking]:
        """Return every vehicle parking lease."""

    def fetch_employees(self) -> list[Employee]:
        """Return all employees ordered by name."""


__all__ = ["LedgerRepositoryPort"]
