"""SQLAlchemy-backed repository for ledger records."""

from datetime import date

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from busledger.application.ports.database import DatabaseEnginePort
from busledger.application.ports.ledger_repository import LedgerRepositoryPort
from busledger.domain.errors import DataAccessError, MalformedRecordError
from busledger.domain.models import (
    Customer,
    Employee,
    ExpenseCategory,
    ExpenseEntry,
    IncomeEntry,
    IncomeType,
    PaymentStatus,
    RecordStatus,
    RecurringFrequency,
    Route,
    RouteType,
    Vehicle,
    VehicleInstallment,
    VehicleInsurance,
    VehicleParking,
    VehicleStatus,
    WorkerType,
)
from busledger.domain.services.normalization import (
    normalize_text,
    parse_billing_period,
    parse_date,
    parse_enum,
    parse_money,
    parse_optional_date,
    parse_optional_enum,
    parse_optional_money,
)
from busledger.utils.decimal_utils import money_or_zero

SELECT_CUSTOMERS_SQL = """
SELECT id, name, contact_person, email, phone, address, status
FROM customers
ORDER BY name
"""

SELECT_ROUTES_SQL = """
SELECT id, name, customer_id, monthly_rate, route_type, subcontractor_name,
       subcontractor_cost, vehicle_id, status, description
FROM routes
ORDER BY name
"""

SELECT_INCOME_SQL = """
SELECT id, customer_id, route_id, amount, billing_period, income_type,
       description, payment_status, due_date, paid_date
FROM income_records
"""

SELECT_CATEGORIES_SQL = """
SELECT id, name, parent_id, description
FROM expense_categories
ORDER BY name
"""

SELECT_EXPENSES_SQL = """
SELECT id, category_id, vehicle_id, amount, description, expense_date,
       is_recurring, recurring_frequency
FROM expenses
"""

SELECT_VEHICLES_SQL = """
SELECT id, registration_number, make, model, year, capacity, purchase_date,
       purchase_price, status
FROM vehicles
ORDER BY registration_number
"""

SELECT_INSTALLMENTS_SQL = """
SELECT id, vehicle_id, monthly_amount, start_date, end_date, lender
FROM vehicle_installments
ORDER BY id
"""

SELECT_INSURANCE_SQL = """
SELECT id, vehicle_id, provider, policy_number, premium, start_date,
       end_date, coverage_type
FROM vehicle_insurance
ORDER BY id
"""

SELECT_PARKING_SQL = """
SELECT id, vehicle_id, location, monthly_cost, start_date, end_date
FROM vehicle_parking
ORDER BY id
"""

SELECT_EMPLOYEES_SQL = """
SELECT id, employee_id, name, position, department, worker_type, salary,
       bonus, foreign_worker_levy, status, start_date, end_date
FROM employees
ORDER BY name
"""


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_customers(self) -> list[Customer]:
        rows = self._fetch_rows(SELECT_CUSTOMERS_SQL)
        return [
            Customer(
                id=row.id,
                name=row.name,
                status=parse_enum(RecordStatus, row.status, "customers.status"),
                contact_person=normalize_text(row.contact_person),
                email=normalize_text(row.email),
                phone=normalize_text(row.phone),
                address=normalize_text(row.address),
            )
            for row in rows
        ]

    def fetch_routes(self) -> list[Route]:
        rows = self._fetch_rows(SELECT_ROUTES_SQL)
        return [self._to_route(row) for row in rows]

    def fetch_income_entries(self) -> list[IncomeEntry]:
        query = SELECT_INCOME_SQL + " ORDER BY billing_period DESC, id DESC"
        rows = self._fetch_rows(query)
        return [self._to_income_entry(row) for row in rows]

    def fetch_income_entries_between(
        self,
        start_period: str,
        end_period: str,
    ) -> list[IncomeEntry]:
        query = (
            SELECT_INCOME_SQL
            + " WHERE billing_period >= :start_period"
            + " AND billing_period <= :end_period"
            + " ORDER BY billing_period DESC, id DESC"
        )
        rows = self._fetch_rows(
            query,
            {"start_period": start_period, "end_period": end_period},
        )
        return [self._to_income_entry(row) for row in rows]

    def fetch_expense_categories(self) -> list[ExpenseCategory]:
        rows = self._fetch_rows(SELECT_CATEGORIES_SQL)
        return [
            ExpenseCategory(
                id=row.id,
                name=row.name,
                parent_id=row.parent_id,
                description=normalize_text(row.description),
            )
            for row in rows
        ]

    def fetch_expense_entries(self) -> list[ExpenseEntry]:
        query = SELECT_EXPENSES_SQL + " ORDER BY expense_date DESC, id DESC"
        rows = self._fetch_rows(query)
        return [self._to_expense_entry(row) for row in rows]

    def fetch_expense_entries_between(
        self,
        start_date: date,
        end_date: date,
    ) -> list[ExpenseEntry]:
        query = (
            SELECT_EXPENSES_SQL
            + " WHERE expense_date >= :start_date"
            + " AND expense_date <= :end_date"
            + " ORDER BY expense_date DESC, id DESC"
        )
        rows = self._fetch_rows(
            query,
            {
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat(),
            },
        )
        return [self._to_expense_entry(row) for row in rows]

    def fetch_vehicles(self) -> list[Vehicle]:
        rows = self._fetch_rows(SELECT_VEHICLES_SQL)
        return [
            Vehicle(
                id=row.id,
                registration_number=row.registration_number,
                make=row.make,
                model=row.model,
                status=parse_enum(VehicleStatus, row.status, "vehicles.status"),
                year=row.year,
                capacity=row.capacity,
                purchase_date=parse_optional_date(
                    row.purchase_date,
                    "vehicles.purchase_date",
                ),
                purchase_price=parse_optional_money(
                    row.purchase_price,
                    "vehicles.purchase_price",
                ),
            )
            for row in rows
        ]

    def fetch_vehicle_installments(self) -> list[VehicleInstallment]:
        rows = self._fetch_rows(SELECT_INSTALLMENTS_SQL)
        return [
            VehicleInstallment(
                id=row.id,
                vehicle_id=row.vehicle_id,
                monthly_amount=parse_money(
                    row.monthly_amount,
                    "vehicle_installments.monthly_amount",
                ),
                start_date=parse_date(
                    row.start_date,
                    "vehicle_installments.start_date",
                ),
                end_date=parse_date(
                    row.end_date,
                    "vehicle_installments.end_date",
                ),
                lender=normalize_text(row.lender),
            )
            for row in rows
        ]

    def fetch_vehicle_insurance(self) -> list[VehicleInsurance]:
        rows = self._fetch_rows(SELECT_INSURANCE_SQL)
        return [
            VehicleInsurance(
                id=row.id,
                vehicle_id=row.vehicle_id,
                provider=row.provider,
                premium=parse_money(row.premium, "vehicle_insurance.premium"),
                start_date=parse_date(
                    row.start_date,
                    "vehicle_insurance.start_date",
                ),
                end_date=parse_date(
                    row.end_date,
                    "vehicle_insurance.end_date",
                ),
                policy_number=normalize_text(row.policy_number),
                coverage_type=normalize_text(row.coverage_type),
            )
            for row in rows
        ]

    def fetch_vehicle_parking(self) -> list[VehicleParking]:
        rows = self._fetch_rows(SELECT_PARKING_SQL)
        return [
            VehicleParking(
                id=row.id,
                vehicle_id=row.vehicle_id,
                location=row.location,
                monthly_cost=parse_money(
                    row.monthly_cost,
                    "vehicle_parking.monthly_cost",
                ),
                start_date=parse_date(
                    row.start_date,
                    "vehicle_parking.start_date",
                ),
                end_date=parse_optional_date(
                    row.end_date,
                    "vehicle_parking.end_date",
                ),
            )
            for row in rows
        ]

    def fetch_employees(self) -> list[Employee]:
        rows = self._fetch_rows(SELECT_EMPLOYEES_SQL)
        return [
            Employee(
                id=row.id,
                employee_code=row.employee_id,
                name=row.name,
                worker_type=parse_enum(
                    WorkerType,
                    row.worker_type,
                    "employees.worker_type",
                ),
                salary=parse_money(row.salary, "employees.salary"),
                status=parse_enum(RecordStatus, row.status, "employees.status"),
                bonus=money_or_zero(
                    parse_optional_money(row.bonus, "employees.bonus")
                ),
                foreign_worker_levy=parse_optional_money(
                    row.foreign_worker_levy,
                    "employees.foreign_worker_levy",
                ),
                position=normalize_text(row.position),
                department=normalize_text(row.department),
                start_date=parse_optional_date(
                    row.start_date,
                    "employees.start_date",
                ),
                end_date=parse_optional_date(
                    row.end_date,
                    "employees.end_date",
                ),
            )
            for row in rows
        ]

    def _fetch_rows(self, sql: str, params: dict | None = None) -> list:
        """Run a read query, wrapping driver failures.

        Args:
            sql: SQL statement to execute.
            params: Optional bound parameters.

        Returns:
            list: Result rows with attribute access.

        Raises:
            DataAccessError: If the engine or the query fails.
        """
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                return conn.execute(text(sql), params or {}).all()
        except SQLAlchemyError as exc:
            raise DataAccessError(f"Ledger read failed: {exc}") from exc

    @staticmethod
    def _to_route(row) -> Route:
        return Route(
            id=row.id,
            name=row.name,
            monthly_rate=parse_money(row.monthly_rate, "routes.monthly_rate"),
            route_type=parse_enum(RouteType, row.route_type, "routes.route_type"),
            status=parse_enum(RecordStatus, row.status, "routes.status"),
            customer_id=row.customer_id,
            subcontractor_name=normalize_text(row.subcontractor_name),
            subcontractor_cost=parse_optional_money(
                row.subcontractor_cost,
                "routes.subcontractor_cost",
            ),
            vehicle_id=row.vehicle_id,
            description=normalize_text(row.description),
        )

    @staticmethod
    def _to_income_entry(row) -> IncomeEntry:
        return IncomeEntry(
            id=row.id,
            amount=parse_money(row.amount, "income_records.amount"),
            billing_period=parse_billing_period(
                row.billing_period,
                "income_records.billing_period",
            ),
            income_type=parse_enum(
                IncomeType,
                row.income_type,
                "income_records.income_type",
            ),
            payment_status=parse_enum(
                PaymentStatus,
                row.payment_status,
                "income_records.payment_status",
            ),
            customer_id=row.customer_id,
            route_id=row.route_id,
            description=normalize_text(row.description),
            due_date=parse_optional_date(
                row.due_date,
                "income_records.due_date",
            ),
            paid_date=parse_optional_date(
                row.paid_date,
                "income_records.paid_date",
            ),
        )

    @staticmethod
    def _to_expense_entry(row) -> ExpenseEntry:
        return ExpenseEntry(
            id=row.id,
            amount=parse_money(row.amount, "expenses.amount"),
            description=row.description,
            expense_date=parse_date(row.expense_date, "expenses.expense_date"),
            is_recurring=SqlAlchemyLedgerRepository._coerce_flag(
                row.is_recurring,
                "expenses.is_recurring",
            ),
            recurring_frequency=parse_optional_enum(
                RecurringFrequency,
                row.recurring_frequency,
                "expenses.recurring_frequency",
            ),
            category_id=row.category_id,
            vehicle_id=row.vehicle_id,
        )

    @staticmethod
    def _coerce_flag(value, field: str) -> bool:
        if isinstance(value, bool):
            return value
        if value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.strip().lower() in (
            "true",
            "false",
            "t",
            "f",
        ):
            return value.strip().lower() in ("true", "t")
        raise MalformedRecordError(field, value, "expected a boolean")


__all__ = ["SqlAlchemyLedgerRepository"]
