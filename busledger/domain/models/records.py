"""Domain models for ledger records read from the repository."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class RecordStatus(str, Enum):
    """Lifecycle status shared by customers, routes and employees."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class VehicleStatus(str, Enum):
    """Operational status of a vehicle."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class RouteType(str, Enum):
    """Whether a route is driven in-house or by a subcontractor."""

    OWNED = "owned"
    SUBCONTRACTED = "subcontracted"


class IncomeType(str, Enum):
    """Source of an income entry."""

    ROUTE = "route"
    ADHOC = "adhoc"


class PaymentStatus(str, Enum):
    """Collection status of an income entry."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class RecurringFrequency(str, Enum):
    """Cadence of a recurring expense."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class WorkerType(str, Enum):
    """Employment class driving the employer cost rule."""

    LOCAL = "local"
    FOREIGN = "foreign"


@dataclass(frozen=True)
class Customer:
    """Company contracting transport services."""

    id: int
    name: str
    status: RecordStatus
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class Route:
    """Bus route billed to a customer at a monthly rate."""

    id: int
    name: str
    monthly_rate: Decimal
    route_type: RouteType
    status: RecordStatus
    customer_id: int | None = None
    subcontractor_name: str | None = None
    subcontractor_cost: Decimal | None = None
    vehicle_id: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class IncomeEntry:
    """Income attributed to a billing period.

    Attributes:
        billing_period: Month key (YYYY-MM) used for monthly bucketing,
            independent of due and paid dates.
    """

    id: int
    amount: Decimal
    billing_period: str
    income_type: IncomeType
    payment_status: PaymentStatus
    customer_id: int | None = None
    route_id: int | None = None
    description: str | None = None
    due_date: date | None = None
    paid_date: date | None = None


@dataclass(frozen=True)
class ExpenseCategory:
    """Expense category with an optional single-level parent."""

    id: int
    name: str
    parent_id: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class ExpenseEntry:
    """Expense bucketed by the calendar month of its expense date."""

    id: int
    amount: Decimal
    description: str
    expense_date: date
    is_recurring: bool = False
    recurring_frequency: RecurringFrequency | None = None
    category_id: int | None = None
    vehicle_id: int | None = None


@dataclass(frozen=True)
class Vehicle:
    """Bus operated by the company."""

    id: int
    registration_number: str
    make: str
    model: str
    status: VehicleStatus
    year: int | None = None
    capacity: int | None = None
    purchase_date: date | None = None
    purchase_price: Decimal | None = None


@dataclass(frozen=True)
class VehicleInstallment:
    """Loan installment active between two inclusive dates."""

    id: int
    vehicle_id: int
    monthly_amount: Decimal
    start_date: date
    end_date: date
    lender: str | None = None


@dataclass(frozen=True)
class VehicleInsurance:
    """Insurance policy whose premium covers the whole term.

    Attributes:
        premium: Term total, not a monthly figure.
    """

    id: int
    vehicle_id: int
    provider: str
    premium: Decimal
    start_date: date
    end_date: date
    policy_number: str | None = None
    coverage_type: str | None = None


@dataclass(frozen=True)
class VehicleParking:
    """Parking lease, open-ended when end_date is None."""

    id: int
    vehicle_id: int
    location: str
    monthly_cost: Decimal
    start_date: date
    end_date: date | None = None


@dataclass(frozen=True)
class Employee:
    """Employee on the payroll.

    Attributes:
        foreign_worker_levy: Monthly levy for foreign workers, if set.
        bonus: Carried for reference; not part of the employer cost.
    """

    id: int
    employee_code: str
    name: str
    worker_type: WorkerType
    salary: Decimal
    status: RecordStatus
    bonus: Decimal = Decimal("0")
    foreign_worker_levy: Decimal | None = None
    position: str | None = None
    department: str | None = None
    start_date: date | None = None
    end_date: date | None = None


__all__ = [
    "RecordStatus",
    "VehicleStatus",
    "RouteType",
    "IncomeType",
    "PaymentStatus",
    "RecurringFrequency",
    "WorkerType",
    "Customer",
    "Route",
    "IncomeEntry",
    "ExpenseCategory",
    "ExpenseEntry",
    "Vehicle",
    "VehicleInstallment",
    "VehicleInsurance",
    "VehicleParking",
    "Employee",
]
