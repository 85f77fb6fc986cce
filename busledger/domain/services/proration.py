"""Pro-rating of fixed-term vehicle costs onto a monthly grid."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from busledger.domain.models import (
    VehicleInstallment,
    VehicleInsurance,
    VehicleParking,
)
from busledger.domain.services.periods import month_key, months_spanned
from busledger.utils.decimal_utils import quantize_money, sum_money


def installment_active_in(
    installment: VehicleInstallment,
    month_start: date,
) -> bool:
    """Return True when the month start lies within the loan term."""
    return installment.start_date <= month_start <= installment.end_date


def parking_active_in(parking: VehicleParking, month_start: date) -> bool:
    """Return True when the month start lies within the lease.

    A lease without an end date stays active indefinitely.
    """
    if month_start < parking.start_date:
        return False
    return parking.end_date is None or month_start <= parking.end_date


def insurance_active_in(
    insurance: VehicleInsurance,
    month_start: date,
) -> bool:
    """Return True when the month start lies within the policy term."""
    return insurance.start_date <= month_start <= insurance.end_date


def insurance_monthly_cost(insurance: VehicleInsurance) -> Decimal:
    """Spread a policy premium evenly over the months of its own term.

    Args:
        insurance: Insurance record whose premium is a term total.

    Returns:
        Decimal: Regular monthly share of the premium rounded to cents, or
        zero for a policy whose end date precedes its start date.
    """
    months = months_spanned(insurance.start_date, insurance.end_date)
    if months <= 0:
        return Decimal("0")
    return quantize_money(insurance.premium / months)


def insurance_cost_in(
    insurance: VehicleInsurance,
    month_start: date,
) -> Decimal:
    """Return the premium share charged in a month.

    The month holding the end date takes the rounding remainder, so the
    shares of a full term add up to the premium.
    """
    if not insurance_active_in(insurance, month_start):
        return Decimal("0")
    share = insurance_monthly_cost(insurance)
    if month_key(month_start) != month_key(insurance.end_date):
        return share
    months = months_spanned(insurance.start_date, insurance.end_date)
    return insurance.premium - share * (months - 1)


def installments_due(
    installments: Iterable[VehicleInstallment],
    month_start: date,
) -> Decimal:
    """Sum the flat installments active in a month."""
    return sum_money(
        installment.monthly_amount
        for installment in installments
        if installment_active_in(installment, month_start)
    )


def insurance_due(
    policies: Iterable[VehicleInsurance],
    month_start: date,
) -> Decimal:
    """Sum the pro-rated premiums of policies active in a month."""
    return sum_money(
        insurance_cost_in(policy, month_start)
        for policy in policies
        if insurance_active_in(policy, month_start)
    )


def parking_due(
    leases: Iterable[VehicleParking],
    month_start: date,
) -> Decimal:
    """Sum the parking costs of leases active in a month."""
    return sum_money(
        lease.monthly_cost
        for lease in leases
        if parking_active_in(lease, month_start)
    )


def prorate_over_period(monthly_cost: Decimal, months: int) -> Decimal:
    """Scale a constant monthly cost to a reporting period."""
    return monthly_cost * months


__all__ = [
    "installment_active_in",
    "parking_active_in",
    "insurance_active_in",
    "insurance_monthly_cost",
    "insurance_cost_in",
    "installments_due",
    "insurance_due",
    "parking_due",
    "prorate_over_period",
]
