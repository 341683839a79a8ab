"""Amortized loan payment calculation"""

import math
from enum import Enum
from typing import Dict, Optional

from truecost.domain.models import LoanResult


class Frequency(str, Enum):
    MONTHLY = "MONTHLY"
    BIWEEKLY = "BIWEEKLY"
    WEEKLY = "WEEKLY"


PAYMENTS_PER_YEAR: Dict[Frequency, int] = {
    Frequency.MONTHLY: 12,
    Frequency.BIWEEKLY: 26,
    Frequency.WEEKLY: 52,
}


def normalize_frequency(value: Optional[str]) -> Frequency:
    """Case-insensitive lookup; anything unrecognized is MONTHLY"""
    upper = (value or "").upper()
    if upper == Frequency.BIWEEKLY.value:
        return Frequency.BIWEEKLY
    if upper == Frequency.WEEKLY.value:
        return Frequency.WEEKLY
    return Frequency.MONTHLY


def periodic_rate(rate: float, payments_per_year: int) -> float:
    """
    Convert an annual rate to the rate compounding once per payment period.

    Uses the effective conversion (1 + r)^(1/n) - 1, so compounding the
    periodic rate n times reproduces the annual rate exactly. This is not
    r / n, which overstates the cost of more frequent payments.
    """
    if rate > 0:
        return (1 + rate) ** (1 / payments_per_year) - 1
    return 0.0


def calculate_loan(
    principal: Optional[float],
    months: Optional[float],
    rate: float,
    frequency: Optional[str] = Frequency.MONTHLY.value,
) -> LoanResult:
    """
    Fixed-rate installment loan payment, total paid and total interest.

    Args:
        principal: Amount borrowed
        months: Term of the loan in months
        rate: Nominal annual rate as a decimal (0.05 = 5%)
        frequency: MONTHLY, BIWEEKLY or WEEKLY (case-insensitive)

    Returns:
        LoanResult; all zeros when principal or months is zero/missing,
        or the term is too long to count in periods

    Example:
        $12,000 over 12 months at 0% monthly → payment $1,000, interest $0
    """
    if not principal or not months:
        return LoanResult(payment=0.0, total_paid=0.0, total_interest=0.0, ratio=0.0)

    payments_per_year = PAYMENTS_PER_YEAR[normalize_frequency(frequency)]
    raw_periods = months / 12 * payments_per_year
    if not math.isfinite(raw_periods):
        return LoanResult(payment=0.0, total_paid=0.0, total_interest=0.0, ratio=0.0)
    periods = max(1, math.floor(raw_periods + 0.5))
    period_rate = periodic_rate(rate, payments_per_year)

    if period_rate == 0:
        payment = principal / periods
    else:
        # Discount form of P*r*(1+r)^n / ((1+r)^n - 1); stays finite for huge n
        discount = (1 + period_rate) ** -periods
        payment = principal * period_rate / (1 - discount)

    total_paid = payment * periods
    total_interest = total_paid - principal

    return LoanResult(
        payment=payment,
        total_paid=total_paid,
        total_interest=total_interest,
        ratio=total_interest / principal * 100 if principal > 0 else 0.0,
    )
