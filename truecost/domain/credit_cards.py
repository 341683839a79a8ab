"""Credit card payoff simulation (the "minimum payment trap")"""

from typing import Optional

from truecost.domain.models import PayoffResult

MAX_MONTHS = 600  # 50 years
DEBT_FREE_TOLERANCE = 0.01


def calculate_credit_card_payoff(
    balance: float,
    interest_rate: float,
    min_payment_pct: float = 0.03,
    min_payment_floor: float = 10,
    monthly_payment_override: Optional[float] = None,
    extra_payment: float = 0,
) -> PayoffResult:
    """
    Simulate paying down a card balance month by month.

    Each month interest accrues on the balance, then a payment is applied
    interest-first. The payment is the override when one is given, otherwise
    the larger of min_payment_pct of the balance and min_payment_floor; the
    extra payment is added on top of either.

    A payment smaller than the month's interest grows the balance (negative
    amortization). That is allowed; the loop stops at MAX_MONTHS and the
    result reports is_debt_free=False.

    Args:
        balance: Current outstanding balance
        interest_rate: Annual APR as a decimal (0.1999 = 19.99%)
        min_payment_pct: Minimum payment as a fraction of the balance
        min_payment_floor: Absolute minimum payment
        monthly_payment_override: Fixed monthly payment replacing the minimum
        extra_payment: Added on top of whichever payment applies

    Returns:
        PayoffResult with months, totals and the debt-free flag
    """
    current_balance = balance
    total_interest_paid = 0.0
    total_paid = 0.0
    months = 0

    monthly_rate = interest_rate / 12

    while current_balance > 0 and months < MAX_MONTHS:
        months += 1

        interest = current_balance * monthly_rate

        if monthly_payment_override:
            payment = monthly_payment_override
        else:
            payment = max(current_balance * min_payment_pct, min_payment_floor)
        payment += extra_payment

        # Final month: pay only what is owed
        amount_owed = current_balance + interest
        if payment >= amount_owed:
            total_paid += amount_owed
            total_interest_paid += interest
            current_balance = 0
            break

        total_paid += payment
        total_interest_paid += interest
        principal_paid = payment - interest
        current_balance -= principal_paid

    return PayoffResult(
        months=months,
        total_interest_paid=total_interest_paid,
        total_paid=total_paid,
        is_debt_free=current_balance <= DEBT_FREE_TOLERANCE,
    )
