"""Saved loan scenarios: stats, comparison, AI context summary and monthly spend totals"""

import math
from typing import Iterable, List, Optional, Sequence

from truecost.domain.loans import PAYMENTS_PER_YEAR, Frequency, calculate_loan, normalize_frequency
from truecost.domain.models import LoanResult, LoanScenario, MonthlySpend, ScenarioComparison, Subscription

MAX_SUMMARY_SCENARIOS = 5

PAYMENT_LABELS = {
    Frequency.MONTHLY: "Monthly",
    Frequency.BIWEEKLY: "Bi-weekly",
    Frequency.WEEKLY: "Weekly",
}


def normalize_rate_input(value: Optional[float]) -> float:
    """Accept a rate typed as a decimal (0.05) or a percent (5)"""
    rate = value or 0.0
    return rate / 100 if rate > 1 else rate


def scenario_rate(scenario: LoanScenario) -> float:
    """Annual rate used for a scenario's stats; variable-rate scenarios count as 0"""
    return scenario.fixed_annual_rate or 0.0


def scenario_stats(scenario: LoanScenario) -> LoanResult:
    return calculate_loan(
        principal=scenario.principal,
        months=scenario.term_months,
        rate=scenario_rate(scenario),
        frequency=scenario.payment_frequency,
    )


def payment_label(frequency: Optional[str]) -> str:
    return PAYMENT_LABELS[normalize_frequency(frequency)]


def compare_scenarios(first: LoanScenario, second: LoanScenario) -> ScenarioComparison:
    """
    Compare two scenarios on the same effective-rate basis.

    The cheaper scenario is the one with less total interest; equal
    interest reports no winner.
    """
    first_stats = scenario_stats(first)
    second_stats = scenario_stats(second)
    difference = first_stats.total_interest - second_stats.total_interest

    if math.isclose(difference, 0.0, abs_tol=1e-9):
        cheaper_id = None
    elif difference < 0:
        cheaper_id = first.id
    else:
        cheaper_id = second.id

    return ScenarioComparison(
        first=first,
        second=second,
        first_stats=first_stats,
        second_stats=second_stats,
        first_payment_label=payment_label(first.payment_frequency),
        second_payment_label=payment_label(second.payment_frequency),
        interest_difference=difference,
        cheaper_id=cheaper_id,
    )


def _format_number(value: float) -> str:
    # Integral floats print without a trailing ".0", the way JSON clients show them
    if value.is_integer():
        return str(int(value))
    return repr(value)


def summarize_scenario(scenario: LoanScenario) -> str:
    name = scenario.name or "Scenario"
    principal = float(scenario.principal or 0)
    term = int(scenario.term_months or 0)
    frequency = scenario.payment_frequency or "unknown"
    rate = float(scenario.fixed_annual_rate or scenario.spread_over_policy_rate or 0)

    principal_str = f"${principal:.0f}" if math.isfinite(principal) else "$0"
    rate_str = _format_number(rate) if math.isfinite(rate) else "0"

    return f"{name}: {principal_str}, {term}mo, {frequency}, rate={rate_str}"


def summarize_scenarios(scenarios: Sequence[LoanScenario], limit: int = MAX_SUMMARY_SCENARIOS) -> str:
    """
    Build the one-line scenario context handed to the AI insights service.

    Example:
        "Car: $25000, 60mo, MONTHLY, rate=0.05; Boat: $8000, 36mo, WEEKLY, rate=0"
    """
    if not scenarios:
        return "No scenarios provided."

    parts: List[str] = [summarize_scenario(s) for s in list(scenarios)[:limit]]
    return "; ".join(parts)


def monthly_subscription_cost(subscription: Subscription) -> float:
    """Yearly charges are spread over 12 months"""
    if (subscription.billing_cycle or "").upper() == "YEARLY":
        return subscription.amount / 12
    return subscription.amount


def monthly_subscription_total(subscriptions: Iterable[Subscription], active_only: bool = False) -> float:
    return sum(
        monthly_subscription_cost(s) for s in subscriptions if s.is_active or not active_only
    )


def monthly_loan_payment(scenario: LoanScenario) -> float:
    """Scenario payment converted to a per-month amount"""
    payments_per_year = PAYMENTS_PER_YEAR[normalize_frequency(scenario.payment_frequency)]
    return scenario_stats(scenario).payment * payments_per_year / 12


def monthly_spend(
    expense_amounts: Iterable[float],
    subscriptions: Iterable[Subscription],
    scenarios: Iterable[LoanScenario],
) -> MonthlySpend:
    """
    Overview totals: this month's expenses, active subscriptions and loan payments.

    Inactive subscriptions are left out.
    """
    expenses = sum(expense_amounts)
    subscription_total = monthly_subscription_total(subscriptions, active_only=True)
    loans = sum(monthly_loan_payment(s) for s in scenarios)

    return MonthlySpend(
        expenses=expenses,
        subscriptions=subscription_total,
        loans=loans,
        total=expenses + subscription_total + loans,
    )
