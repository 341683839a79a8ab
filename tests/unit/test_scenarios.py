"""Unit tests for scenario stats, comparison and summaries"""

import pytest
from dataclasses import replace
from truecost.domain.loans import calculate_loan
from truecost.domain.models import MonthlySpend, Subscription
from truecost.domain.scenarios import (
    compare_scenarios,
    monthly_loan_payment,
    monthly_spend,
    monthly_subscription_cost,
    monthly_subscription_total,
    normalize_rate_input,
    payment_label,
    scenario_rate,
    scenario_stats,
    summarize_scenarios,
)


@pytest.mark.parametrize(
    "value,expected",
    [(5, 0.05), (0.05, 0.05), (19.99, 0.1999), (1, 1), (0, 0), (None, 0)],
)
def test_normalize_rate_input(value, expected):
    assert normalize_rate_input(value) == pytest.approx(expected)


def test_scenario_rate_ignores_spread(car_loan, variable_loan):
    assert scenario_rate(car_loan) == 0.05
    assert scenario_rate(variable_loan) == 0.0


def test_scenario_stats_match_calculator(car_loan):
    assert scenario_stats(car_loan) == calculate_loan(25000.0, 60, 0.05, "MONTHLY")


@pytest.mark.parametrize(
    "frequency,label",
    [("MONTHLY", "Monthly"), ("BIWEEKLY", "Bi-weekly"), ("weekly", "Weekly"), (None, "Monthly")],
)
def test_payment_label(frequency, label):
    assert payment_label(frequency) == label


def test_compare_scenarios_picks_less_interest(car_loan):
    cheaper = replace(car_loan, id="cheap", name="Car at 3%", fixed_annual_rate=0.03)

    comparison = compare_scenarios(car_loan, cheaper)

    assert comparison.cheaper_id == "cheap"
    assert comparison.interest_difference > 0
    assert comparison.first_payment_label == "Monthly"
    assert comparison.first_stats == scenario_stats(car_loan)
    assert comparison.second_stats == scenario_stats(cheaper)


def test_compare_scenarios_tie_has_no_winner(car_loan):
    twin = replace(car_loan, id="twin")

    comparison = compare_scenarios(car_loan, twin)

    assert comparison.cheaper_id is None
    assert comparison.interest_difference == 0


def test_compare_scenarios_across_frequencies(car_loan):
    weekly = replace(car_loan, id="weekly", payment_frequency="WEEKLY")

    comparison = compare_scenarios(car_loan, weekly)

    assert comparison.second_payment_label == "Weekly"
    assert comparison.second_stats.payment < comparison.first_stats.payment


def test_summarize_scenarios_empty():
    assert summarize_scenarios([]) == "No scenarios provided."


def test_summarize_scenarios_format(car_loan, variable_loan):
    summary = summarize_scenarios([car_loan, variable_loan])

    assert summary == "Car: $25000, 60mo, MONTHLY, rate=0.05; HELOC: $40000, 120mo, BIWEEKLY, rate=0.015"


def test_summarize_scenarios_limits_count(car_loan):
    scenarios = [replace(car_loan, id=str(i), name=f"Loan {i}") for i in range(8)]

    summary = summarize_scenarios(scenarios)

    assert summary.count(";") == 4
    assert "Loan 4" in summary
    assert "Loan 5" not in summary


def test_summarize_scenarios_fallbacks(car_loan):
    blank = replace(car_loan, name="", fixed_annual_rate=None, payment_frequency="")

    assert summarize_scenarios([blank]) == "Scenario: $25000, 60mo, unknown, rate=0"


@pytest.mark.parametrize(
    "amount,cycle,expected",
    [(15.0, "MONTHLY", 15.0), (120.0, "YEARLY", 10.0), (120.0, "yearly", 10.0), (9.0, None, 9.0)],
)
def test_monthly_subscription_cost(amount, cycle, expected):
    subscription = Subscription(name="Sub", amount=amount, billing_cycle=cycle)
    assert monthly_subscription_cost(subscription) == pytest.approx(expected)


def test_monthly_subscription_total_counts_inactive_unless_filtered():
    subscriptions = [
        Subscription(name="Music", amount=12.0),
        Subscription(name="Cloud", amount=120.0, billing_cycle="YEARLY"),
        Subscription(name="Gym", amount=50.0, is_active=False),
    ]

    assert monthly_subscription_total(subscriptions) == pytest.approx(72.0)
    assert monthly_subscription_total(subscriptions, active_only=True) == pytest.approx(22.0)


def test_monthly_loan_payment_converts_frequency(car_loan):
    weekly = replace(car_loan, payment_frequency="WEEKLY")

    assert monthly_loan_payment(car_loan) == pytest.approx(scenario_stats(car_loan).payment)
    assert monthly_loan_payment(weekly) == pytest.approx(scenario_stats(weekly).payment * 52 / 12)


def test_monthly_spend(car_loan):
    subscriptions = [
        Subscription(name="Music", amount=12.0),
        Subscription(name="Gym", amount=50.0, is_active=False),
    ]

    spend = monthly_spend([40.0, 60.0], subscriptions, [car_loan])

    assert spend.expenses == pytest.approx(100.0)
    assert spend.subscriptions == pytest.approx(12.0)
    assert spend.loans == pytest.approx(scenario_stats(car_loan).payment)
    assert spend.total == pytest.approx(112.0 + spend.loans)


def test_monthly_spend_empty():
    spend = monthly_spend([], [], [])
    assert spend == MonthlySpend(expenses=0, subscriptions=0, loans=0, total=0)
