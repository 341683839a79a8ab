"""Unit tests for the credit card payoff simulator"""

import pytest
from truecost.domain.credit_cards import MAX_MONTHS, calculate_credit_card_payoff


def test_payoff_with_default_minimum_payment():
    """3% / $10 floor minimum on $1000 at 18% takes ten years"""
    result = calculate_credit_card_payoff(balance=1000, interest_rate=0.18)

    assert result.months == 120
    assert result.is_debt_free is True
    assert result.total_interest_paid == pytest.approx(798.88628432797, abs=1e-8)
    assert result.total_paid == pytest.approx(1798.8862843279705, abs=1e-8)


def test_payoff_with_fixed_override():
    result = calculate_credit_card_payoff(balance=1000, interest_rate=0.24, monthly_payment_override=200)

    assert result.months == 6
    assert result.is_debt_free is True
    assert result.total_interest_paid == pytest.approx(64.538226624, abs=1e-8)
    assert result.total_paid == pytest.approx(1064.538226624, abs=1e-8)


def test_payoff_uses_floor_when_larger_than_percentage():
    result = calculate_credit_card_payoff(
        balance=200,
        interest_rate=0.2,
        min_payment_pct=0.03,
        min_payment_floor=50,
    )

    assert result.months == 5
    assert result.is_debt_free is True
    assert result.total_interest_paid == pytest.approx(8.7581754115, abs=1e-8)
    assert result.total_paid == pytest.approx(208.7581754115, abs=1e-8)


def test_payoff_zero_override_falls_back_to_minimum():
    """An override of 0 is treated as absent"""
    with_zero = calculate_credit_card_payoff(balance=1000, interest_rate=0.18, monthly_payment_override=0)
    default = calculate_credit_card_payoff(balance=1000, interest_rate=0.18)

    assert with_zero == default


def test_payoff_extra_payment_is_faster():
    baseline = calculate_credit_card_payoff(balance=1500, interest_rate=0.24)
    with_extra = calculate_credit_card_payoff(balance=1500, interest_rate=0.24, extra_payment=50)

    assert with_extra.months < baseline.months
    assert with_extra.total_paid < baseline.total_paid


def test_payoff_extra_payment_stacks_on_override():
    override_only = calculate_credit_card_payoff(balance=1000, interest_rate=0.24, monthly_payment_override=100)
    override_plus_extra = calculate_credit_card_payoff(
        balance=1000, interest_rate=0.24, monthly_payment_override=100, extra_payment=100
    )
    flat_200 = calculate_credit_card_payoff(balance=1000, interest_rate=0.24, monthly_payment_override=200)

    assert override_plus_extra.months < override_only.months
    assert override_plus_extra == flat_200


def test_payoff_hits_month_cap_when_payment_never_covers_interest():
    """1% minimum against 3% monthly interest grows the balance forever"""
    result = calculate_credit_card_payoff(
        balance=5000,
        interest_rate=0.36,
        min_payment_pct=0.01,
        min_payment_floor=10,
    )

    assert result.months == MAX_MONTHS == 600
    assert result.is_debt_free is False


def test_payoff_zero_balance_exits_immediately():
    result = calculate_credit_card_payoff(balance=0, interest_rate=0.2)

    assert result.months == 0
    assert result.total_interest_paid == 0
    assert result.total_paid == 0
    assert result.is_debt_free is True


def test_payoff_zero_interest_pays_only_principal():
    result = calculate_credit_card_payoff(balance=1000, interest_rate=0, monthly_payment_override=250)

    assert result.months == 4
    assert result.total_interest_paid == 0
    assert result.total_paid == pytest.approx(1000)


def test_payoff_single_payment_clears_balance():
    """A payment at least the amount owed pays exactly balance plus interest"""
    result = calculate_credit_card_payoff(balance=100, interest_rate=0.12, monthly_payment_override=1000)

    assert result.months == 1
    assert result.total_interest_paid == pytest.approx(1.0)
    assert result.total_paid == pytest.approx(101.0)
    assert result.is_debt_free is True


@pytest.mark.parametrize("balance", [250, 1500, 5000, 20000])
@pytest.mark.parametrize("interest_rate", [0.0, 0.12, 0.2499])
@pytest.mark.parametrize("extra_payment", [5, 50, 500])
def test_payoff_extra_payment_never_costs_more(balance, interest_rate, extra_payment):
    baseline = calculate_credit_card_payoff(balance=balance, interest_rate=interest_rate)
    with_extra = calculate_credit_card_payoff(
        balance=balance, interest_rate=interest_rate, extra_payment=extra_payment
    )

    assert with_extra.months <= baseline.months
    assert with_extra.total_paid <= baseline.total_paid + 1e-6


@pytest.mark.parametrize(
    "kwargs",
    [
        {"balance": 1000, "interest_rate": -0.2},
        {"balance": -500, "interest_rate": 0.2},
        {"balance": 1e9, "interest_rate": 5.0},
        {"balance": 1000, "interest_rate": 0.3, "min_payment_pct": 0, "min_payment_floor": 0},
        {"balance": 1000, "interest_rate": 0.2, "extra_payment": -50},
        {"balance": 1000, "interest_rate": 0.2, "monthly_payment_override": 1},
        {"balance": 1000, "interest_rate": 0.2, "monthly_payment_override": 1e9},
    ],
)
def test_payoff_always_terminates_within_cap(kwargs):
    result = calculate_credit_card_payoff(**kwargs)

    assert 0 <= result.months <= MAX_MONTHS
    if not result.is_debt_free:
        assert result.months == MAX_MONTHS
