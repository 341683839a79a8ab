"""POST /v1/calculators/* - stateless loan, credit card and time-cost calculators"""

import time
from fastapi import APIRouter, Depends

from truecost.api.dependencies import get_request_id
from truecost.api.v1.schemas import (
    CreditCardRequest,
    LoanRequest,
    LoanResultSchema,
    PayoffResultSchema,
    TimeCostRequest,
    TimeCostResultSchema,
)
from truecost.config import settings
from truecost.domain.credit_cards import calculate_credit_card_payoff
from truecost.domain.loans import calculate_loan
from truecost.domain.time_cost import calculate_time_cost
from truecost.infrastructure.observability.logging import log_calculation, log_non_convergent_payoff
from truecost.infrastructure.observability.metrics import record_calculation, record_payoff

router = APIRouter()


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


@router.post("/calculators/loan", response_model=LoanResultSchema)
def loan_calculator(request_body: LoanRequest, request_id: str = Depends(get_request_id)):
    """
    Payment, total paid and total interest for an installment loan.

    Degenerate input (zero principal or term) returns all zeros.
    """
    start_time = time.perf_counter()
    result = calculate_loan(
        principal=request_body.principal,
        months=request_body.months,
        rate=request_body.rate,
        frequency=request_body.frequency,
    )

    record_calculation("loan")
    log_calculation(request_id, "loan", _elapsed_ms(start_time), payment=result.payment)
    return LoanResultSchema.from_domain(result)


@router.post("/calculators/credit-card", response_model=PayoffResultSchema)
def credit_card_calculator(request_body: CreditCardRequest, request_id: str = Depends(get_request_id)):
    """
    Months and total cost to clear a card balance.

    A plan that never pays off reports months=600 and is_debt_free=false.
    """
    start_time = time.perf_counter()
    result = calculate_credit_card_payoff(
        balance=request_body.balance,
        interest_rate=request_body.interest_rate,
        min_payment_pct=request_body.min_payment_pct,
        min_payment_floor=request_body.min_payment_floor,
        monthly_payment_override=request_body.monthly_payment_override,
        extra_payment=request_body.extra_payment,
    )

    record_payoff(result.is_debt_free)
    if not result.is_debt_free:
        log_non_convergent_payoff(request_id, request_body.balance, result.months)
    log_calculation(
        request_id,
        "credit_card",
        _elapsed_ms(start_time),
        months=result.months,
        is_debt_free=result.is_debt_free,
    )
    return PayoffResultSchema.from_domain(result)


@router.post("/calculators/time-cost", response_model=TimeCostResultSchema)
def time_cost_calculator(request_body: TimeCostRequest, request_id: str = Depends(get_request_id)):
    """Price converted into workdays, hours and minutes of after-tax work"""
    start_time = time.perf_counter()
    tax_rate = request_body.tax_rate if request_body.tax_rate is not None else settings.default_tax_rate
    result = calculate_time_cost(
        price=request_body.price,
        hourly_rate=request_body.hourly_rate,
        tax_rate=tax_rate,
    )

    record_calculation("time_cost")
    log_calculation(request_id, "time_cost", _elapsed_ms(start_time), total_hours=result.total_hours)
    return TimeCostResultSchema.from_domain(result)
