"""Pydantic schemas for API request/response validation"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from truecost.domain.models import LoanResult, LoanScenario, PayoffResult, TimeCostResult


class FiniteModel(BaseModel):
    """Calculator inputs are any finite numbers; range checks are the caller's job"""

    model_config = ConfigDict(allow_inf_nan=False)


class LoanRequest(FiniteModel):
    """Request body for POST /v1/calculators/loan"""

    principal: float = Field(0, description="Amount borrowed")
    months: float = Field(0, description="Loan term in months")
    rate: float = Field(0, description="Nominal annual rate as a decimal")
    frequency: Optional[str] = Field("MONTHLY", description="MONTHLY, BIWEEKLY or WEEKLY")


class LoanResultSchema(BaseModel):
    payment: float
    total_paid: float
    total_interest: float
    ratio: float

    @classmethod
    def from_domain(cls, result: LoanResult) -> "LoanResultSchema":
        return cls(
            payment=result.payment,
            total_paid=result.total_paid,
            total_interest=result.total_interest,
            ratio=result.ratio,
        )


class CreditCardRequest(FiniteModel):
    """Request body for POST /v1/calculators/credit-card"""

    balance: float = Field(..., description="Current outstanding balance")
    interest_rate: float = Field(..., description="Annual APR as a decimal")
    min_payment_pct: float = 0.03
    min_payment_floor: float = 10
    monthly_payment_override: Optional[float] = None
    extra_payment: float = 0


class PayoffResultSchema(BaseModel):
    months: int
    total_interest_paid: float
    total_paid: float
    is_debt_free: bool

    @classmethod
    def from_domain(cls, result: PayoffResult) -> "PayoffResultSchema":
        return cls(
            months=result.months,
            total_interest_paid=result.total_interest_paid,
            total_paid=result.total_paid,
            is_debt_free=result.is_debt_free,
        )


class TimeCostRequest(FiniteModel):
    """Request body for POST /v1/calculators/time-cost"""

    price: float
    hourly_rate: float = Field(..., description="Gross hourly wage")
    tax_rate: Optional[float] = Field(None, description="Defaults to the configured tax rate")


class TimeCostDisplaySchema(BaseModel):
    days: int
    hours: int
    minutes: int


class TimeCostResultSchema(BaseModel):
    total_hours: float
    net_hourly_rate: float
    display: TimeCostDisplaySchema

    @classmethod
    def from_domain(cls, result: TimeCostResult) -> "TimeCostResultSchema":
        return cls(
            total_hours=result.total_hours,
            net_hourly_rate=result.net_hourly_rate,
            display=TimeCostDisplaySchema(
                days=result.display.days,
                hours=result.display.hours,
                minutes=result.display.minutes,
            ),
        )


class ScenarioCreateRequest(FiniteModel):
    """Request body for POST /v1/scenarios"""

    name: str = Field(..., min_length=1)
    principal: float = Field(..., gt=0)
    term_months: int = Field(12, description="Loan term in months")
    payment_frequency: Optional[str] = "MONTHLY"
    rate_source: Literal["FIXED", "MARKET_AI"] = "FIXED"
    rate: float = Field(0, description="Decimal (0.05) or percent (5)")
    currency: str = "CAD"
    extra_payment_per_period: Optional[float] = None


class ScenarioResponse(BaseModel):
    """A stored scenario with its computed stats"""

    id: str
    name: str
    principal: float
    currency: str
    term_months: int
    payment_frequency: str
    rate_source: str
    fixed_annual_rate: Optional[float]
    spread_over_policy_rate: Optional[float]
    extra_payment_per_period: Optional[float]
    created_at: Optional[str]
    stats: LoanResultSchema

    @classmethod
    def from_domain(cls, scenario: LoanScenario, stats: LoanResult) -> "ScenarioResponse":
        return cls(
            id=scenario.id,
            name=scenario.name,
            principal=scenario.principal,
            currency=scenario.currency,
            term_months=scenario.term_months,
            payment_frequency=scenario.payment_frequency,
            rate_source=scenario.rate_source,
            fixed_annual_rate=scenario.fixed_annual_rate,
            spread_over_policy_rate=scenario.spread_over_policy_rate,
            extra_payment_per_period=scenario.extra_payment_per_period,
            created_at=scenario.created_at.isoformat() if scenario.created_at else None,
            stats=LoanResultSchema.from_domain(stats),
        )


class ScenarioListResponse(BaseModel):
    scenarios: List[ScenarioResponse]


class ComparisonSide(BaseModel):
    scenario_id: str
    name: str
    payment_label: str
    stats: LoanResultSchema


class ComparisonResponse(BaseModel):
    """Response for GET /v1/scenarios/compare"""

    first: ComparisonSide
    second: ComparisonSide
    interest_difference: float
    cheaper_id: Optional[str] = None


class InsightsContextResponse(BaseModel):
    """Scenario summary handed to the AI insights service"""

    summary: str
    scenario_count: int
