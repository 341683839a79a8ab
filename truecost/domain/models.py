"""Domain models - pure Python dataclasses returned by the calculators"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class LoanResult:
    """Outcome of an amortized loan calculation"""

    payment: float  # per period, at the loan's payment frequency
    total_paid: float
    total_interest: float
    ratio: float  # total_interest as a percent of principal, for UI scaling


@dataclass
class PayoffResult:
    """Outcome of a credit card payoff simulation"""

    months: int
    total_interest_paid: float
    total_paid: float
    is_debt_free: bool  # False when the month cap was hit first


@dataclass
class TimeCostDisplay:
    """Labor time split into 8-hour workdays"""

    days: int
    hours: int
    minutes: int


@dataclass
class TimeCostResult:
    """A price expressed as hours of take-home labor"""

    total_hours: float
    net_hourly_rate: float
    display: TimeCostDisplay


@dataclass
class LoanScenario:
    """Saved what-if loan, as stored by the scenarios screen"""

    id: str
    name: str
    principal: float
    term_months: int
    payment_frequency: str
    rate_source: str = "FIXED"  # "FIXED" or "MARKET_AI"
    fixed_annual_rate: Optional[float] = None
    spread_over_policy_rate: Optional[float] = None
    currency: str = "CAD"
    extra_payment_per_period: Optional[float] = None
    created_at: Optional[datetime] = None


@dataclass
class ScenarioComparison:
    """Head-to-head stats for two scenarios"""

    first: LoanScenario
    second: LoanScenario
    first_stats: LoanResult
    second_stats: LoanResult
    first_payment_label: str
    second_payment_label: str
    interest_difference: float  # first minus second
    cheaper_id: Optional[str]  # None on a tie


@dataclass
class Subscription:
    """Recurring charge tracked on the subscriptions tab"""

    name: str
    amount: float
    billing_cycle: str = "MONTHLY"  # "MONTHLY" or "YEARLY"
    is_active: bool = True


@dataclass
class MonthlySpend:
    """Overview totals for one month"""

    expenses: float
    subscriptions: float
    loans: float
    total: float
