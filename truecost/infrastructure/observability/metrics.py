"""Prometheus metrics for calculator usage, payoff outcomes and scenario activity"""

from prometheus_client import Counter, Histogram

# Calculator metrics
calculation_counter = Counter(
    "truecost_calculation_total",
    "Total calculator runs",
    ["calculator"],  # loan | credit_card | time_cost
)

payoff_outcome_counter = Counter(
    "truecost_payoff_outcome_total",
    "Credit card payoff simulations by outcome",
    ["outcome"],  # debt_free | capped
)

# Scenario metrics
scenario_counter = Counter(
    "truecost_scenario_total",
    "Scenario store operations",
    ["action"],  # created | deleted | compared
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str) -> None:
    calculation_counter.labels(calculator=calculator).inc()


def record_payoff(is_debt_free: bool) -> None:
    """Record whether a simulated payment plan clears the debt"""
    record_calculation("credit_card")
    outcome = "debt_free" if is_debt_free else "capped"
    payoff_outcome_counter.labels(outcome=outcome).inc()


def record_scenario(action: str) -> None:
    scenario_counter.labels(action=action).inc()
