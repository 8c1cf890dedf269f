"""Prometheus metrics for origination outcomes, pool liquidity, and webhook performance"""

from prometheus_client import Counter, Histogram, Gauge

# Origination metrics
loan_request_counter = Counter(
    "gig_lending_loan_requests_total",
    "Total loan requests processed",
    ["outcome"],  # originated | rejection reason
)

loan_principal_histogram = Histogram(
    "gig_lending_loan_principal",
    "Principal of originated loans in ledger units",
    buckets=[100, 500, 1_000, 5_000, 10_000, 50_000, 100_000],
)

# Credit profile metrics
credit_score_histogram = Histogram(
    "gig_lending_credit_score",
    "Credit scores computed on profile update",
    buckets=[400, 500, 600, 700, 800, 850],
)

# Liquidity metrics
liquidity_deposit_counter = Counter(
    "gig_lending_liquidity_deposits_total",
    "Liquidity deposits recorded",
)

total_liquidity_gauge = Gauge(
    "gig_lending_total_liquidity",
    "Pool liquidity after the last committed call",
)

# Webhook metrics
webhook_latency_histogram = Histogram(
    "ledger_webhook_latency_seconds",
    "Ledger webhook response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

webhook_failure_counter = Counter(
    "ledger_webhook_failures_total",
    "Failed webhook deliveries",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_loan_request(outcome: str, amount: int | None = None) -> None:
    """Record a loan request; amount is observed only for originated loans"""
    loan_request_counter.labels(outcome=outcome).inc()
    if amount is not None:
        loan_principal_histogram.observe(amount)


def record_liquidity(total_liquidity: int, deposited: bool = False) -> None:
    if deposited:
        liquidity_deposit_counter.inc()
    total_liquidity_gauge.set(total_liquidity)
