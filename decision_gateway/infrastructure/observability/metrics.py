"""Prometheus metrics for monitoring decision outcomes and approved amounts"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected | invalid_input | error
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # 2000-3999, 4000-6999, 7000-9999, 10000
)

period_extension_counter = Counter(
    "loan_period_extension_total",
    "Approvals granted at a longer period than requested",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, loan_amount: int | None = None) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if loan_amount is None:
        return

    if loan_amount < 4000:
        bucket = "2000-3999"
    elif loan_amount < 7000:
        bucket = "4000-6999"
    elif loan_amount < 10000:
        bucket = "7000-9999"
    else:
        bucket = "10000"

    approved_amount_bucket_counter.labels(bucket=bucket).inc()


def record_period_extension(requested_period: int, approved_period: int) -> None:
    if approved_period > requested_period:
        period_extension_counter.inc()
