"""Prometheus metrics for monitoring acceptance rates and collaborator health"""

from typing import Optional
from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import DeclineReason

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan application decisions made",
    ["outcome", "reason"],  # accepted | declined, decline reason or "none"
)

# Identity service metrics
identity_check_latency_histogram = Histogram(
    "identity_check_latency_seconds",
    "Identity verification service response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

identity_check_failures_counter = Counter(
    "identity_check_failures_total",
    "Failed identity verification service calls",
)

# Credit scorer metrics
credit_score_failures_counter = Counter(
    "credit_score_failures_total",
    "Credit score calculations that raised",
)


def record_decision(accepted: bool, reason: Optional[DeclineReason]) -> None:
    """Record decision metrics for monitoring acceptance rates by decline reason"""
    outcome = "accepted" if accepted else "declined"
    decision_counter.labels(outcome=outcome, reason=reason.value if reason else "none").inc()
