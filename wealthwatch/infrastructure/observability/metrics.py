"""Prometheus metrics for analytics usage, health scores, and record mutations"""

from prometheus_client import Counter, Histogram

# Analytics metrics
analytics_query_counter = Counter(
    "wealthwatch_analytics_queries_total",
    "Analytics views computed",
    ["view"],  # summary | spending_patterns | category_insights | cash_flow | cash_flow_export | health | insights | overview
)

health_score_histogram = Histogram(
    "wealthwatch_health_score",
    "Distribution of computed financial health scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

risk_level_counter = Counter(
    "wealthwatch_risk_level_total",
    "Health assessments by risk tier",
    ["risk_level"],  # low | medium | high
)

# Record store metrics
record_mutation_counter = Counter(
    "wealthwatch_record_mutations_total",
    "Create/update/delete operations against the record store",
    ["entity", "action"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_health_assessment(score: int, risk_level: str) -> None:
    """Record score distribution and risk tier counts"""
    health_score_histogram.observe(score)
    risk_level_counter.labels(risk_level=risk_level).inc()


def record_mutation(entity: str, action: str) -> None:
    record_mutation_counter.labels(entity=entity, action=action).inc()
