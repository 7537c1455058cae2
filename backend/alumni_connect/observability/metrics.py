"""
Prometheus Metrics for the messaging backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus scraper

METRIC TYPES:
    - Counter: Value only goes up (total count, e.g., messages sent)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

CONVERSATIONS_CREATED_TOTAL = Counter(
    "messaging_conversations_created_total",
    "Total number of conversations created on first contact",
)

MESSAGES_TOTAL = Counter(
    "messaging_messages_total",
    "Total number of send attempts by outcome",
    ["outcome"],
)

DROPPED_CONVERSATIONS_TOTAL = Counter(
    "messaging_dropped_conversations_total",
    "Conversations left out of a listing because a participant profile is missing",
)

ERRORS_TOTAL = Counter(
    "messaging_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS
# =============================================================================
class MessageOutcome:
    """Outcome labels for messaging_messages_total."""

    SENT = "sent"
    REJECTED = "rejected"


class MetricsErrorType:
    """Error type labels for messaging_errors_total."""

    QUERY_FAILED = "query_failed"
    ORPHAN_CONVERSATION = "orphan_conversation"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_conversations_created():
    CONVERSATIONS_CREATED_TOTAL.inc()


def increment_messages(outcome: str):
    MESSAGES_TOTAL.labels(outcome=outcome).inc()


def increment_dropped_conversations(count: int = 1):
    DROPPED_CONVERSATIONS_TOTAL.inc(count)


def increment_error(error_type: str):
    ERRORS_TOTAL.labels(error_type=error_type).inc()


def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_conversations_created",
    "increment_messages",
    "increment_dropped_conversations",
    "increment_error",
    "get_metrics_content",
    "MessageOutcome",
    "MetricsErrorType",
]
