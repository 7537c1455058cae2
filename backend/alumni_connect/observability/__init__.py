"""Observability package for the messaging backend."""

from alumni_connect.observability.metrics import (
    observe_request_latency,
    increment_conversations_created,
    increment_messages,
    increment_dropped_conversations,
    increment_error,
    get_metrics_content,
    MessageOutcome,
    MetricsErrorType,
)

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
