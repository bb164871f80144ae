# notifier/metrics.py
from __future__ import annotations
from prometheus_client import (
    Counter, Gauge,
    generate_latest, REGISTRY,
)

CHANGES_TOTAL = Counter(
    "notifier_changes_total",
    "Mutations that produced a change record",
    ["attribute"]
)

DELIVERIES_TOTAL = Counter(
    "notifier_deliveries_total",
    "Subscriber callbacks invoked",
    ["attribute"]
)

CALLBACK_ERRORS_TOTAL = Counter(
    "notifier_callback_errors_total",
    "Subscriber callbacks that raised",
    ["attribute"]
)

ACTIVE_SUBSCRIPTIONS = Gauge(
    "notifier_active_subscriptions",
    "Subscriptions currently registered",
    ["attribute"]
)

def render_prometheus() -> bytes:
    """
    Text exposition of every notifier metric in the default registry.
    """
    return generate_latest(REGISTRY)
