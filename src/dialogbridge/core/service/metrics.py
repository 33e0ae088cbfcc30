"""Prometheus metrics for dialogbridge.

All metrics use the ``dialogbridge_`` prefix and are served on
``/metrics`` by the ASGI app mounted in ``dialogbridge.app``.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Fulfillment metrics
# ---------------------------------------------------------------------------

FULFILLMENTS_TOTAL = Counter(
    "dialogbridge_fulfillments_total",
    "Total webhook turns handled, by outcome",
    ["outcome"],  # ok | capability_error | unexpected_error | malformed_input
)

HISTORY_MESSAGES = Histogram(
    "dialogbridge_history_messages",
    "Number of prior messages reconstructed from the platform contexts",
    buckets=(0, 1, 2, 3, 4, 6, 8, 10, 20),
)

# ---------------------------------------------------------------------------
# Completion metrics
# ---------------------------------------------------------------------------

COMPLETION_LATENCY_SECONDS = Histogram(
    "dialogbridge_completion_latency_seconds",
    "Latency of a single chat completion call",
    ["status"],  # ok | error
    buckets=(0.25, 0.5, 1, 2, 5, 10, 20, 30, 60),
)

OUTCOME_OK = "ok"


@contextmanager
def observe_completion() -> Iterator[None]:
    """Time the enclosed completion call, labelled by success or failure."""
    start = time.monotonic()
    status = "ok"
    try:
        yield
    except Exception:
        status = "error"
        raise
    finally:
        COMPLETION_LATENCY_SECONDS.labels(status=status).observe(
            time.monotonic() - start
        )
