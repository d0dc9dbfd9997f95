"""
Prometheus Metrics — validator observability.

Exposes counters and a histogram for:
- Validation runs by outcome
- Failing descriptors by error kind (custom payload vs generated message)
- Validation latency

Usage
-----
    from object_validator.engine.metrics import timed_validation, record_validation

    with timed_validation():
        result = validator.validate(obj)
    record_validation(result.valid)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Validation runs, labelled "valid" / "invalid".
VALIDATIONS: Counter = Counter(
    "object_validator_validations_total",
    "Total validation runs by outcome",
    ["outcome"],
)

# Failing descriptors, labelled "custom" / "default".
DESCRIPTOR_FAILURES: Counter = Counter(
    "object_validator_descriptor_failures_total",
    "Failing descriptors by error payload kind",
    ["kind"],
)

VALIDATION_LATENCY: Histogram = Histogram(
    "object_validator_validation_seconds",
    "Time spent validating one object in seconds",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_validation(valid: bool) -> None:
    """Increment the validation counter for the run's outcome."""
    VALIDATIONS.labels(outcome="valid" if valid else "invalid").inc()


def record_descriptor_failure(custom: bool) -> None:
    """Increment the descriptor failure counter."""
    DESCRIPTOR_FAILURES.labels(kind="custom" if custom else "default").inc()


@contextmanager
def timed_validation() -> Generator[None, None, None]:
    """Context manager that records validation latency."""
    with VALIDATION_LATENCY.time():
        yield
