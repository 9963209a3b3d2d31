"""
Prometheus Metrics — prediction boundary observability.

Exposes counters and a histogram for:
- Predictions per intent
- Extracted entities per type
- Request errors per error type
- Prediction latency

Metrics are recorded by the request handler only; the predictor core stays
free of side effects.

Usage
-----
    from src.prediction.metrics import record_prediction, timed_prediction

    with timed_prediction():
        result = predict(text)
    record_prediction(result)
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from src.models.prediction import PredictionResult


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total predictions, labelled by winning intent.
PREDICTIONS: Counter = Counter(
    "nlu_predictions_total",
    "Total predictions by intent",
    ["intent"],
)

# Total entities returned, labelled by entity type.
ENTITIES_EXTRACTED: Counter = Counter(
    "nlu_entities_extracted_total",
    "Total extracted entities by entity type",
    ["entity_type"],
)

# Rejected or failed requests, labelled by error type.
REQUEST_ERRORS: Counter = Counter(
    "nlu_request_errors_total",
    "Prediction request errors by error type",
    ["error_type"],
)

# End-to-end prediction latency (seconds).
PREDICTION_LATENCY: Histogram = Histogram(
    "nlu_prediction_seconds",
    "Prediction processing time in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_prediction(result: PredictionResult) -> None:
    """Count the prediction's intent and each returned entity type."""
    PREDICTIONS.labels(intent=result.intent.value).inc()
    for entity in result.entities:
        ENTITIES_EXTRACTED.labels(entity_type=entity.type.value).inc()


def record_request_error(error_type: str = "generic") -> None:
    """Increment the request error counter for *error_type*."""
    REQUEST_ERRORS.labels(error_type=error_type).inc()


@contextmanager
def timed_prediction() -> Generator[None, None, None]:
    """
    Context manager that records prediction latency.

    Usage::

        with timed_prediction():
            result = predict(text)
    """
    with PREDICTION_LATENCY.time():
        yield
