"""
Predictor — main entry point of the rule-based NLU engine.

    text ──► intent scorer ──────────────────────────► (intent, confidence)
    text ──► extractors ──► reconciliation ──────────► entities

The two halves are independent. The function is pure: no I/O, no caches,
and the same text always yields the same result.
"""
import logging

from src.config.constants import FALLBACK_CONFIDENCE, FALLBACK_INTENT
from src.entity_extraction.pipeline import extract_all_entities
from src.intent.scorer import score_intent
from src.models.prediction import PredictionResult

logger = logging.getLogger(__name__)


def predict(text: str, parallel: bool = False, max_workers: int = 4) -> PredictionResult:
    """
    Classify *text* and extract its entities.

    Args:
        text: Raw utterance. Empty input yields the fallback result.
        parallel: Run entity extractors on a thread pool.
        max_workers: Pool size when *parallel* is set.

    Returns:
        PredictionResult with entities sorted by (start, end).
    """
    if not text:
        return PredictionResult(intent=FALLBACK_INTENT, confidence=FALLBACK_CONFIDENCE)

    intent, confidence = score_intent(text)
    entities = extract_all_entities(text, parallel=parallel, max_workers=max_workers)

    logger.debug(
        "Prediction: intent=%s confidence=%.2f entities=%d",
        intent.value,
        confidence,
        len(entities),
    )

    return PredictionResult(
        intent=intent,
        confidence=confidence,
        entities=tuple(entities),
    )
