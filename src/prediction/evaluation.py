"""
Evaluation — score predictions against annotated utterances.

Metrics:
    accuracy         = share of utterances whose predicted intent is the gold intent
    precision_score  = TP / (TP + FP)   over entities, micro-averaged
    recall_score     = TP / (TP + FN)
    f1_score         = harmonic mean of precision and recall

An entity is a true positive only on an exact (start, end, type) match.
Every ratio with a zero denominator is reported as 0.0.
"""
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from src.models.nlu_io import AnnotationRecord
from src.models.prediction import PredictionResult
from src.prediction.predictor import predict

logger = logging.getLogger(__name__)

SpanKey = Tuple[int, int, str]


def annotation_from_dict(raw: dict) -> AnnotationRecord:
    """Validate a raw annotation dict (as stored by the annotation UI)."""
    return AnnotationRecord.model_validate(raw)


def _safe_ratio(numerator: float, denominator: float) -> float:
    return float(numerator / denominator) if denominator else 0.0


def _span_keys(entities) -> Set[SpanKey]:
    return {(e.start, e.end, e.type.value) for e in entities}


def compare_entities(
    gold: AnnotationRecord,
    prediction: PredictionResult,
) -> Tuple[int, int, int]:
    """
    Count entity agreement for a single utterance.

    Returns:
        (true_positives, false_positives, false_negatives)
    """
    gold_keys = _span_keys(gold.entities)
    pred_keys = _span_keys(prediction.entities)

    tp = len(gold_keys & pred_keys)
    fp = len(pred_keys - gold_keys)
    fn = len(gold_keys - pred_keys)
    return tp, fp, fn


def score_predictions(
    annotations: Sequence[AnnotationRecord],
    predictions: Sequence[PredictionResult],
) -> dict:
    """
    Compute intent accuracy and entity precision/recall/F1.

    Args:
        annotations: Gold records.
        predictions: One prediction per record, same order.

    Returns:
        {
            "accuracy": float,
            "precision_score": float,
            "recall_score": float,
            "f1_score": float,
            "per_intent_accuracy": {intent: float},
            "sample_count": int,
        }

    Raises:
        ValueError: If the sequences are empty or differ in length.
    """
    if not annotations:
        raise ValueError("Cannot evaluate an empty annotation set")
    if len(annotations) != len(predictions):
        raise ValueError(
            f"Annotation/prediction count mismatch: {len(annotations)} != {len(predictions)}"
        )

    intent_hits = np.array(
        [gold.intent == pred.intent for gold, pred in zip(annotations, predictions)],
        dtype=float,
    )

    counts = np.array(
        [compare_entities(gold, pred) for gold, pred in zip(annotations, predictions)],
        dtype=float,
    ).reshape(-1, 3)
    tp, fp, fn = counts.sum(axis=0)

    precision = _safe_ratio(tp, tp + fp)
    recall = _safe_ratio(tp, tp + fn)
    f1 = _safe_ratio(2 * precision * recall, precision + recall)

    by_intent: Dict[str, List[float]] = defaultdict(list)
    for gold, hit in zip(annotations, intent_hits):
        by_intent[gold.intent.value].append(hit)

    per_intent_accuracy = {
        intent: float(np.mean(hits)) for intent, hits in sorted(by_intent.items())
    }

    return {
        "accuracy": float(np.mean(intent_hits)),
        "precision_score": precision,
        "recall_score": recall,
        "f1_score": f1,
        "per_intent_accuracy": per_intent_accuracy,
        "sample_count": len(annotations),
    }


def evaluate_predictions(
    annotations: Sequence[AnnotationRecord | dict],
    predictor: Optional[Callable[[str], PredictionResult]] = None,
) -> dict:
    """
    Predict every annotated utterance and score the results.

    Args:
        annotations: AnnotationRecord objects or raw annotation dicts.
        predictor: Prediction function. Defaults to `predict`.

    Returns:
        Metrics dict from score_predictions().
    """
    if predictor is None:
        predictor = predict

    records = [
        a if isinstance(a, AnnotationRecord) else annotation_from_dict(a)
        for a in annotations
    ]
    predictions = [predictor(r.text) for r in records]

    metrics = score_predictions(records, predictions)
    logger.info(
        "Evaluated %d sample(s): accuracy=%.3f f1=%.3f",
        metrics["sample_count"],
        metrics["accuracy"],
        metrics["f1_score"],
    )
    return metrics
