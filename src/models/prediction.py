"""
PredictionResult — the structured output of a single prediction call.
"""
from dataclasses import dataclass, field
from typing import Tuple

from src.models.entity import EntitySpan
from src.models.intent import IntentLabel


@dataclass(frozen=True)
class PredictionResult:
    """Intent label, banded confidence and reconciled entity spans."""

    intent: IntentLabel
    confidence: float
    entities: Tuple[EntitySpan, ...] = field(default=())

    def to_dict(self) -> dict:
        """Serialize to the `{intent, confidence, entities}` response shape."""
        return {
            "intent": self.intent.value,
            "confidence": self.confidence,
            "entities": [e.to_dict() for e in self.entities],
        }
