"""
Intent Scoring — rule-based keyword matcher.

Each intent owns an ordered tuple of lowercase trigger phrases. An intent's
score is the number of its triggers found as substrings of the lower-cased
utterance (each trigger counts once). The strictly highest score wins; ties
go to the intent declared first. No match falls back to `ask_question`.

Confidence is banded, not calibrated:
    score > 0   → 0.85
    score == 0  → 0.5
"""
import logging
from typing import Dict, List, Optional, Tuple

from src.config.constants import (
    FALLBACK_CONFIDENCE,
    FALLBACK_INTENT,
    INTENT_TRIGGERS,
    MATCHED_CONFIDENCE,
)
from src.models.intent import IntentLabel

logger = logging.getLogger(__name__)


class IntentScorer:
    """
    Keyword-count intent scorer with a configurable trigger table.

    Triggers are matched by plain substring containment, so "hi" also fires
    inside "which" and "eat" inside "great". That precision trade-off is part
    of the observed behavior and is kept as is.
    """

    def __init__(self, triggers: Optional[Dict[IntentLabel, Tuple[str, ...]]] = None):
        self.triggers = triggers if triggers is not None else INTENT_TRIGGERS

    def rank(self, text: str) -> List[Tuple[IntentLabel, int]]:
        """
        Score every intent of the trigger table.

        Args:
            text: Raw utterance (any case).

        Returns:
            [(intent, match_count), ...] sorted by count descending; equal
            counts keep trigger-table order.
        """
        lower_text = text.lower()

        counts: List[Tuple[IntentLabel, int]] = []
        for intent, phrases in self.triggers.items():
            count = sum(1 for phrase in phrases if phrase in lower_text)
            counts.append((intent, count))

        # sorted() is stable: declaration order survives among equal counts
        return sorted(counts, key=lambda item: -item[1])

    def score(self, text: str) -> Tuple[IntentLabel, float]:
        """
        Pick the winning intent and its banded confidence.

        Returns:
            (intent, confidence) — (ask_question, 0.5) when nothing matches.
        """
        ranking = self.rank(text)

        best_intent, best_count = FALLBACK_INTENT, 0
        if ranking and ranking[0][1] > 0:
            best_intent, best_count = ranking[0]

        confidence = MATCHED_CONFIDENCE if best_count > 0 else FALLBACK_CONFIDENCE

        logger.debug(
            "Intent scored: %s (matches=%d, confidence=%.2f)",
            best_intent.value,
            best_count,
            confidence,
        )
        return best_intent, confidence


# Module-level default scorer instance
intent_scorer = IntentScorer()


def rank_intents(text: str) -> List[Tuple[IntentLabel, int]]:
    """Rank all intents of the default trigger table for *text*."""
    return intent_scorer.rank(text)


def score_intent(text: str) -> Tuple[IntentLabel, float]:
    """Score *text* with the default trigger table."""
    return intent_scorer.score(text)
