"""
Lexicon Matching — gazetteer-based entity extraction.

Each lexicon entry contributes at most one span: its first case-insensitive
occurrence in the text. Matching is plain substring search (no word
boundary check), and the span text is taken from the original text so the
source casing is preserved.
"""
import re
from typing import List

from src.config.constants import LOCATION_LEXICON, PRODUCT_LEXICON
from src.models.entity import EntitySpan, EntityType


def match_lexicon(
    text: str,
    lexicon: List[str],
    entity_type: EntityType,
) -> List[EntitySpan]:
    """
    Find the first occurrence of every lexicon entry in *text*.

    Case folding is done by the regex engine rather than by lower-casing the
    text, so offsets stay valid for characters whose lower-case form has a
    different length.

    Args:
        text: Original utterance.
        lexicon: Lowercase surface forms, in declaration order.
        entity_type: Type assigned to every emitted span.

    Returns:
        Spans in lexicon order (not position order).
    """
    spans: List[EntitySpan] = []

    for term in lexicon:
        if not term:
            continue
        match = re.search(re.escape(term), text, re.IGNORECASE)
        if match is None:
            continue
        spans.append(
            EntitySpan(
                text=match.group(0),
                type=entity_type,
                start=match.start(),
                end=match.end(),
            )
        )

    return spans


def extract_locations(text: str) -> List[EntitySpan]:
    """Cities, regions and generic place terms ("downtown")."""
    return match_lexicon(text, LOCATION_LEXICON, EntityType.LOCATION)


def extract_products(text: str) -> List[EntitySpan]:
    """Cuisine and food terms."""
    return match_lexicon(text, PRODUCT_LEXICON, EntityType.PRODUCT)
