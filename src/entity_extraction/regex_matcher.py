"""
RegEx Entity Matcher — pattern-based entity extraction.

One compiled pattern per entity type. Every non-overlapping match becomes a
span whose text is the matched substring of the original utterance.
"""
import re
from typing import List, Pattern

from src.config.constants import (
    MONTHS,
    NUMBER_WORDS,
    QUANTITY_UNITS,
    RELATIVE_DAYS,
    WEEKDAYS,
)
from src.models.entity import EntitySpan, EntityType


# ==========================================================================
# Patterns
# ==========================================================================
_DAY_NAMES = "|".join(RELATIVE_DAYS + WEEKDAYS + MONTHS)

# (a) day/month name [day [, year]]  (b) d/d/yyyy  (c) bare 4-digit year
DATE_PATTERN: Pattern[str] = re.compile(
    r"\b(?:"
    r"(?:" + _DAY_NAMES + r")(?:\s+\d{1,2}(?:,?\s+\d{2,4})?)?"
    r"|\d{1,2}/\d{1,2}/\d{2,4}"
    r"|\d{4}"
    r")\b",
    re.IGNORECASE,
)

# H:MM [am|pm]  or  H am|pm
TIME_PATTERN: Pattern[str] = re.compile(
    r"\b(?:\d{1,2}:\d{2}(?:\s?(?:am|pm))?|\d{1,2}\s?(?:am|pm))\b",
    re.IGNORECASE,
)

QUANTITY_PATTERN: Pattern[str] = re.compile(
    r"\b(?:" + "|".join(NUMBER_WORDS) + r"|\d+)\s+(?:" + "|".join(QUANTITY_UNITS) + r")\b",
    re.IGNORECASE,
)

# Case-sensitive: capitalization is the only signal.
PERSON_PATTERN: Pattern[str] = re.compile(r"\b[A-Z][a-z]+\s+[A-Z][a-z]+\b")

# "double quoted" | 'single quoted' | Three Or More Capitalized
ORGANIZATION_PATTERN: Pattern[str] = re.compile(
    r"\"([^\"]+)\"|'([^']+)'|\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+){2,})\b"
)


# ==========================================================================
# Extractors
# ==========================================================================

def match_pattern(
    text: str,
    pattern: Pattern[str],
    entity_type: EntityType,
) -> List[EntitySpan]:
    """
    Emit one span per non-overlapping match of *pattern*.

    Args:
        text: Original utterance.
        pattern: Compiled pattern; the whole match is the entity.
        entity_type: Type assigned to every emitted span.

    Returns:
        Spans in match order.
    """
    return [
        EntitySpan(
            text=match.group(0),
            type=entity_type,
            start=match.start(),
            end=match.end(),
        )
        for match in pattern.finditer(text)
    ]


def extract_dates(text: str) -> List[EntitySpan]:
    return match_pattern(text, DATE_PATTERN, EntityType.DATE)


def extract_times(text: str) -> List[EntitySpan]:
    return match_pattern(text, TIME_PATTERN, EntityType.TIME)


def extract_quantities(text: str) -> List[EntitySpan]:
    return match_pattern(text, QUANTITY_PATTERN, EntityType.QUANTITY)


def extract_persons(text: str) -> List[EntitySpan]:
    """Any two adjacent title-cased words. Permissive; false positives expected."""
    return match_pattern(text, PERSON_PATTERN, EntityType.PERSON)


def extract_organizations(text: str) -> List[EntitySpan]:
    """
    Quoted phrases and runs of three or more capitalized words.

    For quoted phrases the span covers the phrase without its quotes, so
    `text == utterance[start:end]` still holds.
    """
    spans: List[EntitySpan] = []

    for match in ORGANIZATION_PATTERN.finditer(text):
        group = next(g for g in (1, 2, 3) if match.group(g) is not None)
        start, end = match.span(group)
        spans.append(
            EntitySpan(
                text=match.group(group),
                type=EntityType.ORGANIZATION,
                start=start,
                end=end,
            )
        )

    return spans
