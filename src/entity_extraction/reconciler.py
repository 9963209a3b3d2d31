"""
Deterministic Span Reconciler.

Collapses candidates produced by the extractors, walked in extractor
declaration order:
1. Identical (start, end) → the first candidate wins, whatever its type
2. organization / product candidates starting where an accepted span
   already starts are dropped
3. Overlapping but non-identical spans are all kept

Because suppression only looks at candidates earlier in declaration order,
the outcome does not depend on how (or in what order) extractors executed.
"""
from typing import List, Set, Tuple

from src.config.constants import START_SUPPRESSED_TYPES
from src.models.entity import EntitySpan


def reconcile(candidates: List[EntitySpan]) -> List[EntitySpan]:
    """
    Remove exact duplicates and same-start organization/product candidates.

    Args:
        candidates: All extracted spans, concatenated in extractor
                    declaration order (location, date, time, quantity,
                    person, organization, product).

    Returns:
        Surviving spans sorted by (start, end).
    """
    if not candidates:
        return []

    accepted: List[EntitySpan] = []
    seen_spans: Set[Tuple[int, int]] = set()
    seen_starts: Set[int] = set()

    for candidate in candidates:
        key = (candidate.start, candidate.end)
        if key in seen_spans:
            continue
        if candidate.type in START_SUPPRESSED_TYPES and candidate.start in seen_starts:
            continue

        accepted.append(candidate)
        seen_spans.add(key)
        seen_starts.add(candidate.start)

    # Stable sort: ties keep declaration order
    accepted.sort(key=lambda e: (e.start, e.end))
    return accepted
