"""
Entity Extraction Pipeline — orchestrates lexicon + pattern extractors + reconciliation.

Pipeline:
    1. location      (lexicon)
    2. date          (pattern)
    3. time          (pattern)
    4. quantity      (pattern)
    5. person        (pattern)
    6. organization  (pattern)
    7. product       (lexicon)
    8. Reconciliation (exact duplicates, same-start organization/product)

Extractors are independent pure functions, so they may run on a thread
pool; candidates are always concatenated in declaration order before
reconciliation, which keeps the output identical to a sequential run.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple

from src.entity_extraction.lexicon_matcher import extract_locations, extract_products
from src.entity_extraction.reconciler import reconcile
from src.entity_extraction.regex_matcher import (
    extract_dates,
    extract_organizations,
    extract_persons,
    extract_quantities,
    extract_times,
)
from src.models.entity import EntitySpan, EntityType

logger = logging.getLogger(__name__)

Extractor = Callable[[str], List[EntitySpan]]

# Declaration order decides which duplicate survives reconciliation.
ENTITY_EXTRACTORS: List[Tuple[EntityType, Extractor]] = [
    (EntityType.LOCATION, extract_locations),
    (EntityType.DATE, extract_dates),
    (EntityType.TIME, extract_times),
    (EntityType.QUANTITY, extract_quantities),
    (EntityType.PERSON, extract_persons),
    (EntityType.ORGANIZATION, extract_organizations),
    (EntityType.PRODUCT, extract_products),
]


def collect_candidates(
    text: str,
    extractors: Optional[List[Tuple[EntityType, Extractor]]] = None,
    parallel: bool = False,
    max_workers: int = 4,
) -> List[EntitySpan]:
    """
    Run every extractor and concatenate their candidates in declaration order.

    Args:
        text: Original utterance.
        extractors: [(entity_type, extractor)] in declaration order.
                    Defaults to ENTITY_EXTRACTORS.
        parallel: Run extractors on a thread pool.
        max_workers: Pool size when *parallel* is set.

    Returns:
        Unreconciled candidate spans.
    """
    if extractors is None:
        extractors = ENTITY_EXTRACTORS

    functions = [fn for _, fn in extractors]

    if parallel:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # map() yields results in submission order
            per_extractor = list(pool.map(lambda fn: fn(text), functions))
    else:
        per_extractor = [fn(text) for fn in functions]

    candidates: List[EntitySpan] = []
    for (entity_type, _), spans in zip(extractors, per_extractor):
        if spans:
            logger.debug("%s extractor: %d candidate(s)", entity_type.value, len(spans))
        candidates.extend(spans)

    return candidates


def extract_all_entities(
    text: str,
    extractors: Optional[List[Tuple[EntityType, Extractor]]] = None,
    parallel: bool = False,
    max_workers: int = 4,
) -> List[EntitySpan]:
    """
    Full entity extraction pipeline.

    Args:
        text: Original utterance.
        extractors: Override of the extractor table (tests, experiments).
        parallel: Run extractors concurrently.
        max_workers: Pool size when *parallel* is set.

    Returns:
        Reconciled spans sorted by (start, end).
    """
    if not text:
        return []

    candidates = collect_candidates(
        text,
        extractors=extractors,
        parallel=parallel,
        max_workers=max_workers,
    )
    return reconcile(candidates)
