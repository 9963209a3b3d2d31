"""
Constants used across the predictor.
Pinned for determinism: table order is part of the contract.
"""
from typing import Dict, List, Tuple

from src.models.entity import EntityType
from src.models.intent import IntentLabel

# =============================================================================
# Intent keyword triggers (ordered: declaration order breaks ties)
# =============================================================================
INTENT_TRIGGERS: Dict[IntentLabel, Tuple[str, ...]] = {
    IntentLabel.BOOK_FLIGHT: (
        "book flight", "flight ticket", "fly to", "airline", "plane ticket", "book a flight",
    ),
    IntentLabel.CHECK_WEATHER: (
        "weather", "temperature", "forecast", "rain", "sunny", "climate", "snow", "will it",
    ),
    IntentLabel.FIND_RESTAURANT: (
        "restaurant", "eat", "dining", "food place", "lunch", "dinner", "cuisine",
        "downtown", "close to",
    ),
    IntentLabel.ORDER_FOOD: (
        "order food", "delivery", "pizza", "burger", "takeout", "churrascaria",
    ),
    IntentLabel.GET_DIRECTIONS: (
        "directions", "how to get", "navigate", "route", "way to",
    ),
    IntentLabel.BOOK_HOTEL: (
        "book hotel", "hotel room", "accommodation", "stay at",
    ),
    IntentLabel.CANCEL_BOOKING: (
        "cancel", "cancellation", "refund",
    ),
    IntentLabel.CHECK_STATUS: (
        "status", "check my", "where is my",
    ),
    IntentLabel.GREETING: (
        "hello", "hi", "hey", "good morning", "good evening",
    ),
    IntentLabel.FAREWELL: (
        "bye", "goodbye", "see you", "take care",
    ),
}

FALLBACK_INTENT: IntentLabel = IntentLabel.ASK_QUESTION

MATCHED_CONFIDENCE: float = 0.85
FALLBACK_CONFIDENCE: float = 0.5

# =============================================================================
# Lexicons (first occurrence per entry, case-insensitive)
# =============================================================================
LOCATION_LEXICON: List[str] = [
    "new york", "london", "paris", "tokyo", "delhi", "mumbai", "bangalore", "chennai",
    "downtown", "mt", "montana", "california", "texas", "florida", "boston", "chicago",
    "seattle", "san francisco", "los angeles", "miami", "atlanta",
]

PRODUCT_LEXICON: List[str] = [
    "churrascaria", "pizza", "burger", "sushi", "italian", "chinese", "mexican", "thai",
]

# =============================================================================
# Pattern vocabularies
# =============================================================================
RELATIVE_DAYS: List[str] = ["today", "tomorrow", "yesterday"]

WEEKDAYS: List[str] = [
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

# Full names before abbreviations so the longer form is preferred.
MONTHS: List[str] = [
    "january", "february", "march", "april", "may", "june", "july",
    "august", "september", "october", "november", "december",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "oct", "nov", "dec",
]

NUMBER_WORDS: List[str] = [
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
]

QUANTITY_UNITS: List[str] = [
    "people", "person", "tickets?", "rooms?", "nights?", "days?", "guests?",
]

# =============================================================================
# Reconciliation
# =============================================================================
# Types dropped when an earlier accepted span already starts at the same offset.
START_SUPPRESSED_TYPES: frozenset = frozenset({EntityType.ORGANIZATION, EntityType.PRODUCT})
