"""
Shared test fixtures for the predictor test suite.
"""
import json

import pytest

from src.models.entity import EntitySpan, EntityType
from src.models.intent import IntentLabel
from src.models.prediction import PredictionResult


# ==========================================================================
# Utterances
# ==========================================================================

@pytest.fixture
def flight_text():
    return "I want to book flight to Paris tomorrow"


@pytest.fixture
def adversarial_texts():
    """Inputs that must never crash the predictor."""
    return [
        "",
        " ",
        "\t\n",
        "!!!???...",
        "'",
        '"',
        "''",
        '""',
        "I'm at Joe's",
        "İstanbul ß ﬁ",
        "日本 東京 🚀🚀",
        "a" * 5000,
        "12/34/5678 99:99 pm 0 people",
        "MT mt Mt mT",
        "\u0000​",
    ]


# ==========================================================================
# Annotations
# ==========================================================================

@pytest.fixture
def mock_annotations():
    return [
        {
            "text": "I want to book flight to Paris tomorrow",
            "intent": "book_flight",
            "entities": [
                {"text": "Paris", "type": "location", "start": 25, "end": 30},
                {"text": "tomorrow", "type": "date", "start": 31, "end": 39},
            ],
        },
        {
            "text": "Hello, good morning!",
            "intent": "greeting",
            "entities": [],
        },
        {
            "text": "Book a table for 3 people tonight",
            "intent": "find_restaurant",
            "entities": [
                {"text": "3 people", "type": "quantity", "start": 17, "end": 25},
            ],
        },
    ]


@pytest.fixture
def mock_annotations_json(mock_annotations):
    return json.dumps(mock_annotations, ensure_ascii=False)


# ==========================================================================
# Predictions
# ==========================================================================

@pytest.fixture
def mock_prediction():
    return PredictionResult(
        intent=IntentLabel.BOOK_FLIGHT,
        confidence=0.85,
        entities=(
            EntitySpan("Paris", EntityType.LOCATION, 25, 30),
            EntitySpan("tomorrow", EntityType.DATE, 31, 39),
        ),
    )
