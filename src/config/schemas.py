"""
JSON Schemas for the prediction boundary.

Three schemas:
1. PREDICT_REQUEST_SCHEMA  — what a caller must send
2. PREDICT_RESPONSE_SCHEMA — what a successful prediction returns
3. ANNOTATION_SCHEMA       — a human-labelled utterance (evaluation input)

Enum values are generated from the closed enumerations so the schemas can
never drift from the models.
"""
from src.models.entity import EntityType
from src.models.intent import IntentLabel

INTENT_VALUES = [i.value for i in IntentLabel]
ENTITY_TYPE_VALUES = [t.value for t in EntityType]

# =============================================================================
# Shared entity item
# =============================================================================
ENTITY_ITEM_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["text", "type", "start", "end"],
    "properties": {
        "text": {"type": "string", "minLength": 1},
        "type": {"type": "string", "enum": ENTITY_TYPE_VALUES},
        "start": {"type": "integer", "minimum": 0},
        "end": {"type": "integer", "minimum": 1},
    },
}

# =============================================================================
# 1. Request
# =============================================================================
PREDICT_REQUEST_SCHEMA: dict = {
    "type": "object",
    "required": ["text"],
    "properties": {
        "text": {
            "type": "string",
            "description": "Raw utterance to classify",
        },
    },
}

# =============================================================================
# 2. Response
# =============================================================================
PREDICT_RESPONSE_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["intent", "confidence", "entities"],
    "properties": {
        "intent": {"type": "string", "enum": INTENT_VALUES},
        "confidence": {"type": "number", "minimum": 0, "maximum": 1},
        "entities": {"type": "array", "items": ENTITY_ITEM_SCHEMA},
    },
}

# =============================================================================
# 3. Annotation
# =============================================================================
ANNOTATION_SCHEMA: dict = {
    "type": "object",
    "required": ["text", "intent"],
    "properties": {
        "text": {"type": "string", "minLength": 1},
        "intent": {"type": "string", "enum": INTENT_VALUES},
        "entities": {"type": "array", "items": ENTITY_ITEM_SCHEMA},
    },
}
