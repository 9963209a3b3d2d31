"""
Validation — boundary checks for prediction requests and responses.

Implements:
- JSON parse
- Schema conformance (jsonschema)
- Request business rule (non-empty text)
- Response span invariants (offsets in range, text matches, no duplicates)
- Annotation file checks (batch runner input)
"""
import json
import logging
from typing import List, Set, Tuple

from jsonschema import ValidationError, validate

from src.config.schemas import (
    ANNOTATION_SCHEMA,
    PREDICT_REQUEST_SCHEMA,
    PREDICT_RESPONSE_SCHEMA,
)
from src.models.validation import ValidationResult

logger = logging.getLogger(__name__)

TEXT_REQUIRED_ERROR = "Text is required"


def validate_predict_request(body: str | dict) -> ValidationResult:
    """
    Validate an incoming prediction request.

    Stages:
        1. JSON Parse (if a string was given)
        2. Schema conformance
        3. Non-empty text

    Args:
        body: Raw JSON string or already-decoded dict.

    Returns:
        ValidationResult; `data` holds the decoded request on success.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Parse JSON
    # ------------------------------------------------------------------
    if isinstance(body, dict):
        data = body
    else:
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult.fail(errors, warnings)

    if not isinstance(data, dict):
        errors.append("Request body must be a JSON object")
        return ValidationResult.fail(errors, warnings)

    # ------------------------------------------------------------------
    # Stage 2: Missing / empty text
    # ------------------------------------------------------------------
    if not data.get("text"):
        errors.append(TEXT_REQUIRED_ERROR)
        return ValidationResult.fail(errors, warnings)

    # ------------------------------------------------------------------
    # Stage 3: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=data, schema=PREDICT_REQUEST_SCHEMA)
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult.fail(errors, warnings)

    extra = sorted(set(data.keys()) - {"text"})
    if extra:
        warnings.append(f"Ignored unexpected request fields: {extra}")

    return ValidationResult.ok(data, warnings)


def verify_entity_spans(entities: List[dict], text: str) -> List[str]:
    """
    Check span invariants for a list of serialized entities.

    Returns:
        One error string per violation (empty list when all spans are valid).
    """
    errors: List[str] = []
    seen: Set[Tuple[int, int]] = set()

    for ent in entities:
        start, end = ent["start"], ent["end"]

        if not (0 <= start < end <= len(text)):
            errors.append(
                f"Span out of range: [{start},{end}] for text of length {len(text)}"
            )
            continue

        if text[start:end] != ent["text"]:
            errors.append(
                f"Span text mismatch at [{start},{end}]: "
                f"'{ent['text']}' != '{text[start:end]}'"
            )

        if (start, end) in seen:
            errors.append(f"Duplicate span: [{start},{end}]")
        seen.add((start, end))

    return errors


def validate_prediction_output(output: dict, text: str) -> ValidationResult:
    """
    Validate a serialized prediction against the response contract.

    Stages:
        1. Schema conformance
        2. Span invariants against the original text

    Args:
        output: `PredictionResult.to_dict()` output.
        text: The utterance the prediction was made for.

    Returns:
        ValidationResult; `data` holds *output* on success.
    """
    errors: List[str] = []
    warnings: List[str] = []

    try:
        validate(instance=output, schema=PREDICT_RESPONSE_SCHEMA)
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult.fail(errors, warnings)

    errors.extend(verify_entity_spans(output.get("entities", []), text))

    if errors:
        logger.error("Prediction output failed validation: %s", errors)
        return ValidationResult.fail(errors, warnings)

    return ValidationResult.ok(output, warnings)


def validate_annotation_items(body: str | list) -> ValidationResult:
    """
    Validate a batch input file: a JSON list of plain utterance strings
    and/or annotation objects `{"text", "intent", "entities"}`.

    Annotation objects are checked against ANNOTATION_SCHEMA and their
    entity spans against their own text. Every bad item is reported; the
    result is only valid when no item fails.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if isinstance(body, list):
        items = body
    else:
        try:
            items = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult.fail(errors, warnings)

    if not isinstance(items, list):
        errors.append("Annotation file must be a JSON list")
        return ValidationResult.fail(errors, warnings)

    for idx, item in enumerate(items):
        if isinstance(item, str):
            if not item:
                warnings.append(f"Item {idx}: empty utterance")
            continue

        try:
            validate(instance=item, schema=ANNOTATION_SCHEMA)
        except ValidationError as e:
            errors.append(f"Item {idx}: schema violation: {e.message}")
            continue

        for err in verify_entity_spans(item.get("entities", []), item["text"]):
            errors.append(f"Item {idx}: {err}")

    if errors:
        return ValidationResult.fail(errors, warnings)

    return ValidationResult.ok(items, warnings)
