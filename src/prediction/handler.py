"""
Request Handler — framework-agnostic boundary around the predictor.

Maps a request body to an `(http_status, json_body)` pair:
    400 → invalid JSON, schema violation, missing/empty text
    200 → `{intent, confidence, entities}`
    500 → unexpected failure; body carries the error plus the fallback
          prediction so callers can still render something

Any HTTP framework can wrap this function directly.
"""
import logging
from typing import Callable, Optional, Tuple

from src.config import settings
from src.config.constants import FALLBACK_CONFIDENCE, FALLBACK_INTENT
from src.models.nlu_io import PredictRequest, PredictResponse
from src.models.prediction import PredictionResult
from src.prediction.metrics import record_prediction, record_request_error, timed_prediction
from src.prediction.predictor import predict
from src.prediction.validation import validate_predict_request, validate_prediction_output

logger = logging.getLogger(__name__)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "…"


def predict_with_settings(text: str) -> PredictionResult:
    """Run `predict` with the extractor concurrency configured in settings."""
    return predict(
        text,
        parallel=settings.PARALLEL_EXTRACTORS,
        max_workers=settings.EXTRACTOR_MAX_WORKERS,
    )


def fallback_error_body(message: str) -> dict:
    """Error body for unexpected failures, shaped like a fallback prediction."""
    return {
        "error": message,
        "intent": FALLBACK_INTENT.value,
        "confidence": FALLBACK_CONFIDENCE,
        "entities": [],
    }


def handle_predict_request(
    body: str | dict,
    predictor: Optional[Callable[[str], PredictionResult]] = None,
    validate_response: Optional[bool] = None,
) -> Tuple[int, dict]:
    """
    Validate a request, run the predictor, and shape the response.

    Args:
        body: Raw JSON string or decoded dict with a `text` field.
        predictor: Prediction function. Defaults to `predict` configured from
                   settings (parallel extractors, worker count).
        validate_response: Check the outgoing body against the response
                           contract. Defaults to settings.VALIDATE_RESPONSES.

    Returns:
        (status_code, json_body)
    """
    if predictor is None:
        predictor = predict_with_settings
    if validate_response is None:
        validate_response = settings.VALIDATE_RESPONSES

    # ==================================================================
    # Request validation
    # ==================================================================
    request_result = validate_predict_request(body)
    if not request_result.valid:
        logger.warning("Rejected prediction request: %s", request_result.errors)
        record_request_error("bad_request")
        return 400, {"error": "; ".join(request_result.errors)}

    for warning in request_result.warnings:
        logger.warning(warning)

    assert request_result.data is not None
    request = PredictRequest.model_validate(request_result.data)

    logger.info(
        "Predicting intent and entities for text: %s",
        _truncate(request.text, settings.MAX_TEXT_LOG_CHARS),
    )

    # ==================================================================
    # Prediction
    # ==================================================================
    try:
        with timed_prediction():
            result = predictor(request.text)

        output = result.to_dict()

        if validate_response:
            output_result = validate_prediction_output(output, request.text)
            if not output_result.valid:
                record_request_error("invalid_response")
                return 500, fallback_error_body(
                    f"Prediction failed validation: {output_result.errors}"
                )

        response = PredictResponse.model_validate(output)
    except Exception as e:
        logger.exception("Error in prediction handler")
        record_request_error("internal")
        return 500, fallback_error_body(str(e) or e.__class__.__name__)

    record_prediction(result)
    logger.info(
        "Prediction result: intent=%s confidence=%.2f entities=%d",
        response.intent.value,
        response.confidence,
        len(response.entities),
    )

    return 200, response.model_dump(mode="json")
