"""
Batch runner for the rule-based NLU predictor.

Reads:
  - prediction_io/utterances.json  (or the first CLI argument)
    A JSON list whose items are either plain utterance strings or annotation
    objects {"text", "intent", "entities"}.

Produces:
  - prediction_io/predictions.json (or the second CLI argument)

When every item is an annotation, the output also carries evaluation metrics.
"""
import json
import logging
import sys
import time
from pathlib import Path

from src.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_prediction")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "prediction_io"

INPUT_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "utterances.json"
OUTPUT_FILE = Path(sys.argv[2]) if len(sys.argv) > 2 else IO_DIR / "predictions.json"

# ---------------------------------------------------------------------------
# Load input
# ---------------------------------------------------------------------------
logger.info("Loading input from %s", INPUT_FILE)

from src.prediction.validation import validate_annotation_items

with open(INPUT_FILE, encoding="utf-8") as f:
    input_result = validate_annotation_items(f.read())

for warning in input_result.warnings:
    logger.warning(warning)

if not input_result.valid:
    for error in input_result.errors:
        logger.error(error)
    sys.exit(1)

items: list = input_result.data

texts = [item if isinstance(item, str) else item["text"] for item in items]
annotated = bool(items) and all(isinstance(item, dict) and "intent" in item for item in items)

logger.info("utterances        : %d", len(texts))
logger.info("annotated         : %s", annotated)
logger.info("parallel extract  : %s", settings.PARALLEL_EXTRACTORS)

# ---------------------------------------------------------------------------
# Prediction
# ---------------------------------------------------------------------------
from src.prediction.evaluation import evaluate_predictions
from src.prediction.handler import predict_with_settings

start_time = time.monotonic()
predictions = [predict_with_settings(t) for t in texts]
elapsed_ms = int((time.monotonic() - start_time) * 1000)

evaluation = None
if annotated:
    evaluation = evaluate_predictions(items, predictor=predict_with_settings)

result = {
    "predictions": [
        {"text": text, **prediction.to_dict()}
        for text, prediction in zip(texts, predictions)
    ],
    "evaluation": evaluation,
    "processing_metadata": {
        "prediction_duration_ms": elapsed_ms,
        "utterances": len(texts),
        "entities_extracted": sum(len(p.entities) for p in predictions),
    },
}

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(result, f, ensure_ascii=False, indent=2)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("NLU PREDICTION — SUMMARY")
print("=" * 70)

for text, prediction in zip(texts, predictions):
    print(f"\n[{prediction.intent.value:16s}] conf={prediction.confidence:.2f}  {text}")
    for e in prediction.entities:
        print(f"    {e.type.value:14s} → {e.text} [{e.start},{e.end}]")

if evaluation is not None:
    print(f"\nAccuracy    : {evaluation['accuracy']:.2%}")
    print(f"Precision   : {evaluation['precision_score']:.2%}")
    print(f"Recall      : {evaluation['recall_score']:.2%}")
    print(f"F1          : {evaluation['f1_score']:.2%}")

print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
