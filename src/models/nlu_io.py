"""
Typed Pydantic models for the predictor I/O contract.

Covers the request/response surface consumed by callers (UI, annotation
tooling) and the annotated utterances used for evaluation.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from src.models.entity import EntitySpan, EntityType
from src.models.intent import IntentLabel


# =============================================================================
# Request
# =============================================================================


class PredictRequest(BaseModel):
    """Body of a prediction request. Empty text is a caller error."""

    text: str = Field(..., description="Raw utterance to classify.")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v:
            raise ValueError("Text is required")
        return v


# =============================================================================
# Response
# =============================================================================


class EntitySpanPayload(BaseModel):
    """A single entity as it appears on the wire."""

    text: str
    type: EntityType
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)

    @model_validator(mode="after")
    def validate_offsets(self) -> "EntitySpanPayload":
        if self.start >= self.end:
            raise ValueError("start must be strictly less than end")
        return self

    @classmethod
    def from_span(cls, span: EntitySpan) -> "EntitySpanPayload":
        return cls(text=span.text, type=span.type, start=span.start, end=span.end)

    def to_span(self) -> EntitySpan:
        return EntitySpan(text=self.text, type=self.type, start=self.start, end=self.end)


class PredictResponse(BaseModel):
    """Successful prediction response: `{intent, confidence, entities}`."""

    intent: IntentLabel
    confidence: float = Field(..., ge=0.0, le=1.0)
    entities: List[EntitySpanPayload] = Field(default_factory=list)


# =============================================================================
# Annotation (gold data for evaluation)
# =============================================================================


class AnnotationRecord(BaseModel):
    """
    A human-labelled utterance.

    Entity offsets must point inside `text` and the entity text must be the
    exact substring at those offsets.
    """

    text: str = Field(..., min_length=1)
    intent: IntentLabel
    entities: List[EntitySpanPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_entity_offsets(self) -> "AnnotationRecord":
        for ent in self.entities:
            if ent.end > len(self.text):
                raise ValueError(
                    f"entity '{ent.text}' ends at {ent.end}, beyond text length {len(self.text)}"
                )
            if self.text[ent.start:ent.end] != ent.text:
                raise ValueError(
                    f"entity '{ent.text}' does not match text at [{ent.start},{ent.end}]"
                )
        return self
