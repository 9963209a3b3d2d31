"""
Entity model for extracted spans (lexicon / pattern extractors).
Offsets are code-point indices into the utterance, half-open [start, end).
"""
from dataclasses import dataclass
from enum import Enum


class EntityType(str, Enum):
    """Closed set of entity categories."""

    LOCATION = "location"
    DATE = "date"
    TIME = "time"
    PERSON = "person"
    ORGANIZATION = "organization"
    PRODUCT = "product"
    QUANTITY = "quantity"
    PRICE = "price"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EntitySpan:
    """A single extracted entity span."""

    text: str
    type: EntityType
    start: int
    end: int

    def overlaps(self, other: "EntitySpan") -> bool:
        """Check if two spans share at least one character."""
        return not (self.end <= other.start or other.end <= self.start)

    def same_span(self, other: "EntitySpan") -> bool:
        return self.start == other.start and self.end == other.end

    def span_length(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "type": self.type.value,
            "start": self.start,
            "end": self.end,
        }

    def __repr__(self) -> str:
        return f"EntitySpan('{self.text}', {self.type.value}, [{self.start},{self.end}])"
