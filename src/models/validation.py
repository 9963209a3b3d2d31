"""
ValidationResult — outcome of a boundary check (request, response or
annotation file).
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union

Payload = Union[dict, list]


@dataclass
class ValidationResult:
    """`data` carries the decoded payload and is set only when `valid`."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    data: Optional[Payload] = None

    @classmethod
    def ok(cls, data: Payload, warnings: Optional[List[str]] = None) -> "ValidationResult":
        return cls(valid=True, warnings=list(warnings or []), data=data)

    @classmethod
    def fail(
        cls, errors: List[str], warnings: Optional[List[str]] = None
    ) -> "ValidationResult":
        return cls(valid=False, errors=list(errors), warnings=list(warnings or []))
