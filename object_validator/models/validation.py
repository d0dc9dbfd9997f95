"""
ValidationResult — encapsulates the outcome of one validation call.
"""
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class ValidationResult:
    """Result of validating an object against a descriptor list."""

    valid: bool = True
    errors: List[Any] = field(default_factory=list)

    def add_error(self, payload: Any) -> None:
        self.valid = False
        self.errors.append(payload)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
        }
