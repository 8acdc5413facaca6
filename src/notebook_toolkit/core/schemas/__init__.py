"""
Schemas Package

Structural validation for answer payloads handed over by the generation
step.
"""

from .validator import ValidationError, validate_answer_payload, validate_answer_payloads

__all__ = [
    "ValidationError",
    "validate_answer_payload",
    "validate_answer_payloads",
]
