"""Input validation for identifiers, scores and free text.

Every validator returns a list of error messages; an empty list means the
value was accepted. Validators never raise.
"""

import re
from typing import Any

MAX_IDENTIFIER_LENGTH = 100
MIN_SCORE = 1
MAX_SCORE = 5

CANONICAL_ID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
SLUG_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def is_canonical_id(value: Any) -> bool:
    """Return True for a 36-character hyphenated hex id."""
    return isinstance(value, str) and CANONICAL_ID_PATTERN.fullmatch(value) is not None


def validate_identifier(value: Any, field: str = "skill_id") -> list[str]:
    """Validate a skill id or slug before it is used in a request path."""
    if not isinstance(value, str) or not value.strip():
        return [f"Field '{field}' must be a non-empty string"]

    if len(value) > MAX_IDENTIFIER_LENGTH:
        return [
            f"Field '{field}' exceeds {MAX_IDENTIFIER_LENGTH} character limit "
            f"({len(value)} chars)"
        ]

    if is_canonical_id(value) or SLUG_PATTERN.fullmatch(value):
        return []

    return [
        f"Invalid {field} format: '{value}'. Use a skill UUID or a slug "
        "containing only letters, digits, hyphens, and underscores."
    ]


def validate_text(
    value: Any,
    field: str,
    max_length: int,
    *,
    min_length: int = 0,
    required: bool = True,
) -> list[str]:
    """Validate a free-text argument against length bounds."""
    if value is None:
        if required:
            return [f"Missing required field: {field}"]
        return []

    if not isinstance(value, str):
        return [f"Field '{field}' must be a string"]

    if required and not value.strip():
        return [f"Field '{field}' must be a non-empty string"]

    errors = []
    if len(value) > max_length:
        errors.append(
            f"Field '{field}' exceeds {max_length} character limit ({len(value)} chars)"
        )
    if len(value) < min_length:
        errors.append(
            f"Field '{field}' must be at least {min_length} characters. "
            f"You wrote {len(value)}."
        )
    return errors


def coerce_score(value: Any) -> int | None:
    """Return the integer score, or None when the value is not integral."""
    # bool is a subclass of int
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_score(value: Any, field: str = "claws") -> list[str]:
    """Validate an integer rating between MIN_SCORE and MAX_SCORE."""
    score = coerce_score(value)
    if score is None or not MIN_SCORE <= score <= MAX_SCORE:
        label = field.capitalize()
        return [f"{label} must be an integer from {MIN_SCORE} to {MAX_SCORE}"]
    return []
