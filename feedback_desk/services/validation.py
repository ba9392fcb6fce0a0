"""Field rules for feedback submissions."""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from feedback_desk.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    error: Optional[str] = None


def _is_blank(value: Any) -> bool:
    # Non-string values count as missing.
    return not isinstance(value, str) or not value.strip()


# fullmatch: "$" alone would accept a trailing newline.
def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_mobile(mobile: str) -> bool:
    return MOBILE_PATTERN.fullmatch(mobile) is not None


def is_valid_rating(rating: Any) -> bool:
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_RATING <= rating <= MAX_RATING


def validate_feedback(data: Mapping[str, Any]) -> ValidationResult:
    """Check a submission field by field; the first broken rule is reported."""
    name = data.get("name")
    email = data.get("email")
    mobile = data.get("mobile")
    message = data.get("message")
    rating = data.get("rating")

    if _is_blank(name):
        return ValidationResult(ok=False, error="Name is required")
    if _is_blank(email):
        return ValidationResult(ok=False, error="Email is required")
    if not is_valid_email(email):
        return ValidationResult(ok=False, error="Invalid email format")
    if _is_blank(mobile):
        return ValidationResult(ok=False, error="Mobile number is required")
    if not is_valid_mobile(mobile):
        return ValidationResult(ok=False, error="Mobile number must be exactly 10 digits")
    if _is_blank(message):
        return ValidationResult(ok=False, error="Message is required")
    if not rating or not is_valid_rating(rating):
        return ValidationResult(ok=False, error=f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return ValidationResult(ok=True)


def ensure_valid(data: Mapping[str, Any]) -> None:
    """Raise ValidationError with the first broken rule."""
    result = validate_feedback(data)
    if not result.ok:
        raise ValidationError(result.error)
