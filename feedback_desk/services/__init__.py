"""Validation and business logic for feedback submissions."""

from feedback_desk.services.feedback_service import (
    FeedbackService,
    FeedbackStats,
    SubmissionReceipt,
)
from feedback_desk.services.validation import ValidationResult, ensure_valid, validate_feedback

__all__ = [
    "FeedbackService",
    "FeedbackStats",
    "SubmissionReceipt",
    "ValidationResult",
    "ensure_valid",
    "validate_feedback",
]
