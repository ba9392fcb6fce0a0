"""Feedback Desk database models."""

from feedback_desk.models.base import Base
from feedback_desk.models.feedback import Feedback

__all__ = [
    "Base",
    "Feedback",
]
