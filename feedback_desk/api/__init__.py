"""Feedback Desk API routes."""

from feedback_desk.api.admin import AdminController
from feedback_desk.api.feedback import FeedbackController

__all__ = ["AdminController", "FeedbackController"]
