"""Submission, listing and statistics for feedback."""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping

from feedback_desk.models import Feedback
from feedback_desk.services.validation import ensure_valid
from feedback_desk.storage import FeedbackStore

logger = logging.getLogger("FeedbackDesk.feedback")

CONFIRMATION_MESSAGE = "Thank you! Your feedback has been submitted successfully."

POSITIVE_THRESHOLD = 4
NEGATIVE_THRESHOLD = 3

TEXT_FIELDS = ("name", "email", "mobile", "message")


@dataclass(frozen=True)
class SubmissionReceipt:
    id: int
    message: str = CONFIRMATION_MESSAGE


@dataclass(frozen=True)
class FeedbackStats:
    """Aggregate view over every submission.

    A rating of 3 counts toward ``total`` and ``avg_rating`` but is neither
    positive nor negative.
    """

    total: int
    avg_rating: float
    positive: int
    negative: int


class FeedbackService:
    """Feedback operations on top of a FeedbackStore."""

    def __init__(self, store: FeedbackStore) -> None:
        self.store = store

    async def submit(self, data: Mapping[str, Any]) -> SubmissionReceipt:
        """Validate, trim and persist a submission.

        Raises ValidationError before any storage access when a rule is broken.
        """
        ensure_valid(data)

        record = {field: data[field].strip() for field in TEXT_FIELDS}
        record["rating"] = data["rating"]

        feedback_id = await self.store.insert(record)
        logger.info(f"Feedback {feedback_id} saved (rating {record['rating']})")
        return SubmissionReceipt(id=feedback_id)

    async def list_feedback(self) -> List[Feedback]:
        """All submissions, newest first. Callers must have checked admin access."""
        return await self.store.list_all()

    async def compute_stats(self) -> FeedbackStats:
        rows = await self.store.list_all_unordered()
        total = len(rows)
        if total == 0:
            return FeedbackStats(total=0, avg_rating=0, positive=0, negative=0)

        ratings = [row.rating for row in rows]
        return FeedbackStats(
            total=total,
            avg_rating=round(sum(ratings) / total, 2),
            positive=sum(1 for r in ratings if r >= POSITIVE_THRESHOLD),
            negative=sum(1 for r in ratings if r < NEGATIVE_THRESHOLD),
        )
