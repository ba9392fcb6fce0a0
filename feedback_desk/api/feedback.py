"""Public feedback submission endpoint."""

import logging
from typing import Annotated, Any

from litestar import Controller, post
from litestar.params import Dependency
from pydantic import BaseModel, ConfigDict

from feedback_desk.services import FeedbackService

logger = logging.getLogger("FeedbackDesk.feedback")


# --- Request/Response Schemas ---

class FeedbackRequest(BaseModel):
    """Submitted feedback. Field rules are applied by the service, not here."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    mobile: Any = None
    message: Any = None
    rating: Any = None


class SubmitFeedbackResponse(BaseModel):
    """Response after submitting feedback."""
    message: str
    id: int


# --- Controller ---

class FeedbackController(Controller):
    """API endpoints for feedback submission."""

    path = "/api/feedback"
    tags = ["feedback"]

    @post("/")
    async def submit_feedback(
        self,
        data: FeedbackRequest,
        feedback_service: Annotated[FeedbackService, Dependency(skip_validation=True)],
    ) -> SubmitFeedbackResponse:
        """Submit rated feedback."""
        receipt = await feedback_service.submit(data.model_dump())
        return SubmitFeedbackResponse(message=receipt.message, id=receipt.id)
