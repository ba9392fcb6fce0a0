"""Admin API endpoints."""

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional

from litestar import Controller, get, post
from litestar.params import Dependency
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel, ConfigDict, Field, field_validator

from feedback_desk.auth import AdminAuth, require_admin_guard
from feedback_desk.services import FeedbackService

logger = logging.getLogger("FeedbackDesk.admin")

FeedbackServiceDependency = Annotated[FeedbackService, Dependency(skip_validation=True)]
AdminAuthDependency = Annotated[AdminAuth, Dependency(skip_validation=True)]


# --- Request/Response Schemas ---

class LoginRequest(BaseModel):
    """Admin credentials. Missing or non-string values are treated as a mismatch."""
    username: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    success: bool
    message: str
    token: str


class FeedbackListItem(BaseModel):
    """Full feedback row, serialized with ``createdAt``."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    mobile: str
    message: str
    rating: int
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # SQLite hands back CURRENT_TIMESTAMP (UTC) without an offset
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class StatsResponse(BaseModel):
    """Feedback statistics."""

    total: int
    avg_rating: float = Field(serialization_alias="avgRating")
    positive: int
    negative: int


# --- Controller ---

class AdminController(Controller):
    """API endpoints for the admin dashboard."""

    path = "/api/admin"
    tags = ["admin"]

    @post("/login", status_code=HTTP_200_OK)
    async def login(
        self,
        data: LoginRequest,
        admin_auth: AdminAuthDependency,
    ) -> LoginResponse:
        """Exchange the admin credentials for a token."""
        token = await admin_auth.login(data.username, data.password)
        return LoginResponse(success=True, message="Login successful", token=token)

    @get("/feedback", guards=[require_admin_guard])
    async def get_feedback(
        self,
        feedback_service: FeedbackServiceDependency,
    ) -> List[Dict[str, Any]]:
        """Get all feedback submissions, newest first."""
        feedback_list = await feedback_service.list_feedback()
        return [
            FeedbackListItem.model_validate(f).model_dump(mode="json", by_alias=True)
            for f in feedback_list
        ]

    @get("/stats", guards=[require_admin_guard])
    async def get_stats(
        self,
        feedback_service: FeedbackServiceDependency,
    ) -> Dict[str, Any]:
        """Get rating statistics."""
        stats = await feedback_service.compute_stats()
        return StatsResponse(**asdict(stats)).model_dump(mode="json", by_alias=True)
