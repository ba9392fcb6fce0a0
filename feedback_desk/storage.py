"""Persistence for feedback submissions."""

import logging
from typing import Any, List, Mapping

from sqlalchemy import desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from feedback_desk.exceptions import StorageError
from feedback_desk.models import Base, Feedback
from feedback_desk.utils.logging import error_log

logger = logging.getLogger("FeedbackDesk.storage")


class FeedbackStore:
    """Long-lived handle on the ``feedbacks`` table.

    One store is created per application. ``init`` must run before the first
    request; ``close`` disposes of the connection pool.
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.engine = create_async_engine(database_url, echo=echo)
        self.session_maker = async_sessionmaker(self.engine, expire_on_commit=False)

    @property
    def safe_url(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)

    async def init(self) -> None:
        """Create the table if it does not exist yet."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            error_log("Failed to create feedbacks table", exc=e, context={"database_url": self.safe_url})
            raise StorageError("Failed to initialise storage") from e
        logger.info(f"Storage ready at {self.safe_url}")

    async def close(self) -> None:
        await self.engine.dispose()

    async def insert(self, record: Mapping[str, Any]) -> int:
        """Insert one row and return its id. ``createdAt`` is set by the database."""
        feedback = Feedback(
            name=record["name"],
            email=record["email"],
            mobile=record["mobile"],
            message=record["message"],
            rating=record["rating"],
        )
        try:
            async with self.session_maker() as session:
                session.add(feedback)
                await session.commit()
        except SQLAlchemyError as e:
            error_log("Error inserting feedback", exc=e, context={"email": record["email"]})
            raise StorageError("Failed to save feedback") from e
        return feedback.id

    async def list_all(self) -> List[Feedback]:
        """All rows, newest first. Rows sharing a timestamp come back in reverse insert order."""
        stmt = select(Feedback).order_by(desc(Feedback.created_at), desc(Feedback.id))
        try:
            async with self.session_maker() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            error_log("Error fetching feedbacks", exc=e)
            raise StorageError("Failed to fetch feedbacks") from e

    async def list_all_unordered(self) -> List[Feedback]:
        """All rows in whatever order the database returns them."""
        try:
            async with self.session_maker() as session:
                result = await session.execute(select(Feedback))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            error_log("Error fetching stats", exc=e)
            raise StorageError("Failed to fetch stats") from e

    async def count(self) -> int:
        try:
            async with self.session_maker() as session:
                result = await session.execute(select(func.count(Feedback.id)))
                return result.scalar() or 0
        except SQLAlchemyError as e:
            error_log("Error counting feedbacks", exc=e)
            raise StorageError("Failed to count feedbacks") from e
