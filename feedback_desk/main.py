import logging
from typing import Optional

from feedback_desk.config import Settings, load_env_file_fallback

# Must run before Settings.from_env() and before utils.logging reads APP_DEBUG
load_env_file_fallback()

from litestar import Litestar, Request
from litestar.datastructures import State
from litestar.di import Provide
from litestar.response import Response
from litestar.exceptions import HTTPException
from litestar.status_codes import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from feedback_desk.auth import AdminAuth
from feedback_desk.exceptions import FeedbackDeskError, StorageError
from feedback_desk.routes import ROUTES
from feedback_desk.services import FeedbackService
from feedback_desk.storage import FeedbackStore
from feedback_desk.utils.logging import log_request_error

logger = logging.getLogger("FeedbackDesk")


# --- Exception handlers
def handle_feedback_error(request: Request, exc: FeedbackDeskError) -> Response:
    """Answer with ``{"error": message}`` and the status the error maps to."""
    if isinstance(exc, StorageError):
        log_request_error(request, exc.__cause__ or exc, message=exc.message)
    return Response(
        content={"error": exc.message},
        status_code=exc.http_status,
        media_type="application/json",
    )


def handle_bad_request(request: Request, exc: HTTPException) -> Response:
    """Litestar's own 400s (malformed JSON, body of the wrong shape) in the ``{"error"}`` format."""
    logger.info(f"Rejected request body for {request.method} {request.url.path}: {exc.detail}")
    return Response(
        content={"error": exc.detail},
        status_code=HTTP_400_BAD_REQUEST,
        media_type="application/json",
    )


def log_exceptions(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled exception occurred", exc_info=exc)
    return Response(
        content={"error": "Internal Server Error"},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/json",
    )


# --- Dependencies
def provide_feedback_service(state: State) -> FeedbackService:
    return state.feedback_service


def provide_admin_auth(state: State) -> AdminAuth:
    return state.admin_auth


# --- App init
def create_app(settings: Optional[Settings] = None) -> Litestar:
    """Build the application. The feedbacks table is created on startup."""
    settings = settings or Settings.from_env()

    store = FeedbackStore(settings.database_url, echo=settings.debug)
    admin_auth = AdminAuth(
        username=settings.admin_username,
        password=settings.admin_password,
        strict_tokens=settings.strict_tokens,
        token_ttl=settings.token_ttl,
    )

    logger.info(f"Starting app in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")
    logger.info(f"Database URL: {store.safe_url}")
    if settings.strict_tokens:
        logger.info("Admin tokens are checked against issued tokens")

    return Litestar(
        route_handlers=ROUTES,
        debug=settings.debug,
        state=State({
            "store": store,
            "feedback_service": FeedbackService(store),
            "admin_auth": admin_auth,
        }),
        dependencies={
            "feedback_service": Provide(provide_feedback_service, sync_to_thread=False),
            "admin_auth": Provide(provide_admin_auth, sync_to_thread=False),
        },
        on_startup=[store.init],
        on_shutdown=[store.close],
        exception_handlers={
            FeedbackDeskError: handle_feedback_error,
            HTTP_400_BAD_REQUEST: handle_bad_request,
            HTTP_500_INTERNAL_SERVER_ERROR: log_exceptions,
        },
    )


_settings = Settings.from_env()

logging.basicConfig(
    level=logging.DEBUG if _settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

app = create_app(_settings)
