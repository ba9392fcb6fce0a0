"""Shared-credential admin login and token guard."""

import logging
import time
from typing import Any, Optional

from litestar.connection import ASGIConnection
from litestar.handlers.base import BaseRouteHandler
from litestar.stores.memory import MemoryStore

from feedback_desk.exceptions import AuthError
from feedback_desk.utils.logging import debug_log

logger = logging.getLogger("FeedbackDesk.auth")

TOKEN_PREFIX = "simple-token-"
ISSUED_TOKEN_KEY = "admin_token"


def _redact(token: str) -> str:
    return f"{token[:len(TOKEN_PREFIX) + 4]}..."


class AdminAuth:
    """Checks the single admin credential pair and the tokens it hands out.

    By default any value starting with ``TOKEN_PREFIX`` is accepted, whether or
    not it was ever issued. With ``strict_tokens`` the issued tokens are kept in
    a MemoryStore for ``token_ttl`` seconds and only those are accepted.
    """

    def __init__(
        self,
        username: str,
        password: str,
        strict_tokens: bool = False,
        token_ttl: int = 86400,
        token_store: Optional[MemoryStore] = None,
    ) -> None:
        self.username = username
        self.password = password
        self.strict_tokens = strict_tokens
        self.token_ttl = token_ttl
        self.token_store = token_store or MemoryStore()

    def mint_token(self) -> str:
        return f"{TOKEN_PREFIX}{int(time.time() * 1000)}"

    async def login(self, username: Any, password: Any) -> str:
        """Return a fresh token, or raise AuthError on a credential mismatch."""
        if username != self.username or password != self.password:
            logger.warning(f"Admin login failed for username: {username!r}")
            raise AuthError("Invalid credentials")

        token = self.mint_token()
        if self.strict_tokens:
            await self.token_store.set(f"{ISSUED_TOKEN_KEY}:{token}", "true", expires_in=self.token_ttl)
        logger.info(f"Admin logged in, token {_redact(token)}")
        return token

    async def authorize(self, presented: Optional[str]) -> None:
        """Raise AuthError unless ``presented`` is an acceptable admin token."""
        if not presented or not presented.startswith(TOKEN_PREFIX):
            raise AuthError("Unauthorized")

        if self.strict_tokens:
            issued = await self.token_store.get(f"{ISSUED_TOKEN_KEY}:{presented}")
            if not issued:
                logger.warning(f"Admin access with unknown token {_redact(presented)}")
                raise AuthError("Unauthorized")


async def require_admin_guard(connection: ASGIConnection, handler: BaseRouteHandler) -> None:
    """Guard for admin routes. The Authorization header is used as-is, no scheme is stripped."""
    path = connection.url.path
    auth: AdminAuth = connection.app.state.admin_auth
    token = connection.headers.get("authorization")

    if not token:
        logger.warning(f"Admin access attempted without token: {path}")
    await auth.authorize(token)
    debug_log("Admin access granted for %s", path)
