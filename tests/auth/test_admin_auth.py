"""Tests for the admin credential check and token guard."""

import pytest

from feedback_desk.auth import TOKEN_PREFIX, AdminAuth
from feedback_desk.exceptions import AuthError


@pytest.fixture()
def auth() -> AdminAuth:
    return AdminAuth(username="admin", password="admin123")


@pytest.mark.asyncio
async def test_login_returns_prefixed_token(auth):
    token = await auth.login("admin", "admin123")
    assert token.startswith(TOKEN_PREFIX)
    assert token[len(TOKEN_PREFIX):].isdigit()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "username, password",
    [
        ("admin", "wrong"),
        ("root", "admin123"),
        ("", ""),
        (None, None),
        ("Admin", "admin123"),
    ],
)
async def test_login_rejects_other_credentials(auth, username, password):
    with pytest.raises(AuthError, match="Invalid credentials") as exc_info:
        await auth.login(username, password)
    assert exc_info.value.http_status == 401


@pytest.mark.asyncio
async def test_login_uses_configured_credentials():
    auth = AdminAuth(username="ops", password="s3cret")
    assert (await auth.login("ops", "s3cret")).startswith(TOKEN_PREFIX)
    with pytest.raises(AuthError):
        await auth.login("admin", "admin123")


@pytest.mark.asyncio
async def test_authorize_accepts_any_prefixed_value(auth):
    # Tokens are only checked for their prefix, never for issuance.
    await auth.authorize(f"{TOKEN_PREFIX}0")
    await auth.authorize(f"{TOKEN_PREFIX}never-issued")


@pytest.mark.asyncio
@pytest.mark.parametrize("presented", [None, "", "token-123", f"Bearer {TOKEN_PREFIX}1", "simple-token"])
async def test_authorize_rejects_malformed(auth, presented):
    with pytest.raises(AuthError, match="Unauthorized"):
        await auth.authorize(presented)


@pytest.mark.asyncio
async def test_strict_mode_only_accepts_issued_tokens():
    auth = AdminAuth(username="admin", password="admin123", strict_tokens=True)
    token = await auth.login("admin", "admin123")

    await auth.authorize(token)
    with pytest.raises(AuthError, match="Unauthorized"):
        await auth.authorize(f"{TOKEN_PREFIX}1")
