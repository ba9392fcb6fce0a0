"""Admin authentication."""

from feedback_desk.auth.admin import TOKEN_PREFIX, AdminAuth, require_admin_guard

__all__ = ["TOKEN_PREFIX", "AdminAuth", "require_admin_guard"]
