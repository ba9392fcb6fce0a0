"""Feedback Desk: collect rated feedback and review it as an administrator."""
