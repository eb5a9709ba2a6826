"""Utility helpers."""

from hushbot.utils.helpers import ensure_dir, get_hushbot_home, safe_filename, now_ms

__all__ = ["ensure_dir", "get_hushbot_home", "safe_filename", "now_ms"]
