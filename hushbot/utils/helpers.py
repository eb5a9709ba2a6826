"""Small filesystem and time helpers shared across modules."""

import re
import time
from pathlib import Path

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def get_hushbot_home() -> Path:
    """Get the hushbot home directory (~/.hushbot)."""
    return Path.home() / ".hushbot"


def ensure_dir(path: Path) -> Path:
    """Create *path* (and parents) if missing and return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_filename(name: str) -> str:
    """Replace characters that are not allowed in file names."""
    return _UNSAFE_CHARS.sub("_", name).strip() or "_"


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)
