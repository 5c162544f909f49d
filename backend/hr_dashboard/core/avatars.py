from __future__ import annotations

from urllib.parse import quote

DEFAULT_AVATAR_BASE_URL = "https://api.dicebear.com/7.x/avataaars/svg"


def avatar_url(seed: str, base_url: str = DEFAULT_AVATAR_BASE_URL) -> str:
    """DiceBear avatar URL; the same seed always renders the same image."""
    return f"{base_url.rstrip('/')}?seed={quote(seed, safe='')}"
