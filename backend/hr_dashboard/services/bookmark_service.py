from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class BookmarkService:
    """Per-user bookmarked employee ids, kept for the process lifetime."""

    def __init__(self) -> None:
        self._bookmarks: dict[str, list[int]] = {}

    def get_ids(self, user_id: str) -> list[int]:
        return list(self._bookmarks.get(user_id, []))

    def count(self, user_id: str) -> int:
        return len(self._bookmarks.get(user_id, []))

    def is_bookmarked(self, user_id: str, employee_id: int) -> bool:
        return employee_id in self._bookmarks.get(user_id, [])

    def add(self, user_id: str, employee_id: int) -> list[int]:
        ids = self._bookmarks.setdefault(user_id, [])
        if employee_id not in ids:
            ids.append(employee_id)
            logger.info("Bookmark added user=%s employee=%d", user_id, employee_id)
        return list(ids)

    def remove(self, user_id: str, employee_id: int) -> list[int]:
        ids = self._bookmarks.get(user_id, [])
        if employee_id in ids:
            ids.remove(employee_id)
            logger.info("Bookmark removed user=%s employee=%d", user_id, employee_id)
        return list(ids)

    def clear(self) -> None:
        self._bookmarks.clear()


bookmark_service = BookmarkService()
