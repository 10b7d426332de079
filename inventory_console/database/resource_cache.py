"""
In-memory cache of the last full record seen per resource identifier.

The inventory backend may not implement GET /<resource>/{id}, so the console
keeps whatever the list endpoint and successful writes returned and edits from
there. One ResourceCache exists per resource type per console session; entries
never expire and are lost on restart.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from inventory_console.integrations.policy.response_wrappers import resolve_id

logger = logging.getLogger(__name__)


def cache_key(record_id: Any) -> Optional[str]:
    # Ids arrive as numbers from JSON and as strings from form posts.
    if record_id is None:
        return None
    key = str(record_id).strip()
    return key or None


class ResourceCache:
    def __init__(self, name: str = "") -> None:
        self.name = name
        self._records: Dict[str, Dict[str, Any]] = {}

    def replace_all(self, records: Iterable[Dict[str, Any]]) -> int:
        """Replace every entry with the records of a fresh list fetch."""
        fresh: Dict[str, Dict[str, Any]] = {}
        skipped = 0
        for record in records:
            key = cache_key(resolve_id(record))
            if key is None:
                skipped += 1
                continue
            fresh[key] = dict(record)
        self._records = fresh
        if skipped:
            logger.warning("%s cache: skipped %d record(s) without an identifier", self.name or "resource", skipped)
        return len(fresh)

    def put(self, record: Optional[Dict[str, Any]]) -> bool:
        key = cache_key(resolve_id(record))
        if key is None:
            return False
        self._records[key] = dict(record)
        return True

    def get(self, record_id: Any) -> Optional[Dict[str, Any]]:
        key = cache_key(record_id)
        if key is None:
            return None
        record = self._records.get(key)
        return dict(record) if record is not None else None

    def remove(self, record_id: Any) -> None:
        key = cache_key(record_id)
        if key is not None:
            self._records.pop(key, None)

    def __contains__(self, record_id: Any) -> bool:
        key = cache_key(record_id)
        return key is not None and key in self._records

    def __len__(self) -> int:
        return len(self._records)
