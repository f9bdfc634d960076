"""
In-Memory Repository

Default (and currently only) storage backend. Records live in a dict for
the lifetime of the process; nothing is written to disk.
"""

from typing import Dict, Iterator, Optional

from shortlinks.db.interface import LinkRepository
from shortlinks.db.models import LinkRecord


class InMemoryLinkRepository(LinkRepository):
    """Dict-backed repository; dicts preserve insertion order."""

    def __init__(self):
        self._records: Dict[str, LinkRecord] = {}

    def get(self, code: str) -> Optional[LinkRecord]:
        return self._records.get(code)

    def put(self, record: LinkRecord) -> None:
        self._records[record.code] = record

    def __iter__(self) -> Iterator[LinkRecord]:
        # Copy so callers can iterate while the store keeps inserting
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, code: str) -> bool:
        return code in self._records


def get_repository() -> LinkRepository:
    """
    Get the storage backend for a new store.

    To switch backends, return a different LinkRepository implementation here.
    """
    return InMemoryLinkRepository()
