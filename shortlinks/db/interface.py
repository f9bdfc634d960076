"""
Link Repository Interface

This module defines the storage abstraction behind the short-link store.
The store only needs get/put/iterate over records keyed by short code, so
a persistent backend can be substituted by implementing a new repository
class without touching the store's invariants or API.

Repositories are not required to be thread-safe: the store serializes
every access under its own lock.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from shortlinks.db.models import LinkRecord


class LinkRepository(ABC):
    """
    Abstract base class for link storage backends.

    To add a new backend:
    1. Create a new class inheriting from LinkRepository
    2. Implement all abstract methods
    3. Update get_repository() in memory.py to return the new repository
    """

    @abstractmethod
    def get(self, code: str) -> Optional[LinkRecord]:
        """
        Return the record stored under code, or None.

        Expired records are still returned; expiry is applied by the store.
        """
        pass

    @abstractmethod
    def put(self, record: LinkRecord) -> None:
        """
        Store a record under its code.

        Callers guarantee the code is not already present.
        """
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[LinkRecord]:
        """Iterate over all records in insertion order."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, code: str) -> bool:
        return self.get(code) is not None
