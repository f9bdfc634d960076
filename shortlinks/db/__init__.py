"""
Storage module with repository abstraction.

This module provides:
- LinkRepository interface: Abstract base class for storage backends
- InMemoryLinkRepository: Process-local implementation (default)
- Record models: LinkRecord, ClickEvent, LinkStatistics
"""

from shortlinks.db.interface import LinkRepository
from shortlinks.db.memory import InMemoryLinkRepository, get_repository
from shortlinks.db.models import ClickEvent, LinkRecord, LinkStatistics

__all__ = [
    "LinkRepository",
    "InMemoryLinkRepository",
    "get_repository",
    "ClickEvent",
    "LinkRecord",
    "LinkStatistics",
]
