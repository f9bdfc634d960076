"""
Services module for business logic separation.

This module contains service classes that encapsulate business logic,
keeping it separate from API endpoints and storage models.
"""

from shortlinks.services.code_generator import CodeGenerator
from shortlinks.services.link_store import ShortLinkStore

__all__ = ["CodeGenerator", "ShortLinkStore"]
