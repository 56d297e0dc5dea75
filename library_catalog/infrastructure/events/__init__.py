"""
Event publishing adapters.
"""

from .in_memory_event_publisher import InMemoryEventPublisher
from .logging_event_publisher import LoggingEventPublisher

__all__ = ["InMemoryEventPublisher", "LoggingEventPublisher"]
