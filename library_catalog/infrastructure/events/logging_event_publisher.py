"""
Event publisher that writes each event to the application log.
"""

import json
import logging

from library_catalog.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class LoggingEventPublisher:
    """Logs the serialized event at INFO level."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def publish(self, event: DomainEvent) -> None:
        logger.log(self._level, "Published %s: %s", event.event_type, json.dumps(event.to_dict()))
