"""In-memory decoded code source.

Provides an in-process implementation of the DecodedCodeSource port
for tests, demos and chat callers that already hold a decoded payload.
Readings emitted while disarmed are dropped.
"""

from typing import Optional, Union

import structlog

from foodscan.domain.scan.ports import DecodeHandler
from foodscan.domain.shared.value_objects import Symbology

logger = structlog.get_logger(__name__)


class InMemoryCodeSource:
    """
    In-memory implementation of the DecodedCodeSource port.

    Thread safety: NOT thread-safe, drive it from the event loop.

    Example:
        >>> source = InMemoryCodeSource()
        >>> source.arm(lambda symbology, payload: None)
        >>> assert source.emit("ean13", "3017620422003")
        >>> source.disarm()
        >>> assert not source.emit("ean13", "3017620422003")
    """

    def __init__(self) -> None:
        """Initialize disarmed source."""
        self._handler: Optional[DecodeHandler] = None
        self.arm_count = 0
        self.disarm_count = 0

    @property
    def armed(self) -> bool:
        return self._handler is not None

    def arm(self, handler: DecodeHandler) -> None:
        """Forward subsequent readings to handler."""
        self._handler = handler
        self.arm_count += 1

    def disarm(self) -> None:
        """Drop subsequent readings."""
        self._handler = None
        self.disarm_count += 1

    def emit(self, symbology: Union[Symbology, str], payload: str) -> bool:
        """Simulate one decoder reading.

        Returns:
            True if a handler received the reading
        """
        handler = self._handler
        if handler is None:
            logger.debug("Reading dropped, source disarmed", payload=payload)
            return False
        handler(symbology, payload)
        return True
