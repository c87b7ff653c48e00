"""
Manual scan trigger.

State machine deciding when decoder readings are accepted:

    IDLE --arm()--> ARMED --decode / timeout / cancel()--> IDLE
    any  --teardown()--> DISPOSED

Only the first reading of an arming is forwarded; the decoder tends to
keep firing on the same physical code and later readings are dropped
until the next arm().
"""

from __future__ import annotations

import asyncio
from typing import Optional, Union

import pydantic
import structlog

from foodscan.domain.scan.models import (
    DEFAULT_SCAN_TIMEOUT_S,
    NO_BARCODE_NOTICE,
    ScanSession,
    ScanState,
)
from foodscan.domain.scan.ports import CodeHandler, DecodedCodeSource, NoticeHandler
from foodscan.domain.shared.errors import ScanDomainError
from foodscan.domain.shared.value_objects import DecodedCode, Symbology

logger = structlog.get_logger(__name__)


class ScanTrigger:
    """Arms the decoder on demand and forwards at most one reading per arming.

    Must be driven from a single asyncio event loop. The timeout is a
    scheduled callback owned by the current ScanSession, never a
    blocking wait.

    Example:
        >>> async def scan(source):
        ...     trigger = ScanTrigger(source, on_code=print)
        ...     trigger.arm()
        ...     source.emit("ean13", "8886467124723")
        ...     trigger.teardown()
    """

    def __init__(
        self,
        source: DecodedCodeSource,
        on_code: CodeHandler,
        on_notice: Optional[NoticeHandler] = None,
        timeout_seconds: float = DEFAULT_SCAN_TIMEOUT_S,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        """Initialize trigger.

        Args:
            source: Decoder port to arm and disarm
            on_code: Receives each accepted reading
            on_notice: Receives advisory notices (scan timed out)
            timeout_seconds: Time an arming waits for a reading
            loop: Event loop for the timeout (default: running loop)
        """
        if timeout_seconds <= 0:
            raise ScanDomainError(f"Scan timeout must be positive, got {timeout_seconds}")
        self._source = source
        self._on_code = on_code
        self._on_notice = on_notice
        self._loop = loop
        self.timeout_seconds = timeout_seconds
        self._state = ScanState.IDLE
        self._session: Optional[ScanSession] = None

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def session(self) -> Optional[ScanSession]:
        return self._session

    @property
    def forwarding_enabled(self) -> bool:
        """True only while armed and no reading accepted yet."""
        session = self._session
        return (
            self._state is ScanState.ARMED
            and session is not None
            and session.armed
            and not session.has_result
        )

    def arm(self) -> bool:
        """Start a scan.

        Returns:
            True if armed, False if ignored (already armed or disposed)
        """
        if self._state is not ScanState.IDLE:
            logger.debug("Arm ignored", state=self._state.value)
            return False

        loop = self._loop or asyncio.get_running_loop()
        session = ScanSession(armed=True)
        session.timeout_handle = loop.call_later(
            self.timeout_seconds, self._on_timeout, session
        )
        self._session = session
        self._state = ScanState.ARMED
        self._source.arm(self.on_decoded)

        logger.debug("Scan armed", timeout_s=self.timeout_seconds)
        return True

    def on_decoded(self, symbology: Union[Symbology, str], payload: str) -> bool:
        """Handle one decoder reading.

        Returns:
            True if the reading was accepted and forwarded
        """
        session = self._session
        if session is None or not self.forwarding_enabled:
            logger.debug("Decode ignored", state=self._state.value)
            return False

        try:
            code = DecodedCode(symbology=symbology, payload=payload)
        except pydantic.ValidationError as e:
            # Arming stays open for a readable code
            logger.warning(
                "Unreadable decode ignored",
                symbology=str(symbology),
                error=str(e),
            )
            return False

        session.has_result = True
        self._finish(session, ScanState.IDLE)

        logger.info(
            "Barcode accepted",
            symbology=code.symbology.value,
            payload=code.payload,
        )
        self._on_code(code)
        return True

    def cancel(self) -> bool:
        """Abort the current scan and return to IDLE.

        Returns:
            True if a scan was cancelled
        """
        session = self._session
        if self._state is not ScanState.ARMED or session is None:
            return False

        self._finish(session, ScanState.IDLE)
        logger.info("Scan cancelled")
        return True

    def teardown(self) -> None:
        """Cancel any pending timeout and stop forwarding. Idempotent."""
        if self._state is ScanState.DISPOSED:
            return

        if self._session is not None:
            self._session.close()
        self._source.disarm()
        self._state = ScanState.DISPOSED
        logger.debug("Scan trigger torn down")

    def _on_timeout(self, session: ScanSession) -> None:
        # Stale callback from an arming that already ended
        if session is not self._session or not session.armed or session.has_result:
            return
        if self._state is not ScanState.ARMED:
            return

        session.timeout_handle = None
        self._finish(session, ScanState.IDLE)

        logger.info("Scan timed out", timeout_s=self.timeout_seconds)
        if self._on_notice is not None:
            self._on_notice(NO_BARCODE_NOTICE)

    def _finish(self, session: ScanSession, next_state: ScanState) -> None:
        session.close()
        self._source.disarm()
        self._state = next_state
