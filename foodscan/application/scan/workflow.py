"""
Scan workflow.

Wires the manual scan trigger to product resolution for a UI or chat
caller: arm → decoded payload → lookup → result callback.
"""

import asyncio
from typing import Callable, Optional

import structlog

from foodscan.application.product.resolver import ProductResolver, ProfileInput
from foodscan.config import ScannerSettings
from foodscan.domain.product.models import ResolvedProduct
from foodscan.domain.scan.models import DEFAULT_SCAN_TIMEOUT_S, ScanState
from foodscan.domain.scan.ports import DecodedCodeSource, NoticeHandler
from foodscan.domain.scan.trigger import ScanTrigger
from foodscan.domain.shared.value_objects import DecodedCode

logger = structlog.get_logger(__name__)

ResultHandler = Callable[[DecodedCode, Optional[ResolvedProduct]], None]


class ScanWorkflow:
    """Runs one lookup per accepted reading and reports the outcome.

    One lookup is in flight at a time: a new scan cannot start until the
    previous lookup has reported. Results of lookups that finish after
    close() are dropped.

    Example:
        >>> async def run(source, resolver):
        ...     workflow = ScanWorkflow(source, resolver, {"diets": ["vegan"]}, on_result=print)
        ...     workflow.start_scan()
        ...     source.emit("ean13", "8886467124723")
        ...     await workflow.drain()
        ...     await workflow.close()
    """

    def __init__(
        self,
        source: DecodedCodeSource,
        resolver: ProductResolver,
        profile: ProfileInput,
        on_result: ResultHandler,
        on_notice: Optional[NoticeHandler] = None,
        timeout_seconds: float = DEFAULT_SCAN_TIMEOUT_S,
    ) -> None:
        """Initialize workflow.

        Args:
            source: Decoder port
            resolver: Product resolver
            profile: Dietary profile used for every lookup
            on_result: Receives (code, record or None) per lookup
            on_notice: Receives advisory notices
            timeout_seconds: Scan timeout per arming
        """
        self.resolver = resolver
        self.profile = profile
        self._on_result = on_result
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False
        self.trigger = ScanTrigger(
            source,
            on_code=self._handle_code,
            on_notice=on_notice,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_settings(
        cls,
        source: DecodedCodeSource,
        resolver: ProductResolver,
        profile: ProfileInput,
        on_result: ResultHandler,
        settings: ScannerSettings,
        on_notice: Optional[NoticeHandler] = None,
    ) -> "ScanWorkflow":
        """Create workflow using the configured scan timeout."""
        return cls(
            source,
            resolver,
            profile,
            on_result,
            on_notice=on_notice,
            timeout_seconds=settings.scan_timeout_s,
        )

    @property
    def state(self) -> ScanState:
        return self.trigger.state

    @property
    def pending_lookups(self) -> int:
        return len(self._tasks)

    def start_scan(self) -> bool:
        """Arm the trigger.

        Returns:
            False if closed, already scanning or a lookup is still running
        """
        if self._closed:
            return False
        if self._tasks:
            logger.debug("Scan not started, lookup in flight", pending=len(self._tasks))
            return False
        return self.trigger.arm()

    def cancel_scan(self) -> bool:
        """Abort the current scan."""
        return self.trigger.cancel()

    async def drain(self) -> None:
        """Wait for in-flight lookups to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Tear down the trigger and cancel in-flight lookups. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self.trigger.teardown()

        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("Scan workflow closed", cancelled_lookups=len(tasks))

    def _handle_code(self, code: DecodedCode) -> None:
        task = asyncio.get_running_loop().create_task(self._lookup(code))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _lookup(self, code: DecodedCode) -> None:
        result = await self.resolver.resolve(code.payload, self.profile)
        if self._closed:
            logger.debug("Lookup result dropped, workflow closed", payload=code.payload)
            return
        try:
            self._on_result(code, result)
        except Exception:
            logger.exception("Result handler failed", payload=code.payload)
