"""
Scan domain models.

State of the manual scan trigger and the per-arming session it owns.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional

NO_BARCODE_NOTICE = "No barcode detected. Please adjust position and try again."
DEFAULT_SCAN_TIMEOUT_S = 3.0


class ScanState(str, Enum):
    """Scan trigger lifecycle."""

    IDLE = "idle"  # Waiting for a manual trigger
    ARMED = "armed"  # Decoder may report one reading
    DISPOSED = "disposed"  # Torn down, accepts nothing


@dataclass
class ScanSession:
    """One arming of the scan trigger.

    Owns the timeout handle so it can never outlive the arming that
    scheduled it.
    """

    armed: bool = False
    has_result: bool = False
    timeout_handle: Optional[asyncio.TimerHandle] = None

    def cancel_timeout(self) -> None:
        """Cancel the pending timeout, if any."""
        if self.timeout_handle is not None:
            self.timeout_handle.cancel()
            self.timeout_handle = None

    def close(self) -> None:
        """Stop forwarding and drop the timer."""
        self.armed = False
        self.cancel_timeout()
