"""
Ports (Interfaces) for scan dependencies.

The decoder itself lives outside this package (camera hardware); the
trigger only talks to it through this protocol.

Design Pattern: Ports & Adapters (Hexagonal Architecture)
"""

from typing import Callable, Protocol, Union, runtime_checkable

from foodscan.domain.shared.value_objects import DecodedCode, Symbology

DecodeHandler = Callable[[Union[Symbology, str], str], object]
CodeHandler = Callable[[DecodedCode], None]
NoticeHandler = Callable[[str], None]


@runtime_checkable
class DecodedCodeSource(Protocol):
    """
    Port for a barcode decoder.

    While armed, the source may call the handler with
    ``(symbology, payload)``. While disarmed it emits nothing.
    """

    def arm(self, handler: DecodeHandler) -> None:
        """Start forwarding decode events to handler."""
        ...

    def disarm(self) -> None:
        """Stop forwarding decode events. Safe to call when disarmed."""
        ...
