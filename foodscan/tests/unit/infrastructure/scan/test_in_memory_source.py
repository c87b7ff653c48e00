"""
Unit tests for the in-memory decoded code source.
"""

from foodscan.infrastructure.scan.in_memory_source import InMemoryCodeSource


class TestInMemoryCodeSource:
    def test_emits_only_while_armed(self) -> None:
        received: list[tuple[str, str]] = []
        source = InMemoryCodeSource()

        assert source.emit("ean13", "3017620422003") is False

        source.arm(lambda symbology, payload: received.append((symbology, payload)))
        assert source.armed
        assert source.emit("ean13", "3017620422003") is True

        source.disarm()
        assert source.emit("ean13", "3017620422003") is False
        assert received == [("ean13", "3017620422003")]

    def test_counts_transitions(self) -> None:
        source = InMemoryCodeSource()
        source.arm(lambda symbology, payload: None)
        source.disarm()
        source.disarm()

        assert source.arm_count == 1
        assert source.disarm_count == 2
