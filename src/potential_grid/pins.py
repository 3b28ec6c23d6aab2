"""Pin id allocation for placed conductors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PinAllocator:
    """Hands out strictly increasing pin ids. Pins are never released."""

    start: int = 0
    issued: int = 0

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Pin ids must start at >= 0, got {self.start}")

    def peek(self) -> int:
        """Return the id the next ``allocate`` call will hand out."""
        return self.start + self.issued

    def allocate(self) -> int:
        pin = self.peek()
        self.issued += 1
        return pin
