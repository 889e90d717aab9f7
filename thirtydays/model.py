"""Plain data records for the catalog and per-card view state."""

from __future__ import annotations

from dataclasses import dataclass

# Opaque key into the string table or the image assets (e.g. 'make1').
ResourceHandle = str


@dataclass(frozen=True)
class Motorcycle:
    """One day of the catalog: a make, a quote and an image."""

    make: ResourceHandle
    quote: ResourceHandle
    image: ResourceHandle


CatalogEntry = Motorcycle


@dataclass
class CardViewState:
    """Expand/collapse flag owned by a single rendered card."""

    expanded: bool = False

    def toggle(self) -> bool:
        """Flip the flag and return the new value."""
        self.expanded = not self.expanded
        return self.expanded


def day_for_position(position: int) -> int:
    """Days are displayed 1-based; list positions are 0-based."""
    if position < 0:
        raise ValueError(f'Position must be non-negative, got {position}')
    return position + 1
