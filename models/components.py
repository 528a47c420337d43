"""Frequency component counts."""

from dataclasses import dataclass

from utils.constants import MIN_COMPONENTS, MAX_COMPONENTS


@dataclass(frozen=True)
class Components:
    """Number of DCT components kept along each axis."""

    x: int
    y: int

    def is_valid(self) -> bool:
        return (MIN_COMPONENTS <= self.x <= MAX_COMPONENTS
                and MIN_COMPONENTS <= self.y <= MAX_COMPONENTS)

    @property
    def count(self) -> int:
        return self.x * self.y
