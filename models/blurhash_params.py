"""BlurHash encoding parameters."""

from dataclasses import dataclass
from typing import Optional

from models.components import Components


@dataclass
class BlurHashParams:
    """Encode/decode settings."""

    components_x: int = 4
    components_y: int = 4
    punch: float = 1.0
    max_side: Optional[int] = None
    linear: bool = False

    def __post_init__(self):
        if not self.components.is_valid():
            raise ValueError(
                f"Components must be 1-9 on each axis, got "
                f"{self.components_x}x{self.components_y}"
            )
        if self.punch <= 0:
            raise ValueError(f"Punch must be positive, got {self.punch}")
        if self.max_side is not None and self.max_side < 1:
            raise ValueError(f"max_side must be at least 1, got {self.max_side}")

    @property
    def components(self) -> Components:
        return Components(self.components_x, self.components_y)
