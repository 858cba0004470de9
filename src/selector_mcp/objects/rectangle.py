"""Rectangle value object."""

from dataclasses import dataclass


@dataclass
class Rectangle:
    """Rectangle with ``width`` and ``height``."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
