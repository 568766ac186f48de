"""Seat winds and relative table directions."""

from enum import IntEnum
from typing import List


class Wind(IntEnum):
    EAST = 0    # 東
    SOUTH = 1   # 南
    WEST = 2    # 西
    NORTH = 3   # 北

    @property
    def index34(self) -> int:
        """34 encoding index for this wind tile."""
        return 27 + self.value

    @property
    def is_dealer(self) -> bool:
        """The dealer always sits at the east seat."""
        return self == Wind.EAST

    def shift(self, n: int) -> 'Wind':
        """Wind of the seat ``n`` places further in turn order."""
        return Wind((self.value + n) % 4)


class Side(IntEnum):
    """Direction of another seat as seen from a reference seat.

    Turn order runs SELF -> RIGHT -> ACROSS -> LEFT, so the player on the
    left is the one who discards just before the reference seat.
    """
    SELF = 0
    RIGHT = 1
    ACROSS = 2
    LEFT = 3

    def of(self, reference: Wind) -> Wind:
        """Absolute seat wind of this side relative to ``reference``."""
        return reference.shift(self.value)

    def others(self) -> List['Side']:
        """The three other sides in turn order starting after this one."""
        return [Side((self.value + n) % 4) for n in (1, 2, 3)]

    @staticmethod
    def between(target: Wind, reference: Wind) -> 'Side':
        """Side at which ``target`` sits when seen from ``reference``."""
        return Side((4 + target.value - reference.value) % 4)
