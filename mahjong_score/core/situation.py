"""Winning situation - how and when a hand was completed."""

from dataclasses import dataclass, field
from typing import List, Tuple

from .seat import Side, Wind
from .tile import Tile, next_tile_index

# Option pairs that cannot hold at the same time
_CONTRADICTIONS = [
    ('first_turn_win', 'riichi'),
    ('first_turn_win', 'last_tile'),
    ('first_turn_win', 'quad_grab'),
    ('first_turn_win', 'quad_draw'),
    ('one_shot', 'quad_draw'),
    ('last_tile', 'quad_grab'),
    ('last_tile', 'quad_draw'),
    ('quad_grab', 'quad_draw'),
]

# (option, required option)
_DEPENDENCIES = [
    ('double_riichi', 'riichi'),
    ('one_shot', 'riichi'),
]


@dataclass(frozen=True)
class Situation:
    """Immutable facts about a win, assembled by the caller per evaluation.

    Attributes:
        round_wind: Prevailing wind (場風)
        seat_wind: Winner's seat wind (自風); EAST is the dealer
        supplier: Side of the player who supplied the winning tile;
            SELF for a self-draw (自摸)
        riichi: Riichi was declared
        double_riichi: Riichi was declared on the first uninterrupted turn
        one_shot: Win within one uninterrupted turn after riichi (一発)
        first_turn_win: Win on the first uninterrupted draw (天和/地和)
        last_tile: Win on the last drawable tile or its discard
        quad_grab: Win on a tile added to an opponent's quad (槍槓)
        quad_draw: Win on the replacement tile after a quad (嶺上開花)
        dora_indicators: Revealed bonus indicators
        ura_dora_indicators: Hidden bonus indicators (riichi only)
    """
    round_wind: Wind = Wind.EAST
    seat_wind: Wind = Wind.EAST
    supplier: Side = Side.SELF
    riichi: bool = False
    double_riichi: bool = False
    one_shot: bool = False
    first_turn_win: bool = False
    last_tile: bool = False
    quad_grab: bool = False
    quad_draw: bool = False
    dora_indicators: Tuple[Tile, ...] = field(default_factory=tuple)
    ura_dora_indicators: Tuple[Tile, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'dora_indicators', tuple(self.dora_indicators))
        object.__setattr__(self, 'ura_dora_indicators', tuple(self.ura_dora_indicators))
        for option, required in _DEPENDENCIES:
            if getattr(self, option) and not getattr(self, required):
                raise ValueError(f"{option} cannot be applied without {required}")
        for left, right in _CONTRADICTIONS:
            if getattr(self, left) and getattr(self, right):
                raise ValueError(f"{left} and {right} cannot be applied simultaneously")
        if self.is_tsumo and self.quad_grab:
            raise ValueError("robbing a quad is a claimed win, not a self-draw")
        if not self.is_tsumo and self.quad_draw:
            raise ValueError("a replacement tile win is a self-draw")
        if self.ura_dora_indicators and not self.riichi:
            raise ValueError("hidden indicators are only valid after riichi")
        if len(self.dora_indicators) > 5 or len(self.ura_dora_indicators) > 5:
            raise ValueError("at most five indicators can be revealed")

    @property
    def is_tsumo(self) -> bool:
        return self.supplier == Side.SELF

    @property
    def is_dealer(self) -> bool:
        return self.seat_wind.is_dealer

    @property
    def dora_tiles_34(self) -> List[int]:
        return [next_tile_index(t.index34) for t in self.dora_indicators]

    @property
    def ura_dora_tiles_34(self) -> List[int]:
        if not self.riichi:
            return []
        return [next_tile_index(t.index34) for t in self.ura_dora_indicators]
