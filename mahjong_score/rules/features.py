"""Structure-independent hand features.

Counts here are computed once per hand and shared by every decomposition,
so rules that only look at which tiles are present never repeat the work.
"""

from dataclasses import dataclass
from typing import List, Sequence

from mahjong_score.core.meld import Meld
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import (
    CHUN, HAKU, HATSU, Tile, TileSuit, tiles_to_34_array,
)


@dataclass(frozen=True)
class HandFeatures:
    """Tile counts of a finished hand.

    Counts use the 14 tile view, where revealed quads are cut down to three
    tiles. Bonus tile counts use every physical tile.
    """
    dragon_white: int = 0
    dragon_green: int = 0
    dragon_red: int = 0
    winds: int = 0
    seat_wind: int = 0
    round_wind: int = 0
    winning_tile: int = 0      # copies of the winning face
    terminals: int = 0
    honors: int = 0
    orphans: int = 0           # terminals + honors
    greens: int = 0
    max_duplication: int = 0
    distinct: int = 0          # distinct faces
    suit_types: int = 0        # number suits present (0-3)
    dora: int = 0
    ura_dora: int = 0
    red_dora: int = 0
    call_count: int = 0        # melds claimed from opponents
    quad_count: int = 0

    @property
    def dragons(self) -> int:
        return self.dragon_white + self.dragon_green + self.dragon_red

    @property
    def is_concealed(self) -> bool:
        """No claimed meld; concealed quads keep a hand concealed."""
        return self.call_count == 0

    @classmethod
    def extract(cls, tiles: Sequence[Tile], melds: Sequence[Meld], winning_tile: Tile,
                situation: Situation, red_fives: bool = True) -> 'HandFeatures':
        """Compute the features of concealed tiles + winning tile + melds."""
        view: List[Tile] = list(tiles) + [winning_tile]
        full: List[Tile] = list(view)
        for meld in melds:
            view.extend(meld.truncated)
            full.extend(meld.tiles)

        counts = tiles_to_34_array(view)
        full_counts = tiles_to_34_array(full)
        suits = {t.suit for t in view if t.is_number_tile}

        dora = sum(full_counts[i] for i in situation.dora_tiles_34)
        ura_dora = sum(full_counts[i] for i in situation.ura_dora_tiles_34)
        red_dora = sum(1 for t in full if t.is_red) if red_fives else 0

        return cls(
            dragon_white=counts[HAKU],
            dragon_green=counts[HATSU],
            dragon_red=counts[CHUN],
            winds=sum(1 for t in view if t.suit == TileSuit.WIND),
            seat_wind=counts[situation.seat_wind.index34],
            round_wind=counts[situation.round_wind.index34],
            winning_tile=counts[winning_tile.index34],
            terminals=sum(1 for t in view if t.is_terminal),
            honors=sum(1 for t in view if t.is_honor),
            orphans=sum(1 for t in view if t.is_yaochu),
            greens=sum(1 for t in view if t.is_green),
            max_duplication=max(counts),
            distinct=sum(1 for c in counts if c > 0),
            suit_types=len(suits),
            dora=dora,
            ura_dora=ura_dora,
            red_dora=red_dora,
            call_count=sum(1 for m in melds if m.is_open),
            quad_count=sum(1 for m in melds if m.is_quad),
        )
