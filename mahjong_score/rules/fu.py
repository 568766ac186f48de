"""Fu (符) calculation for scoring."""

from enum import Enum
from typing import List, Optional

from mahjong_score.core.meld import Head, Meld
from mahjong_score.core.situation import Situation
from mahjong_score.rules.agari import Decomposition, Wait
from mahjong_score.rules.features import HandFeatures


class FuType(Enum):
    """One itemised source of fu."""
    BASE = ("base", 20)                                   # 副底
    SEVEN_PAIRS = ("seven_pairs", 25)                     # 七対子
    DRAGON_HEAD = ("dragon_head", 2)
    SEAT_WIND_HEAD = ("seat_wind_head", 2)
    ROUND_WIND_HEAD = ("round_wind_head", 2)
    OPEN_SIMPLE_TRIPLET = ("open_simple_triplet", 2)      # 明刻
    OPEN_ORPHAN_TRIPLET = ("open_orphan_triplet", 4)
    CONCEALED_SIMPLE_TRIPLET = ("concealed_simple_triplet", 4)  # 暗刻
    CONCEALED_ORPHAN_TRIPLET = ("concealed_orphan_triplet", 8)
    OPEN_SIMPLE_QUAD = ("open_simple_quad", 8)            # 明槓
    OPEN_ORPHAN_QUAD = ("open_orphan_quad", 16)
    CONCEALED_SIMPLE_QUAD = ("concealed_simple_quad", 16)  # 暗槓
    CONCEALED_ORPHAN_QUAD = ("concealed_orphan_quad", 32)
    EDGE_WAIT = ("edge_wait", 2)                          # 辺張
    MIDDLE_WAIT = ("middle_wait", 2)                      # 嵌張
    SINGLE_HEAD_WAIT = ("single_head_wait", 2)            # 単騎
    SELF_DRAW = ("self_draw", 2)                          # 自摸符
    CONCEALED_CLAIM = ("concealed_claim", 10)             # 門前加符
    OPEN_NO_POINTS = ("open_no_points", 10)               # 喰い平和形

    def __init__(self, key: str, points: int):
        self.key = key
        self.points = points


_MELD_FU = {
    # (is_quad, is_concealed, is_yaochu)
    (False, False, False): FuType.OPEN_SIMPLE_TRIPLET,
    (False, False, True): FuType.OPEN_ORPHAN_TRIPLET,
    (False, True, False): FuType.CONCEALED_SIMPLE_TRIPLET,
    (False, True, True): FuType.CONCEALED_ORPHAN_TRIPLET,
    (True, False, False): FuType.OPEN_SIMPLE_QUAD,
    (True, False, True): FuType.OPEN_ORPHAN_QUAD,
    (True, True, False): FuType.CONCEALED_SIMPLE_QUAD,
    (True, True, True): FuType.CONCEALED_ORPHAN_QUAD,
}

_WAIT_FU = {
    Wait.SINGLE_SIDE: FuType.EDGE_WAIT,
    Wait.MIDDLE: FuType.MIDDLE_WAIT,
    Wait.SINGLE_HEAD: FuType.SINGLE_HEAD_WAIT,
}


def meld_fu(meld: Meld) -> Optional[FuType]:
    """Fu item of a single meld; runs score nothing."""
    if meld.is_run:
        return None
    return _MELD_FU[(meld.is_quad, meld.is_concealed, meld.is_yaochu)]


def head_fu(head: Head, situation: Situation) -> List[FuType]:
    """Head fu: dragons 2, seat wind 2, round wind 2 (a double wind pair scores 4)."""
    items = []
    idx = head.tile_index34
    if head.is_dragon:
        items.append(FuType.DRAGON_HEAD)
    if idx == situation.seat_wind.index34:
        items.append(FuType.SEAT_WIND_HEAD)
    if idx == situation.round_wind.index34:
        items.append(FuType.ROUND_WIND_HEAD)
    return items


def wait_fu(wait: Wait) -> Optional[FuType]:
    """Edge, middle and single head waits score 2; two-sided and either-head score 0."""
    return _WAIT_FU.get(wait)


def structural_fu(decomposition: Decomposition, situation: Situation) -> List[FuType]:
    """Fu items coming from the shape alone: head, melds and wait."""
    items = head_fu(decomposition.head, situation)
    for meld in decomposition.melds:
        item = meld_fu(meld)
        if item is not None:
            items.append(item)
    item = wait_fu(decomposition.wait)
    if item is not None:
        items.append(item)
    return items


def calculate_fu_items(decomposition: Decomposition, situation: Situation,
                       features: HandFeatures) -> List[FuType]:
    """Itemise the fu of a standard decomposition.

    The self-draw bonus is dropped for a concealed hand with no other
    structural fu (平和自摸), and an open hand without structural fu gets
    10 on a claimed win so it never scores below 30.
    """
    structural = structural_fu(decomposition, situation)
    items = [FuType.BASE] + structural
    if situation.is_tsumo:
        if not (features.is_concealed and not structural):
            items.append(FuType.SELF_DRAW)
    elif features.is_concealed:
        items.append(FuType.CONCEALED_CLAIM)
    elif not structural:
        items.append(FuType.OPEN_NO_POINTS)
    return items


def total_fu(items: List[FuType]) -> int:
    """Sum fu items and round up to 10; seven pairs stays at 25."""
    if items == [FuType.SEVEN_PAIRS]:
        return 25
    return _round_up_10(sum(item.points for item in items))


def calculate_fu(decomposition: Decomposition, situation: Situation,
                 features: HandFeatures) -> int:
    """Calculate fu (符) for a standard hand, rounded up to the nearest 10."""
    return total_fu(calculate_fu_items(decomposition, situation, features))


def _round_up_10(fu: int) -> int:
    """Round up to nearest 10."""
    return ((fu + 9) // 10) * 10
