"""Score calculation - convert han + fu to points.

Every reading of a finished hand (each standard decomposition, and seven
pairs when the tiles allow it) is scored on its own; the highest value wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from mahjong_score.core.meld import Meld
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import Tile, tiles_to_34_array
from mahjong_score.rules.agari import Decomposition, decompose, is_seven_pairs
from mahjong_score.rules.config import DEFAULT_CONFIG, ScoringConfig
from mahjong_score.rules.features import HandFeatures
from mahjong_score.rules.fu import FuType, calculate_fu_items, total_fu
from mahjong_score.rules.yaku import (
    RIVER_JACKPOT, HandContext, YakuResult, detect_all_yaku, detect_limit_yaku,
    total_han, total_multiplier,
)


class LimitTier(Enum):
    """Score tier with its base points."""
    NONE = ("none", 0, "")
    LIMIT = ("limit", 2000, "満貫")
    ONE_HALF_LIMIT = ("one_half_limit", 3000, "跳満")
    DOUBLE_LIMIT = ("double_limit", 4000, "倍満")
    TRIPLE_LIMIT = ("triple_limit", 6000, "三倍満")
    COUNTED_LIMIT = ("counted_limit", 8000, "数え役満")
    HAND_LIMIT = ("hand_limit", 8000, "役満")   # per multiplier

    def __init__(self, key: str, base: int, kanji: str):
        self.key = key
        self.base = base
        self.kanji = kanji

    @classmethod
    def of(cls, han: int, fu: int, counted_limit: bool = True) -> 'LimitTier':
        """Tier of a graded hand."""
        if han >= 13:
            return cls.COUNTED_LIMIT if counted_limit else cls.TRIPLE_LIMIT
        if han >= 11:
            return cls.TRIPLE_LIMIT
        if han >= 8:
            return cls.DOUBLE_LIMIT
        if han >= 6:
            return cls.ONE_HALF_LIMIT
        if han == 5 or (han == 4 and fu >= 40) or (han == 3 and fu >= 70):
            return cls.LIMIT
        return cls.NONE


_MULTIPLE_KANJI = ["", "", "二倍", "三倍", "四倍", "五倍", "六倍", "七倍", "八倍"]


@dataclass(frozen=True)
class HandScore:
    """Result of score calculation.

    ``value`` is the total the winner collects before deposits and streak
    bonus; ``split()`` breaks stacked limit hands into one score per rule
    so liability can be judged rule by rule.
    """
    yaku: Tuple[YakuResult, ...] = ()
    fu_items: Tuple[FuType, ...] = ()
    han: int = 0
    fu: int = 0
    multiplier: int = 0
    tier: LimitTier = LimitTier.NONE
    is_dealer: bool = False
    decomposition: Optional[Decomposition] = None

    @property
    def is_empty(self) -> bool:
        return len(self.yaku) == 0

    @property
    def is_limit_hand(self) -> bool:
        """役満 and above."""
        return self.multiplier > 0

    @property
    def base_points(self) -> int:
        if self.is_empty:
            return 0
        if self.tier == LimitTier.HAND_LIMIT:
            return self.tier.base * self.multiplier
        if self.tier != LimitTier.NONE:
            return self.tier.base
        return min(2000, self.fu * 2 ** (self.han + 2))

    @property
    def value(self) -> int:
        return _round_up_100(self.base_points * (6 if self.is_dealer else 4))

    @property
    def ron_payment(self) -> int:
        """Amount the discarder pays."""
        return self.value

    @property
    def dealer_payment(self) -> int:
        """Amount the dealer pays on a non-dealer self-draw."""
        if self.is_dealer:
            return 0
        return share_of(self.value, 2)

    @property
    def non_dealer_payment(self) -> int:
        """Amount each non-dealer pays on a self-draw."""
        if self.is_dealer:
            return share_of(self.value, 3)
        return share_of(self.value, 4)

    @property
    def rank_name(self) -> str:
        if self.tier == LimitTier.HAND_LIMIT:
            return _MULTIPLE_KANJI[min(self.multiplier, 8)] + self.tier.kanji
        if self.tier != LimitTier.NONE:
            return self.tier.kanji
        if self.is_empty:
            return ""
        return f"{self.han}翻{self.fu}符"

    def sort_key(self) -> Tuple[int, int, int, int]:
        """Ordering for picking the best reading: value, han, fu, rule count."""
        return (self.value, self.han + 13 * self.multiplier, self.fu, len(self.yaku))

    def split(self) -> List['HandScore']:
        """One score per limit rule of a stacked limit hand; otherwise just self."""
        if not self.is_limit_hand or len(self.yaku) == 1:
            return [self]
        return [_limit_score([result], self.is_dealer) for result in self.yaku]

    @classmethod
    def empty(cls, is_dealer: bool = False) -> 'HandScore':
        return cls(is_dealer=is_dealer)

    @classmethod
    def river_jackpot(cls, is_dealer: bool = False) -> 'HandScore':
        """Fixed limit (満貫) for a river of terminals and honors."""
        return cls(yaku=((RIVER_JACKPOT, 0),), tier=LimitTier.LIMIT, is_dealer=is_dealer)


def calculate_score(
    tiles: Sequence[Tile],
    melds: Sequence[Meld],
    winning_tile: Tile,
    situation: Situation,
    config: Optional[ScoringConfig] = None,
) -> HandScore:
    """Calculate the best score of a finished hand.

    Args:
        tiles: Concealed tiles, without the winning tile
        melds: Revealed melds in completion order, concealed quads included
        winning_tile: Tile that completed the hand
        situation: How and when the hand was completed
        config: Rule configuration; DEFAULT_CONFIG when omitted

    Returns:
        The highest valued HandScore, or an empty one if no rule matched.

    Raises:
        ValueError: If the hand is malformed or not complete.
    """
    config = config or DEFAULT_CONFIG
    decompositions = decompose(tiles, winning_tile, melds, situation.supplier)
    features = HandFeatures.extract(tiles, melds, winning_tile, situation, config.red_fives)
    tiles_34 = tiles_to_34_array(list(tiles) + [winning_tile])
    is_dealer = situation.is_dealer

    limits = detect_limit_yaku(HandContext(features, situation, config, tiles_34=tiles_34))
    if limits:
        if not config.stack_limits:
            limits = [max(limits, key=lambda r: r[1])]
        return _limit_score(limits, is_dealer)

    candidates = []
    if is_seven_pairs(tiles, winning_tile):
        ctx = HandContext(features, situation, config, tiles_34=tiles_34)
        candidates.append(_graded_score(detect_all_yaku(ctx), [FuType.SEVEN_PAIRS],
                                        None, is_dealer, config))
    for decomposition in decompositions:
        ctx = HandContext(features, situation, config, decomposition, tiles_34)
        fu_items = calculate_fu_items(decomposition, situation, features)
        candidates.append(_graded_score(detect_all_yaku(ctx), fu_items,
                                        decomposition, is_dealer, config))

    candidates = [c for c in candidates if not c.is_empty]
    if not candidates:
        return HandScore.empty(is_dealer)
    return max(candidates, key=HandScore.sort_key)


def _limit_score(limits: List[YakuResult], is_dealer: bool) -> HandScore:
    return HandScore(
        yaku=tuple(limits),
        multiplier=total_multiplier(limits),
        tier=LimitTier.HAND_LIMIT,
        is_dealer=is_dealer,
    )


def _graded_score(yaku_list: List[YakuResult], fu_items: List[FuType],
                  decomposition: Optional[Decomposition], is_dealer: bool,
                  config: ScoringConfig) -> HandScore:
    if not yaku_list:
        return HandScore.empty(is_dealer)
    han = total_han(yaku_list)
    fu = total_fu(fu_items)
    return HandScore(
        yaku=tuple(yaku_list),
        fu_items=tuple(fu_items),
        han=han,
        fu=fu,
        tier=LimitTier.of(han, fu, config.counted_limit),
        is_dealer=is_dealer,
        decomposition=decomposition,
    )


def _round_up_100(points: int) -> int:
    return ((points + 99) // 100) * 100


def share_of(points: int, parts: int) -> int:
    """One of ``parts`` equal shares of ``points``, rounded up to 100."""
    return _round_up_100(-(-points // parts))
