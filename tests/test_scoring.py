"""Tests for scoring.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side, Wind
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import make_tile, make_tiles_from_string
from mahjong_score.rules.scoring import HandScore, LimitTier, calculate_score, share_of
from mahjong_score.rules.yaku import (
    ALL_HONORS, BIG_THREE_DRAGONS, DOUBLE_RUN, RIICHI, THREE_CONCEALED_TRIPLETS,
)


def graded(han: int, fu: int, is_dealer: bool = False) -> HandScore:
    return HandScore(yaku=((RIICHI, han),), han=han, fu=fu,
                     tier=LimitTier.of(han, fu), is_dealer=is_dealer)


def limit(*yaku, is_dealer: bool = False) -> HandScore:
    results = tuple((y, y.multiplier) for y in yaku)
    return HandScore(yaku=results, multiplier=sum(y.multiplier for y in yaku),
                     tier=LimitTier.HAND_LIMIT, is_dealer=is_dealer)


class TestLimitTier:
    def test_thresholds(self):
        assert LimitTier.of(3, 60) == LimitTier.NONE
        assert LimitTier.of(3, 70) == LimitTier.LIMIT
        assert LimitTier.of(4, 30) == LimitTier.NONE
        assert LimitTier.of(4, 40) == LimitTier.LIMIT
        assert LimitTier.of(5, 30) == LimitTier.LIMIT
        assert LimitTier.of(6, 30) == LimitTier.ONE_HALF_LIMIT
        assert LimitTier.of(7, 30) == LimitTier.ONE_HALF_LIMIT
        assert LimitTier.of(8, 30) == LimitTier.DOUBLE_LIMIT
        assert LimitTier.of(10, 30) == LimitTier.DOUBLE_LIMIT
        assert LimitTier.of(11, 30) == LimitTier.TRIPLE_LIMIT
        assert LimitTier.of(12, 30) == LimitTier.TRIPLE_LIMIT
        assert LimitTier.of(13, 30) == LimitTier.COUNTED_LIMIT
        assert LimitTier.of(13, 30, counted_limit=False) == LimitTier.TRIPLE_LIMIT


class TestHandScore:
    def test_graded_values(self):
        assert graded(1, 30).value == 1000
        assert graded(1, 30, is_dealer=True).value == 1500
        assert graded(3, 30).value == 3900
        assert graded(4, 30).value == 7700
        assert graded(2, 25).value == 1600

    def test_limit_values(self):
        assert graded(5, 30).value == 8000
        assert graded(6, 30).value == 12000
        assert graded(8, 30, is_dealer=True).value == 24000
        assert graded(11, 30).value == 24000
        assert graded(13, 30).value == 32000

    def test_multiplied_limit(self):
        assert limit(BIG_THREE_DRAGONS).value == 32000
        assert limit(BIG_THREE_DRAGONS, ALL_HONORS, is_dealer=True).value == 96000

    def test_self_draw_shares(self):
        score = graded(1, 30)
        assert score.ron_payment == 1000
        assert score.dealer_payment == 500
        assert score.non_dealer_payment == 300
        dealer = graded(2, 30, is_dealer=True)
        assert dealer.value == 2900
        assert dealer.dealer_payment == 0
        assert dealer.non_dealer_payment == 1000

    def test_shares_cover_value(self):
        for han in range(1, 5):
            for fu in (20, 30, 40, 50, 60, 70, 80, 90, 100, 110):
                for is_dealer in (False, True):
                    score = graded(han, fu, is_dealer)
                    if is_dealer:
                        total = 3 * score.non_dealer_payment
                    else:
                        total = score.dealer_payment + 2 * score.non_dealer_payment
                    assert total >= score.value
                    assert score.value % 100 == 0

    def test_share_of(self):
        assert share_of(1000, 4) == 300
        assert share_of(2900, 3) == 1000
        assert share_of(8000, 2) == 4000
        assert share_of(0, 3) == 0

    def test_rank_name(self):
        assert graded(1, 30).rank_name == "1翻30符"
        assert graded(5, 30).rank_name == "満貫"
        assert limit(BIG_THREE_DRAGONS, ALL_HONORS).rank_name == "二倍役満"
        assert HandScore.empty().rank_name == ""

    def test_empty(self):
        score = HandScore.empty(is_dealer=True)
        assert score.is_empty
        assert score.value == 0
        assert score.is_dealer

    def test_split(self):
        stacked = limit(BIG_THREE_DRAGONS, ALL_HONORS)
        parts = stacked.split()
        assert len(parts) == 2
        assert [p.yaku[0][0] for p in parts] == [BIG_THREE_DRAGONS, ALL_HONORS]
        assert all(p.value == 32000 for p in parts)
        assert graded(3, 30).split() == [graded(3, 30)]

    def test_river_jackpot(self):
        assert HandScore.river_jackpot().value == 8000
        assert HandScore.river_jackpot(is_dealer=True).value == 12000

    def test_sort_key(self):
        assert graded(2, 40).sort_key() > graded(2, 30).sort_key()
        # Same value: more han ranks higher
        assert graded(6, 30).sort_key() < graded(7, 30).sort_key()


class TestCalculateScore:
    def test_best_reading(self):
        tiles = make_tiles_from_string("111222333m456p7p")
        win = make_tile("7p", exclude=tiles)
        score = calculate_score(tiles, [], win, Situation(seat_wind=Wind.SOUTH,
                                                          supplier=Side.ACROSS))
        yaku = [y for y, _ in score.yaku]
        assert THREE_CONCEALED_TRIPLETS in yaku
        assert DOUBLE_RUN not in yaku
        assert score.fu == 50
        assert score.value == 3200
        assert score.decomposition is not None

    def test_no_points_self_draw(self):
        tiles = make_tiles_from_string("23m456m789p234s55s")
        win = make_tile("1m", exclude=tiles)
        score = calculate_score(tiles, [], win, Situation(riichi=True))
        assert score.han == 3 and score.fu == 20
        assert score.is_dealer
        assert score.value == 3900
        assert score.non_dealer_payment == 1300

    def test_incomplete_hand(self):
        tiles = make_tiles_from_string("123m456p789s1122z")
        with pytest.raises(ValueError):
            calculate_score(tiles, [], make_tile("5m"), Situation())

    def test_malformed_hand(self):
        tiles = make_tiles_from_string("123m456p789s112z")
        meld = Meld.from_string("555s", Side.ACROSS, exclude=tiles)
        with pytest.raises(ValueError):
            calculate_score(tiles, [meld], make_tile("2z", exclude=tiles), Situation())
