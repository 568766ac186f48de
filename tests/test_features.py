"""Tests for features.py and config.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side, Wind
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import make_tile, make_tiles_from_string
from mahjong_score.rules.config import DEFAULT_CONFIG, ScoringConfig
from mahjong_score.rules.features import HandFeatures


class TestHandFeatures:
    def test_counts(self):
        tiles = make_tiles_from_string("123m456p789sDwDwDwE")
        win = make_tile("E", exclude=tiles)
        f = HandFeatures.extract(tiles, [], win, Situation())
        assert f.dragon_white == 3 and f.dragons == 3
        assert f.winds == 2
        assert f.seat_wind == 2 and f.round_wind == 2
        assert f.winning_tile == 2
        assert f.terminals == 2
        assert f.honors == 5
        assert f.orphans == 7
        assert f.greens == 1
        assert f.distinct == 11
        assert f.max_duplication == 3
        assert f.suit_types == 3
        assert f.call_count == 0 and f.is_concealed

    def test_seat_and_round_differ(self):
        tiles = make_tiles_from_string("123m456p789sSSSE")
        win = make_tile("E", exclude=tiles)
        f = HandFeatures.extract(tiles, [], win,
                                 Situation(round_wind=Wind.EAST, seat_wind=Wind.SOUTH))
        assert f.seat_wind == 3
        assert f.round_wind == 2

    def test_quad_is_truncated_but_dora_is_not(self):
        quad = Meld.concealed_quad(make_tiles_from_string("1111m"))
        tiles = make_tiles_from_string("234p567p789sE")
        win = make_tile("E", exclude=tiles)
        situation = Situation(dora_indicators=(make_tile("9m"),))
        f = HandFeatures.extract(tiles, [quad], win, situation)
        assert f.terminals == 4
        assert f.max_duplication == 3
        assert f.dora == 4
        assert f.quad_count == 1
        assert f.call_count == 0 and f.is_concealed

    def test_calls(self):
        tiles = make_tiles_from_string("123m456p789sE")
        meld = Meld.from_string("555s", Side.ACROSS, exclude=tiles)
        win = make_tile("E", exclude=tiles)
        f = HandFeatures.extract(tiles, [meld], win, Situation())
        assert f.call_count == 1
        assert not f.is_concealed

    def test_red_fives(self):
        tiles = make_tiles_from_string("123m406p789sEEE5s")
        win = make_tile("5s", exclude=tiles)
        assert HandFeatures.extract(tiles, [], win, Situation()).red_dora == 1
        assert HandFeatures.extract(tiles, [], win, Situation(), red_fives=False).red_dora == 0

    def test_ura_dora(self):
        tiles = make_tiles_from_string("123m456p789sEEE5s")
        win = make_tile("5s", exclude=tiles)
        situation = Situation(riichi=True, ura_dora_indicators=(make_tile("4s", exclude=tiles),))
        f = HandFeatures.extract(tiles, [], win, situation)
        assert f.ura_dora == 2
        assert f.dora == 0


class TestScoringConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.deposit_score == 1000
        assert DEFAULT_CONFIG.streak_score == 300
        assert DEFAULT_CONFIG.drawn_pot == 3000
        assert DEFAULT_CONFIG.open_all_simples

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            ScoringConfig(streak_score=-100)

    def test_to_dict(self):
        data = ScoringConfig(stack_limits=False).to_dict()
        assert data["stack_limits"] is False
        assert data["deposit_score"] == 1000
