"""Tests for meld.py and situation.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_score.core.meld import Head, Meld, MeldKind
from mahjong_score.core.seat import Side, Wind
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import make_tile, make_tiles_from_string


class TestMeld:
    def test_concealed_run(self):
        meld = Meld.from_string("123m")
        assert meld.kind == MeldKind.RUN
        assert meld.is_concealed
        assert meld.called_tile is None
        assert meld.is_terminal and not meld.is_honor

    def test_claimed_triplet(self):
        meld = Meld.from_string("555p", Side.ACROSS)
        assert meld.is_triplet and meld.is_open
        assert meld.called_tile == meld.tiles[-1]
        assert not meld.contains_red()

    def test_run_only_from_left(self):
        assert Meld.from_string("789s", Side.LEFT).is_open
        with pytest.raises(ValueError):
            Meld.from_string("789s", Side.ACROSS)

    def test_invalid_shapes(self):
        with pytest.raises(ValueError):
            Meld.from_string("124m")
        with pytest.raises(ValueError):
            Meld.triplet(make_tiles_from_string("556m"))
        with pytest.raises(ValueError):
            Meld.run(make_tiles_from_string("89m1p"))

    def test_quads(self):
        concealed = Meld.concealed_quad(make_tiles_from_string("1111z"))
        assert concealed.is_quad and concealed.is_concealed
        assert concealed.is_wind
        assert len(concealed.truncated) == 3

        called = Meld.from_string("5555m", Side.RIGHT)
        assert called.is_called_quad
        assert called.direct_side == Side.RIGHT
        assert called.contains_red()

        with pytest.raises(ValueError):
            Meld.called_quad(make_tiles_from_string("2222m"), Side.SELF)

    def test_added_quad(self):
        triplet = Meld.from_string("DwDwDw", Side.LEFT)
        fourth = make_tile("Dw", exclude=triplet.tiles)
        quad = Meld.added_quad(triplet, fourth)
        assert quad.is_quad and quad.added
        assert quad.side == Side.LEFT
        assert quad.direct_side == Side.SELF
        assert quad.is_open and not quad.is_called_quad
        assert quad.is_dragon

    def test_added_quad_needs_claimed_triplet(self):
        triplet = Meld.from_string("999s")
        with pytest.raises(ValueError):
            Meld.added_quad(triplet, make_tile("9s", exclude=triplet.tiles))

    def test_tiles_sorted(self):
        meld = Meld.run(make_tiles_from_string("312m"))
        assert [t.number for t in meld.tiles] == [1, 2, 3]
        assert meld.tile_index34 == 0


class TestHead:
    def test_pair(self):
        head = Head(tuple(make_tiles_from_string("EE")))
        assert head.is_wind and head.is_yaochu
        assert head.tile_index34 == 27

    def test_not_a_pair(self):
        with pytest.raises(ValueError):
            Head(tuple(make_tiles_from_string("12m")))


class TestSituation:
    def test_defaults(self):
        s = Situation()
        assert s.is_tsumo
        assert s.is_dealer
        assert s.dora_tiles_34 == []

    def test_claimed_win(self):
        s = Situation(seat_wind=Wind.SOUTH, supplier=Side.LEFT)
        assert not s.is_tsumo
        assert not s.is_dealer

    def test_dependencies(self):
        with pytest.raises(ValueError):
            Situation(double_riichi=True)
        with pytest.raises(ValueError):
            Situation(one_shot=True)

    def test_contradictions(self):
        with pytest.raises(ValueError):
            Situation(first_turn_win=True, riichi=True)
        with pytest.raises(ValueError):
            Situation(last_tile=True, quad_draw=True)
        with pytest.raises(ValueError):
            Situation(riichi=True, one_shot=True, quad_draw=True)

    def test_self_draw_vs_claim(self):
        with pytest.raises(ValueError):
            Situation(quad_grab=True)
        with pytest.raises(ValueError):
            Situation(supplier=Side.ACROSS, quad_draw=True)
        assert Situation(supplier=Side.ACROSS, quad_grab=True).quad_grab

    def test_indicators(self):
        with pytest.raises(ValueError):
            Situation(ura_dora_indicators=(make_tile("1m"),))
        with pytest.raises(ValueError):
            Situation(dora_indicators=tuple(make_tiles_from_string("123456m")))
        s = Situation(riichi=True, dora_indicators=(make_tile("9m"),),
                      ura_dora_indicators=(make_tile("N"),))
        assert s.dora_tiles_34 == [0]
        assert s.ura_dora_tiles_34 == [27]
