"""Tests for agari.py (win detection and decomposition)"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side
from mahjong_score.core.tile import make_tile, make_tiles_from_string, tiles_to_34_array
from mahjong_score.rules.agari import (
    COMPLETE_SIGNATURES, READY_SIGNATURES, Wait,
    block_signature, decompose, decompose_standard, get_agari_type, get_waiting_tiles,
    is_chiitoi_agari, is_complete, is_kokushi_agari, is_seven_pairs, is_standard_agari,
    is_tenpai, is_thirteen_orphans, validate_hand, winning_tiles_of,
)


def make_34(s: str):
    return tiles_to_34_array(make_tiles_from_string(s))


def make_hand(s: str, win: str, melds=()):
    """Concealed tiles, revealed melds and a winning tile with distinct ids."""
    tiles = make_tiles_from_string(s)
    used = list(tiles)
    meld_list = []
    for text, side in melds:
        meld = Meld.from_string(text, side, exclude=used)
        used.extend(meld.tiles)
        meld_list.append(meld)
    return tiles, make_tile(win, exclude=used), meld_list


class TestBlockSignature:
    def test_signature(self):
        assert block_signature(make_34("123m456p")) == (3, 3)
        assert block_signature(make_34("1122m")) == (4,)
        assert block_signature(make_34("19m")) == (1, 1)
        assert block_signature(make_34("9m1p")) == (1, 1)
        assert block_signature(make_34("EESS")) == (2, 2)

    def test_tables(self):
        assert (3, 3, 3, 3, 2) in COMPLETE_SIGNATURES
        assert (14,) in COMPLETE_SIGNATURES
        assert (5,) in COMPLETE_SIGNATURES
        assert (4,) not in COMPLETE_SIGNATURES
        assert (13,) in READY_SIGNATURES
        assert (1,) in READY_SIGNATURES
        assert all(sum(s) % 3 == 2 for s in COMPLETE_SIGNATURES)
        assert all(sum(s) % 3 == 1 for s in READY_SIGNATURES)

    def test_ready_table_keeps_split_middle_waits(self):
        # 13m456m789p234s55s: the missing 2m splits the run in two
        assert block_signature(make_34("13m456m789p234s55s")) == (5, 4, 3, 1)
        assert (5, 4, 3, 1) in READY_SIGNATURES
        assert (3, 3, 3, 2, 1, 1) in READY_SIGNATURES
        assert (2, 1, 1) in READY_SIGNATURES

    def test_prunes_scattered_hand(self):
        assert not is_standard_agari(make_34("19m19p19sESWNDwDgDr1m"))


class TestStandardAgari:
    def test_basic(self):
        assert is_standard_agari(make_34("123m456p789s11122z"))
        assert not is_standard_agari(make_34("123m456p789s11123z"))

    def test_reslice_triplets(self):
        results = decompose_standard(make_34("111222333m456p77s"))
        assert len(results) == 2
        heads = {head for head, _ in results}
        assert heads == {24}
        kinds = sorted(tuple(m[0] for m in mentsu) for _, mentsu in results)
        assert ('shuntsu', 'shuntsu', 'shuntsu', 'shuntsu') in kinds
        assert ('koutsu', 'koutsu', 'koutsu', 'shuntsu') in kinds

    def test_four_identical_runs(self):
        results = decompose_standard(make_34("111122223333m55p"))
        assert len(results) == 2
        assert any(all(m[0] == 'shuntsu' for m in mentsu) for _, mentsu in results)

    def test_wrong_size(self):
        assert decompose_standard(make_34("123m456p789s1122z")) == []

    def test_agari_type(self):
        assert get_agari_type(make_34("19m19p19sESWNDwDgDr1m")) == 'kokushi'
        assert get_agari_type(make_34("1122m3344p5566s77z")) == 'chiitoi'
        assert get_agari_type(make_34("123m456p789s11122z")) == 'standard'
        assert get_agari_type(make_34("123m456p789s11123z")) is None


class TestIrregularForms:
    def test_seven_pairs(self):
        assert is_chiitoi_agari(make_34("1122m3344p5566s77z"))
        assert not is_chiitoi_agari(make_34("1111m3344p5566s77z"))

    def test_thirteen_orphans(self):
        assert is_kokushi_agari(make_34("19m19p19sESWNDwDgDr1m"))
        assert not is_kokushi_agari(make_34("19m19p19sESWNDwDg2m1m"))

    def test_physical_helpers(self):
        tiles, win, _ = make_hand("1122m3344p5566s7z", "7z")
        assert is_seven_pairs(tiles, win)
        assert not is_thirteen_orphans(tiles, win)
        tiles, win, _ = make_hand("19m19p19sESWNDwDgDg", "Dr")
        assert is_thirteen_orphans(tiles, win)
        assert is_complete(tiles, win)


class TestWaits:
    def test_nine_gates_waits(self):
        assert get_waiting_tiles(make_34("1112345678999m")) == list(range(9))

    def test_either_head(self):
        assert get_waiting_tiles(make_34("123m456p789s1122z")) == [27, 28]

    def test_thirteen_sided(self):
        waits = get_waiting_tiles(make_34("19m19p19sESWNDwDgDr"))
        assert len(waits) == 13

    def test_exhausted_face_is_not_a_wait(self):
        tiles, _, melds = make_hand("1m234p567p789p", "9s", [("111m", Side.ACROSS)])
        assert winning_tiles_of(tiles, melds) == []
        assert not is_tenpai(tiles, melds)

    def test_middle_wait(self):
        tiles = make_tiles_from_string("13m456m789p234s55s")
        assert winning_tiles_of(tiles) == [1]
        assert is_tenpai(tiles)

    def test_middle_wait_apart_from_other_blocks(self):
        tiles = make_tiles_from_string("57m123p789p234s EE")
        assert winning_tiles_of(tiles) == [5]
        assert get_waiting_tiles(make_34("13p55s")) == [10]

    def test_single_wait_with_meld(self):
        tiles, _, melds = make_hand("1m234p567p789p", "9s", [("222m", Side.ACROSS)])
        assert winning_tiles_of(tiles, melds) == [0]
        assert is_tenpai(tiles, melds)

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError):
            winning_tiles_of(make_tiles_from_string("123m456p789s11z"))


class TestValidation:
    def test_sizes(self):
        with pytest.raises(ValueError):
            validate_hand(make_tiles_from_string("123m456p789s1122z5m"))
        with pytest.raises(ValueError):
            validate_hand([])
        tiles, _, melds = make_hand("123m456p789s1z", "1z",
                                    [("555p", Side.ACROSS), ("666p", Side.RIGHT)])
        with pytest.raises(ValueError):
            validate_hand(tiles, melds)

    def test_duplicates(self):
        tiles = make_tiles_from_string("123m456p789s1122z")
        with pytest.raises(ValueError):
            validate_hand(tiles, (), tiles[0])

    def test_tile_shared_with_meld(self):
        tiles = make_tiles_from_string("1m234p567p789p")
        meld = Meld.from_string("111m", Side.ACROSS)
        with pytest.raises(ValueError):
            validate_hand(tiles, [meld])


class TestDecompose:
    def test_double_side(self):
        tiles, win, _ = make_hand("23m456m789p234s55s", "1m")
        results = decompose(tiles, win)
        assert len(results) == 1
        assert results[0].wait == Wait.DOUBLE_SIDE

    def test_edge(self):
        tiles, win, _ = make_hand("12m456m789p234s55s", "3m")
        assert [d.wait for d in decompose(tiles, win)] == [Wait.SINGLE_SIDE]

    def test_middle(self):
        tiles, win, _ = make_hand("13m456m789p234s55s", "2m")
        assert [d.wait for d in decompose(tiles, win)] == [Wait.MIDDLE]

    def test_single_head(self):
        tiles, win, _ = make_hand("123m456m789p234s5s", "5s")
        assert [d.wait for d in decompose(tiles, win)] == [Wait.SINGLE_HEAD]

    def test_claimed_either_head_triplet_is_open(self):
        tiles, win, _ = make_hand("123m456m789p11s22s", "1s")
        results = decompose(tiles, win, supplier=Side.ACROSS)
        assert len(results) == 1
        d = results[0]
        assert d.wait == Wait.EITHER_HEAD
        triplet = d.triplets_and_quads[0]
        assert triplet.is_open and triplet.side == Side.ACROSS
        assert all(run.is_concealed for run in d.runs)

    def test_self_drawn_triplet_stays_concealed(self):
        tiles, win, _ = make_hand("123m456m789p11s22s", "1s")
        d = decompose(tiles, win)[0]
        assert d.triplets_and_quads[0].is_concealed

    def test_winning_tile_positions(self):
        tiles, win, _ = make_hand("23m345m456p789s99s", "4m")
        results = decompose(tiles, win)
        assert len(results) == 2
        assert {d.wait for d in results} == {Wait.DOUBLE_SIDE, Wait.MIDDLE}

    def test_partition(self):
        tiles, win, melds = make_hand("111222333m5p", "5p", [("789s", Side.LEFT)])
        results = decompose(tiles, win, melds)
        assert len(results) == 2
        expected = sorted(list(tiles) + [win] + list(melds[0].tiles))
        for d in results:
            assert sorted(d.all_tiles()) == expected
            assert len(d.melds) == 4
            assert d.melds[-1] == melds[0]

    def test_seven_pairs_has_no_standard_reading(self):
        tiles, win, _ = make_hand("1122m3344p5566s7z", "7z")
        assert decompose(tiles, win) == []

    def test_incomplete_raises(self):
        tiles, win, _ = make_hand("123m456p789s1122z", "5m")
        with pytest.raises(ValueError):
            decompose(tiles, win)
