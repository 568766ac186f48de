"""Tests for i18n, tile_display and score_display"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import io

import pytest
from rich.console import Console

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side, Wind
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import Tile, make_tile, make_tiles_from_string
from mahjong_score.rules.fu import FuType
from mahjong_score.rules.scoring import HandScore, LimitTier, calculate_score
from mahjong_score.rules.settlement import WinContext, settle_win
from mahjong_score.rules.yaku import ALL_HONORS, BIG_THREE_DRAGONS, RIICHI, YAKU_BY_KEY
from mahjong_score.ui.i18n import (
    get_language, set_language, t, translate_fu, translate_tier, translate_wind,
    translate_yaku,
)
from mahjong_score.ui.locales import en, ja, zh
from mahjong_score.ui.score_display import (
    build_settlement_table, render_score, render_settlement, score_expression,
)
from mahjong_score.ui.tile_display import (
    hand_to_rich_text, meld_to_rich_text, tile_to_display_str, tile_to_simple_str,
)


@pytest.fixture(autouse=True)
def restore_language():
    previous = get_language()
    yield
    set_language(previous)


def make_console() -> Console:
    return Console(file=io.StringIO(), record=True, width=100)


class TestI18n:
    def test_every_rule_is_translated(self):
        for locale in (zh, ja, en):
            for key in YAKU_BY_KEY:
                assert f"yaku.{key}" in locale.TRANSLATIONS
            for item in FuType:
                assert f"fu.{item.key}" in locale.TRANSLATIONS
            for tier in LimitTier:
                assert f"tier.{tier.key}" in locale.TRANSLATIONS

    def test_switch_language(self):
        set_language("ja")
        assert translate_yaku("riichi") == "立直"
        assert t("score.points", points=8000) == "8000点"
        set_language("en")
        assert t("score.points", points=8000) == "8000 pts"
        assert translate_wind("EAST") == "East"

    def test_tiers(self):
        set_language("ja")
        assert translate_tier("limit") == "満貫"
        assert translate_tier("hand_limit") == "役満"
        assert translate_tier("hand_limit", 2) == "2倍役満"
        assert translate_tier("none") == ""
        assert translate_fu("base") != "fu.base"

    def test_locales_share_keys(self):
        assert set(zh.TRANSLATIONS) == set(ja.TRANSLATIONS) == set(en.TRANSLATIONS)
        for key in ("mode.score", "prompt.hand", "lang.select", "error.discarder"):
            assert key in en.TRANSLATIONS

    def test_missing_key(self):
        assert t("no.such.key") == "no.such.key"

    def test_unknown_language(self):
        set_language("en")
        with pytest.raises(ValueError):
            set_language("xx")
        assert get_language() == "en"
        set_language(" JA ")
        assert get_language() == "ja"


class TestTileDisplay:
    def test_simple_str(self):
        assert tile_to_simple_str(Tile(16)) == "0m"
        assert tile_to_simple_str(Tile(0)) == "1m"
        assert tile_to_simple_str(Tile(108)) == "東"

    def test_localized(self):
        set_language("en")
        assert tile_to_display_str(Tile(108)) == "E"
        assert tile_to_display_str(Tile(52)) == "0p"

    def test_meld_text(self):
        meld = Meld.from_string("777p", Side.ACROSS)
        assert meld_to_rich_text(meld).plain == "[7p][7p][7p]"

    def test_hand_text(self):
        tiles = make_tiles_from_string("312m")
        win = make_tile("4m")
        assert hand_to_rich_text(tiles, (), win).plain == "[1m][2m][3m]  [4m]"


class TestScoreDisplay:
    def test_expression(self):
        set_language("ja")
        graded = HandScore(yaku=((RIICHI, 1),), han=1, fu=30)
        assert score_expression(graded) == "30符 1翻 1000点"
        limit = HandScore(yaku=((BIG_THREE_DRAGONS, 1),), multiplier=1,
                          tier=LimitTier.HAND_LIMIT)
        assert score_expression(limit) == "役満 32000点"
        stacked = HandScore(yaku=((BIG_THREE_DRAGONS, 1), (ALL_HONORS, 1)), multiplier=2,
                            tier=LimitTier.HAND_LIMIT)
        assert score_expression(stacked) == "2倍役満 64000点"
        assert score_expression(HandScore.empty()) == "役なし"

    def test_render_score(self):
        set_language("en")
        tiles = make_tiles_from_string("23m456m789p234s55s")
        win = make_tile("1m", exclude=tiles)
        score = calculate_score(tiles, [], win, Situation(riichi=True))
        console = make_console()
        render_score(console, score, tiles, [], win)
        output = console.export_text()
        assert translate_yaku("riichi") in output
        assert "3900 pts" in output

    def test_render_settlement(self):
        set_language("en")
        settlement = settle_win(HandScore(yaku=((RIICHI, 1),), han=1, fu=30),
                                WinContext(Wind.SOUTH, Side.LEFT, deposits=1, streak=2))
        console = make_console()
        render_settlement(console, settlement)
        output = console.export_text()
        assert "+2600" in output
        assert "-1600" in output
        assert "South" in output
        assert build_settlement_table(settlement).row_count == 4
