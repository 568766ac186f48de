"""Yaku (役) detection for Riichi Mahjong.

Rules are grouped into families. Every family keeps a table of
``(Yaku, check)`` pairs, and all checks of one family share a signature:

    situation      check(ctx) looking at ctx.situation and ctx.features
    feature        check(ctx) looking at ctx.features only
    decomposition  check(ctx) also reading ctx.decomposition
    irregular      check(ctx) reading the raw ctx.tiles_34
    limit          check(ctx) looking at ctx.features and ctx.situation

A detected rule is reported as ``(yaku, value)`` where value is the han
count, or the limit multiplier for limit hands.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from mahjong_score.core.situation import Situation
from mahjong_score.rules.agari import Decomposition, is_chiitoi_agari
from mahjong_score.rules.config import DEFAULT_CONFIG, ScoringConfig
from mahjong_score.rules.features import HandFeatures
from mahjong_score.rules.fu import structural_fu


class YakuFamily(Enum):
    SITUATION = "situation"
    FEATURE = "feature"
    DECOMPOSITION = "decomposition"
    IRREGULAR = "irregular"
    LIMIT = "limit"
    BONUS = "bonus"
    SPECIAL = "special"


class YakuCategory(Enum):
    GRADED = "graded"   # counted in han
    LIMIT = "limit"     # 役満, counted in multipliers
    FIXED = "fixed"     # fixed value regardless of han (流し満貫)


@dataclass(frozen=True)
class Yaku:
    """A named scoring rule.

    Attributes:
        key: Stable identifier used by presentation and logs
        name: Japanese name
        family: Rule family
        han: Han value (per tile for bonus rules)
        multiplier: Limit multiplier for limit hands
        category: Graded, limit or fixed
    """
    key: str
    name: str
    family: YakuFamily
    han: int = 0
    multiplier: int = 0
    category: YakuCategory = YakuCategory.GRADED

    @property
    def is_limit(self) -> bool:
        return self.category == YakuCategory.LIMIT

    @property
    def is_bonus(self) -> bool:
        return self.family == YakuFamily.BONUS


YakuResult = Tuple[Yaku, int]  # (yaku, han or multiplier)


@dataclass
class HandContext:
    """All information needed to judge yaku for one reading of a hand."""
    features: HandFeatures
    situation: Situation
    config: ScoringConfig = DEFAULT_CONFIG
    decomposition: Optional[Decomposition] = None
    # 14 tile counts; set for irregular shapes
    tiles_34: List[int] = field(default_factory=lambda: [0] * 34)

    @property
    def is_concealed(self) -> bool:
        return self.features.is_concealed


Check = Callable[[HandContext], bool]

YAKU_BY_KEY: Dict[str, Yaku] = {}

SITUATION_RULES: List[Tuple[Yaku, Check]] = []
FEATURE_RULES: List[Tuple[Yaku, Check]] = []
DECOMPOSITION_RULES: List[Tuple[Yaku, Check]] = []
IRREGULAR_RULES: List[Tuple[Yaku, Check]] = []
LIMIT_RULES: List[Tuple[Yaku, Check]] = []

_TABLES = {
    YakuFamily.SITUATION: SITUATION_RULES,
    YakuFamily.FEATURE: FEATURE_RULES,
    YakuFamily.DECOMPOSITION: DECOMPOSITION_RULES,
    YakuFamily.IRREGULAR: IRREGULAR_RULES,
    YakuFamily.LIMIT: LIMIT_RULES,
}


def _yaku(key: str, name: str, family: YakuFamily, han: int = 0,
          multiplier: int = 0) -> Yaku:
    if key in YAKU_BY_KEY:
        raise ValueError(f"duplicate yaku key: {key}")
    if family == YakuFamily.LIMIT:
        category = YakuCategory.LIMIT
    elif family == YakuFamily.SPECIAL:
        category = YakuCategory.FIXED
    else:
        category = YakuCategory.GRADED
    yaku = Yaku(key, name, family, han, multiplier, category)
    YAKU_BY_KEY[key] = yaku
    return yaku


def rule(yaku: Yaku):
    """Register the decorated check in the table of the yaku's family."""
    def register(check: Check) -> Check:
        _TABLES[yaku.family].append((yaku, check))
        return check
    return register


S, F, D, I, L = (YakuFamily.SITUATION, YakuFamily.FEATURE, YakuFamily.DECOMPOSITION,
                 YakuFamily.IRREGULAR, YakuFamily.LIMIT)

RIICHI = _yaku("riichi", "立直", S, 1)
DOUBLE_RIICHI = _yaku("double_riichi", "両立直", S, 2)
ONE_SHOT = _yaku("one_shot", "一発", S, 1)
SELF_DRAW = _yaku("self_draw", "門前清自摸和", S, 1)
LAST_TILE_DRAW = _yaku("last_tile_draw", "海底摸月", S, 1)
LAST_TILE_CLAIM = _yaku("last_tile_claim", "河底撈魚", S, 1)
QUAD_DRAW = _yaku("quad_draw", "嶺上開花", S, 1)
QUAD_GRAB = _yaku("quad_grab", "搶槓", S, 1)

ALL_SIMPLES = _yaku("all_simples", "断幺九", F, 1)
HALF_FLUSH = _yaku("half_flush", "混一色", F, 3)
HALF_FLUSH_OPEN = _yaku("half_flush_open", "混一色", F, 2)
FULL_FLUSH = _yaku("full_flush", "清一色", F, 6)
FULL_FLUSH_OPEN = _yaku("full_flush_open", "清一色", F, 5)
DRAGON_WHITE = _yaku("dragon_white", "役牌 白", F, 1)
DRAGON_GREEN = _yaku("dragon_green", "役牌 發", F, 1)
DRAGON_RED = _yaku("dragon_red", "役牌 中", F, 1)
SEAT_WIND = _yaku("seat_wind", "自風", F, 1)
ROUND_WIND = _yaku("round_wind", "場風", F, 1)
ALL_TERMINALS_AND_HONORS = _yaku("all_terminals_and_honors", "混老頭", F, 2)
THREE_QUADS = _yaku("three_quads", "三槓子", F, 2)
SMALL_THREE_DRAGONS = _yaku("small_three_dragons", "小三元", F, 2)

ALL_TRIPLETS = _yaku("all_triplets", "対々和", D, 2)
THREE_CONCEALED_TRIPLETS = _yaku("three_concealed_triplets", "三暗刻", D, 2)
NO_POINTS = _yaku("no_points", "平和", D, 1)
HALF_OUTSIDE = _yaku("half_outside", "混全帯幺九", D, 2)
HALF_OUTSIDE_OPEN = _yaku("half_outside_open", "混全帯幺九", D, 1)
FULL_OUTSIDE = _yaku("full_outside", "純全帯幺九", D, 3)
FULL_OUTSIDE_OPEN = _yaku("full_outside_open", "純全帯幺九", D, 2)
FULL_STRAIGHT = _yaku("full_straight", "一気通貫", D, 2)
FULL_STRAIGHT_OPEN = _yaku("full_straight_open", "一気通貫", D, 1)
THREE_COLOR_STRAIGHT = _yaku("three_color_straight", "三色同順", D, 2)
THREE_COLOR_STRAIGHT_OPEN = _yaku("three_color_straight_open", "三色同順", D, 1)
THREE_COLOR_TRIPLETS = _yaku("three_color_triplets", "三色同刻", D, 2)
DOUBLE_RUN = _yaku("double_run", "一盃口", D, 1)
TWO_DOUBLE_RUNS = _yaku("two_double_runs", "二盃口", D, 3)

SEVEN_PAIRS = _yaku("seven_pairs", "七対子", I, 2)

HEAVENLY_WIN = _yaku("heavenly_win", "天和", L, multiplier=1)
EARTHLY_WIN = _yaku("earthly_win", "地和", L, multiplier=1)
THIRTEEN_ORPHANS = _yaku("thirteen_orphans", "国士無双", L, multiplier=1)
THIRTEEN_ORPHANS_13 = _yaku("thirteen_orphans_13", "国士無双十三面", L, multiplier=2)
NINE_GATES = _yaku("nine_gates", "九蓮宝燈", L, multiplier=1)
PURE_NINE_GATES = _yaku("pure_nine_gates", "純正九蓮宝燈", L, multiplier=2)
FOUR_QUADS = _yaku("four_quads", "四槓子", L, multiplier=2)
BIG_THREE_DRAGONS = _yaku("big_three_dragons", "大三元", L, multiplier=1)
SMALL_FOUR_WINDS = _yaku("small_four_winds", "小四喜", L, multiplier=1)
BIG_FOUR_WINDS = _yaku("big_four_winds", "大四喜", L, multiplier=2)
ALL_HONORS = _yaku("all_honors", "字一色", L, multiplier=1)
ALL_TERMINALS = _yaku("all_terminals", "清老頭", L, multiplier=1)
ALL_GREEN = _yaku("all_green", "緑一色", L, multiplier=1)
FOUR_CONCEALED_TRIPLETS = _yaku("four_concealed_triplets", "四暗刻", L, multiplier=1)
FOUR_CONCEALED_SINGLE = _yaku("four_concealed_single", "四暗刻単騎", L, multiplier=2)

DORA = _yaku("dora", "ドラ", YakuFamily.BONUS, 1)
URA_DORA = _yaku("ura_dora", "裏ドラ", YakuFamily.BONUS, 1)
RED_DORA = _yaku("red_dora", "赤ドラ", YakuFamily.BONUS, 1)

RIVER_JACKPOT = _yaku("river_jackpot", "流し満貫", YakuFamily.SPECIAL)

# Limit hands whose last meld can make another player liable (包)
LIABLE_LIMITS = (BIG_THREE_DRAGONS, BIG_FOUR_WINDS, FOUR_QUADS)


# === Situation ===

@rule(RIICHI)
def check_riichi(ctx: HandContext) -> bool:
    return ctx.situation.riichi and not ctx.situation.double_riichi


@rule(DOUBLE_RIICHI)
def check_double_riichi(ctx: HandContext) -> bool:
    return ctx.situation.double_riichi


@rule(ONE_SHOT)
def check_one_shot(ctx: HandContext) -> bool:
    return ctx.situation.one_shot


@rule(SELF_DRAW)
def check_self_draw(ctx: HandContext) -> bool:
    return ctx.situation.is_tsumo and ctx.is_concealed


@rule(LAST_TILE_DRAW)
def check_last_tile_draw(ctx: HandContext) -> bool:
    return ctx.situation.last_tile and ctx.situation.is_tsumo


@rule(LAST_TILE_CLAIM)
def check_last_tile_claim(ctx: HandContext) -> bool:
    return ctx.situation.last_tile and not ctx.situation.is_tsumo


@rule(QUAD_DRAW)
def check_quad_draw(ctx: HandContext) -> bool:
    return ctx.situation.quad_draw


@rule(QUAD_GRAB)
def check_quad_grab(ctx: HandContext) -> bool:
    return ctx.situation.quad_grab


# === Features ===

@rule(ALL_SIMPLES)
def check_all_simples(ctx: HandContext) -> bool:
    """All simples (断幺九) - no terminals or honors."""
    if ctx.features.orphans != 0:
        return False
    return ctx.is_concealed or ctx.config.open_all_simples


@rule(HALF_FLUSH)
def check_half_flush(ctx: HandContext) -> bool:
    f = ctx.features
    return ctx.is_concealed and f.honors > 0 and f.suit_types == 1


@rule(HALF_FLUSH_OPEN)
def check_half_flush_open(ctx: HandContext) -> bool:
    f = ctx.features
    return not ctx.is_concealed and f.honors > 0 and f.suit_types == 1


@rule(FULL_FLUSH)
def check_full_flush(ctx: HandContext) -> bool:
    f = ctx.features
    return ctx.is_concealed and f.honors == 0 and f.suit_types == 1


@rule(FULL_FLUSH_OPEN)
def check_full_flush_open(ctx: HandContext) -> bool:
    f = ctx.features
    return not ctx.is_concealed and f.honors == 0 and f.suit_types == 1


@rule(DRAGON_WHITE)
def check_dragon_white(ctx: HandContext) -> bool:
    return ctx.features.dragon_white == 3


@rule(DRAGON_GREEN)
def check_dragon_green(ctx: HandContext) -> bool:
    return ctx.features.dragon_green == 3


@rule(DRAGON_RED)
def check_dragon_red(ctx: HandContext) -> bool:
    return ctx.features.dragon_red == 3


@rule(SEAT_WIND)
def check_seat_wind(ctx: HandContext) -> bool:
    return ctx.features.seat_wind == 3


@rule(ROUND_WIND)
def check_round_wind(ctx: HandContext) -> bool:
    return ctx.features.round_wind == 3


@rule(ALL_TERMINALS_AND_HONORS)
def check_all_terminals_and_honors(ctx: HandContext) -> bool:
    """混老頭. Distinct faces cap out at 7, which leaves thirteen orphans out."""
    f = ctx.features
    return f.honors > 0 and f.orphans == 14 and f.distinct <= 7


@rule(THREE_QUADS)
def check_three_quads(ctx: HandContext) -> bool:
    return ctx.features.quad_count == 3


@rule(SMALL_THREE_DRAGONS)
def check_small_three_dragons(ctx: HandContext) -> bool:
    return ctx.features.dragons == 8


# === Decomposition ===

def _runs_by_suit(ctx: HandContext) -> Dict[int, List[int]]:
    """Starting numbers of runs, grouped by suit."""
    result: Dict[int, List[int]] = {}
    for meld in ctx.decomposition.runs:
        first = meld.tiles[0]
        result.setdefault(int(first.suit), []).append(first.number)
    return result


def _double_run_count(ctx: HandContext) -> int:
    seen: Dict[int, int] = {}
    for meld in ctx.decomposition.runs:
        seen[meld.tile_index34] = seen.get(meld.tile_index34, 0) + 1
    return sum(v // 2 for v in seen.values())


def _components(ctx: HandContext) -> list:
    return [ctx.decomposition.head] + list(ctx.decomposition.melds)


@rule(ALL_TRIPLETS)
def check_all_triplets(ctx: HandContext) -> bool:
    return not ctx.decomposition.runs


@rule(THREE_CONCEALED_TRIPLETS)
def check_three_concealed_triplets(ctx: HandContext) -> bool:
    concealed = [m for m in ctx.decomposition.triplets_and_quads if m.is_concealed]
    return len(concealed) == 3


@rule(NO_POINTS)
def check_no_points(ctx: HandContext) -> bool:
    """Pinfu - no fu from head, melds or wait, and nothing claimed."""
    return ctx.is_concealed and not structural_fu(ctx.decomposition, ctx.situation)


def _half_outside(ctx: HandContext) -> bool:
    components = _components(ctx)
    return (all(c.is_yaochu for c in components)
            and any(c.is_honor for c in components)
            and len(ctx.decomposition.runs) > 0)


def _full_outside(ctx: HandContext) -> bool:
    return (all(c.is_terminal for c in _components(ctx))
            and len(ctx.decomposition.runs) > 0)


@rule(HALF_OUTSIDE)
def check_half_outside(ctx: HandContext) -> bool:
    """Mixed outside hand (混全帯幺九). Every group has a terminal or honor."""
    return ctx.is_concealed and _half_outside(ctx)


@rule(HALF_OUTSIDE_OPEN)
def check_half_outside_open(ctx: HandContext) -> bool:
    return not ctx.is_concealed and _half_outside(ctx)


@rule(FULL_OUTSIDE)
def check_full_outside(ctx: HandContext) -> bool:
    """Pure outside hand (純全帯幺九). Every group has a terminal."""
    return ctx.is_concealed and _full_outside(ctx)


@rule(FULL_OUTSIDE_OPEN)
def check_full_outside_open(ctx: HandContext) -> bool:
    return not ctx.is_concealed and _full_outside(ctx)


def _full_straight(ctx: HandContext) -> bool:
    for numbers in _runs_by_suit(ctx).values():
        if {1, 4, 7} <= set(numbers):
            return True
    return False


@rule(FULL_STRAIGHT)
def check_full_straight(ctx: HandContext) -> bool:
    """Pure straight (一気通貫). 123, 456, 789 in one suit."""
    return ctx.is_concealed and _full_straight(ctx)


@rule(FULL_STRAIGHT_OPEN)
def check_full_straight_open(ctx: HandContext) -> bool:
    return not ctx.is_concealed and _full_straight(ctx)


def _three_color_straight(ctx: HandContext) -> bool:
    by_suit = _runs_by_suit(ctx)
    if len(by_suit) < 3:
        return False
    common = set.intersection(*(set(numbers) for numbers in by_suit.values()))
    return len(common) > 0


@rule(THREE_COLOR_STRAIGHT)
def check_three_color_straight(ctx: HandContext) -> bool:
    """Mixed triple sequence (三色同順)."""
    return ctx.is_concealed and _three_color_straight(ctx)


@rule(THREE_COLOR_STRAIGHT_OPEN)
def check_three_color_straight_open(ctx: HandContext) -> bool:
    return not ctx.is_concealed and _three_color_straight(ctx)


@rule(THREE_COLOR_TRIPLETS)
def check_three_color_triplets(ctx: HandContext) -> bool:
    """Triple triplets (三色同刻)."""
    by_number: Dict[int, set] = {}
    for meld in ctx.decomposition.triplets_and_quads:
        first = meld.tiles[0]
        if first.is_number_tile:
            by_number.setdefault(first.number, set()).add(first.suit)
    return any(len(suits) == 3 for suits in by_number.values())


@rule(DOUBLE_RUN)
def check_double_run(ctx: HandContext) -> bool:
    """One set of identical sequences (一盃口). Concealed only."""
    return ctx.is_concealed and _double_run_count(ctx) == 1


@rule(TWO_DOUBLE_RUNS)
def check_two_double_runs(ctx: HandContext) -> bool:
    """Two sets of identical sequences (二盃口). Concealed only."""
    return ctx.is_concealed and _double_run_count(ctx) == 2


# === Irregular ===

@rule(SEVEN_PAIRS)
def check_seven_pairs(ctx: HandContext) -> bool:
    return ctx.is_concealed and is_chiitoi_agari(ctx.tiles_34)


# === Limit hands ===

@rule(HEAVENLY_WIN)
def check_heavenly_win(ctx: HandContext) -> bool:
    s = ctx.situation
    return s.first_turn_win and s.is_dealer and s.is_tsumo


@rule(EARTHLY_WIN)
def check_earthly_win(ctx: HandContext) -> bool:
    s = ctx.situation
    return s.first_turn_win and not s.is_dealer and s.is_tsumo


def _thirteen_orphans_shape(f: HandFeatures) -> bool:
    return f.call_count == 0 and f.distinct == 13 and f.orphans == 14


@rule(THIRTEEN_ORPHANS)
def check_thirteen_orphans(ctx: HandContext) -> bool:
    return _thirteen_orphans_shape(ctx.features) and ctx.features.winning_tile == 1


@rule(THIRTEEN_ORPHANS_13)
def check_thirteen_orphans_13(ctx: HandContext) -> bool:
    """Thirteen orphans completed on the duplicated face (13-sided wait)."""
    return _thirteen_orphans_shape(ctx.features) and ctx.features.winning_tile == 2


def _nine_gates_shape(f: HandFeatures) -> bool:
    """1112345678999 + one more tile of the same suit, nothing claimed."""
    return (f.call_count == 0 and f.quad_count == 0 and f.suit_types == 1
            and f.distinct == 9 and f.honors == 0
            and f.terminals == (7 if f.max_duplication == 4 else 6))


@rule(NINE_GATES)
def check_nine_gates(ctx: HandContext) -> bool:
    return _nine_gates_shape(ctx.features) and ctx.features.winning_tile % 2 == 1


@rule(PURE_NINE_GATES)
def check_pure_nine_gates(ctx: HandContext) -> bool:
    """The winning tile is the extra one: a nine-sided wait."""
    return _nine_gates_shape(ctx.features) and ctx.features.winning_tile % 2 == 0


@rule(FOUR_QUADS)
def check_four_quads(ctx: HandContext) -> bool:
    return ctx.features.quad_count == 4


@rule(BIG_THREE_DRAGONS)
def check_big_three_dragons(ctx: HandContext) -> bool:
    return ctx.features.dragons == 9


@rule(SMALL_FOUR_WINDS)
def check_small_four_winds(ctx: HandContext) -> bool:
    return ctx.features.winds == 11


@rule(BIG_FOUR_WINDS)
def check_big_four_winds(ctx: HandContext) -> bool:
    return ctx.features.winds == 12


@rule(ALL_HONORS)
def check_all_honors(ctx: HandContext) -> bool:
    return ctx.features.honors == 14


@rule(ALL_TERMINALS)
def check_all_terminals(ctx: HandContext) -> bool:
    return ctx.features.terminals == 14


@rule(ALL_GREEN)
def check_all_green(ctx: HandContext) -> bool:
    """All green (緑一色). Only 2s,3s,4s,6s,8s + hatsu."""
    return ctx.features.greens == 14


def _four_triplets_shape(f: HandFeatures) -> bool:
    return f.call_count == 0 and f.distinct == 5 and f.max_duplication == 3


@rule(FOUR_CONCEALED_TRIPLETS)
def check_four_concealed_triplets(ctx: HandContext) -> bool:
    """四暗刻. A claimed tile on a triplet wait would open that triplet."""
    return (_four_triplets_shape(ctx.features) and ctx.features.winning_tile == 3
            and ctx.situation.is_tsumo)


@rule(FOUR_CONCEALED_SINGLE)
def check_four_concealed_single(ctx: HandContext) -> bool:
    return _four_triplets_shape(ctx.features) and ctx.features.winning_tile == 2


# === Detection ===

def _matches(table: List[Tuple[Yaku, Check]], ctx: HandContext) -> List[YakuResult]:
    return [(yaku, yaku.multiplier if yaku.is_limit else yaku.han)
            for yaku, check in table if check(ctx)]


def detect_limit_yaku(ctx: HandContext) -> List[YakuResult]:
    """Limit hands (役満) matched by features and situation alone."""
    return _matches(LIMIT_RULES, ctx)


def detect_bonus(features: HandFeatures) -> List[YakuResult]:
    results = []
    if features.dora > 0:
        results.append((DORA, features.dora))
    if features.ura_dora > 0:
        results.append((URA_DORA, features.ura_dora))
    if features.red_dora > 0:
        results.append((RED_DORA, features.red_dora))
    return results


def detect_all_yaku(ctx: HandContext) -> List[YakuResult]:
    """Detect all applicable yaku for the given hand context.

    Any limit hand pre-empts graded rules. Bonus tiles are only added when
    at least one other rule matched.
    """
    limits = detect_limit_yaku(ctx)
    if limits:
        return limits

    results = _matches(SITUATION_RULES, ctx) + _matches(FEATURE_RULES, ctx)
    if ctx.decomposition is not None:
        results += _matches(DECOMPOSITION_RULES, ctx)
    else:
        results += _matches(IRREGULAR_RULES, ctx)

    if results:
        results += detect_bonus(ctx.features)
    return results


def total_han(yaku_list: List[YakuResult]) -> int:
    """Sum total han from yaku list."""
    return sum(value for yaku, value in yaku_list if not yaku.is_limit)


def total_multiplier(yaku_list: List[YakuResult]) -> int:
    return sum(value for yaku, value in yaku_list if yaku.is_limit)


def has_yaku(yaku_list: List[YakuResult]) -> bool:
    """Check if there's at least one real yaku (not just dora)."""
    return any(not yaku.is_bonus for yaku, _ in yaku_list)
