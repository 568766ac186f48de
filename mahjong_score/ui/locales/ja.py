"""Japanese translations."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "東", "tile.south": "南", "tile.west": "西", "tile.north": "北",
    "tile.haku": "白", "tile.hatsu": "發", "tile.chun": "中",

    # Winds
    "wind.east": "東家", "wind.south": "南家", "wind.west": "西家", "wind.north": "北家",

    # Score screen
    "score.title": "和了",
    "score.yaku": "役",
    "score.han": "{han}翻",
    "score.fu": "{fu}符",
    "score.multiplier": "{n}倍",
    "score.points": "{points}点",
    "score.fu_breakdown": "符の内訳",
    "score.no_yaku": "役なし",
    "settlement.title": "精算",
    "settlement.seat": "席",
    "settlement.delta": "収支",
    "settlement.deposits": "供託 {n}本",
    "settlement.streak": "{n}本場",

    # Tiers
    "tier.none": "",
    "tier.limit": "満貫",
    "tier.one_half_limit": "跳満",
    "tier.double_limit": "倍満",
    "tier.triple_limit": "三倍満",
    "tier.counted_limit": "数え役満",
    "tier.hand_limit": "役満",
    "tier.multiple_hand_limit": "{n}倍役満",

    # Fu items
    "fu.base": "副底",
    "fu.seven_pairs": "七対子",
    "fu.dragon_head": "役牌雀頭",
    "fu.seat_wind_head": "自風雀頭",
    "fu.round_wind_head": "場風雀頭",
    "fu.open_simple_triplet": "中張明刻",
    "fu.open_orphan_triplet": "幺九明刻",
    "fu.concealed_simple_triplet": "中張暗刻",
    "fu.concealed_orphan_triplet": "幺九暗刻",
    "fu.open_simple_quad": "中張明槓",
    "fu.open_orphan_quad": "幺九明槓",
    "fu.concealed_simple_quad": "中張暗槓",
    "fu.concealed_orphan_quad": "幺九暗槓",
    "fu.edge_wait": "辺張待ち",
    "fu.middle_wait": "嵌張待ち",
    "fu.single_head_wait": "単騎待ち",
    "fu.self_draw": "自摸符",
    "fu.concealed_claim": "門前加符",
    "fu.open_no_points": "喰い平和",

    # Yaku
    "yaku.riichi": "立直",
    "yaku.double_riichi": "両立直",
    "yaku.one_shot": "一発",
    "yaku.self_draw": "門前清自摸和",
    "yaku.last_tile_draw": "海底摸月",
    "yaku.last_tile_claim": "河底撈魚",
    "yaku.quad_draw": "嶺上開花",
    "yaku.quad_grab": "搶槓",
    "yaku.all_simples": "断幺九",
    "yaku.half_flush": "混一色",
    "yaku.half_flush_open": "混一色",
    "yaku.full_flush": "清一色",
    "yaku.full_flush_open": "清一色",
    "yaku.dragon_white": "役牌 白",
    "yaku.dragon_green": "役牌 發",
    "yaku.dragon_red": "役牌 中",
    "yaku.seat_wind": "自風",
    "yaku.round_wind": "場風",
    "yaku.all_terminals_and_honors": "混老頭",
    "yaku.three_quads": "三槓子",
    "yaku.small_three_dragons": "小三元",
    "yaku.all_triplets": "対々和",
    "yaku.three_concealed_triplets": "三暗刻",
    "yaku.no_points": "平和",
    "yaku.half_outside": "混全帯幺九",
    "yaku.half_outside_open": "混全帯幺九",
    "yaku.full_outside": "純全帯幺九",
    "yaku.full_outside_open": "純全帯幺九",
    "yaku.full_straight": "一気通貫",
    "yaku.full_straight_open": "一気通貫",
    "yaku.three_color_straight": "三色同順",
    "yaku.three_color_straight_open": "三色同順",
    "yaku.three_color_triplets": "三色同刻",
    "yaku.double_run": "一盃口",
    "yaku.two_double_runs": "二盃口",
    "yaku.seven_pairs": "七対子",
    "yaku.heavenly_win": "天和",
    "yaku.earthly_win": "地和",
    "yaku.thirteen_orphans": "国士無双",
    "yaku.thirteen_orphans_13": "国士無双十三面",
    "yaku.nine_gates": "九蓮宝燈",
    "yaku.pure_nine_gates": "純正九蓮宝燈",
    "yaku.four_quads": "四槓子",
    "yaku.big_three_dragons": "大三元",
    "yaku.small_four_winds": "小四喜",
    "yaku.big_four_winds": "大四喜",
    "yaku.all_honors": "字一色",
    "yaku.all_terminals": "清老頭",
    "yaku.all_green": "緑一色",
    "yaku.four_concealed_triplets": "四暗刻",
    "yaku.four_concealed_single": "四暗刻単騎",
    "yaku.dora": "ドラ",
    "yaku.ura_dora": "裏ドラ",
    "yaku.red_dora": "赤ドラ",
    "yaku.river_jackpot": "流し満貫",

    # Menu
    "label.title": "リーチ麻雀 点数計算",
    "mode.select": "選択してください:",
    "mode.score": "和了点数の計算",
    "mode.draw": "荒牌流局",
    "mode.language": "言語 / Language",
    "mode.quit": "終了",
    "lang.select": "言語を選択:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    # Prompts
    "prompt.hand": "手牌 (例 123m456p789s1122z):",
    "prompt.melds": "副露 (例 555p:across, 1111z:self):",
    "prompt.winning_tile": "和了牌:",
    "prompt.tsumo": "ツモ?",
    "prompt.discarder": "放銃者 (right/across/left):",
    "prompt.riichi": "リーチ?",
    "prompt.round_wind": "場風",
    "prompt.seat_wind": "自風",
    "prompt.dora": "ドラ表示牌:",
    "prompt.ready_seats": "聴牌の席 (例 E S):",
    "error.discarder": "放銃者は right・across・left のいずれかです",
}
