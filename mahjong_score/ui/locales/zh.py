"""Chinese (Simplified) translations."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "东", "tile.south": "南", "tile.west": "西", "tile.north": "北",
    "tile.haku": "白", "tile.hatsu": "发", "tile.chun": "中",

    # Winds
    "wind.east": "东家", "wind.south": "南家", "wind.west": "西家", "wind.north": "北家",

    # Score screen
    "score.title": "和牌",
    "score.yaku": "役种",
    "score.han": "{han}番",
    "score.fu": "{fu}符",
    "score.multiplier": "{n}倍",
    "score.points": "{points}点",
    "score.fu_breakdown": "符数明细",
    "score.no_yaku": "无役",
    "settlement.title": "结算",
    "settlement.seat": "座位",
    "settlement.delta": "得失",
    "settlement.deposits": "供托 {n}根",
    "settlement.streak": "{n}本场",

    # Tiers
    "tier.none": "",
    "tier.limit": "满贯",
    "tier.one_half_limit": "跳满",
    "tier.double_limit": "倍满",
    "tier.triple_limit": "三倍满",
    "tier.counted_limit": "累计役满",
    "tier.hand_limit": "役满",
    "tier.multiple_hand_limit": "{n}倍役满",

    # Fu items
    "fu.base": "底符",
    "fu.seven_pairs": "七对子",
    "fu.dragon_head": "役牌雀头",
    "fu.seat_wind_head": "自风雀头",
    "fu.round_wind_head": "场风雀头",
    "fu.open_simple_triplet": "中张明刻",
    "fu.open_orphan_triplet": "幺九明刻",
    "fu.concealed_simple_triplet": "中张暗刻",
    "fu.concealed_orphan_triplet": "幺九暗刻",
    "fu.open_simple_quad": "中张明杠",
    "fu.open_orphan_quad": "幺九明杠",
    "fu.concealed_simple_quad": "中张暗杠",
    "fu.concealed_orphan_quad": "幺九暗杠",
    "fu.edge_wait": "边张听牌",
    "fu.middle_wait": "嵌张听牌",
    "fu.single_head_wait": "单骑听牌",
    "fu.self_draw": "自摸符",
    "fu.concealed_claim": "门前荣和",
    "fu.open_no_points": "副露平和形",

    # Yaku
    "yaku.riichi": "立直",
    "yaku.double_riichi": "两立直",
    "yaku.one_shot": "一发",
    "yaku.self_draw": "门前清自摸和",
    "yaku.last_tile_draw": "海底捞月",
    "yaku.last_tile_claim": "河底捞鱼",
    "yaku.quad_draw": "岭上开花",
    "yaku.quad_grab": "抢杠",
    "yaku.all_simples": "断幺九",
    "yaku.half_flush": "混一色",
    "yaku.half_flush_open": "混一色",
    "yaku.full_flush": "清一色",
    "yaku.full_flush_open": "清一色",
    "yaku.dragon_white": "役牌 白",
    "yaku.dragon_green": "役牌 发",
    "yaku.dragon_red": "役牌 中",
    "yaku.seat_wind": "自风",
    "yaku.round_wind": "场风",
    "yaku.all_terminals_and_honors": "混老头",
    "yaku.three_quads": "三杠子",
    "yaku.small_three_dragons": "小三元",
    "yaku.all_triplets": "对对和",
    "yaku.three_concealed_triplets": "三暗刻",
    "yaku.no_points": "平和",
    "yaku.half_outside": "混全带幺九",
    "yaku.half_outside_open": "混全带幺九",
    "yaku.full_outside": "纯全带幺九",
    "yaku.full_outside_open": "纯全带幺九",
    "yaku.full_straight": "一气通贯",
    "yaku.full_straight_open": "一气通贯",
    "yaku.three_color_straight": "三色同顺",
    "yaku.three_color_straight_open": "三色同顺",
    "yaku.three_color_triplets": "三色同刻",
    "yaku.double_run": "一杯口",
    "yaku.two_double_runs": "二杯口",
    "yaku.seven_pairs": "七对子",
    "yaku.heavenly_win": "天和",
    "yaku.earthly_win": "地和",
    "yaku.thirteen_orphans": "国士无双",
    "yaku.thirteen_orphans_13": "国士无双十三面",
    "yaku.nine_gates": "九莲宝灯",
    "yaku.pure_nine_gates": "纯正九莲宝灯",
    "yaku.four_quads": "四杠子",
    "yaku.big_three_dragons": "大三元",
    "yaku.small_four_winds": "小四喜",
    "yaku.big_four_winds": "大四喜",
    "yaku.all_honors": "字一色",
    "yaku.all_terminals": "清老头",
    "yaku.all_green": "绿一色",
    "yaku.four_concealed_triplets": "四暗刻",
    "yaku.four_concealed_single": "四暗刻单骑",
    "yaku.dora": "宝牌",
    "yaku.ura_dora": "里宝牌",
    "yaku.red_dora": "赤宝牌",
    "yaku.river_jackpot": "流局满贯",

    # Menu
    "label.title": "立直麻将点数计算",
    "mode.select": "请选择:",
    "mode.score": "计算和牌点数",
    "mode.draw": "荒牌流局",
    "mode.language": "语言 / Language",
    "mode.quit": "退出",
    "lang.select": "选择语言:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    # Prompts
    "prompt.hand": "手牌 (例 123m456p789s1122z):",
    "prompt.melds": "副露 (例 555p:across, 1111z:self):",
    "prompt.winning_tile": "和了牌:",
    "prompt.tsumo": "自摸?",
    "prompt.discarder": "放铳者 (right/across/left):",
    "prompt.riichi": "立直?",
    "prompt.round_wind": "场风",
    "prompt.seat_wind": "自风",
    "prompt.dora": "宝牌指示牌:",
    "prompt.ready_seats": "听牌的座位 (例 E S):",
    "error.discarder": "放铳者必须是 right、across 或 left",
}
