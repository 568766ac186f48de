"""English translations."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "E", "tile.south": "S", "tile.west": "W", "tile.north": "N",
    "tile.haku": "Wh", "tile.hatsu": "Gr", "tile.chun": "Rd",

    # Winds
    "wind.east": "East", "wind.south": "South", "wind.west": "West", "wind.north": "North",

    # Score screen
    "score.title": "Win",
    "score.yaku": "Yaku",
    "score.han": "{han} han",
    "score.fu": "{fu} fu",
    "score.multiplier": "x{n}",
    "score.points": "{points} pts",
    "score.fu_breakdown": "Fu breakdown",
    "score.no_yaku": "No yaku",
    "settlement.title": "Settlement",
    "settlement.seat": "Seat",
    "settlement.delta": "Change",
    "settlement.deposits": "{n} deposit(s)",
    "settlement.streak": "{n} streak",

    # Tiers
    "tier.none": "",
    "tier.limit": "Mangan",
    "tier.one_half_limit": "Haneman",
    "tier.double_limit": "Baiman",
    "tier.triple_limit": "Sanbaiman",
    "tier.counted_limit": "Counted Yakuman",
    "tier.hand_limit": "Yakuman",
    "tier.multiple_hand_limit": "{n}x Yakuman",

    # Fu items
    "fu.base": "Base",
    "fu.seven_pairs": "Seven Pairs",
    "fu.dragon_head": "Dragon pair",
    "fu.seat_wind_head": "Seat wind pair",
    "fu.round_wind_head": "Round wind pair",
    "fu.open_simple_triplet": "Open simple triplet",
    "fu.open_orphan_triplet": "Open terminal/honor triplet",
    "fu.concealed_simple_triplet": "Closed simple triplet",
    "fu.concealed_orphan_triplet": "Closed terminal/honor triplet",
    "fu.open_simple_quad": "Open simple quad",
    "fu.open_orphan_quad": "Open terminal/honor quad",
    "fu.concealed_simple_quad": "Closed simple quad",
    "fu.concealed_orphan_quad": "Closed terminal/honor quad",
    "fu.edge_wait": "Edge wait",
    "fu.middle_wait": "Closed wait",
    "fu.single_head_wait": "Pair wait",
    "fu.self_draw": "Tsumo",
    "fu.concealed_claim": "Closed ron",
    "fu.open_no_points": "Open pinfu shape",

    # Yaku
    "yaku.riichi": "Riichi",
    "yaku.double_riichi": "Double Riichi",
    "yaku.one_shot": "Ippatsu",
    "yaku.self_draw": "Menzen Tsumo",
    "yaku.last_tile_draw": "Haitei",
    "yaku.last_tile_claim": "Houtei",
    "yaku.quad_draw": "Rinshan Kaihou",
    "yaku.quad_grab": "Chankan",
    "yaku.all_simples": "Tanyao",
    "yaku.half_flush": "Honitsu",
    "yaku.half_flush_open": "Honitsu",
    "yaku.full_flush": "Chinitsu",
    "yaku.full_flush_open": "Chinitsu",
    "yaku.dragon_white": "Yakuhai (White)",
    "yaku.dragon_green": "Yakuhai (Green)",
    "yaku.dragon_red": "Yakuhai (Red)",
    "yaku.seat_wind": "Seat Wind",
    "yaku.round_wind": "Round Wind",
    "yaku.all_terminals_and_honors": "Honroutou",
    "yaku.three_quads": "Sankantsu",
    "yaku.small_three_dragons": "Shousangen",
    "yaku.all_triplets": "Toitoi",
    "yaku.three_concealed_triplets": "Sanankou",
    "yaku.no_points": "Pinfu",
    "yaku.half_outside": "Chanta",
    "yaku.half_outside_open": "Chanta",
    "yaku.full_outside": "Junchan",
    "yaku.full_outside_open": "Junchan",
    "yaku.full_straight": "Ittsu",
    "yaku.full_straight_open": "Ittsu",
    "yaku.three_color_straight": "Sanshoku Doujun",
    "yaku.three_color_straight_open": "Sanshoku Doujun",
    "yaku.three_color_triplets": "Sanshoku Doukou",
    "yaku.double_run": "Iipeikou",
    "yaku.two_double_runs": "Ryanpeikou",
    "yaku.seven_pairs": "Chiitoitsu",
    "yaku.heavenly_win": "Tenhou",
    "yaku.earthly_win": "Chiihou",
    "yaku.thirteen_orphans": "Kokushi Musou",
    "yaku.thirteen_orphans_13": "Kokushi Musou 13-wait",
    "yaku.nine_gates": "Chuuren Poutou",
    "yaku.pure_nine_gates": "Junsei Chuuren Poutou",
    "yaku.four_quads": "Suukantsu",
    "yaku.big_three_dragons": "Daisangen",
    "yaku.small_four_winds": "Shousuushii",
    "yaku.big_four_winds": "Daisuushii",
    "yaku.all_honors": "Tsuuiisou",
    "yaku.all_terminals": "Chinroutou",
    "yaku.all_green": "Ryuuiisou",
    "yaku.four_concealed_triplets": "Suuankou",
    "yaku.four_concealed_single": "Suuankou Tanki",
    "yaku.dora": "Dora",
    "yaku.ura_dora": "Ura Dora",
    "yaku.red_dora": "Red Dora",
    "yaku.river_jackpot": "Nagashi Mangan",

    # Menu
    "label.title": "Riichi Mahjong Scorer",
    "mode.select": "Select:",
    "mode.score": "Score a hand",
    "mode.draw": "Exhaustive draw",
    "mode.language": "Language / 语言",
    "mode.quit": "Quit",
    "lang.select": "Select language:",
    "lang.zh": "中文",
    "lang.ja": "日本語",
    "lang.en": "English",

    # Prompts
    "prompt.hand": "Hand tiles (e.g. 123m456p789s1122z):",
    "prompt.melds": "Melds (e.g. 555p:across, 1111z:self):",
    "prompt.winning_tile": "Winning tile:",
    "prompt.tsumo": "Self-draw?",
    "prompt.discarder": "Discarder (right/across/left):",
    "prompt.riichi": "Riichi?",
    "prompt.round_wind": "Round wind",
    "prompt.seat_wind": "Seat wind",
    "prompt.dora": "Dora indicators:",
    "prompt.ready_seats": "Ready seats (e.g. E S):",
    "error.discarder": "the discarder must be right, across or left",
}
