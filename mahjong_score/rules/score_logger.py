"""Score logger - records scored hands and settlements for review and debugging."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional, Sequence

from mahjong_score.core.meld import Meld
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import Tile
from mahjong_score.rules.config import DEFAULT_CONFIG, ScoringConfig
from mahjong_score.rules.scoring import HandScore
from mahjong_score.rules.settlement import Settlement
from mahjong_score.ui.tile_display import tile_to_simple_str

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


def _tiles_str(tiles) -> List[str]:
    return [tile_to_simple_str(t) for t in tiles]


def _meld_data(meld: Meld) -> dict:
    return {
        "kind": meld.kind.value,
        "tiles": _tiles_str(meld.tiles),
        "side": meld.side.name.lower(),
        "added": meld.added,
    }


def situation_data(situation: Situation) -> dict:
    return {
        "round_wind": situation.round_wind.name,
        "seat_wind": situation.seat_wind.name,
        "supplier": situation.supplier.name.lower(),
        "flags": [name for name in ("riichi", "double_riichi", "one_shot", "first_turn_win",
                                    "last_tile", "quad_grab", "quad_draw")
                  if getattr(situation, name)],
        "dora_indicators": _tiles_str(situation.dora_indicators),
        "ura_dora_indicators": _tiles_str(situation.ura_dora_indicators),
    }


def score_data(score: HandScore) -> dict:
    data = {
        "yaku": [{"key": yaku.key, "name": yaku.name, "value": value}
                 for yaku, value in score.yaku],
        "han": score.han,
        "fu": score.fu,
        "fu_items": [item.key for item in score.fu_items],
        "multiplier": score.multiplier,
        "tier": score.tier.key,
        "is_dealer": score.is_dealer,
        "value": score.value,
    }
    if score.decomposition is not None:
        data["decomposition"] = str(score.decomposition)
    return data


def settlement_data(settlement: Settlement) -> dict:
    return {
        "deltas": {wind.name: delta for wind, delta in settlement.deltas.items()},
        "deposit_income": settlement.deposit_income,
        "deposits": settlement.deposits,
        "streak": settlement.streak,
    }


class ScoreLogger:
    """Records scored hands and settlements to JSON log files."""

    def __init__(self, config: Optional[ScoringConfig] = None, log_dir: str = LOG_DIR):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = (config or DEFAULT_CONFIG).to_dict()
        self.log_dir = log_dir
        self.entries: List[dict] = []

        os.makedirs(self.log_dir, exist_ok=True)

    def log_hand(self, tiles: Sequence[Tile], melds: Sequence[Meld], winning_tile: Tile,
                 situation: Situation, score: HandScore) -> dict:
        """Log one scored hand and return the recorded entry."""
        entry = {
            "type": "hand",
            "tiles": _tiles_str(sorted(tiles)),
            "melds": [_meld_data(m) for m in melds],
            "winning_tile": tile_to_simple_str(winning_tile),
            "situation": situation_data(situation),
            "score": score_data(score),
        }
        self.entries.append(entry)
        return entry

    def log_settlement(self, settlement: Settlement, label: str = "win") -> dict:
        """Log a settlement ('win', 'draw', 'multiple', ...)."""
        entry = {"type": "settlement", "label": label}
        entry.update(settlement_data(settlement))
        self.entries.append(entry)
        return entry

    def save(self) -> str:
        """Save the session log to a JSON file and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "entries": self.entries,
        }

        filename = f"score_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath
