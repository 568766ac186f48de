"""Point settlement among the four seats.

Turns a HandScore into signed point transfers, covering liability (包) for
big three dragons, big four winds and four quads, deposit sticks, streak
bonus, exhaustive draws and simultaneous claimed wins.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side, Wind
from mahjong_score.rules.config import DEFAULT_CONFIG, ScoringConfig
from mahjong_score.rules.scoring import HandScore, share_of
from mahjong_score.rules.yaku import BIG_FOUR_WINDS, BIG_THREE_DRAGONS, FOUR_QUADS


@dataclass(frozen=True)
class WinContext:
    """Table facts needed to settle one win.

    Attributes:
        winner: Seat wind of the winner
        supplier: Side of the discarder (or quad declarer) as seen from the
            winner; SELF for a self-draw
        melds: Winner's revealed melds in completion order
        quad_draw: Won on the replacement tile after a quad
        deposits: Riichi deposit sticks on the table
        streak: Streak counter (本場)
    """
    winner: Wind
    supplier: Side = Side.SELF
    melds: Tuple[Meld, ...] = ()
    quad_draw: bool = False
    deposits: int = 0
    streak: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'melds', tuple(self.melds))
        if self.deposits < 0 or self.streak < 0:
            raise ValueError("deposit and streak counts must not be negative")
        if self.quad_draw and self.supplier != Side.SELF:
            raise ValueError("a replacement tile win is a self-draw")

    @property
    def is_tsumo(self) -> bool:
        return self.supplier == Side.SELF


@dataclass
class Settlement:
    """Signed point changes per seat for one resolved hand.

    ``deposit_income`` is the part of the winners' income taken from the
    deposit sticks on the table; everything else sums to zero.
    """
    deltas: Dict[Wind, int] = field(default_factory=lambda: {w: 0 for w in Wind})
    deposit_income: int = 0
    deposits: int = 0
    streak: int = 0

    def income_of(self, wind: Wind) -> int:
        return self.deltas[wind]

    @property
    def net(self) -> int:
        return sum(self.deltas.values())

    def pay(self, payer: Wind, payee: Wind, amount: int):
        self.deltas[payer] -= amount
        self.deltas[payee] += amount

    def merge(self, other: 'Settlement') -> 'Settlement':
        """Combine two settlements of the same hand (e.g. double ron)."""
        return Settlement(
            deltas={w: self.deltas[w] + other.deltas[w] for w in Wind},
            deposit_income=self.deposit_income + other.deposit_income,
            deposits=max(self.deposits, other.deposits),
            streak=max(self.streak, other.streak),
        )

    def apply(self, scores: Dict[Wind, int]) -> Dict[Wind, int]:
        """Return new seat scores after this settlement."""
        return {w: scores[w] + self.deltas[w] for w in Wind}


def winning_tile_supplier(context: WinContext) -> Optional[Wind]:
    """Who pays as discarder: the discarder on a claimed win, or the source of
    a called quad whose replacement tile won the hand."""
    if not context.is_tsumo:
        return context.supplier.of(context.winner)
    if context.quad_draw and context.melds and context.melds[-1].is_called_quad:
        return context.melds[-1].side.of(context.winner)
    return None


def liable_seat(score: HandScore, context: WinContext) -> Optional[Wind]:
    """Seat liable for a single limit sub-score, if any.

    The player who fed the last meld of big three dragons or big four winds,
    or the last quad of four quads, pays for that limit hand.
    """
    if len(score.yaku) != 1 or not score.is_limit_hand:
        return None
    yaku = score.yaku[0][0]
    melds = context.melds
    completing = None
    if yaku == BIG_THREE_DRAGONS:
        dragons = [m for m in melds if m.is_dragon]
        if len(dragons) >= 3 and dragons[-1].is_open:
            completing = dragons[-1].side
    elif yaku == BIG_FOUR_WINDS:
        winds = [m for m in melds if m.is_wind]
        if len(winds) >= 4 and winds[-1].is_open:
            completing = winds[-1].side
    elif yaku == FOUR_QUADS:
        quads = [m for m in melds if m.is_quad]
        if quads and quads[-1].direct_side != Side.SELF:
            completing = quads[-1].direct_side
    if completing is None:
        return None
    return completing.of(context.winner)


def settle_win(score: HandScore, context: WinContext,
               config: Optional[ScoringConfig] = None) -> Settlement:
    """Settle one win.

    Raises:
        ValueError: Empty score, or the score's dealer flag disagrees with
            the winner's seat.
    """
    config = config or DEFAULT_CONFIG
    if score.is_empty:
        raise ValueError("cannot settle a hand without any scoring rule")
    if score.is_dealer != context.winner.is_dealer:
        raise ValueError(f"score is for a {'dealer' if score.is_dealer else 'non-dealer'} "
                         f"but the winner sits at {context.winner.name}")

    winner = context.winner
    settlement = Settlement(deposits=context.deposits, streak=context.streak)
    supplier = winning_tile_supplier(context)
    responsible = set()
    if supplier is not None:
        responsible.add(supplier)

    for sub_score in score.split():
        value = sub_score.value
        liable = liable_seat(sub_score, context)
        if liable is not None:
            responsible.add(liable)
        if liable is not None and supplier is not None and liable != supplier:
            # 包:放銃者 = 50:50
            settlement.pay(supplier, winner, share_of(value, 2))
            settlement.pay(liable, winner, share_of(value, 2))
        elif liable is not None:
            settlement.pay(liable, winner, value)
        elif supplier is not None:
            settlement.pay(supplier, winner, value)
        elif score.is_dealer:
            for side in Side.SELF.others():
                settlement.pay(side.of(winner), winner, share_of(value, 3))
        else:
            for side in Side.SELF.others():
                payer = side.of(winner)
                parts = 2 if payer.is_dealer else 4
                settlement.pay(payer, winner, share_of(value, parts))

    streak_total = context.streak * config.streak_score
    if streak_total:
        if responsible:
            for payer in sorted(responsible):
                settlement.pay(payer, winner, share_of(streak_total, len(responsible)))
        else:
            for side in Side.SELF.others():
                settlement.pay(side.of(winner), winner, share_of(streak_total, 3))

    deposit_total = context.deposits * config.deposit_score
    settlement.deltas[winner] += deposit_total
    settlement.deposit_income = deposit_total
    return settlement


def settle_exhaustive_draw(ready_seats: Iterable[Wind],
                           config: Optional[ScoringConfig] = None) -> Settlement:
    """Settle an exhaustive draw (荒牌平局): ready seats share the pot.

    Nothing moves when nobody or everybody is ready.
    """
    config = config or DEFAULT_CONFIG
    ready = list(ready_seats)
    if len(set(ready)) != len(ready):
        raise ValueError(f"duplicate ready seats: {ready}")
    settlement = Settlement()
    if len(ready) in (0, 4):
        return settlement
    gain = config.drawn_pot // len(ready)
    loss = config.drawn_pot // (4 - len(ready))
    for wind in Wind:
        settlement.deltas[wind] = gain if wind in ready else -loss
    return settlement


def priority_order(winners: Iterable[Wind], discarder: Wind) -> List[Wind]:
    """Winners in turn order after the discarder (right, across, left)."""
    return sorted(winners, key=lambda w: Side.between(w, discarder).value)


def settle_multiple_wins(wins: Sequence[Tuple[HandScore, WinContext]], discarder: Wind,
                         config: Optional[ScoringConfig] = None) -> Settlement:
    """Settle up to three claimed wins on one discard.

    Each win is paid in full. Only the winner first in turn order after the
    discarder collects deposits and the streak bonus.
    """
    if not 1 <= len(wins) <= 3:
        raise ValueError(f"between one and three winners expected, got {len(wins)}")
    by_winner = {context.winner: (score, context) for score, context in wins}
    if len(by_winner) != len(wins):
        raise ValueError("the same seat cannot win twice on one discard")
    if discarder in by_winner:
        raise ValueError("the discarder cannot be among the winners")

    settlement = Settlement()
    for i, winner in enumerate(priority_order(by_winner, discarder)):
        score, context = by_winner[winner]
        if context.supplier.of(winner) != discarder:
            raise ValueError(f"{winner.name} did not claim from {discarder.name}")
        if i > 0:
            context = replace(context, deposits=0, streak=0)
        settlement = settlement.merge(settle_win(score, context, config))
    return settlement


def settle_river_jackpot(seats: Iterable[Wind], deposits: int = 0, streak: int = 0,
                         config: Optional[ScoringConfig] = None) -> Settlement:
    """Settle river jackpots (流し満貫) at an exhaustive draw.

    Each qualifying seat is paid a limit hand as if by self-draw; deposits
    and streak go to the first qualifying seat from the dealer.
    """
    settlement = Settlement()
    for i, seat in enumerate(sorted(set(seats))):
        context = WinContext(seat, deposits=deposits if i == 0 else 0,
                             streak=streak if i == 0 else 0)
        score = HandScore.river_jackpot(seat.is_dealer)
        settlement = settlement.merge(settle_win(score, context, config))
    return settlement
