"""Score and settlement rendering using Rich."""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Wind
from mahjong_score.core.tile import Tile
from mahjong_score.rules.scoring import HandScore
from mahjong_score.rules.settlement import Settlement
from mahjong_score.ui.i18n import t, translate_fu, translate_tier, translate_wind, translate_yaku
from mahjong_score.ui.tile_display import hand_to_rich_text


def score_expression(score: HandScore) -> str:
    """One line summary, e.g. '30符 4翻 満貫 8000点'."""
    if score.is_empty:
        return t("score.no_yaku")
    parts = []
    # Limit hands and fixed hands carry no fu
    if score.fu:
        parts.append(t("score.fu", fu=score.fu))
        parts.append(t("score.han", han=score.han))
    tier = translate_tier(score.tier.key, score.multiplier)
    if tier:
        parts.append(tier)
    parts.append(t("score.points", points=score.value))
    return " ".join(parts)


def build_yaku_table(score: HandScore) -> Table:
    """Table of matched rules with their han or limit multiplier."""
    table = Table(title=t("score.yaku"), show_header=False, border_style="cyan")
    table.add_column("yaku", style="bold")
    table.add_column("value", justify="right")
    for yaku, value in score.yaku:
        if yaku.is_limit:
            amount = translate_tier("hand_limit", value)
        elif value:
            amount = t("score.han", han=value)
        else:
            amount = translate_tier(score.tier.key)
        table.add_row(translate_yaku(yaku.key), amount)
    return table


def build_fu_table(score: HandScore) -> Table:
    """Itemised fu, one row per item."""
    table = Table(title=t("score.fu_breakdown"), show_header=False, border_style="dim")
    table.add_column("item")
    table.add_column("fu", justify="right")
    for item in score.fu_items:
        table.add_row(translate_fu(item.key), str(item.points))
    return table


def build_settlement_table(settlement: Settlement) -> Table:
    table = Table(title=t("settlement.title"), border_style="cyan")
    table.add_column(t("settlement.seat"), style="bold")
    table.add_column(t("settlement.delta"), justify="right")
    for wind in Wind:
        delta = settlement.income_of(wind)
        style = "green" if delta > 0 else "red" if delta < 0 else ""
        table.add_row(translate_wind(wind.name), f"{delta:+d}", style=style)
    return table


def render_score(console: Console, score: HandScore, tiles: Sequence[Tile] = (),
                 melds: Sequence[Meld] = (), winning_tile: Tile = None):
    """Render a scored hand with its rules, fu items and total."""
    console.print()
    if tiles:
        console.print(Panel(hand_to_rich_text(tiles, melds, winning_tile),
                            title=f"[bold]{t('score.title')}[/bold]", border_style="green"))
    if not score.is_empty:
        console.print(build_yaku_table(score))
        if score.fu_items:
            console.print(build_fu_table(score))
    style = "bold red" if score.is_limit_hand else "bold"
    console.print(Text(f"  {score_expression(score)}", style=style))
    console.print()


def render_settlement(console: Console, settlement: Settlement):
    """Render point changes per seat."""
    console.print(build_settlement_table(settlement))
    notes = []
    if settlement.deposits:
        notes.append(t("settlement.deposits", n=settlement.deposits))
    if settlement.streak:
        notes.append(t("settlement.streak", n=settlement.streak))
    if notes:
        console.print("  " + "  ".join(notes), style="dim")
