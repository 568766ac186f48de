#!/usr/bin/env python3
"""Riichi Mahjong hand scorer - terminal front end."""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from mahjong_score.core.meld import Meld
from mahjong_score.core.seat import Side, Wind
from mahjong_score.core.situation import Situation
from mahjong_score.core.tile import Tile, make_tile, make_tiles_from_string
from mahjong_score.rules.score_logger import ScoreLogger
from mahjong_score.rules.scoring import calculate_score
from mahjong_score.rules.settlement import WinContext, settle_exhaustive_draw, settle_win
from mahjong_score.ui.i18n import t, set_language
from mahjong_score.ui.score_display import render_score, render_settlement

console = Console()

WIND_INPUT = {"e": Wind.EAST, "s": Wind.SOUTH, "w": Wind.WEST, "n": Wind.NORTH}
SIDE_INPUT = {"self": Side.SELF, "right": Side.RIGHT, "across": Side.ACROSS, "left": Side.LEFT}


def ask(prompt: str, default: str = "") -> str:
    try:
        answer = console.input(f"  {prompt} ").strip()
    except EOFError:
        return default
    return answer or default


def ask_yes(prompt: str) -> bool:
    return ask(f"{prompt} [y/N]").lower().startswith("y")


def ask_wind(prompt: str) -> Wind:
    while True:
        answer = ask(f"{prompt} (E/S/W/N)", "e").lower()
        if answer[:1] in WIND_INPUT:
            return WIND_INPUT[answer[:1]]
        console.print("  [red]E / S / W / N[/red]")


def parse_melds(text: str, used: List[Tile]) -> List[Meld]:
    """Parse 'tiles:side' entries separated by commas, e.g. '555p:across, 1111z:self'."""
    melds = []
    for entry in filter(None, (e.strip() for e in text.split(","))):
        tiles_text, _, side_text = entry.partition(":")
        side = SIDE_INPUT.get(side_text.strip().lower() or "self")
        if side is None:
            raise ValueError(f"unknown side {side_text!r}")
        meld = Meld.from_string(tiles_text, side, exclude=used)
        used.extend(meld.tiles)
        melds.append(meld)
    return melds


def score_hand(logger: ScoreLogger):
    """Prompt for a finished hand, score it and settle it."""
    try:
        tiles = make_tiles_from_string(ask(t("prompt.hand")))
        used = list(tiles)
        melds = parse_melds(ask(t("prompt.melds")), used)
        winning_tile = make_tile(ask(t("prompt.winning_tile")), exclude=used)
        used.append(winning_tile)
        tsumo = ask_yes(t("prompt.tsumo"))
        supplier = Side.SELF
        if not tsumo:
            supplier = SIDE_INPUT.get(ask(t("prompt.discarder"), "across").lower())
            if supplier in (None, Side.SELF):
                raise ValueError(t("error.discarder"))
        riichi = ask_yes(t("prompt.riichi"))
        situation = Situation(
            round_wind=ask_wind(t("prompt.round_wind")),
            seat_wind=ask_wind(t("prompt.seat_wind")),
            supplier=supplier,
            riichi=riichi,
            dora_indicators=tuple(make_tiles_from_string(ask(t("prompt.dora")), used)),
        )
        score = calculate_score(tiles, melds, winning_tile, situation)
    except ValueError as e:
        console.print(f"  [red]{e}[/red]")
        return

    render_score(console, score, tiles, melds, winning_tile)
    logger.log_hand(tiles, melds, winning_tile, situation, score)
    if score.is_empty:
        return
    context = WinContext(situation.seat_wind, supplier, tuple(melds))
    settlement = settle_win(score, context)
    render_settlement(console, settlement)
    logger.log_settlement(settlement)


def settle_draw(logger: ScoreLogger):
    """Prompt for ready seats at an exhaustive draw."""
    answer = ask(t("prompt.ready_seats")).lower().split()
    try:
        ready = [WIND_INPUT[a[:1]] for a in answer]
        settlement = settle_exhaustive_draw(ready)
    except (KeyError, ValueError) as e:
        console.print(f"  [red]{e}[/red]")
        return
    render_settlement(console, settlement)
    logger.log_settlement(settlement, label="draw")


LANGUAGE_CHOICES = {1: "zh", 2: "ja", 3: "en"}


def change_language():
    """Show language selection submenu."""
    console.print(f"\n  {t('lang.select')}")
    for number, lang in LANGUAGE_CHOICES.items():
        console.print(f"    {number}. {t('lang.' + lang)}")
    console.print()

    while True:
        try:
            set_language(LANGUAGE_CHOICES[int(ask("> 1/2/3:", "1"))])
            return
        except (KeyError, ValueError):
            console.print("  [red]Invalid / 无效 / 無効[/red]")


def show_menu() -> Optional[int]:
    console.print()
    console.print(Panel(f"[bold cyan]{t('label.title')}[/bold cyan]", border_style="cyan",
                        padding=(0, 4)))
    console.print(f"  {t('mode.select')}")
    console.print(f"    1. {t('mode.score')}")
    console.print(f"    2. {t('mode.draw')}")
    console.print(f"    3. {t('mode.language')}")
    console.print(f"    0. {t('mode.quit')}")
    try:
        return int(ask(">", "0"))
    except ValueError:
        return None


def main():
    logger = ScoreLogger()
    while True:
        choice = show_menu()
        if choice == 1:
            score_hand(logger)
        elif choice == 2:
            settle_draw(logger)
        elif choice == 3:
            change_language()
        elif choice == 0:
            break
    if logger.entries:
        console.print(f"  [dim]{logger.save()}[/dim]")


if __name__ == "__main__":
    main()
