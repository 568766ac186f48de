"""Tile display formatting with colors for terminal output."""

from typing import Sequence

from rich.text import Text

from mahjong_score.core.meld import Meld
from mahjong_score.core.tile import Tile, TileSuit
from mahjong_score.ui.i18n import t


# Honor faces 27..33; number tiles keep their short name in every language
HONOR_KEYS = (
    "tile.east", "tile.south", "tile.west", "tile.north",
    "tile.haku", "tile.hatsu", "tile.chun",
)

# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.WIND: "yellow",
    TileSuit.DRAGON: "yellow",
}


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    name = tile_to_display_str(tile)
    if tile.is_red:
        style = "bold red on white"
    else:
        style = f"bold {SUIT_COLORS[tile.suit]}"
        if highlight:
            style += " on white"
    return Text(f"[{name}]", style=style)


def tile_to_simple_str(tile: Tile) -> str:
    """Stable short name of a tile, as written to the score log."""
    return tile.name


def tile_to_display_str(tile: Tile) -> str:
    """Tile name in the active language."""
    if tile.is_honor:
        return t(HONOR_KEYS[tile.index34 - 27])
    return tile.name


def tiles_to_rich_text(tiles: Sequence[Tile], separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def meld_to_rich_text(meld: Meld) -> Text:
    """Show a meld; the claimed tile is highlighted, concealed quads are dimmed."""
    result = Text()
    for tile in meld.tiles:
        text = tile_to_rich_text(tile, highlight=(tile == meld.called_tile))
        if meld.is_quad and meld.is_concealed:
            text.stylize("dim")
        result.append_text(text)
    return result


def hand_to_rich_text(tiles: Sequence[Tile], melds: Sequence[Meld] = (),
                      winning_tile: Tile = None) -> Text:
    """Concealed tiles, then melds, then the winning tile set apart."""
    result = tiles_to_rich_text(sorted(tiles), separator="")
    for meld in melds:
        result.append("  ")
        result.append_text(meld_to_rich_text(meld))
    if winning_tile is not None:
        result.append("  ")
        result.append_text(tile_to_rich_text(winning_tile, highlight=True))
    return result
