"""Meld (面子) and head (雀頭) data structures.

Every group of a finished hand, whether revealed by a call or found by
decomposing the concealed tiles, is one ``Meld`` record. Its ``kind`` and
``side`` tags carry everything the rules need; predicates such as
``is_concealed`` are derived from the tags.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .seat import Side
from .tile import Tile, make_tiles_from_string


class MeldKind(Enum):
    RUN = "run"           # 順子
    TRIPLET = "triplet"   # 刻子
    QUAD = "quad"         # 槓子


def _is_run(tiles: Tuple[Tile, ...]) -> bool:
    return (len(tiles) == 3 and tiles[0].is_number_tile
            and tiles[1].is_next_of(tiles[0]) and tiles[2].is_next_of(tiles[1]))


def _is_set(tiles: Tuple[Tile, ...], size: int) -> bool:
    return len(tiles) == size and all(t.same_face(tiles[0]) for t in tiles)


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        kind: Run, triplet or quad
        tiles: All tiles in the meld, sorted
        side: Who supplied the claimed tile (SELF for concealed melds). An
            added quad keeps the side of the triplet it was built from.
        called_tile: The claimed tile (None for concealed melds)
        added: Whether this quad was made by adding a tile to a claimed triplet
    """
    kind: MeldKind
    tiles: Tuple[Tile, ...]
    side: Side = Side.SELF
    called_tile: Optional[Tile] = None
    added: bool = False

    def __post_init__(self):
        tiles = tuple(sorted(self.tiles))
        object.__setattr__(self, 'tiles', tiles)
        if self.kind == MeldKind.RUN and not _is_run(tiles):
            raise ValueError(f"invalid run: {list(tiles)}")
        if self.kind == MeldKind.TRIPLET and not _is_set(tiles, 3):
            raise ValueError(f"invalid triplet: {list(tiles)}")
        if self.kind == MeldKind.QUAD and not _is_set(tiles, 4):
            raise ValueError(f"invalid quad: {list(tiles)}")
        if self.kind == MeldKind.RUN and self.side not in (Side.SELF, Side.LEFT):
            raise ValueError(f"a run can only be claimed from the left: {list(tiles)}")
        if self.added and (self.kind != MeldKind.QUAD or self.side == Side.SELF):
            raise ValueError("an added quad must extend a claimed triplet")
        if self.called_tile is not None and self.called_tile not in tiles:
            raise ValueError(f"called tile {self.called_tile} is not part of {list(tiles)}")

    # --- factories ---

    @classmethod
    def run(cls, tiles: Iterable[Tile], side: Side = Side.SELF,
            called_tile: Optional[Tile] = None) -> 'Meld':
        return cls(MeldKind.RUN, tuple(tiles), side, called_tile)

    @classmethod
    def triplet(cls, tiles: Iterable[Tile], side: Side = Side.SELF,
                called_tile: Optional[Tile] = None) -> 'Meld':
        return cls(MeldKind.TRIPLET, tuple(tiles), side, called_tile)

    @classmethod
    def concealed_quad(cls, tiles: Iterable[Tile]) -> 'Meld':
        return cls(MeldKind.QUAD, tuple(tiles))

    @classmethod
    def called_quad(cls, tiles: Iterable[Tile], side: Side,
                    called_tile: Optional[Tile] = None) -> 'Meld':
        if side == Side.SELF:
            raise ValueError("a called quad needs a source other than self")
        return cls(MeldKind.QUAD, tuple(tiles), side, called_tile)

    @classmethod
    def added_quad(cls, triplet: 'Meld', tile: Tile) -> 'Meld':
        """Extend a claimed triplet into a quad with the fourth tile."""
        if not triplet.is_triplet or triplet.is_concealed:
            raise ValueError(f"only a claimed triplet can be extended: {triplet}")
        return cls(MeldKind.QUAD, triplet.tiles + (tile,), triplet.side,
                   triplet.called_tile, added=True)

    @classmethod
    def of_tiles(cls, tiles: Iterable[Tile], side: Side = Side.SELF,
                 called_tile: Optional[Tile] = None) -> 'Meld':
        """Build a meld, inferring its kind from the tiles."""
        tiles = tuple(sorted(tiles))
        if len(tiles) == 4:
            kind = MeldKind.QUAD
        elif len(tiles) == 3 and tiles[0].same_face(tiles[2]):
            kind = MeldKind.TRIPLET
        else:
            kind = MeldKind.RUN
        return cls(kind, tiles, side, called_tile)

    @classmethod
    def from_string(cls, s: str, side: Side = Side.SELF,
                    exclude: Iterable[Tile] = ()) -> 'Meld':
        """Parse a meld from shorthand, e.g. ``Meld.from_string('555p', Side.ACROSS)``.

        The last tile is taken as the called tile when ``side`` is not SELF.
        """
        tiles = make_tiles_from_string(s, exclude)
        called = tiles[-1] if side != Side.SELF else None
        return cls.of_tiles(tiles, side, called)

    # --- derived predicates ---

    @property
    def is_run(self) -> bool:
        return self.kind == MeldKind.RUN

    @property
    def is_triplet(self) -> bool:
        return self.kind == MeldKind.TRIPLET

    @property
    def is_quad(self) -> bool:
        return self.kind == MeldKind.QUAD

    @property
    def is_concealed(self) -> bool:
        return self.side == Side.SELF

    @property
    def is_open(self) -> bool:
        return not self.is_concealed

    @property
    def is_called_quad(self) -> bool:
        """A quad made directly from an opponent's discard (大明槓)."""
        return self.is_quad and self.is_open and not self.added

    @property
    def direct_side(self) -> Side:
        """Who supplied the tile that completed this meld as it stands now."""
        if self.added:
            return Side.SELF
        return self.side

    @property
    def tile_index34(self) -> int:
        """The 34 index of the meld's lowest tile."""
        return self.tiles[0].index34

    @property
    def truncated(self) -> Tuple[Tile, ...]:
        """The meld as three tiles (quads lose their fourth tile)."""
        return self.tiles[:3]

    @property
    def is_honor(self) -> bool:
        return self.tiles[0].is_honor

    @property
    def is_dragon(self) -> bool:
        return self.tiles[0].is_dragon

    @property
    def is_wind(self) -> bool:
        return self.tiles[0].is_wind

    @property
    def is_terminal(self) -> bool:
        """Contains a 1 or 9 number tile."""
        return self.tiles[0].is_terminal or self.tiles[-1].is_terminal

    @property
    def is_yaochu(self) -> bool:
        return self.is_terminal or self.is_honor

    def contains_face(self, index34: int) -> bool:
        return any(t.index34 == index34 for t in self.tiles)

    def contains_red(self) -> bool:
        return any(t.is_red for t in self.tiles)

    def __str__(self):
        body = "".join(t.name for t in self.tiles)
        if self.is_concealed:
            return f"[{body}]"
        return f"[{body}]<{self.side.name.lower()}>"


@dataclass(frozen=True)
class Head:
    """The pair (雀頭) of a standard hand."""
    tiles: Tuple[Tile, ...]

    def __post_init__(self):
        tiles = tuple(sorted(self.tiles))
        object.__setattr__(self, 'tiles', tiles)
        if not _is_set(tiles, 2):
            raise ValueError(f"invalid head: {list(tiles)}")

    @property
    def tile_index34(self) -> int:
        return self.tiles[0].index34

    @property
    def is_honor(self) -> bool:
        return self.tiles[0].is_honor

    @property
    def is_dragon(self) -> bool:
        return self.tiles[0].is_dragon

    @property
    def is_wind(self) -> bool:
        return self.tiles[0].is_wind

    @property
    def is_terminal(self) -> bool:
        return self.tiles[0].is_terminal

    @property
    def is_yaochu(self) -> bool:
        return self.tiles[0].is_yaochu

    def __str__(self):
        return "(" + "".join(t.name for t in self.tiles) + ")"
