"""Tile definition with dual encoding (136/34) and red five support."""

from enum import IntEnum
from typing import Dict, Iterable, List


class TileSuit(IntEnum):
    MAN = 0   # 万子
    PIN = 1   # 筒子
    SOU = 2   # 索子
    WIND = 3  # 风牌
    DRAGON = 4  # 三元牌


# Red five tile IDs (in 136 encoding)
RED_FIVE_MAN = 16    # 赤5m - the first 5m (id 16 among 5m: 16,17,18,19)
RED_FIVE_PIN = 52    # 赤5p
RED_FIVE_SOU = 88    # 赤5s
RED_FIVE_IDS = {RED_FIVE_MAN, RED_FIVE_PIN, RED_FIVE_SOU}

# Orphan faces: terminals and honors
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]
# 2s 3s 4s 6s 8s 發
GREEN_INDICES = [19, 20, 21, 23, 25, 32]

HAKU = 31
HATSU = 32
CHUN = 33

TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]

# Latin honor tokens accepted by make_tiles_from_string
HONOR_TOKENS: Dict[str, int] = {
    "E": 27, "S": 28, "W": 29, "N": 30,
    "Dw": 31, "Dg": 32, "Dr": 33,
    "東": 27, "南": 28, "西": 29, "北": 30,
    "白": 31, "發": 32, "中": 33,
}


class Tile:
    """One physical tile.

    ``id`` (0..135) is its identity, ``index34`` (id // 4) its face; every
    structural check works on faces, equality and hashing on ids.
    """
    __slots__ = ('_id', '_index34', '_suit', '_number', '_is_red')

    def __init__(self, tile_id: int):
        if not (0 <= tile_id < 136):
            raise ValueError(f"tile_id must be 0..135, got {tile_id}")
        self._id = tile_id
        self._index34 = tile_id // 4
        if self._index34 < 27:
            suit, offset = divmod(self._index34, 9)
            self._suit = TileSuit(suit)
            self._number = offset + 1
        elif self._index34 < HAKU:
            self._suit = TileSuit.WIND
            self._number = self._index34 - 26  # 1..4 = E S W N
        else:
            self._suit = TileSuit.DRAGON
            self._number = self._index34 - 30  # 1..3 = white green red
        self._is_red = tile_id in RED_FIVE_IDS

    @property
    def id(self) -> int:
        return self._id

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def number(self) -> int:
        return self._number

    @property
    def is_red(self) -> bool:
        return self._is_red

    @property
    def is_honor(self) -> bool:
        return self._suit in (TileSuit.WIND, TileSuit.DRAGON)

    @property
    def is_wind(self) -> bool:
        return self._suit == TileSuit.WIND

    @property
    def is_dragon(self) -> bool:
        return self._suit == TileSuit.DRAGON

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self._number in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def is_green(self) -> bool:
        return self._index34 in GREEN_INDICES

    @property
    def is_number_tile(self) -> bool:
        return self._suit in (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)

    @property
    def name(self) -> str:
        if self._is_red:
            return "0" + "mps"[self._suit]
        return TILE_NAMES_34[self._index34]

    def same_face(self, other: 'Tile') -> bool:
        """Whether both tiles share the face, ignoring the red five flag."""
        return self._index34 == other._index34

    def is_next_of(self, other: 'Tile') -> bool:
        """Whether this tile is the number directly after ``other`` in the same suit."""
        return (self.is_number_tile and self._suit == other._suit
                and self._number == other._number + 1)

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._id == other._id
        return NotImplemented

    def __hash__(self):
        return self._id

    def __lt__(self, other):
        if isinstance(other, Tile):
            if self._index34 != other._index34:
                return self._index34 < other._index34
            return self._id < other._id
        return NotImplemented


def tile_34_to_name(index34: int) -> str:
    """Short name of a face, e.g. '5m' or '東'."""
    return TILE_NAMES_34[index34]


def tiles_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """Count tiles per face."""
    counts = [0] * 34
    for tile in tiles:
        counts[tile.index34] += 1
    return counts


def is_suit_neighbour(left: int, right: int) -> bool:
    """Whether two sorted 34 indices belong to the same connected block.

    Same face always connects. Number faces also connect to the next
    number of the same suit; honors never connect to another face.
    """
    if left == right:
        return True
    if left >= 27 or right >= 27:
        return False
    return right == left + 1 and left // 9 == right // 9


ALL_TILES_136 = [Tile(i) for i in range(136)]


def next_tile_index(index34: int) -> int:
    """Face made prized (dora) by an indicator face.

    Each group cycles on its own: numbers 1..9 of one suit, the four
    winds in seat order, the three dragons white, green, red.
    """
    if index34 < 27:
        start, size = index34 - index34 % 9, 9
    elif index34 < HAKU:
        start, size = 27, 4
    else:
        start, size = HAKU, 3
    return start + (index34 - start + 1) % size


def _tokenize(s: str) -> List[int]:
    """Turn shorthand text into a list of faces; red fives are reported as -1, -2, -3."""
    faces = []
    numbers = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch.isdigit():
            numbers.append(int(ch))
            i += 1
        elif ch in ('m', 'p', 's', 'z'):
            if not numbers:
                raise ValueError(f"suit '{ch}' without numbers in {s!r}")
            for n in numbers:
                if ch == 'z':
                    if not 1 <= n <= 7:
                        raise ValueError(f"honor number must be 1..7, got {n}z")
                    faces.append(26 + n)
                elif n == 0:
                    faces.append(-1 - {'m': 0, 'p': 1, 's': 2}[ch])
                else:
                    faces.append({'m': 0, 'p': 9, 's': 18}[ch] + n - 1)
            numbers = []
            i += 1
        elif s[i:i + 2] in HONOR_TOKENS:
            faces.append(HONOR_TOKENS[s[i:i + 2]])
            i += 2
        elif ch in HONOR_TOKENS:
            faces.append(HONOR_TOKENS[ch])
            i += 1
        elif ch.isspace() or ch in ',[]':
            i += 1
        else:
            raise ValueError(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise ValueError(f"numbers without suit in {s!r}")
    return faces


def make_tiles_from_string(s: str, exclude: Iterable[Tile] = ()) -> List[Tile]:
    """Parse a shorthand string like '123m456p789s東南西北' into tiles.

    Honors may be written as kanji, as 'E S W N Dw Dg Dr', or as '1z'..'7z'.
    Each face hands out its physical copies in id order, skipping the red
    five (written '0m', '0p', '0s') and any tile in ``exclude``.
    """
    used = {t.id for t in exclude}
    red_ids = [RED_FIVE_MAN, RED_FIVE_PIN, RED_FIVE_SOU]
    tiles = []
    for face in _tokenize(s):
        if face < 0:
            tile_id = red_ids[-1 - face]
            if tile_id in used:
                raise ValueError(f"red five {tile_34_to_name(tile_id // 4)} used twice")
        else:
            candidates = [face * 4 + k for k in range(4)
                          if face * 4 + k not in used and face * 4 + k not in RED_FIVE_IDS]
            if not candidates:
                # Only the red copy is left for this face
                candidates = [face * 4 + k for k in range(4) if face * 4 + k not in used]
            if not candidates:
                raise ValueError(f"more than four copies of {tile_34_to_name(face)}")
            tile_id = candidates[0]
        used.add(tile_id)
        tiles.append(ALL_TILES_136[tile_id])
    return tiles


def make_tile(s: str, exclude: Iterable[Tile] = ()) -> Tile:
    """Parse exactly one tile from shorthand."""
    tiles = make_tiles_from_string(s, exclude)
    if len(tiles) != 1:
        raise ValueError(f"expected a single tile, got {s!r}")
    return tiles[0]
