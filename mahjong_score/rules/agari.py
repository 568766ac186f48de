"""Win (和了) detection - standard form, seven pairs, thirteen orphans.

Returns all possible decompositions for a winning hand.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import FrozenSet, List, Optional, Sequence, Tuple

from mahjong_score.core.meld import Head, Meld, MeldKind
from mahjong_score.core.seat import Side
from mahjong_score.core.tile import (
    Tile, YAOCHU_INDICES, is_suit_neighbour, tiles_to_34_array,
)


# A decomposition of a 34-array is (head_34, mentsu_list) where mentsu_list
# is a list of (type, index34); type: 'shuntsu' (顺子) or 'koutsu' (刻子)
Mentsu = Tuple[str, int]
Decomposition34 = Tuple[int, List[Mentsu]]


# --- block signature tables ---

def _derive_signatures(block_sizes: Tuple[int, ...]) -> FrozenSet[Tuple[int, ...]]:
    """All signatures reachable by merging any two blocks, repeatedly."""
    found = set()
    pending = [tuple(sorted(block_sizes, reverse=True))]
    while pending:
        sizes = pending.pop()
        if sizes in found:
            continue
        found.add(sizes)
        for i, j in combinations(range(len(sizes)), 2):
            rest = [s for k, s in enumerate(sizes) if k not in (i, j)]
            rest.append(sizes[i] + sizes[j])
            pending.append(tuple(sorted(rest, reverse=True)))
    return frozenset(found)


def _build_table(bases: Sequence[Tuple[int, ...]]) -> FrozenSet[Tuple[int, ...]]:
    table = set()
    for base in bases:
        table |= _derive_signatures(base)
    return frozenset(table)


COMPLETE_BASES = [(3, 3, 3, 3, 2), (3, 3, 3, 2), (3, 3, 2), (3, 2), (2,)]


def _ready_bases(complete_bases: Sequence[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
    """Every way to take one tile out of a complete base.

    A head or meld block loses a tile; a run may also lose its middle tile
    and split into two single tiles (嵌張).
    """
    bases = set()
    for base in complete_bases:
        for i, size in enumerate(base):
            rest = base[:i] + base[i + 1:]
            bases.add(rest + (size - 1,))
            if size == 3:
                bases.add(rest + (1, 1))
    return sorted(bases)


# Signatures of complete standard shapes (3n+2 tiles)
COMPLETE_SIGNATURES = _build_table(COMPLETE_BASES)

# Signatures of hands one tile away from a standard shape (3n+1 tiles)
READY_SIGNATURES = _build_table(_ready_bases(COMPLETE_BASES))


def block_signature(tiles_34: List[int]) -> Tuple[int, ...]:
    """Sizes of the connected blocks of a hand, largest first.

    A block is a maximal chain of neighbouring tiles: equal faces, or
    consecutive numbers of one suit. Every meld and the head lie inside a
    single block, so the signature bounds which shapes a hand can take.
    """
    sizes = []
    previous = None
    for idx in range(34):
        if tiles_34[idx] == 0:
            continue
        if previous is not None and is_suit_neighbour(previous, idx):
            sizes[-1] += tiles_34[idx]
        else:
            sizes.append(tiles_34[idx])
        previous = idx
    return tuple(sorted(sizes, reverse=True))


def matches_complete_shape(tiles_34: List[int]) -> bool:
    """Quick check that a 3n+2 hand can possibly be a standard win."""
    return block_signature(tiles_34) in COMPLETE_SIGNATURES


def matches_ready_shape(tiles_34: List[int]) -> bool:
    """Quick check that a 3n+1 hand can possibly be one tile from a standard win."""
    return block_signature(tiles_34) in READY_SIGNATURES


# --- standard form on 34-arrays ---

def is_standard_agari(tiles_34: List[int]) -> bool:
    """Check standard form (4 mentsu + 1 jantai)."""
    return len(decompose_standard(tiles_34)) > 0


def decompose_standard(tiles_34: List[int]) -> List[Decomposition34]:
    """Find all standard decompositions (mentsu + 1 head).

    Works on 34-array of closed tiles only (melds already extracted), so the
    array holds 14, 11, 8, 5 or 2 tiles depending on the number of melds.
    Each head candidate is tiled once, lowest tile first; every other
    reading of the same tiles comes from re-slicing three consecutive
    triplets into three identical runs.
    """
    total = sum(tiles_34)
    if total % 3 != 2:
        return []
    if not matches_complete_shape(tiles_34):
        return []

    results = []
    seen = set()
    for head in range(34):
        if tiles_34[head] < 2:
            continue
        remaining = list(tiles_34)
        remaining[head] -= 2
        tiling = _tile_greedy(remaining)
        if tiling is None:
            continue
        for mentsu_list in _reslice_all(tiling):
            key = (head, tuple(mentsu_list))
            if key not in seen:
                seen.add(key)
                results.append((head, list(mentsu_list)))
    return results


def _tile_greedy(tiles: List[int]) -> Optional[List[Mentsu]]:
    """Tile the array deterministically, lowest tile first.

    Takes a triplet when three copies are present, otherwise a run with the
    next two faces. Returns None when neither is possible.
    """
    tiles = list(tiles)
    result: List[Mentsu] = []
    idx = 0
    while idx < 34:
        if tiles[idx] == 0:
            idx += 1
            continue
        if tiles[idx] >= 3:
            tiles[idx] -= 3
            result.append(('koutsu', idx))
        elif (idx < 27 and idx % 9 <= 6
                and tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1):
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            result.append(('shuntsu', idx))
        else:
            return None
    return sorted(result)


def _reslice_all(mentsu_list: List[Mentsu]) -> List[List[Mentsu]]:
    """Every variant reachable by turning three consecutive triplets into runs."""
    variants = [sorted(mentsu_list)]
    found = {tuple(variants[0])}
    i = 0
    while i < len(variants):
        current = variants[i]
        i += 1
        triplets = sorted({m[1] for m in current if m[0] == 'koutsu'})
        for low in triplets:
            if low >= 27 or low % 9 > 6:
                continue
            if low + 1 not in triplets or low + 2 not in triplets:
                continue
            sliced = list(current)
            for offset in range(3):
                sliced.remove(('koutsu', low + offset))
            sliced.extend([('shuntsu', low)] * 3)
            sliced.sort()
            key = tuple(sliced)
            if key not in found:
                found.add(key)
                variants.append(sliced)
    return variants


# --- irregular forms on 34-arrays ---

def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子) form. Four identical tiles never count as two pairs."""
    if sum(tiles_34) != 14:
        return False
    pairs = sum(1 for c in tiles_34 if c == 2)
    return pairs == 7


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双) form."""
    if sum(tiles_34) != 14:
        return False
    has_pair = False
    for idx in YAOCHU_INDICES:
        if tiles_34[idx] == 0:
            return False
        if tiles_34[idx] == 2:
            has_pair = True
    # Must have exactly 14 tiles all yaochu with one pair
    non_yaochu = sum(tiles_34[i] for i in range(34) if i not in YAOCHU_INDICES)
    return has_pair and non_yaochu == 0


def get_agari_type(tiles_34: List[int]) -> Optional[str]:
    """Determine the agari type: 'standard', 'chiitoi', 'kokushi', or None."""
    if is_kokushi_agari(tiles_34):
        return 'kokushi'
    if is_chiitoi_agari(tiles_34):
        return 'chiitoi'
    if is_standard_agari(tiles_34):
        return 'standard'
    return None


def get_waiting_tiles(tiles_34: List[int], exhausted: Sequence[int] = ()) -> List[int]:
    """Find all tiles (34 indices) that would complete this hand.

    The hand should have 13 tiles (tenpai check) or appropriate for melds.
    Faces in ``exhausted`` (all four copies already visible in the hand or
    its melds) are never waits.
    """
    total = sum(tiles_34)
    if total % 3 != 1:
        return []

    standard_possible = matches_ready_shape(tiles_34)
    waits = []
    for i in range(34):
        if tiles_34[i] >= 4 or i in exhausted:
            continue
        test = list(tiles_34)
        test[i] += 1
        if is_kokushi_agari(test) or is_chiitoi_agari(test):
            waits.append(i)
        elif standard_possible and is_standard_agari(test):
            waits.append(i)
    return waits


# --- decompositions with physical tiles ---

class Wait(Enum):
    DOUBLE_SIDE = "double_side"    # 両面
    SINGLE_SIDE = "single_side"    # 辺張
    MIDDLE = "middle"              # 嵌張
    EITHER_HEAD = "either_head"    # 双碰
    SINGLE_HEAD = "single_head"    # 単騎


@dataclass(frozen=True)
class Decomposition:
    """One reading of a finished standard hand.

    Attributes:
        head: The pair
        melds: The four melds; concealed ones first, then revealed ones in
            completion order
        wait: The wait the winning tile completed
        winning_tile: The winning tile
    """
    head: Head
    melds: Tuple[Meld, ...]
    wait: Wait
    winning_tile: Tile

    @property
    def runs(self) -> List[Meld]:
        return [m for m in self.melds if m.is_run]

    @property
    def triplets_and_quads(self) -> List[Meld]:
        return [m for m in self.melds if not m.is_run]

    def all_tiles(self) -> List[Tile]:
        tiles = list(self.head.tiles)
        for meld in self.melds:
            tiles.extend(meld.tiles)
        return tiles

    def __str__(self):
        return " ".join([str(self.head)] + [str(m) for m in self.melds]) + f" {self.wait.value}"


def validate_hand(tiles: Sequence[Tile], melds: Sequence[Meld] = (),
                  winning_tile: Optional[Tile] = None) -> None:
    """Reject malformed hands with ``ValueError``.

    Concealed tiles must number 3n+1 and, together with the revealed melds,
    form a 13 tile hand. No physical tile may appear twice and no face may
    appear more than four times.
    """
    size = len(tiles)
    if size == 0 or size % 3 != 1 or size > 13:
        raise ValueError(f"illegal size of hand tiles: {size}")
    if len(melds) > 4:
        raise ValueError(f"too many melds: {len(melds)}")
    if size + 3 * len(melds) != 13:
        raise ValueError(f"{size} concealed tiles do not fit {len(melds)} melds")
    everything = list(tiles)
    for meld in melds:
        everything.extend(meld.tiles)
    if winning_tile is not None:
        everything.append(winning_tile)
    if len({t.id for t in everything}) != len(everything):
        raise ValueError("the same physical tile appears twice")
    counts = tiles_to_34_array(everything)
    if max(counts) > 4:
        raise ValueError("more than four copies of a tile")


def is_seven_pairs(tiles: Sequence[Tile], winning_tile: Tile) -> bool:
    """Seven distinct pairs from 13 concealed tiles plus the winning tile."""
    if len(tiles) != 13:
        return False
    return is_chiitoi_agari(tiles_to_34_array(list(tiles) + [winning_tile]))


def is_thirteen_orphans(tiles: Sequence[Tile], winning_tile: Tile) -> bool:
    """One of each orphan face plus one duplicate."""
    if len(tiles) != 13:
        return False
    return is_kokushi_agari(tiles_to_34_array(list(tiles) + [winning_tile]))


def is_complete(tiles: Sequence[Tile], winning_tile: Tile, melds: Sequence[Meld] = ()) -> bool:
    """Whether the hand plus winning tile is a win of any shape."""
    validate_hand(tiles, melds, winning_tile)
    if is_thirteen_orphans(tiles, winning_tile) or is_seven_pairs(tiles, winning_tile):
        return True
    return is_standard_agari(tiles_to_34_array(list(tiles) + [winning_tile]))


def exhausted_faces(tiles: Sequence[Tile], melds: Sequence[Meld] = ()) -> List[int]:
    """Faces whose four copies are all inside the hand already."""
    everything = list(tiles)
    for meld in melds:
        everything.extend(meld.tiles)
    counts = tiles_to_34_array(everything)
    return [i for i in range(34) if counts[i] >= 4]


def winning_tiles_of(tiles: Sequence[Tile], melds: Sequence[Meld] = ()) -> List[int]:
    """Faces (34 indices) that complete a ready hand; empty when not ready."""
    validate_hand(tiles, melds)
    return get_waiting_tiles(tiles_to_34_array(tiles), exhausted_faces(tiles, melds))


def is_tenpai(tiles: Sequence[Tile], melds: Sequence[Meld] = ()) -> bool:
    return len(winning_tiles_of(tiles, melds)) > 0


def _take(pool: List[Tile], index34: int) -> Tile:
    for i, tile in enumerate(pool):
        if tile.index34 == index34:
            return pool.pop(i)
    raise ValueError(f"no tile {index34} left to form the hand")


def _mentsu_faces(mentsu: Mentsu) -> List[int]:
    kind, idx = mentsu
    if kind == 'koutsu':
        return [idx, idx, idx]
    return [idx, idx + 1, idx + 2]


def _wait_of(meld: Meld, winning_tile: Tile) -> Wait:
    if not meld.is_run:
        return Wait.EITHER_HEAD
    first, middle, last = meld.tiles
    if middle.same_face(winning_tile):
        return Wait.MIDDLE
    # 12 waiting on 3, or 89 waiting on 7
    if first.number == 1 and last.same_face(winning_tile):
        return Wait.SINGLE_SIDE
    if last.number == 9 and first.same_face(winning_tile):
        return Wait.SINGLE_SIDE
    return Wait.DOUBLE_SIDE


def _build(head_34: int, mentsu_list: List[Mentsu], position: int,
           tiles: Sequence[Tile], winning_tile: Tile, melds: Sequence[Meld],
           supplier: Side) -> Decomposition:
    """Assign physical tiles to one reading with the winning tile at ``position``.

    Position -1 puts the winning tile in the head, otherwise in the mentsu at
    that index. A triplet finished by a claimed tile counts as claimed; a run
    stays concealed.
    """
    pool = sorted(tiles)
    if position < 0:
        head = Head((_take(pool, head_34), winning_tile))
    else:
        head = Head((_take(pool, head_34), _take(pool, head_34)))
    formed = []
    wait = Wait.SINGLE_HEAD
    for i, mentsu in enumerate(mentsu_list):
        faces = _mentsu_faces(mentsu)
        if i == position:
            faces.remove(winning_tile.index34)
            group = [_take(pool, f) for f in faces] + [winning_tile]
            meld = Meld.of_tiles(group)
            if supplier != Side.SELF and meld.is_triplet:
                meld = Meld.triplet(group, supplier, winning_tile)
            wait = _wait_of(meld, winning_tile)
        else:
            meld = Meld.of_tiles([_take(pool, f) for f in faces])
        formed.append(meld)
    return Decomposition(head, tuple(formed) + tuple(melds), wait, winning_tile)


def decompose(tiles: Sequence[Tile], winning_tile: Tile, melds: Sequence[Meld] = (),
              supplier: Side = Side.SELF) -> List[Decomposition]:
    """Enumerate every distinct standard reading of a finished hand.

    Args:
        tiles: Concealed tiles (3n+1)
        winning_tile: The tile that completed the hand
        melds: Revealed melds in completion order (concealed quads included)
        supplier: Side that supplied the winning tile (SELF for tsumo)

    Raises:
        ValueError: Malformed hand, or the hand is not complete
    """
    validate_hand(tiles, melds, winning_tile)
    tiles_34 = tiles_to_34_array(list(tiles) + [winning_tile])
    readings = decompose_standard(tiles_34)
    if not readings and not (is_seven_pairs(tiles, winning_tile)
                             or is_thirteen_orphans(tiles, winning_tile)):
        raise ValueError("decomposition requested on an incomplete hand")

    results = []
    seen = set()
    win = winning_tile.index34
    for head_34, mentsu_list in readings:
        positions = [-1] if head_34 == win else []
        done_faces = set()
        for i, mentsu in enumerate(mentsu_list):
            if win in _mentsu_faces(mentsu) and mentsu not in done_faces:
                done_faces.add(mentsu)
                positions.append(i)
        for position in positions:
            decomposition = _build(head_34, mentsu_list, position, tiles,
                                   winning_tile, melds, supplier)
            key = _key_of(decomposition)
            if key not in seen:
                seen.add(key)
                results.append(decomposition)
    return results


def _key_of(decomposition: Decomposition) -> tuple:
    melds = tuple(sorted((m.kind.value, m.tile_index34, m.side.value, m.added)
                         for m in decomposition.melds))
    return decomposition.head.tile_index34, melds, decomposition.wait
