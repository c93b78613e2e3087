"""
Room layout solver.

Rooms are never placed explicitly in a document. Instead, an object that
sits on a shared wall is drawn in both rooms: on the left wall of one and on
the right wall of the other, say. The solver looks for such pairs of faces
whose symbol patterns have the same shape and moves the later room so the
two faces touch and the patterns line up.

Algorithm, per pass:
  for each symbol (sorted), for each opposing face pair, for each room
  `current` holding the symbol on its face and each lower-id room `other`
  holding it on the opposite face:
    1. sort current's positions
    2. mirror other's positions across other's face, then sort
    3. normalize both by their own minimum
    4. equal lists -> match: place current against other

The relaxation runs a fixed number of passes. It is a heuristic; rooms that
never match stay at the origin and are reported as unplaced.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Set, Tuple
from dataclasses import dataclass, field
from enum import Enum

from .character_index import CharacterIndex
from .room_types import Face, Position, Room

logger = logging.getLogger(__name__)


class AxisPair(NamedTuple):
    """Two touching faces and where `face`'s room ends up relative to the other.

    `face` belongs to the room being placed, `opposite` to the reference
    room. `direction` is the sign along `axis` of the placed room.
    """
    face: Face
    opposite: Face
    axis: int
    direction: int

    @property
    def mirror_rows(self) -> bool:
        # Top/floor grids are reflected across rows, walls across columns
        return self.axis == 1


AXIS_PAIRS: Tuple[AxisPair, ...] = (
    AxisPair(Face.LEFT, Face.RIGHT, 0, 1),
    AxisPair(Face.RIGHT, Face.LEFT, 0, -1),
    AxisPair(Face.TOP, Face.FLOOR, 1, -1),
    AxisPair(Face.FLOOR, Face.TOP, 1, 1),
    AxisPair(Face.FRONT, Face.BACK, 2, -1),
    AxisPair(Face.BACK, Face.FRONT, 2, 1),
)


class TieBreak(Enum):
    """Which reference room wins when several match the same face."""
    LAST_MATCH = "last_match"  # Reference rooms visited by ascending id; last one wins
    LOWEST_ID = "lowest_id"    # Reference rooms visited by descending id; lowest id wins


class InPlaneAlignment(Enum):
    """How a matched room is shifted within the shared wall plane."""
    MIN_OFFSET = "min_offset"    # Difference of the two pattern minima, in cells
    CELL_CENTER = "cell_center"  # Matched minimum cells coincide in room space


@dataclass
class SolverSettings:
    passes: int = 2
    tie_break: TieBreak = TieBreak.LAST_MATCH
    alignment: InPlaneAlignment = InPlaneAlignment.MIN_OFFSET


@dataclass
class SolveResult:
    """Solved rooms plus the rooms the solver could not attach."""
    rooms: List[Room]
    unplaced_room_ids: List[int] = field(default_factory=list)
    match_count: int = 0

    @property
    def all_placed(self) -> bool:
        return not self.unplaced_room_ids


def mirror_positions(positions: List[Position], columns: int, rows: int,
                     mirror_rows: bool) -> List[Position]:
    """Reflect positions across a face grid.

    Reflecting twice returns the same positions.

    Args:
        positions: Positions on a face of `columns` x `rows` cells
        columns: Face width in cells
        rows: Face height in cells
        mirror_rows: Reflect rows instead of columns
    """
    if mirror_rows:
        return [Position(p.column, rows - 1 - p.row) for p in positions]
    return [Position(columns - 1 - p.column, p.row) for p in positions]


def normalize_positions(positions: List[Position]) -> Tuple[List[Position], Optional[Position]]:
    """Shift sorted positions so the first (minimum) one is (0, 0).

    Returns:
        (normalized positions, the minimum that was subtracted)
    """
    if not positions:
        return [], None
    origin = positions[0]
    return [Position(p.column - origin.column, p.row - origin.row) for p in positions], origin


def match_shapes(current: List[Position],
                 other_mirrored: List[Position]) -> Optional[Tuple[Position, Position]]:
    """Compare two face patterns independent of translation.

    Args:
        current: Positions on the face of the room being placed
        other_mirrored: Positions on the reference face, already mirrored

    Returns:
        (current minimum, other minimum) if the shapes are equal, else None
    """
    current_norm, current_min = normalize_positions(sorted(current))
    other_norm, other_min = normalize_positions(sorted(other_mirrored))
    if not current_norm or current_norm != other_norm:
        return None
    return current_min, other_min


class RoomLayoutSolver:
    """Positions rooms relative to room 0 by matching symbol patterns."""

    def __init__(self, settings: Optional[SolverSettings] = None):
        self.settings = settings or SolverSettings()

    def solve(self, rooms: List[Room], index: Optional[CharacterIndex] = None) -> SolveResult:
        """Solve room positions in place.

        Args:
            rooms: Decoded rooms; room ids must be unique
            index: Character index of the rooms (built if omitted)

        Returns:
            SolveResult with the same room objects and the ids of rooms other
            than room 0 that never matched
        """
        if index is None:
            index = CharacterIndex.from_rooms(rooms)

        by_id: Dict[int, Room] = {room.room_id: room for room in rooms}
        matched: Set[int] = set()
        match_count = 0

        for pass_number in range(self.settings.passes):
            count = self._relax(by_id, index, matched)
            logger.debug(f"Pass {pass_number + 1}: {count} match(es)")
            match_count += count

        unplaced = sorted(
            room.room_id for room in rooms
            if room.room_id != 0 and room.room_id not in matched
        )
        logger.info(
            f"Solved {len(rooms)} room(s) in {self.settings.passes} pass(es): "
            f"{match_count} match(es), {len(unplaced)} unplaced"
        )
        return SolveResult(rooms=rooms, unplaced_room_ids=unplaced, match_count=match_count)

    def _relax(self, by_id: Dict[int, Room], index: CharacterIndex, matched: Set[int]) -> int:
        """One pass over every symbol, face pair and room pair."""
        count = 0
        descending = self.settings.tie_break is TieBreak.LOWEST_ID

        for symbol in index.symbols():
            for pair in AXIS_PAIRS:
                currents = index.rooms_with(symbol, pair.face)
                others = index.rooms_with(symbol, pair.opposite)
                if not currents or not others:
                    continue

                for current_id in sorted(currents):
                    candidates = sorted(
                        (other_id for other_id in others if other_id < current_id),
                        reverse=descending,
                    )
                    for other_id in candidates:
                        current = by_id[current_id]
                        other = by_id[other_id]
                        columns, rows = other.face_size(pair.opposite)
                        mirrored = mirror_positions(
                            others[other_id], columns, rows, pair.mirror_rows
                        )
                        minima = match_shapes(currents[current_id], mirrored)
                        if minima is None:
                            continue

                        current_min, other_min = minima
                        self._place(current, other, pair, current_min, other_min)
                        matched.add(current_id)
                        count += 1
                        logger.debug(
                            f"'{symbol}': room {current_id} {pair.face} matches "
                            f"room {other_id} {pair.opposite} -> {current.position}"
                        )

        return count

    def _place(self, current: Room, other: Room, pair: AxisPair,
               current_min: Position, other_min: Position):
        """Move `current` so its face touches `other`'s and the patterns align.

        `other_min` is in mirrored coordinates. The wall-plane shift is the
        difference of the two minima, applied per axis pair:

            left/right   z += dcol, y += drow
            front/back   x += dcol, y += drow
            top/floor    x -= dcol, z -= drow
        """
        position = list(other.position)
        # Faces touch: centres are half of each extent apart
        position[pair.axis] += (
            pair.direction * (current.extents[pair.axis] + other.extents[pair.axis]) / 2.0
        )

        if self.settings.alignment is InPlaneAlignment.CELL_CENTER:
            self._align_cell_centers(position, current, other, pair, current_min, other_min)
        else:
            d_column = current_min.column - other_min.column
            d_row = current_min.row - other_min.row
            if pair.axis == 0:
                position[2] += d_column
                position[1] += d_row
            elif pair.axis == 1:
                position[0] -= d_column
                position[2] -= d_row
            else:
                position[0] += d_column
                position[1] += d_row

        current.set_position(tuple(position))

    @staticmethod
    def _align_cell_centers(position: List[float], current: Room, other: Room,
                            pair: AxisPair, current_min: Position, other_min: Position):
        """Shift the in-plane coordinates so both minimum cells coincide."""
        columns, rows = other.face_size(pair.opposite)
        # Mirroring is its own inverse
        other_cell = mirror_positions([other_min], columns, rows, pair.mirror_rows)[0]

        current_offset = current.cell_center(pair.face, current_min.column, current_min.row)
        other_offset = other.cell_center(pair.opposite, other_cell.column, other_cell.row)
        for i in range(3):
            if i != pair.axis:
                position[i] = other.position[i] + other_offset[i] - current_offset[i]
