"""
Room Types for Net-Based Floor Plans

This module defines the core data structures shared by the decoder, the
layout solver and the viewer:

- Face: the six interior surfaces of a rectangular room, with the table that
  locates each face inside an unfolded net and the mapping from a face cell
  to room space
- Position / FaceEntry: cell coordinates inside one face grid
- Room: a decoded room with its face symbols and its solved position

Room space is centred on the room, Y up. A room spans
[-width/2, width/2] on X, [-height/2, height/2] on Y and
[-depth/2, depth/2] on Z.
"""

from typing import Dict, List, NamedTuple, Tuple
from dataclasses import dataclass, field
from enum import Enum

Vec3 = Tuple[float, float, float]


class Position(NamedTuple):
    """Cell coordinate inside a single face grid."""
    column: int
    row: int


class FaceEntry(NamedTuple):
    """A symbol placed on a face cell."""
    column: int
    row: int
    symbol: str

    @property
    def position(self) -> Position:
        return Position(self.column, self.row)


class Face(Enum):
    """The six faces of a room, in net order."""
    TOP = "top"
    BACK = "back"
    RIGHT = "right"
    FRONT = "front"
    LEFT = "left"
    FLOOR = "floor"

    def __str__(self) -> str:
        return self.value

    @property
    def opposite(self) -> 'Face':
        """The face on the other side of the room."""
        return _OPPOSITES[self]

    @property
    def normal_axis(self) -> int:
        """Room-space axis (0=X, 1=Y, 2=Z) perpendicular to this face."""
        if self in (Face.LEFT, Face.RIGHT):
            return 0
        if self in (Face.TOP, Face.FLOOR):
            return 1
        return 2

    def grid_origin(self, width: int, depth: int, height: int) -> Tuple[int, int]:
        """Top-left (x, y) of this face's grid inside the net."""
        if self is Face.TOP:
            return (0, 0)
        if self is Face.BACK:
            return (0, depth)
        if self is Face.RIGHT:
            return (width, depth)
        if self is Face.FRONT:
            return (width + depth, depth)
        if self is Face.LEFT:
            return (2 * width + depth, depth)
        return (0, depth + height)

    def grid_size(self, width: int, depth: int, height: int) -> Tuple[int, int]:
        """(columns, rows) of this face's grid."""
        if self in (Face.TOP, Face.FLOOR):
            return (width, depth)
        if self in (Face.BACK, Face.FRONT):
            return (width, height)
        return (depth, height)

    def cell_center(self, column: float, row: float,
                    width: float, height: float, depth: float) -> Vec3:
        """Map a face cell to room space.

        The returned point lies on the face plane, at the centre of the cell.
        Walls are unfolded around the room in the order back, right, front,
        left; the top is folded up from the back wall and the floor folded
        down from it.

        Args:
            column: Cell column inside the face grid
            row: Cell row inside the face grid
            width: Room extent along X
            height: Room extent along Y
            depth: Room extent along Z

        Returns:
            (x, y, z) in room space
        """
        hw, hh, hd = width / 2.0, height / 2.0, depth / 2.0
        wall_y = hh - 0.5 - row
        if self is Face.TOP:
            return (column - hw + 0.5, hh, hd - 0.5 - row)
        if self is Face.FLOOR:
            return (column - hw + 0.5, -hh, row - hd + 0.5)
        if self is Face.BACK:
            return (column - hw + 0.5, wall_y, -hd)
        if self is Face.RIGHT:
            return (hw, wall_y, column - hd + 0.5)
        if self is Face.FRONT:
            return (hw - 0.5 - column, wall_y, hd)
        return (-hw, wall_y, hd - 0.5 - column)


_OPPOSITES = {
    Face.TOP: Face.FLOOR,
    Face.FLOOR: Face.TOP,
    Face.LEFT: Face.RIGHT,
    Face.RIGHT: Face.LEFT,
    Face.FRONT: Face.BACK,
    Face.BACK: Face.FRONT,
}

# Order in which faces are cut out of a net and indexed
NET_FACE_ORDER = (Face.TOP, Face.BACK, Face.RIGHT, Face.FRONT, Face.LEFT, Face.FLOOR)


@dataclass
class Room:
    """
    A decoded room.

    Only the position changes after creation; the face symbols are stored as
    tuples. Room 0 is the layout anchor and stays at the origin.
    """

    room_id: int
    name: str
    width: int   # X extent, in net cells
    height: int  # Y extent
    depth: int   # Z extent
    faces: Dict[Face, Tuple[FaceEntry, ...]] = field(default_factory=dict)
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        self.faces = {face: tuple(self.faces.get(face, ())) for face in Face}

    @property
    def position(self) -> Vec3:
        return (self.x, self.y, self.z)

    def set_position(self, position: Vec3):
        self.x, self.y, self.z = (float(v) for v in position)

    @property
    def extents(self) -> Vec3:
        """Room size along (X, Y, Z)."""
        return (float(self.width), float(self.height), float(self.depth))

    def face_size(self, face: Face) -> Tuple[int, int]:
        """(columns, rows) of one face grid."""
        return face.grid_size(self.width, self.depth, self.height)

    def entries(self, face: Face) -> Tuple[FaceEntry, ...]:
        return self.faces[face]

    def positions(self, face: Face) -> List[Position]:
        return [entry.position for entry in self.faces[face]]

    def cell_center(self, face: Face, column: float, row: float) -> Vec3:
        """Room-space centre of a face cell (relative to the room centre)."""
        return face.cell_center(column, row, self.width, self.height, self.depth)

    def symbol_count(self) -> int:
        return sum(len(entries) for entries in self.faces.values())
