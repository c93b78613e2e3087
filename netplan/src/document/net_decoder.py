"""
Net decoder: cuts a validated room net into its six face grids.

The net is laid out as a horizontal cross. The top sits above the back wall,
the floor below it, and the walls run back, right, front, left from left to
right:

    +---+
    |top|
    +---++-++---++-+
    |bck||r||frt||l|
    +---++-++---++-+
    |flr|
    +---+

Border characters and blanks are skipped; every other character is a symbol
placed on that cell.
"""

import logging
from typing import List, Optional

from netplan.src.layout.room_types import Face, FaceEntry, Room, NET_FACE_ORDER

from .document_parser import RoomNet
from .errors import NetFormatError

logger = logging.getLogger(__name__)

# Characters that draw the net and never denote an object
IGNORED_CHARS = frozenset('+- |')


def get_letters_in_ascii_grid(lines: List[str], x: int, y: int,
                              width: int, height: int,
                              room: Optional[str] = None,
                              first_line: int = 1) -> List[FaceEntry]:
    """Extract the symbols of one rectangular sub-grid.

    Scans row-major and reports cells relative to the sub-grid corner.

    Args:
        lines: Net lines
        x: Column of the sub-grid's left edge
        y: Line index of the sub-grid's top edge
        width: Sub-grid width in cells
        height: Sub-grid height in cells
        room: Room name for error messages
        first_line: Document line number of lines[0], for error messages

    Returns:
        List of FaceEntry(column, row, symbol)

    Raises:
        NetFormatError: If the sub-grid reaches past the net
    """
    entries: List[FaceEntry] = []
    if width <= 0 or height <= 0:
        return entries

    if y + height > len(lines):
        raise NetFormatError(
            f"face needs lines {y + 1}..{y + height} of the net, net has {len(lines)}",
            room=room, line=first_line + len(lines) - 1,
        )

    for row in range(height):
        line = lines[y + row]
        if x + width > len(line):
            raise NetFormatError(
                f"face needs columns {x + 1}..{x + width}, line is {len(line)} long",
                room=room, line=first_line + y + row, column=len(line) + 1,
            )
        for column, char in enumerate(line[x:x + width]):
            if char not in IGNORED_CHARS:
                entries.append(FaceEntry(column, row, char))

    return entries


class NetDecoder:
    """Turns validated room nets into rooms with face symbols."""

    def decode(self, net: RoomNet, room_id: int) -> Room:
        """Decode one net into a Room at the origin.

        Raises:
            NetFormatError: If a face slice falls outside the net
        """
        faces = {}
        for face in NET_FACE_ORDER:
            x, y = face.grid_origin(net.width, net.depth, net.height)
            columns, rows = face.grid_size(net.width, net.depth, net.height)
            faces[face] = get_letters_in_ascii_grid(
                net.lines, x, y, columns, rows,
                room=net.name, first_line=net.first_line,
            )

        room = Room(
            room_id=room_id,
            name=net.name,
            width=net.width,
            height=net.height,
            depth=net.depth,
            faces=faces,
        )
        logger.debug(
            f"Decoded room {room_id} '{net.name}': {room.symbol_count()} symbol(s) "
            + ", ".join(f"{face}={len(room.faces[face])}" for face in Face)
        )
        return room

    def decode_all(self, nets: List[RoomNet]) -> List[Room]:
        """Decode nets in order; the list index becomes the room id."""
        return [self.decode(net, room_id) for room_id, net in enumerate(nets)]
