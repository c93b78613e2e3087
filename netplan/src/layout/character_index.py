"""
Character index: where each symbol appears, per face and per room.

Symbols recur across rooms. A symbol drawn on the left wall of one room and
on the right wall of another is what ties the two rooms together, so the
solver needs fast access to symbol -> face -> room -> positions.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from .room_types import Face, Position, Room, NET_FACE_ORDER


class CharacterIndex:
    """Aggregates face positions by symbol, face and room id.

    Positions are kept in the order they were added, which for a decoded
    room is the row-major scan order of each face.
    """

    def __init__(self):
        self._index: Dict[str, Dict[Face, Dict[int, List[Position]]]] = {}

    @classmethod
    def from_rooms(cls, rooms: Iterable[Room]) -> 'CharacterIndex':
        index = cls()
        for room in rooms:
            index.add_room(room)
        return index

    def add(self, symbol: str, face: Face, room_id: int, position: Position):
        """Record one occurrence of a symbol."""
        faces = self._index.setdefault(symbol, defaultdict(dict))
        faces[face].setdefault(room_id, []).append(position)

    def add_room(self, room: Room):
        """Record every symbol of a room, face by face in net order."""
        for face in NET_FACE_ORDER:
            for entry in room.entries(face):
                self.add(entry.symbol, face, room.room_id, entry.position)

    def symbols(self) -> List[str]:
        """All indexed symbols, sorted."""
        return sorted(self._index)

    def rooms_with(self, symbol: str, face: Face) -> Dict[int, List[Position]]:
        """Room id -> positions of a symbol on one face (empty if none)."""
        faces = self._index.get(symbol)
        if faces is None:
            return {}
        return faces.get(face, {})

    def positions(self, symbol: str, face: Face, room_id: int) -> List[Position]:
        return list(self.rooms_with(symbol, face).get(room_id, []))

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._index

    def __len__(self) -> int:
        return len(self._index)
