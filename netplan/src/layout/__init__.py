"""
Layout Module for Net-Based Floor Plans

This module provides the room data structures, the symbol index and the
solver that places rooms next to each other by matching symbol patterns.
"""

from .room_types import (
    Face,
    FaceEntry,
    Position,
    Room,
    NET_FACE_ORDER,
)
from .character_index import CharacterIndex
from .layout_solver import (
    AxisPair,
    AXIS_PAIRS,
    InPlaneAlignment,
    RoomLayoutSolver,
    SolverSettings,
    SolveResult,
    TieBreak,
    match_shapes,
    mirror_positions,
    normalize_positions,
)

__all__ = [
    'Face',
    'FaceEntry',
    'Position',
    'Room',
    'NET_FACE_ORDER',
    'CharacterIndex',
    'AxisPair',
    'AXIS_PAIRS',
    'InPlaneAlignment',
    'RoomLayoutSolver',
    'SolverSettings',
    'SolveResult',
    'TieBreak',
    'match_shapes',
    'mirror_positions',
    'normalize_positions',
]
