"""
Checks run on a solved floor plan.

Rules:
    LAYOUT-001  A room never matched a neighbour and sits at the origin
    DOC-001     A placed symbol has no description
    DOC-002     A description names a symbol that is never placed
"""

from typing import Dict, List

from netplan.src.layout.room_types import Room

from .core import Severity, ValidationIssue, ValidationResult


def check_unplaced_rooms(rooms: List[Room], unplaced_room_ids: List[int],
                         strict: bool = False) -> List[ValidationIssue]:
    """Report rooms the solver could not attach to any neighbour."""
    names = {room.room_id: room.name for room in rooms}
    severity = Severity.FAIL if strict else Severity.WARN
    return [
        ValidationIssue(
            severity=severity,
            code="LAYOUT-001",
            message=f"Room '{names.get(room_id, room_id)}' matches no neighbour; left at the origin",
            room=room_id,
            remediation="Draw a shared object on the touching faces of both rooms",
        )
        for room_id in unplaced_room_ids
    ]


def check_descriptions(rooms: List[Room], descriptions: Dict[str, str]) -> List[ValidationIssue]:
    """Report symbols without descriptions and descriptions without symbols."""
    issues = []
    placed = sorted({
        entry.symbol
        for room in rooms
        for entries in room.faces.values()
        for entry in entries
    })

    for symbol in placed:
        if symbol not in descriptions:
            issues.append(ValidationIssue(
                severity=Severity.INFO,
                code="DOC-001",
                message=f"Symbol '{symbol}' has no description",
                symbol=symbol,
                remediation=f"Add a '# {symbol}' section",
            ))

    for symbol in sorted(descriptions):
        if symbol not in placed:
            issues.append(ValidationIssue(
                severity=Severity.INFO,
                code="DOC-002",
                message=f"Description for '{symbol}' is never placed in a room",
                symbol=symbol,
            ))

    return issues


def check_floor_plan(rooms: List[Room], descriptions: Dict[str, str],
                     unplaced_room_ids: List[int], strict: bool = False) -> ValidationResult:
    """Run every floor plan check.

    Args:
        rooms: Solved rooms
        descriptions: Symbol -> description text
        unplaced_room_ids: Room ids reported by the solver
        strict: Treat unplaced rooms as failures

    Returns:
        ValidationResult with all issues
    """
    result = ValidationResult()
    for issue in check_unplaced_rooms(rooms, unplaced_room_ids, strict):
        result.add_issue(issue)
    for issue in check_descriptions(rooms, descriptions):
        result.add_issue(issue)
    return result
