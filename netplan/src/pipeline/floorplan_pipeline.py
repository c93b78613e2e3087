"""
Floor plan pipeline.

Orchestrates document parsing, net decoding, symbol indexing, layout solving
and validation. Parse and decode failures abort the run before any layout
work; the solver itself never fails.
"""

import time
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field
from enum import Enum

from netplan.src.document.document_parser import DocumentParser, ParsedDocument, read_document
from netplan.src.document.errors import NetplanError
from netplan.src.document.net_decoder import NetDecoder
from netplan.src.layout.character_index import CharacterIndex
from netplan.src.layout.layout_solver import (
    InPlaneAlignment, RoomLayoutSolver, SolverSettings, SolveResult, TieBreak,
)
from netplan.src.layout.room_types import Room
from netplan.src.validation import ValidationError, ValidationResult, check_floor_plan

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PipelineStage(Enum):
    PARSE = "parse"
    DECODE = "decode"
    INDEX = "index"
    SOLVE = "solve"
    VALIDATE = "validate"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class PipelineError(NetplanError):
    pass


# ---------------------------------------------------------------------------
# Settings / Result dataclasses
# ---------------------------------------------------------------------------

@dataclass
class PipelineSettings:
    # Layout solving
    solver_passes: int = 2
    tie_break: TieBreak = TieBreak.LAST_MATCH
    alignment: InPlaneAlignment = InPlaneAlignment.MIN_OFFSET

    # Validation
    strict_placement: bool = False  # Unplaced rooms fail the run


@dataclass
class PipelineResult:
    rooms: List[Room] = field(default_factory=list)
    descriptions: Dict[str, str] = field(default_factory=dict)
    unplaced_room_ids: List[int] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)
    stages_completed: List[PipelineStage] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def total_time(self) -> float:
        return self.metrics.get("total_time", 0.0)

    def describe(self, symbol: str) -> Optional[str]:
        return self.descriptions.get(symbol)


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------

class FloorPlanPipeline:
    """Turns document text into solved rooms and descriptions."""

    def __init__(self, settings: Optional[PipelineSettings] = None):
        self.settings = settings or PipelineSettings()
        self.current_stage = PipelineStage.PARSE
        self._validate_settings()

        self.parser = DocumentParser()
        self.decoder = NetDecoder()
        self.solver = RoomLayoutSolver(SolverSettings(
            passes=self.settings.solver_passes,
            tie_break=self.settings.tie_break,
            alignment=self.settings.alignment,
        ))

    def _validate_settings(self):
        if self.settings.solver_passes < 1:
            raise PipelineError(
                f"Invalid settings: solver_passes must be at least 1, got {self.settings.solver_passes}"
            )

    # -- stages --

    def _parse(self, text: str) -> ParsedDocument:
        self.current_stage = PipelineStage.PARSE
        return self.parser.parse(text)

    def _decode(self, document: ParsedDocument) -> List[Room]:
        self.current_stage = PipelineStage.DECODE
        rooms = self.decoder.decode_all(document.rooms)
        logger.info("Decoded %d rooms, %d symbols",
                    len(rooms), sum(room.symbol_count() for room in rooms))
        return rooms

    def _index(self, rooms: List[Room]) -> CharacterIndex:
        self.current_stage = PipelineStage.INDEX
        index = CharacterIndex.from_rooms(rooms)
        logger.info("Indexed %d distinct symbols", len(index))
        return index

    def _solve(self, rooms: List[Room], index: CharacterIndex) -> SolveResult:
        self.current_stage = PipelineStage.SOLVE
        return self.solver.solve(rooms, index)

    def _validate(self, result: PipelineResult) -> ValidationResult:
        self.current_stage = PipelineStage.VALIDATE
        validation = check_floor_plan(
            result.rooms,
            result.descriptions,
            result.unplaced_room_ids,
            strict=self.settings.strict_placement,
        )
        for issue in validation.errors + validation.warnings:
            logger.warning("Validation: %s", issue.format())
        for issue in validation.infos:
            logger.debug("Validation: %s", issue.format())
        return validation

    # -- main entry --

    def run(self, text: str) -> PipelineResult:
        """Run every stage on document text.

        Raises:
            NetFormatError: If the document contains a malformed room net
            ValidationError: If strict_placement is set and a room is unplaced
        """
        start_time = time.time()
        result = PipelineResult()

        document = self._parse(text)
        result.stages_completed.append(PipelineStage.PARSE)
        result.descriptions = dict(document.descriptions)

        rooms = self._decode(document)
        result.stages_completed.append(PipelineStage.DECODE)

        index = self._index(rooms)
        result.stages_completed.append(PipelineStage.INDEX)

        solved = self._solve(rooms, index)
        result.rooms = solved.rooms
        result.unplaced_room_ids = list(solved.unplaced_room_ids)
        result.metrics["match_count"] = solved.match_count
        result.metrics["symbol_count"] = len(index)
        result.stages_completed.append(PipelineStage.SOLVE)

        result.validation = self._validate(result)
        result.stages_completed.append(PipelineStage.VALIDATE)
        if result.validation.failed:
            raise ValidationError(result.validation)

        self.current_stage = PipelineStage.COMPLETE
        result.stages_completed.append(PipelineStage.COMPLETE)
        result.metrics["total_time"] = time.time() - start_time
        logger.info("Pipeline complete in %.3fs", result.metrics["total_time"])
        return result

    def run_file(self, path: Union[str, Path]) -> PipelineResult:
        """Read a document from disk and run it.

        Raises:
            DocumentReadError: If the file cannot be read
        """
        return self.run(read_document(path))
