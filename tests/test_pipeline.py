"""
Floor plan pipeline and plan validation tests.
"""

import pytest

from netplan.src.document import DocumentReadError, NetFormatError, NetplanError
from netplan.src.layout import InPlaneAlignment, TieBreak
from netplan.src.pipeline import (
    FloorPlanPipeline,
    PipelineError,
    PipelineSettings,
    PipelineStage,
)
from netplan.src.validation import Severity, ValidationError

from nets import HALL_NET, document, unit_cube

TWO_ROOMS = document(
    ("Kitchen", unit_cube(right="a")),
    ("Pantry", unit_cube(left="a", floor="s")),
    ("a", "A swinging door."),
    ("z", "A zither nobody plays."),
)


def test_full_run():
    result = FloorPlanPipeline().run(TWO_ROOMS)
    assert result.room_count == 2
    assert [room.name for room in result.rooms] == ["Kitchen", "Pantry"]
    assert result.rooms[1].position == (1.0, 0.0, 0.0)
    assert result.unplaced_room_ids == []
    assert result.stages_completed == [
        PipelineStage.PARSE,
        PipelineStage.DECODE,
        PipelineStage.INDEX,
        PipelineStage.SOLVE,
        PipelineStage.VALIDATE,
        PipelineStage.COMPLETE,
    ]
    assert result.metrics["symbol_count"] == 2
    assert result.total_time >= 0.0


def test_descriptions_are_passed_through():
    result = FloorPlanPipeline().run(TWO_ROOMS)
    assert result.describe('a') == "A swinging door."
    assert result.describe('s') is None


def test_description_issues():
    validation = FloorPlanPipeline().run(TWO_ROOMS).validation
    assert validation.passed
    assert validation.codes() == ["DOC-001", "DOC-002"]
    undescribed, unused = validation.issues
    assert undescribed.symbol == 's'
    assert undescribed.severity == Severity.INFO
    assert unused.symbol == 'z'


def test_unplaced_room_is_a_warning():
    text = document(("One", unit_cube(top="x")), ("Two", unit_cube(top="y")))
    result = FloorPlanPipeline().run(text)
    assert result.unplaced_room_ids == [1]
    assert result.rooms[1].position == (0.0, 0.0, 0.0)
    warnings = result.validation.warnings
    assert [issue.code for issue in warnings] == ["LAYOUT-001"]
    assert warnings[0].room == 1
    assert "'Two'" in warnings[0].message


def test_strict_placement_fails():
    text = document(("One", unit_cube()), ("Two", unit_cube()))
    pipeline = FloorPlanPipeline(PipelineSettings(strict_placement=True))
    with pytest.raises(ValidationError) as excinfo:
        pipeline.run(text)
    assert excinfo.value.result.failed
    assert excinfo.value.result.errors[0].code == "LAYOUT-001"
    assert pipeline.current_stage == PipelineStage.VALIDATE


def test_strict_placement_passes_when_connected():
    pipeline = FloorPlanPipeline(PipelineSettings(strict_placement=True))
    assert pipeline.run(TWO_ROOMS).validation.passed


def test_format_error_stops_before_solving():
    text = document(("Good", unit_cube()), ("Bad", "x\n+   \n++"))
    pipeline = FloorPlanPipeline()
    with pytest.raises(NetFormatError):
        pipeline.run(text)
    assert pipeline.current_stage == PipelineStage.PARSE


def test_empty_document():
    result = FloorPlanPipeline().run("")
    assert result.rooms == []
    assert result.validation.issues == []


def test_invalid_passes():
    with pytest.raises(PipelineError):
        FloorPlanPipeline(PipelineSettings(solver_passes=0))


def test_pipeline_errors_share_base_class():
    assert issubclass(PipelineError, NetplanError)
    assert issubclass(ValidationError, NetplanError)


def test_tie_break_setting_reaches_solver():
    pipeline = FloorPlanPipeline(PipelineSettings(tie_break=TieBreak.LOWEST_ID))
    assert pipeline.solver.settings.tie_break is TieBreak.LOWEST_ID


def test_alignment_setting_reaches_solver():
    assert FloorPlanPipeline().solver.settings.alignment is InPlaneAlignment.MIN_OFFSET
    pipeline = FloorPlanPipeline(PipelineSettings(alignment=InPlaneAlignment.CELL_CENTER))
    assert pipeline.solver.settings.alignment is InPlaneAlignment.CELL_CENTER


def test_run_file(tmp_path):
    path = tmp_path / "hall.md"
    path.write_text(document(("Hall", HALL_NET), ("d", "A dusty rug.")), encoding="utf-8")
    result = FloorPlanPipeline().run_file(path)
    assert result.rooms[0].name == "Hall"
    assert result.describe('d') == "A dusty rug."


def test_run_missing_file(tmp_path):
    with pytest.raises(DocumentReadError):
        FloorPlanPipeline().run_file(tmp_path / "nope.md")


class TestValidationReport:

    def test_issue_format(self):
        text = document(("One", unit_cube()), ("Two", unit_cube()))
        issue = FloorPlanPipeline().run(text).validation.issues[0]
        assert issue.format().startswith("[WARN] LAYOUT-001 room=1 symbol=- :: ")

    def test_report_groups_by_severity(self):
        report = FloorPlanPipeline().run(TWO_ROOMS).validation.report()
        assert report.startswith("Validation PASSED: 2 issue(s)")
        assert "INFO (2):" in report

    def test_clean_report(self):
        report = FloorPlanPipeline().run("").validation.report()
        assert report == "Validation passed: No issues found"
