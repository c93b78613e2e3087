"""
Document parser tests.

Covers section splitting, description handling and the structural checks on
room nets.
"""

import pytest

from netplan.src.document import (
    DocumentParser,
    DocumentReadError,
    NetFormatError,
    NetplanError,
    net_area,
    parse_document,
    read_document,
)
from netplan.src.document.document_parser import split_sections

from nets import HALL_NET, document, unit_cube


def test_single_description():
    parsed = parse_document("# A\nfoo")
    assert parsed.descriptions == {'A': 'foo'}
    assert parsed.rooms == []


def test_later_description_overwrites_earlier():
    parsed = parse_document("# a\nfirst\n# a\nsecond")
    assert parsed.descriptions == {'a': 'second'}


def test_description_body_is_trimmed_and_multiline():
    parsed = parse_document("#   x  \n\n  A small\n  table.  \n\n")
    assert parsed.descriptions == {'x': 'A small\n  table.'}


def test_blank_sections_are_discarded():
    parsed = parse_document("\n\n#\n   \n# a\nlamp\n")
    assert parsed.descriptions == {'a': 'lamp'}
    assert parsed.rooms == []


def test_hash_inside_a_line_is_not_a_marker():
    parsed = parse_document("# a\nroom #3 lamp")
    assert parsed.descriptions == {'a': 'room #3 lamp'}


def test_markdown_subheadings_open_sections():
    parsed = parse_document("## Kitchen\n" + unit_cube(top="x") + "\n### k\nkettle")
    assert [room.name for room in parsed.rooms] == ["Kitchen"]
    assert parsed.descriptions == {'k': 'kettle'}


def test_split_sections_keeps_line_numbers():
    sections = split_sections("intro\n# A\nfoo\n## B\nbar")
    assert [start for start, _ in sections] == [1, 2, 4]
    assert sections[1][1] == [" A", "foo"]


def test_windows_line_endings():
    parsed = parse_document("# Cube\r\n" + unit_cube(top="x").replace("\n", "\r\n"))
    room = parsed.rooms[0]
    assert (room.width, room.depth, room.height) == (1, 1, 1)


class TestRoomNetMeasurement:

    def test_unit_cube(self):
        net = DocumentParser().parse_net("Cube", unit_cube(top="x"))
        assert (net.width, net.depth, net.height) == (1, 1, 1)
        assert net.expected_cells == 6

    def test_hall(self, hall_net):
        net = DocumentParser().parse_net("Hall", hall_net)
        assert (net.width, net.depth, net.height) == (5, 3, 4)
        assert net.expected_cells == 94
        assert len(net.lines) == 10

    def test_rooms_keep_document_order(self):
        text = document(("First", unit_cube()), ("a", "lamp"), ("Second", unit_cube()))
        parsed = parse_document(text)
        assert [room.name for room in parsed.rooms] == ["First", "Second"]

    def test_body_first_line_is_recorded(self):
        text = "# a\nlamp\n\n# Hall\n\n" + HALL_NET
        parsed = parse_document(text)
        assert parsed.rooms[0].first_line == 6

    def test_net_area(self):
        assert net_area(1, 1, 1) == 6
        assert net_area(5, 3, 4) == 94
        assert net_area(3, 1, 0) == 6


class TestRoomNetErrors:

    def test_area_violation(self):
        with pytest.raises(NetFormatError, match="expected 6"):
            parse_document("# Room\nx\n+   \n++")

    def test_missing_corner_line(self):
        with pytest.raises(NetFormatError, match="cannot measure depth"):
            parse_document("# Room\nabc\ndef")

    def test_single_line_net(self):
        with pytest.raises(NetFormatError):
            parse_document("# Room\nabc")

    def test_negative_height(self):
        with pytest.raises(NetFormatError, match="at least 4"):
            parse_document("# Room\nx\ny\n+")

    def test_empty_net(self):
        with pytest.raises(NetFormatError, match="empty"):
            parse_document("# Room\n\n# a\nlamp")

    def test_error_names_room_and_line(self):
        text = "# a\ntext\n# Room\nx\n+   \n++"
        with pytest.raises(NetFormatError) as excinfo:
            parse_document(text)
        error = excinfo.value
        assert error.room == "Room"
        assert error.line == 4
        assert str(error).startswith("room 'Room' line 4: ")

    def test_format_errors_share_base_class(self):
        with pytest.raises(NetplanError):
            parse_document("# Room\nx\n+   \n++")

    def test_preamble_text_is_a_section(self):
        with pytest.raises(NetFormatError) as excinfo:
            parse_document("Some intro\n# a\nlamp")
        assert excinfo.value.room == "Some intro"


class TestReadDocument:

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "plan.md"
        path.write_text("# ä\nUmlaut", encoding="utf-8")
        assert parse_document(read_document(path)).descriptions == {'ä': 'Umlaut'}

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.md"
        with pytest.raises(DocumentReadError) as excinfo:
            read_document(path)
        assert excinfo.value.path == str(path)
        assert str(excinfo.value).startswith(f"Failed to read file '{path}'")

    def test_read_error_is_an_os_error(self, tmp_path):
        with pytest.raises(OSError):
            read_document(tmp_path)
