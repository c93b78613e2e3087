"""
Document parser for floor plan markdown files.

A document is a sequence of sections. Each line starting with '#' opens a
new section; the rest of that line is the heading. A heading of exactly one
character makes the section a description of that symbol. Any other heading
makes the section body a room net: the six interior faces of a rectangular
room unfolded into an ASCII cross.

    # Hall
    +---+
    | a |
    |   |
    +---++-++---++-+
    | b ||c||   ||a|
    |   || ||   || |
    +---++-++---++-+
    |   |
    | d |
    +---+

    # a
    A lamp hanging from the ceiling.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Tuple, Union
from dataclasses import dataclass, field

from .errors import DocumentReadError, NetFormatError

logger = logging.getLogger(__name__)

# A run of '#' at the start of a line opens a section
_SECTION_MARKER = re.compile(r'^#+')

# Character that opens the first line of the wall band
NET_CORNER = '+'


@dataclass
class RoomNet:
    """A structurally valid, not yet decoded room net."""
    name: str
    width: int
    depth: int
    height: int
    lines: List[str]
    first_line: int  # 1-based document line of lines[0]

    @property
    def expected_cells(self) -> int:
        return net_area(self.width, self.depth, self.height)


@dataclass
class ParsedDocument:
    """Result of parsing a document.

    Attributes:
        rooms: Room nets in document order; the index is the room id
        descriptions: Symbol -> description text
    """
    rooms: List[RoomNet] = field(default_factory=list)
    descriptions: Dict[str, str] = field(default_factory=dict)


def net_area(width: int, depth: int, height: int) -> int:
    """Number of net cells for a room of the given size."""
    return 2 * (width * depth + width * height + depth * height)


def read_document(path: Union[str, Path]) -> str:
    """Read a document from disk.

    Raises:
        DocumentReadError: If the file cannot be read or decoded
    """
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(str(path), str(e)) from e


def split_sections(text: str) -> List[Tuple[int, List[str]]]:
    """Split a document into raw sections.

    Text before the first marker forms a section of its own.

    Returns:
        List of (first document line number, section lines). The first line
        of a marker section is the remainder of the marker line.
    """
    sections: List[Tuple[int, List[str]]] = []
    start = 1
    current: List[str] = []

    for number, line in enumerate(text.replace('\r', '').split('\n'), start=1):
        match = _SECTION_MARKER.match(line)
        if match:
            sections.append((start, current))
            start = number
            current = [line[match.end():]]
        else:
            current.append(line)
    sections.append((start, current))

    return sections


class DocumentParser:
    """Turns document text into descriptions and validated room nets."""

    def parse(self, text: str) -> ParsedDocument:
        """Parse a whole document.

        Raises:
            NetFormatError: If any room net breaks a structural rule
        """
        document = ParsedDocument()

        for start, lines in split_sections(text):
            if not '\n'.join(lines).strip():
                continue

            # Heading is the first non-blank line
            heading_index = next(i for i, line in enumerate(lines) if line.strip())
            heading = lines[heading_index].strip()
            body_lines = lines[heading_index + 1:]
            body = '\n'.join(body_lines).strip()
            blank_prefix = next(
                (i for i, line in enumerate(body_lines) if line.strip()),
                len(body_lines),
            )
            body_line = start + heading_index + 1 + blank_prefix

            if len(heading) == 1:
                if heading in document.descriptions:
                    logger.debug(f"Description for '{heading}' replaced at line {start}")
                document.descriptions[heading] = body
                continue

            net = self.parse_net(heading, body, body_line)
            logger.debug(
                f"Room {len(document.rooms)} '{heading}': "
                f"{net.width}x{net.height}x{net.depth} (w x h x d)"
            )
            document.rooms.append(net)

        logger.info(
            f"Parsed {len(document.rooms)} room(s) and "
            f"{len(document.descriptions)} description(s)"
        )
        return document

    def parse_net(self, name: str, body: str, first_line: int = 1) -> RoomNet:
        """Measure and validate a single room net.

        The first line gives the width. The first later line that starts with
        '+' opens the wall band; its offset among the lines after the first
        gives the depth. Whatever is left after the top and the floor (depth
        lines each) is the height.

        Args:
            name: Section heading
            body: Trimmed section body
            first_line: Document line number of the first body line

        Raises:
            NetFormatError: On an empty body, a missing wall band, too few
                lines or a cell count that does not fit the measured size
        """
        if not body:
            raise NetFormatError("room net is empty", room=name, line=first_line)

        lines = body.split('\n')
        width = len(lines[0].strip())

        depth = None
        for offset, line in enumerate(lines[1:]):
            if line.startswith(NET_CORNER):
                depth = 1 + offset
                break
        if depth is None:
            raise NetFormatError(
                f"no line after the first starts with '{NET_CORNER}', cannot measure depth",
                room=name, line=first_line,
            )

        height = len(lines) - 2 * depth
        if height < 0:
            raise NetFormatError(
                f"net has {len(lines)} line(s), needs at least {2 * depth} for depth {depth}",
                room=name, line=first_line + depth,
            )

        expected = net_area(width, depth, height)
        actual = sum(len(line) for line in lines)
        if actual != expected:
            raise NetFormatError(
                f"net has {actual} character(s), expected {expected} "
                f"for width={width} depth={depth} height={height}",
                room=name, line=first_line,
            )

        return RoomNet(
            name=name,
            width=width,
            depth=depth,
            height=height,
            lines=lines,
            first_line=first_line,
        )


def parse_document(text: str) -> ParsedDocument:
    """Convenience function to parse a document in one call."""
    return DocumentParser().parse(text)
