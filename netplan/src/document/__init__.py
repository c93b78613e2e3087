"""
Document Module for Floor Plan Nets

Reads floor plan documents, validates room nets and decodes them into rooms.
"""

from .errors import NetplanError, UsageError, DocumentReadError, NetFormatError
from .document_parser import (
    DocumentParser,
    ParsedDocument,
    RoomNet,
    net_area,
    parse_document,
    read_document,
)
from .net_decoder import NetDecoder, get_letters_in_ascii_grid, IGNORED_CHARS

__all__ = [
    'NetplanError',
    'UsageError',
    'DocumentReadError',
    'NetFormatError',
    'DocumentParser',
    'ParsedDocument',
    'RoomNet',
    'net_area',
    'parse_document',
    'read_document',
    'NetDecoder',
    'get_letters_in_ascii_grid',
    'IGNORED_CHARS',
]
