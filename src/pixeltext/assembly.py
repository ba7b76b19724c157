"""Translate block-style CSV text into a DOS assembly program.

Each cell becomes an INT 21h/AH=02h character write and each row ends with
an INT 21h/AH=09h print of a CR/LF string. The program targets the small
memory model of a 16-bit assembler such as MASM or TASM.
"""

import logging
from collections.abc import Mapping

from pixeltext.charsets import AUTO_DOS_BYTES, CUSTOM_DOS_BYTES, CUSTOM_DOS_BYTES_INVERTED, FALLBACK_BYTE
from pixeltext.errors import NoInputData
from pixeltext.settings import DosMode

logger = logging.getLogger(__name__)

PREAMBLE = """\
;----------------------------------------
; ASCII Art in x86 Assembly for DOSBox
; Generated by Pixel Art to Assembly Converter
;----------------------------------------

.MODEL SMALL
.STACK 100h

.DATA
    crlf DB 13, 10, "$"  ; Carriage return + line feed

.CODE
MAIN PROC
    MOV AX, @DATA
    MOV DS, AX

    CALL DISPLAY_ART

    MOV AX, 4C00h
    INT 21h
MAIN ENDP

DISPLAY_ART PROC
"""

POSTAMBLE = """\
    RET
DISPLAY_ART ENDP

END MAIN
"""

PUT_CHAR = "    MOV DL, {byte}\n    MOV AH, 02h\n    INT 21h\n"
NEWLINE = "    MOV DX, OFFSET crlf\n    MOV AH, 09h\n    INT 21h\n"


def byte_table(mode: DosMode | str, invert: bool = True) -> Mapping[str, int]:
    """Select the glyph-to-byte table for a DOS display mode."""
    if DosMode(mode) is DosMode.AUTO:
        return AUTO_DOS_BYTES
    return CUSTOM_DOS_BYTES_INVERTED if invert else CUSTOM_DOS_BYTES


def dos_byte(cell: str, table: Mapping[str, int]) -> int:
    """Byte for one trimmed cell, falling back to its first code point."""
    if cell in table:
        return table[cell]
    code = ord(cell[0])
    return code if code <= 255 else FALLBACK_BYTE


def parse_cells(text: str) -> list[list[str]]:
    """Split CSV text into rows of trimmed cells, dropping blank lines."""
    rows = [line for line in text.split("\n") if line.strip()]
    return [[cell.strip() for cell in row.split(",")] for row in rows]


def emit_assembly(text: str | None, mode: DosMode | str = DosMode.AUTO, invert: bool = True) -> str:
    """Build the DOS program for block CSV text.

    Raises NoInputData when the text is missing, empty or only whitespace,
    so no program without cells is ever emitted.
    """
    if not text or not text.strip():
        raise NoInputData("No CSV data: please upload a CSV file or generate spreadsheet data first")

    table = byte_table(mode, invert)
    rows = parse_cells(text)
    logger.debug("emitting %d rows, %d cells in %s mode", len(rows), sum(map(len, rows)), DosMode(mode).value)

    parts = [PREAMBLE]
    for row in rows:
        parts.extend(PUT_CHAR.format(byte=dos_byte(cell, table)) for cell in row)
        parts.append(NEWLINE)
    parts.append(POSTAMBLE)
    return "".join(parts)
