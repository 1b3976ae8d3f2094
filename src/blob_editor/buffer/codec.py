"""Conversion between raw newline-separated bytes and buffer lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .line import BytesLike, Line
from .sequence import LineSequence

NEWLINE = b"\n"
PADDING = b" "


@dataclass(frozen=True, slots=True)
class TextCodec:
    """Splits raw bytes into lines and renders lines back.

    With ``pad_empty_lines`` a wholly-empty line decodes to a single space,
    matching files written by older builds of the editor. The default keeps
    empty lines empty.
    """

    pad_empty_lines: bool = False

    def decode(self, raw: BytesLike) -> LineSequence:
        return LineSequence(self.decode_lines(raw))

    def decode_lines(self, raw: BytesLike) -> list[Line]:
        data = bytes(raw)
        if not data:
            return []
        pieces = data.split(NEWLINE)
        if data.endswith(NEWLINE):
            pieces.pop()
        return [self._line(piece) for piece in pieces]

    def decode_line(self, raw: BytesLike) -> Line:
        """Decode one raw read, terminated by ``\\n`` or end of input."""

        data = bytes(raw)
        if data.endswith(NEWLINE):
            data = data[:-1]
        return self._line(data)

    def encode(self, line: Line) -> bytes:
        return bytes(line.data) + NEWLINE

    def encode_lines(self, lines: Iterable[Line]) -> bytes:
        return b"".join(self.encode(line) for line in lines)

    def _line(self, piece: bytes) -> Line:
        if not piece and self.pad_empty_lines:
            piece = PADDING
        return Line.from_bytes(piece)


DEFAULT_CODEC = TextCodec()


def decode(raw: BytesLike) -> LineSequence:
    return DEFAULT_CODEC.decode(raw)


def encode(line: Line) -> bytes:
    return DEFAULT_CODEC.encode(line)


def encode_lines(lines: Iterable[Line]) -> bytes:
    return DEFAULT_CODEC.encode_lines(lines)


__all__ = [
    "DEFAULT_CODEC",
    "TextCodec",
    "decode",
    "encode",
    "encode_lines",
]
