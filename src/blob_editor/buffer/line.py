"""Single buffer line backed by a mutable byte sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

NEWLINE = 0x0A

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(slots=True, eq=False)
class Line:
    """One line of the buffer, without its terminating newline.

    Lines compare by identity: two lines holding the same bytes are still
    distinct members of a sequence.
    """

    data: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytearray):
            self.data = bytearray(self.data)
        if NEWLINE in self.data:
            raise ValueError("line content cannot contain a newline byte")

    @classmethod
    def from_bytes(cls, raw: BytesLike) -> "Line":
        return cls(data=bytearray(raw))

    @classmethod
    def from_text(cls, text: str, *, encoding: str = "utf-8") -> "Line":
        return cls(data=bytearray(text.encode(encoding)))

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def text(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return self.data.decode(encoding, errors)


__all__ = ["Line", "NEWLINE", "BytesLike"]
