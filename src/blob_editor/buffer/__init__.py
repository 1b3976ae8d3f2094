"""Buffer data model, text codec, and backing-file storage."""

from .codec import DEFAULT_CODEC, TextCodec, decode, encode, encode_lines
from .line import Line
from .sequence import AtEnd, AtStart, BoundaryError, LineHandle, LineSequence
from .state import EditorState
from .storage import StorageError, load, save
from .validation import BufferValidationError, check_links, ensure_cursor

__all__ = [
    "AtEnd",
    "AtStart",
    "BoundaryError",
    "BufferValidationError",
    "DEFAULT_CODEC",
    "EditorState",
    "Line",
    "LineHandle",
    "LineSequence",
    "StorageError",
    "TextCodec",
    "check_links",
    "decode",
    "encode",
    "encode_lines",
    "ensure_cursor",
    "load",
    "save",
]
