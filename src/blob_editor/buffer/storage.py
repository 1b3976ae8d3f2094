"""Backing-file access for the editor buffer."""

from __future__ import annotations

from typing import Iterable

from blob_editor.runtime import telemetry

from .codec import DEFAULT_CODEC, TextCodec
from .line import Line
from .sequence import LineSequence


class StorageError(RuntimeError):
    """Raised when the backing file cannot be read, created or written."""

    def __init__(self, path: str, action: str, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"{action} {path}: {reason}")
        self.path = path
        self.action = action
        self.cause = cause


def load(path: str, codec: TextCodec = DEFAULT_CODEC) -> LineSequence:
    """Read ``path`` into a line sequence, creating an empty file if missing."""

    with telemetry.span(
        "storage::load", component="storage", metadata={"path": path}
    ) as handle:
        try:
            with open(path, "rb") as stream:
                raw = stream.read()
        except FileNotFoundError:
            handle.add_metadata("created", True)
            _create_empty(path)
            raw = b""
        except OSError as exc:
            raise StorageError(path, "cannot read", exc) from exc

        lines = codec.decode(raw)

    telemetry.record_event(
        "buffer.load", data={"path": path, "lines": len(lines), "bytes": len(raw)}
    )
    return lines


def save(
    path: str, lines: Iterable[Line], codec: TextCodec = DEFAULT_CODEC
) -> int:
    """Truncate ``path`` and write every line; returns the byte count."""

    payload = codec.encode_lines(lines)
    with telemetry.span(
        "storage::save", component="storage", metadata={"path": path}
    ):
        try:
            with open(path, "wb") as stream:
                stream.write(payload)
        except OSError as exc:
            raise StorageError(path, "cannot write", exc) from exc

    telemetry.record_event("buffer.write", data={"path": path, "bytes": len(payload)})
    return len(payload)


def _create_empty(path: str) -> None:
    try:
        with open(path, "wb"):
            pass
    except OSError as exc:
        raise StorageError(path, "cannot create", exc) from exc


__all__ = ["StorageError", "load", "save"]
