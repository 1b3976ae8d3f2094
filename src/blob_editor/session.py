"""Editor session: owns the buffer, the prompt loop and the SIGINT hookup."""

from __future__ import annotations

import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from blob_editor.buffer import EditorState, TextCodec, load
from blob_editor.keymaps import KeymapRegistry, default_registry
from blob_editor.modes import (
    AtEndResult,
    AtStartResult,
    ByteSink,
    CommandMode,
    InputExhausted,
    LineSource,
    ModeContext,
    Quit,
)
from blob_editor.runtime import telemetry
from blob_editor.runtime.cancel import CancellationToken
from blob_editor.runtime.config import EditorConfig

COMMAND_ENCODING = "latin-1"


@contextmanager
def interrupt_handler(
    token: CancellationToken, *, enabled: bool = True
) -> Iterator[None]:
    """Route SIGINT to ``token`` for the duration of the block.

    Signal handlers can only be installed from the main thread; elsewhere
    (and when ``enabled`` is false) the block runs with the current handler.
    """

    if not enabled or threading.current_thread() is not threading.main_thread():
        yield
        return

    def _on_interrupt(signum: int, frame: object) -> None:
        del signum, frame
        token.cancel()

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


class EditorSession:
    """One editing session over one backing file.

    ``open`` loads the file (creating it when missing), ``run`` drives the
    prompt loop until ``q``, and ``close`` releases the buffer. The session
    is also a context manager doing ``open``/``close``.
    """

    def __init__(
        self,
        path: str,
        *,
        config: Optional[EditorConfig] = None,
        keymaps: Optional[KeymapRegistry] = None,
        source: Optional[LineSource] = None,
        output: Optional[ByteSink] = None,
        errors: Optional[ByteSink] = None,
    ) -> None:
        self.path = path
        self.config = config or EditorConfig.from_env()
        self.codec = TextCodec(pad_empty_lines=self.config.pad_empty_lines)
        self.keymaps = keymaps or default_registry()
        self.source = source
        self.output = output
        self.errors = errors
        self.token = CancellationToken()
        self.context: Optional[ModeContext] = None

    def __enter__(self) -> "EditorSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    @property
    def state(self) -> EditorState:
        if self.context is None:
            raise RuntimeError("session is not open")
        return self.context.state

    def open(self) -> ModeContext:
        if self.context is not None:
            return self.context
        lines = load(self.path, self.codec)
        self.context = ModeContext(
            state=EditorState.from_lines(self.path, lines),
            keymaps=self.keymaps,
            source=self.source or sys.stdin.buffer,
            output=self.output or sys.stdout.buffer,
            errors=self.errors or sys.stderr.buffer,
            token=self.token,
            codec=self.codec,
        )
        telemetry.record_event(
            "session.start", data={"path": self.path, "lines": len(lines)}
        )
        return self.context

    def close(self) -> None:
        if self.context is None:
            return
        self.context.state.release()
        self.context = None
        telemetry.record_event("session.end", data={"path": self.path})

    def run(self, *, handle_signals: bool = True) -> None:
        """Prompt for command lines until ``q``.

        Raises ``InputExhausted`` if the input stream ends first.
        """

        context = self.open()
        interpreter = CommandMode(context)
        with interrupt_handler(self.token, enabled=handle_signals):
            while True:
                _write(context.output, self.config.prompt.encode("utf-8"))
                raw = context.source.readline()
                if not raw:
                    raise InputExhausted("input ended at the command prompt")

                result = interpreter.run_line(raw.decode(COMMAND_ENCODING))
                if isinstance(result, Quit):
                    return
                if isinstance(result, (AtEndResult, AtStartResult)):
                    _write(context.output, result.token)


def _write(sink: ByteSink, data: bytes) -> None:
    sink.write(data)
    sink.flush()


__all__ = ["COMMAND_ENCODING", "EditorSession", "interrupt_handler"]
