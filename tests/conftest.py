from __future__ import annotations

import io
from typing import Callable, List, Optional

import pytest

from blob_editor.buffer import EditorState, TextCodec
from blob_editor.keymaps import default_registry
from blob_editor.modes import ModeContext
from blob_editor.runtime.cancel import CancellationToken


class ScriptedSource:
    """Line source replaying canned reads.

    ``interrupt_on`` cancels ``token`` while the given (1-based) read is in
    flight, as a SIGINT landing during a blocking read would.
    """

    def __init__(
        self,
        *lines: bytes,
        token: Optional[CancellationToken] = None,
        interrupt_on: Optional[int] = None,
    ) -> None:
        self._lines: List[bytes] = list(lines)
        self.token = token
        self.interrupt_on = interrupt_on
        self.reads = 0

    def readline(self) -> bytes:
        self.reads += 1
        if self.token is not None and self.reads == self.interrupt_on:
            self.token.cancel()
        return self._lines.pop(0) if self._lines else b""


ContextFactory = Callable[..., ModeContext]


@pytest.fixture
def make_context() -> ContextFactory:
    def factory(
        raw: bytes = b"",
        *lines: bytes,
        path: str = "buffer.txt",
        interrupt_on: Optional[int] = None,
        codec: Optional[TextCodec] = None,
    ) -> ModeContext:
        codec = codec or TextCodec()
        token = CancellationToken()
        return ModeContext(
            state=EditorState.from_lines(path, codec.decode(raw)),
            keymaps=default_registry(),
            source=ScriptedSource(*lines, token=token, interrupt_on=interrupt_on),
            output=io.BytesIO(),
            errors=io.BytesIO(),
            token=token,
            codec=codec,
        )

    return factory
