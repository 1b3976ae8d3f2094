"""Command interpreter: runs a line of single-letter commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from blob_editor.buffer import AtEnd, AtStart, BoundaryError
from blob_editor.runtime import telemetry

from .base_mode import (
    AtEndResult,
    AtStartResult,
    BoundaryResult,
    CommandResult,
    Continue,
    Mode,
    Quit,
)

if TYPE_CHECKING:
    from blob_editor.keymaps.models import ActionRef

LINE_TERMINATORS = frozenset("\n\0")


class CommandMode(Mode):
    """Applies each letter of an input line to the editor state.

    Letters run left to right. A boundary hit from ``n`` or ``b`` stops the
    rest of the line; ``q`` stops it and ends the session. Unbound letters
    are skipped.
    """

    name = "command"

    def run_line(self, text: str) -> CommandResult:
        executed = 0
        with telemetry.span(
            "mode::command", component=True, metadata={"line": text.rstrip("\r\n")}
        ) as handle:
            for column, key in enumerate(text):
                if key in LINE_TERMINATORS:
                    break

                action = self.context.keymaps.lookup(key)
                if action is None:
                    telemetry.record_event(
                        "command.unknown", level="debug", data={"key": key}
                    )
                    continue

                try:
                    outcome = self._execute(action)
                except BoundaryError as exc:
                    result = _boundary_result(exc, column)
                    handle.add_metadata("status", result.status)
                    telemetry.record_event(
                        "command.boundary",
                        data={"key": key, "column": column, "token": str(exc)},
                    )
                    return result

                executed += 1
                if isinstance(outcome, Quit):
                    handle.add_metadata("status", outcome.status)
                    return outcome

            handle.add_metadata("executed", executed)
        return Continue(executed=executed)

    def _execute(self, action: "ActionRef") -> Optional[object]:
        with telemetry.span(
            f"command::{action.telemetry_name}",
            component="commands",
            metadata={"action": action.id},
        ):
            return action(self.context)


def _boundary_result(exc: BoundaryError, column: int) -> BoundaryResult:
    if isinstance(exc, AtStart):
        return AtStartResult(column=column)
    if isinstance(exc, AtEnd):
        return AtEndResult(column=column)
    raise exc


__all__ = ["CommandMode", "LINE_TERMINATORS"]
