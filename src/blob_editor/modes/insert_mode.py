"""Insert mode: append typed lines after the cursor until interrupted."""

from __future__ import annotations

from blob_editor.runtime import telemetry

from .base_mode import InputExhausted, Mode


class InsertMode(Mode):
    """Reads raw lines and threads them in after the cursor.

    The cancellation token is checked before each blocking read and again
    once the read returns: an interrupt that lands while the read is blocked
    still discards the line that read produced.
    """

    name = "insert"

    def run(self) -> int:
        token = self.context.token
        token.reset()
        inserted = 0

        with telemetry.span("mode::insert", component=True) as handle:
            while not token.cancelled:
                raw = self.read_line()
                if raw is None:
                    handle.add_metadata("inserted", inserted)
                    raise InputExhausted("input ended during insert mode")

                if token.cancelled:
                    handle.cancel("interrupt")
                    break

                self.state.insert(self.context.codec.decode_line(raw))
                inserted += 1

            handle.add_metadata("inserted", inserted)

        telemetry.record_event("insert.cancelled", data={"inserted": inserted})
        return inserted


__all__ = ["InsertMode"]
