"""Command-line entry point: ``blob PATH``."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import NoReturn, Optional, Sequence

from blob_editor.actions import render_usage
from blob_editor.buffer import StorageError
from blob_editor.keymaps import default_registry
from blob_editor.modes import InputExhausted
from blob_editor.runtime import telemetry
from blob_editor.runtime.config import EditorConfig
from blob_editor.session import EditorSession

LOG_PRESETS = ("development", "production", "performance")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        sys.stderr.write(render_usage(default_registry()))
        self.exit(1, f"{self.prog}: {message}\n")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="blob", description="A line-oriented text editor."
    )
    parser.add_argument("path", help="File to edit; created if missing.")
    parser.add_argument(
        "--pad-empty-lines",
        action="store_true",
        default=None,
        help="Load empty lines as a single space (BLOB_PAD_EMPTY_LINES).",
    )
    parser.add_argument(
        "--log-preset",
        choices=LOG_PRESETS,
        default=None,
        help="telelog preset to use instead of BLOB_LOG_* settings.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    config = EditorConfig.from_env()
    if args.pad_empty_lines:
        config = replace(config, pad_empty_lines=True)

    try:
        with EditorSession(args.path, config=config) as session:
            session.run()
    except StorageError as exc:
        sys.stderr.write(f"blob: {exc}\n")
        return 1
    except InputExhausted:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
