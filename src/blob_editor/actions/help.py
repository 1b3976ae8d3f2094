"""Usage text rendered from the active keymap."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blob_editor.keymaps import KeymapRegistry

BANNER = (
    "\nBlob\n"
    "A line-oriented text editor, which aims to be simple and effective.\n\n"
)
FOOTER = "\nYou can string together commands, like so: 'npi' (next, print, insert).\n"


def render_usage(registry: "KeymapRegistry") -> str:
    """One ``'key' (label): description`` row per bound letter."""

    rows = [BANNER]
    for binding in registry.iter_bindings():
        action = registry.get_action(binding.action_id)
        label = action.metadata.get("label") or action.id.rsplit(".", 1)[-1]
        rows.append(f"'{binding.key}' ({label}): {action.description}\n")
    rows.append(FOOTER)
    return "".join(rows)


__all__ = ["BANNER", "FOOTER", "render_usage"]
