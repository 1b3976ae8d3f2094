"""Built-in command letters."""

from __future__ import annotations

from typing import Iterable, Sequence

from blob_editor.actions import core as core_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.next",
        handler=core_actions.next_line,
        description="go to the next line.",
    ),
    ActionRef(
        id="core.back",
        handler=core_actions.previous_line,
        description="go to the previous line.",
    ),
    ActionRef(
        id="core.print",
        handler=core_actions.print_line,
        description="print the current line.",
    ),
    ActionRef(
        id="core.insert",
        handler=core_actions.insert_lines,
        description="insert lines after the current line, until (ctrl+c).",
    ),
    ActionRef(
        id="core.list",
        handler=core_actions.list_buffer,
        description="list the contents of the file.",
    ),
    ActionRef(
        id="core.delete",
        handler=core_actions.delete_line,
        description="delete the current line.",
    ),
    ActionRef(
        id="core.quit",
        handler=core_actions.quit_editor,
        description="quit the editor.",
    ),
    ActionRef(
        id="core.write",
        handler=core_actions.write_buffer,
        description="write buffer to file.",
    ),
    ActionRef(
        id="core.help",
        handler=core_actions.show_help,
        description="print this message.",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(key="n", action_id="core.next"),
    Binding(key="b", action_id="core.back"),
    Binding(key="p", action_id="core.print"),
    Binding(key="i", action_id="core.insert"),
    Binding(key="l", action_id="core.list"),
    Binding(key="d", action_id="core.delete"),
    Binding(key="q", action_id="core.quit"),
    Binding(key="w", action_id="core.write"),
    Binding(key="h", action_id="core.help"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    exclude_keys: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> KeymapRegistry:
    """Register the built-in actions and bind their letters."""

    excluded = set(exclude_keys or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.key in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)

    return registry


def default_registry() -> KeymapRegistry:
    return load_default_keymaps(KeymapRegistry(logger_name="blob_editor.keymaps"))


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "default_registry",
    "load_default_keymaps",
]
