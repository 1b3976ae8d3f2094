"""Registry mapping command letters to actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from blob_editor.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    keys: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a letter is already bound to another action."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Key '{binding.key}' is already bound to '{existing.action_id}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the letters bound to them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": binding.key, "action_id": binding.action_id},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Key '{binding.key}' references unknown action '{binding.action_id}'"
                )

            existing = self._bindings.get(binding.key)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.action_id)
                raise KeymapConflictError(binding, existing)

            self._bindings[binding.key] = binding
            self._revision += 1
            return binding

    def unregister_binding(self, key: str) -> Optional[Binding]:
        binding = self._bindings.pop(key, None)
        if binding is not None:
            self._revision += 1
        return binding

    def lookup(self, key: str) -> Optional[ActionRef]:
        """Return the action bound to ``key``, or ``None`` for unknown letters."""

        binding = self._bindings.get(key)
        if binding is None:
            return None
        return self._actions.get(binding.action_id)

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            keys=tuple(sorted(self._bindings)),
        )


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
