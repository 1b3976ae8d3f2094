"""Dataclasses describing command letters and the actions they run."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during command dispatch."""

    id: str
    handler: Callable[..., object]
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a single command letter with an action."""

    key: str
    action_id: str

    def __post_init__(self) -> None:
        if len(self.key) != 1:
            raise ValueError("binding key must be exactly one character")
        if self.key in "\r\n":
            raise ValueError("line terminators cannot be bound")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def id(self) -> str:
        return f"command.{self.key}"


__all__ = ["ActionRef", "Binding"]
