"""Command-letter registry and the default bindings."""

from .models import ActionRef, Binding
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import default_registry, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "default_registry",
    "load_default_keymaps",
]
