"""Environment-driven editor configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "BLOB_"
DEFAULT_PROMPT = ": "

_TRUTHY = {"1", "true", "yes", "on"}


def env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env(name, environ=environ)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Settings shared by the session, the codec and the storage layer."""

    prompt: str = DEFAULT_PROMPT
    pad_empty_lines: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        return cls(
            prompt=env("PROMPT", DEFAULT_PROMPT, environ=environ) or DEFAULT_PROMPT,
            pad_empty_lines=env_flag("PAD_EMPTY_LINES", False, environ=environ),
        )


__all__ = ["ENV_PREFIX", "DEFAULT_PROMPT", "EditorConfig", "env", "env_flag"]
