from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
import os

import yaml

from bfi.core.tape import DEFAULT_TAPE_SIZE

# Environment overrides
ENV_TAPE_SIZE = "BF_TAPE_SIZE"
ENV_STEP_LIMIT = "BF_STEP_LIMIT"


@dataclass(frozen=True)
class InterpreterConfig:
    tape_size: int = DEFAULT_TAPE_SIZE
    max_steps: Optional[int] = None  # None = run until the source ends
    trace: bool = False
    trace_window: int = 10

    def __post_init__(self):
        for name in ("tape_size", "trace_window", "max_steps"):
            value = getattr(self, name)
            if name == "max_steps" and value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.trace, bool):
            raise ValueError(f"trace must be true or false, got {self.trace!r}")
        if self.tape_size < 1:
            raise ValueError(f"tape_size must be >= 1, got {self.tape_size}")
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError(f"max_steps must be >= 1 or unset, got {self.max_steps}")
        if self.trace_window < 1:
            raise ValueError(f"trace_window must be >= 1, got {self.trace_window}")


def _known_keys():
    return {f.name for f in fields(InterpreterConfig)}


def load_config_file(path: str) -> Dict[str, Any]:
    """Load interpreter settings from a YAML mapping.

    An empty file yields no settings. Unknown keys are rejected.
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(data).__name__}")

    unknown = set(data) - _known_keys()
    if unknown:
        raise ValueError(f"{path}: unknown settings: {', '.join(sorted(unknown))}")
    return data


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    tape_size = _env_int(ENV_TAPE_SIZE)
    if tape_size is not None:
        overrides["tape_size"] = tape_size
    max_steps = _env_int(ENV_STEP_LIMIT)
    if max_steps is not None:
        overrides["max_steps"] = max_steps
    return overrides


def load_config(path: Optional[str] = None, **overrides: Any) -> InterpreterConfig:
    """Resolve settings: defaults < YAML file < environment < explicit overrides."""
    settings: Dict[str, Any] = {}
    if path:
        settings.update(load_config_file(path))
    settings.update(env_overrides())
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return InterpreterConfig(**settings)
