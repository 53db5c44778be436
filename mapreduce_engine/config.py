"""
Engine configuration.
Concurrency caps can come from code, from the environment, or from CLI flags.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from mapreduce_engine.errors import ConfigError

MAX_MAP_ENV = 'MAPREDUCE_MAX_MAP_TASKS'
MAX_REDUCE_ENV = 'MAPREDUCE_MAX_REDUCE_TASKS'


def _parse_limit(name: str, raw: Optional[str]) -> Optional[int]:
    """Parse an optional positive integer from an environment string."""
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class EngineConfig:
    """
    Settings for a single Engine.

    A limit of None means full fan-out: one worker thread per task.
    """
    max_concurrent_map_tasks: Optional[int] = None
    max_concurrent_reduce_tasks: Optional[int] = None
    copy_inputs: bool = True

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ConfigError if any limit is not a positive integer."""
        for name in ('max_concurrent_map_tasks', 'max_concurrent_reduce_tasks'):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer or None, got {value!r}")

    @classmethod
    def from_env(cls, environ=None) -> 'EngineConfig':
        """Build a config from MAPREDUCE_* environment variables."""
        environ = os.environ if environ is None else environ
        return cls(
            max_concurrent_map_tasks=_parse_limit(MAX_MAP_ENV, environ.get(MAX_MAP_ENV)),
            max_concurrent_reduce_tasks=_parse_limit(MAX_REDUCE_ENV, environ.get(MAX_REDUCE_ENV)),
        )

    def with_overrides(self, **overrides) -> 'EngineConfig':
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
