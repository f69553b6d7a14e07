"""
Service settings.

Values come from environment variables (SEARCHWORDLE_*) with defaults that run
the bundled word lists on localhost:5000; the serve CLI overrides individual
fields from its flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from searchwordle.datasets.lexicon import default_paths

ENV_PREFIX = "SEARCHWORDLE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer; got {raw!r}") from None


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean; got {raw!r}")


@dataclass
class Settings:
    host: str = "localhost"
    port: int = 5000
    answers_path: Path = default_paths()[0]
    guesses_path: Path = default_paths()[1]
    secret_key: str = "dev-secret-change-in-production"
    strict_lexicon: bool = False
    seed: Optional[int] = None
    max_sessions: int = 10000

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        base = cls()
        return cls(
            host=env.get(ENV_PREFIX + "HOST", base.host),
            port=_env_int(env, "PORT", base.port),
            answers_path=Path(env.get(ENV_PREFIX + "ANSWERS", base.answers_path)),
            guesses_path=Path(env.get(ENV_PREFIX + "GUESSES", base.guesses_path)),
            secret_key=env.get(ENV_PREFIX + "SECRET_KEY", base.secret_key),
            strict_lexicon=_env_bool(env, "STRICT_LEXICON", base.strict_lexicon),
            seed=_env_int(env, "SEED", base.seed),
            max_sessions=_env_int(env, "MAX_SESSIONS", base.max_sessions),
        )
