"""Configuration utilities for typeforge.

Reads environment variables and exposes configuration values for the CLI and
the optional backstory client. The engine itself reads no configuration; every
builder is a pure function of its arguments.

Notes on flags:
- USE_LLM_BACKSTORY:
  When False (default), `llm_client.generate_backstory` returns None without
  touching the network. When True and OPENAI_API_KEY is set, the CLI can ask
  for a short backstory built from the character summary.
- NAME_SEED:
  Optional integer used by the CLI when no explicit `--seed` is given.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_QUIZ_MODE = "quick"


def _bool_from_env(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _int_from_env(name: str) -> Optional[int]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return None
    try:
        return int(val.strip())
    except ValueError:
        return None


# LLM backstory flags (module-level constants for easy import)
USE_LLM_BACKSTORY: bool = _bool_from_env("USE_LLM_BACKSTORY", default=False)
LLM_MODEL_NAME: str = os.getenv("LLM_MODEL_NAME", "gpt-4.1-mini")
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Application log level string.
        quiz_mode: Default quiz strategy ("quick" or "deep") for the CLI.
        name_seed: Default seed for cosmetic name generation, or None.
        use_llm_backstory: Whether the CLI may call the backstory client.
    """

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    quiz_mode: str = os.getenv("QUIZ_MODE", DEFAULT_QUIZ_MODE).strip().lower()
    name_seed: Optional[int] = _int_from_env("NAME_SEED")
    use_llm_backstory: bool = _bool_from_env("USE_LLM_BACKSTORY", default=False)


def get_settings() -> Settings:
    """Return a Settings instance using current environment variables."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        quiz_mode=os.getenv("QUIZ_MODE", DEFAULT_QUIZ_MODE).strip().lower(),
        name_seed=_int_from_env("NAME_SEED"),
        use_llm_backstory=_bool_from_env("USE_LLM_BACKSTORY", default=False),
    )
