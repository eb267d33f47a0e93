"""Minimal OpenAI chat client wrapper for character backstories.

This module is optional and never used by the engine itself. If
USE_LLM_BACKSTORY is false or no OPENAI_API_KEY is provided, all helpers
return None and callers should carry on without a backstory.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from openai import OpenAI

from . import config as cfg
from .config import _bool_from_env as _bool_from_env
from .summary import build_backstory_context
from .types import Character

logger = logging.getLogger(__name__)

BACKSTORY_PROMPT = """You are a dark fantasy narrator writing character backstories for a roguelite game.
Write in a vivid, atmospheric style.

Rules:
- Write exactly 2-3 paragraphs
- Reference the character's class, abilities, element and combat style naturally
- Turn the stats into personality (high willpower = determined, high intelligence = cunning, and so on)
- Include a defining moment or origin event
- End with a hint of their current quest or motivation
- Never quote the exact stat numbers
- Keep it under 200 words
- No headers, no bullet points, only prose"""

_client: Optional[OpenAI] = None


def get_client() -> Optional[OpenAI]:
    """Return a cached OpenAI client if backstories are enabled and configured.

    Returns None when:
      - USE_LLM_BACKSTORY is False, or
      - OPENAI_API_KEY is not set.
    """
    global _client
    # Read flags dynamically from environment to make tests and runtime toggling reliable
    enabled = _bool_from_env("USE_LLM_BACKSTORY", default=False)
    api_key = os.getenv("OPENAI_API_KEY")
    if not enabled:
        return None
    if not api_key:
        logger.debug("LLM backstory enabled but OPENAI_API_KEY not set; skipping")
        return None
    if _client is None:
        _client = OpenAI(api_key=api_key)
    return _client


def chat_text(system_prompt: str, user_prompt: str, max_tokens: int = 512) -> Optional[str]:
    """Call the LLM and return the stripped response text, or None on any failure."""
    client = get_client()
    if client is None:
        return None

    try:
        completion = client.chat.completions.create(
            model=cfg.LLM_MODEL_NAME,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=0.8,
            max_tokens=max_tokens,
        )
    except Exception as e:  # network / auth / model errors
        logger.debug("LLM call failed: %s", e)
        return None

    content = (completion.choices[0].message.content or "").strip()
    if not content:
        logger.debug("LLM returned an empty backstory")
        return None
    return content


def generate_backstory(character: Character) -> Optional[str]:
    """Short prose backstory for a character, or None when unavailable."""
    context = build_backstory_context(character)
    return chat_text(BACKSTORY_PROMPT, f"Write a backstory for this character:\n\n{context}")
