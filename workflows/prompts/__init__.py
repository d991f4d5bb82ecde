"""
LLM prompt templates for project planning.

  1. CREATE   : free-text idea → one or more projects with tasks
  2. PREDICT  : existing project → new tasks to append (+ optional timeline update)
  3. OPTIMIZE : existing project → full replacement task set (+ optional timeline update)

Placeholders (double-brace, replace before sending to LLM):
  - {{TODAY}}: current date
"""

from .workflow import (
    PROMPT_CREATE,
    PROMPT_PREDICT,
    PROMPT_OPTIMIZE,
    fill_prompt,
)

__all__ = [
    "PROMPT_CREATE",
    "PROMPT_PREDICT",
    "PROMPT_OPTIMIZE",
    "fill_prompt",
]
