"""Shared API constants."""

# Hard cap for normalized task descriptions (characters, no ellipsis)
DESCRIPTION_MAX_CHARS = 4000

# Characters of context shown either side of a JSON decode error offset
JSON_ERROR_CONTEXT_CHARS = 30

# Separator used when an LLM returns a description as a list of fragments
DESCRIPTION_FRAGMENT_SEPARATOR = " • "

# Range of the Integer columns (sprint, sprints_quantity); values outside it coerce to None
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1
