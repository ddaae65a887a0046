"""Pure data constants for action dispatch.

// [LAW:one-source-of-truth] Canonical output-line wording and the set of
// internal action identifiers.
// [LAW:one-way-deps] No project imports. catalog and dispatcher depend on this.
"""

# [LAW:one-source-of-truth] Internal action identifiers understood by the dispatcher.
CLEAR_OUTPUT = "clear-output"
INTERNAL_ACTION_IDS = frozenset({CLEAR_OUTPUT})

# Transcript line formats
PROMPT_PREFIX = "$ "
ERROR_PREFIX = "Error: "
UNKNOWN_ERROR = "An unknown error occurred"
COPIED_FORMAT = "Copied to clipboard: {name}"
COPY_ERROR_FORMAT = "Error copying to clipboard: {message}"
