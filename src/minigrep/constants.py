"""Application-wide constants."""

APP_NAME = "minigrep"
APP_VERSION = "0.1.0"

# Presence (any value, even empty) switches matching to case-insensitive.
CASE_INSENSITIVE_VAR = "CASE_INSENSITIVE"

# Presence enables DEBUG logging on stderr, same as --verbose.
DEBUG_VAR = "MINIGREP_DEBUG"

USAGE = f"Usage: {APP_NAME} <query> <filename>"
