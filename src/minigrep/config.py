"""Run configuration resolved from the argument list and the environment.

A ``Config`` is built once per invocation:

    Config.from_args(["minigrep", "needle", "haystack.txt"])

The first argument is the program name and is skipped.  Case sensitivity
comes from the presence of ``CASE_INSENSITIVE`` in the environment; its
value is never inspected.
"""

import os
from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from minigrep.constants import CASE_INSENSITIVE_VAR

EnvLookup = Callable[[str], bool]


class ConfigError(Exception):
    """Raised when the argument list cannot produce a Config."""


class MissingQueryError(ConfigError):
    def __init__(self) -> None:
        super().__init__("missing query")


class MissingFilenameError(ConfigError):
    def __init__(self) -> None:
        super().__init__("missing filename")


def env_is_set(name: str) -> bool:
    """Return True if ``name`` is present in the process environment."""
    return name in os.environ


class Config(BaseModel):
    """Immutable search configuration."""

    model_config = ConfigDict(frozen=True)

    query: str
    filename: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args: Iterable[str], is_set: EnvLookup = env_is_set) -> "Config":
        """Resolve a Config from ``args`` and the ``is_set`` lookup.

        Raises MissingQueryError if nothing follows the program name, and
        MissingFilenameError if only the query does.  The query check
        comes first.  Extra arguments after the filename are ignored.
        """
        it = iter(args)
        next(it, None)

        query = next(it, None)
        if query is None:
            raise MissingQueryError()
        filename = next(it, None)
        if filename is None:
            raise MissingFilenameError()

        return cls(
            query=query,
            filename=filename,
            case_sensitive=not is_set(CASE_INSENSITIVE_VAR),
        )
