"""Search orchestration: read the file, filter it, write the matches."""

import sys
from typing import TextIO

from minigrep.config import Config
from minigrep.domain.search import search, search_case_insensitive


class FileReadError(Exception):
    """Raised when the target file cannot be read as UTF-8 text."""

    def __init__(self, filename: str, cause: Exception) -> None:
        super().__init__(f"{filename}: {cause}")
        self.filename = filename
        self.cause = cause


def run(config: Config, out: TextIO | None = None) -> int:
    """Print every matching line of ``config.filename`` to ``out``.

    Returns the number of lines written.  Zero matches is not an error.
    Nothing is written unless the whole file was read successfully.
    """
    if out is None:
        out = sys.stdout

    try:
        with open(config.filename, encoding="utf-8", newline="") as fh:
            contents = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(config.filename, exc) from exc

    if config.case_sensitive:
        results = search(config.query, contents)
    else:
        results = search_case_insensitive(config.query, contents)

    for line in results:
        out.write(f"{line}\n")

    return len(results)
