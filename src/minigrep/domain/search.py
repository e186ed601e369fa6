"""Pure line-filtering functions.

Both filters work on a whole text body held in memory and return the
matching lines in source order.  Lines are split on ``\\n`` only, with a
single trailing ``\\r`` removed, so other Unicode separators such as
``\\x0c`` stay inside their line.
"""

from collections.abc import Iterator


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents`` in order.

    - A trailing ``\\n`` does not produce a final empty line.
    - An empty body yields nothing.
    - Empty lines between terminators are kept.
    """
    if not contents:
        return
    parts = contents.split("\n")
    if parts[-1] == "":
        parts.pop()
    for line in parts:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str) -> list[str]:
    """Return every line of ``contents`` containing ``query`` exactly.

    An empty query matches every line.
    """
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Like ``search`` but compares lowercased copies.

    The returned lines keep their original casing.
    """
    q = query.lower()
    return [line for line in iter_lines(contents) if q in line.lower()]
