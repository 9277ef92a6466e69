"""Front-matter header for daily note files.

A note file starts with a small header block:

    ---
    title: "default"
    tags: [python, git]
    ---

Only ``title`` and ``tags`` are understood. The header is located with a
line grammar rather than a pattern over the whole document: the first line
must be the ``---`` delimiter and the block ends at the next ``---`` line.
Nothing after the closing delimiter is inspected, so entry text can never
be mistaken for header content.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from til.core.errors import CannotParseMetaData

DELIMITER = "---"
TAGS_KEY = "tags:"


def unique(tags: Iterable[str]) -> list[str]:
    """Drop repeated tags, keeping first-seen order."""
    return list(dict.fromkeys(tags))


def format_tags(tags: Iterable[str]) -> str:
    return f"[{', '.join(tags)}]"


@dataclass
class Header:
    title: str
    tags: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Render the header block, followed by the blank separator line."""
        return (
            f"{DELIMITER}\n"
            f'title: "{self.title}"\n'
            f"{TAGS_KEY} {format_tags(self.tags)}\n"
            f"{DELIMITER}\n"
            "\n"
        )


@dataclass(frozen=True)
class HeaderSpan:
    """Where the header sits inside a document.

    ``tags_start``/``tags_end`` bound the text of the tags line (without its
    line ending); ``end`` is the offset just past the closing delimiter line.
    """

    end: int
    tags_start: int
    tags_end: int
    tags: list[str]


def _iter_lines(content: str) -> Iterator[tuple[int, str, int]]:
    """Yield ``(start, text, next_start)`` for each ``\\n``-terminated line."""
    start = 0
    while start < len(content):
        newline = content.find("\n", start)
        stop = len(content) if newline == -1 else newline + 1
        yield start, content[start:stop].rstrip("\n"), stop
        start = stop


def _parse_tag_list(line: str) -> list[str]:
    value = line[len(TAGS_KEY) :].strip()
    if not (value.startswith("[") and value.endswith("]")):
        raise CannotParseMetaData(f"malformed tags line: {line.strip()!r}")
    return [item.strip() for item in value[1:-1].split(",") if item.strip()]


def parse_header(content: str) -> HeaderSpan:
    """Locate the header block and its tags line.

    Raises:
        CannotParseMetaData: the document does not open with a delimiter,
            the block is never closed, or it has no well-formed tags line.
    """
    lines = _iter_lines(content)
    first = next(lines, None)
    if first is None or first[1].rstrip() != DELIMITER:
        raise CannotParseMetaData("missing opening delimiter")

    tags_line: tuple[int, int, list[str]] | None = None
    for start, text, stop in lines:
        if text.rstrip() == DELIMITER:
            if tags_line is None:
                raise CannotParseMetaData("header has no tags line")
            tags_start, tags_end, tags = tags_line
            return HeaderSpan(end=stop, tags_start=tags_start, tags_end=tags_end, tags=tags)
        if tags_line is None and text.startswith(TAGS_KEY):
            stripped = text.rstrip()
            tags_line = (start, start + len(stripped), _parse_tag_list(stripped))

    raise CannotParseMetaData("missing closing delimiter")


def merge_tags(content: str, tags: Iterable[str]) -> str:
    """Return ``content`` with any tags not yet in the header appended to it.

    Existing tags keep their order; new ones follow in input order. When
    every tag is already present the original string is returned untouched.
    Only the tags line inside the header is rewritten.
    """
    span = parse_header(content)
    new_tags = [tag for tag in unique(tags) if tag not in span.tags]
    if not new_tags:
        return content

    tags_line = f"{TAGS_KEY} {format_tags(span.tags + new_tags)}"
    return content[: span.tags_start] + tags_line + content[span.tags_end :]
