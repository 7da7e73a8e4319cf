"""Errors raised while building schemas and validating values."""

from __future__ import annotations

from typing import Iterable, Sequence

PATH_INDENT = ".   "


class IndexSegment(str):
    """Path segment for a position in an array, rendered as ``[ i ]``."""

    index: int

    def __new__(cls, index: int) -> "IndexSegment":
        segment = super().__new__(cls, f"[ {index} ]")
        segment.index = index
        return segment


class SchemaDefinitionError(ValueError):
    """Raised when a schema is constructed from malformed parts."""


class ValidationError(ValueError):
    """Raised when a value does not conform to a schema.

    ``path`` holds the segments from the root down to the failing value: field
    names, and array positions rendered as ``[ i ]``. The root itself is not
    part of ``path``.
    """

    def __init__(self, path: Sequence[str], message: str) -> None:
        self.path = tuple(path)
        self.message = message
        super().__init__(render_failure(self.path, message))

    @property
    def location(self) -> str:
        """Compact one-line rendering of the path, e.g. ``$.items[ 0 ].name``."""
        text = "$"
        for segment in self.path:
            text += segment if isinstance(segment, IndexSegment) else f".{segment}"
        return text

    def __repr__(self) -> str:
        return f"ValidationError(path={self.path!r}, message={self.message!r})"


def render_path(segments: Iterable[str]) -> str:
    """Render path segments one per line, each indented below its parent."""
    return "\n".join(PATH_INDENT * depth + segment for depth, segment in enumerate(segments))


def render_failure(path: Sequence[str], message: str) -> str:
    """Render a failure as the indented path (root first), a blank line, and the message."""
    return "\n" + render_path(("", *path)) + "\n\n" + message
