from __future__ import annotations

import uuid


class Book:
    """Represents a single book entry in the library."""

    def __init__(self, title: str, author: str, summary: str = "", id: str | None = None) -> None:
        # The id is assigned once and never changes; it alone decides identity
        self._id = id or str(uuid.uuid4())
        self.title = title
        self.author = author
        self.summary = summary

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author}"

    def __repr__(self) -> str:  # pragma: no cover
        return f"Book(title={self.title!r}, author={self.author!r}, id={self._id!r})"

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "title": self.title,
            "author": self.author,
            "summary": self.summary,
        }
