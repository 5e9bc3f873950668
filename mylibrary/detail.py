from dataclasses import dataclass

from mylibrary.book import Book


@dataclass(frozen=True)
class BookDetail:
    """Read-only projection of one book for the details screen."""

    title: str
    byline: str

    @classmethod
    def from_book(cls, book: Book) -> "BookDetail":
        return cls(title=book.title, byline=f"By {book.author}")

    def to_dict(self) -> dict:
        return {"title": self.title, "byline": self.byline}
