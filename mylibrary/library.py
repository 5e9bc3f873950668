import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from mylibrary.book import Book
from mylibrary.sample_data import sample_books
from utils.validators import TextValidator

logger = logging.getLogger(__name__)


def filter_books(books: Sequence[Book], query: Optional[str]) -> Sequence[Book]:
    """Return the books whose title or author contains ``query``, ignoring case.

    A blank query gives back ``books`` itself. Matching keeps the order of
    ``books`` and never raises; a query that matches nothing yields ``[]``.
    """
    if TextValidator.is_blank(query):
        return books
    needle = query.casefold()
    return [
        book for book in books
        if needle in book.title.casefold() or needle in book.author.casefold()
    ]


class Library:
    """Holds the authoritative, in-memory collection of books for one session."""

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self.books: List[Book] = []
        for book in books or []:
            self.add_book(book)

    @classmethod
    def with_sample_data(cls) -> "Library":
        return cls(sample_books())

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a pre-constructed Book. Prevent duplicates by id."""
        if self.find_book(book.id):
            raise ValueError(f"Book with id {book.id} already exists.")
        self.books.append(book)
        logger.info(f"Book added: {book.title!r} ({book.id})")

    def remove_books(self, ids: Iterable[str]) -> List[Book]:
        """Remove every book whose id is in ``ids``; return the removed books."""
        targets = set(ids)
        if not targets:
            return []
        removed = [b for b in self.books if b.id in targets]
        if removed:
            self.books = [b for b in self.books if b.id not in targets]
            logger.info(f"Removed {len(removed)} book(s)")
        return removed

    def remove_books_at(self, positions: Iterable[int], view: Sequence[Book]) -> List[Book]:
        """Delete the books shown at ``positions`` of a filtered ``view``.

        Positions are resolved to ids against ``view`` first; the ids are then
        removed from the collection wherever they sit in it. Positions outside
        ``view`` are ignored.
        """
        ids: Set[str] = set()
        for position in positions:
            if 0 <= position < len(view):
                ids.add(view[position].id)
        return self.remove_books(ids)

    def find_book(self, book_id: str) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def search_books(self, query: Optional[str]) -> List[Book]:
        """Search for books by title or author."""
        return list(filter_books(self.books, query))

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        return {
            "total_books": len(self.books),
            "unique_authors": len({b.author for b in self.books if b.author}),
        }

    def __len__(self) -> int:
        return len(self.books)
