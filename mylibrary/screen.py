"""Controller for the single library screen.

Owns the session's Library and the search text, derives the filtered view on
demand, and turns screen gestures (add, delete rows, open a row) into store
operations. Rendering lives in ``main.py`` and ``utils.ui_helpers``.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from mylibrary.book import Book
from mylibrary.detail import BookDetail
from mylibrary.forms import AddBookForm
from mylibrary.library import Library

logger = logging.getLogger(__name__)


class LibraryScreen:
    """The list screen: search box, rows, Add sheet and row actions."""

    def __init__(self, library: Library) -> None:
        self.library = library
        self.search_text = ""
        self.showing_add = False

    def search(self, query: Optional[str]) -> List[Book]:
        self.search_text = query or ""
        logger.debug(f"Search text set to {self.search_text!r}")
        return self.filtered_books

    @property
    def filtered_books(self) -> List[Book]:
        # Recomputed on every access so it always reflects the store
        return self.library.search_books(self.search_text)

    # ------------------------- Add sheet ------------------------- #
    def present_add_form(self) -> AddBookForm:
        self.showing_add = True
        logger.debug("Add form presented")
        return AddBookForm(on_save=self.library.add_book, on_close=self._dismiss_add_form)

    def _dismiss_add_form(self) -> None:
        self.showing_add = False

    # ------------------------- Row actions ------------------------- #
    def delete_rows(self, positions: Iterable[int]) -> List[Book]:
        """Delete the rows at ``positions`` of the list as currently displayed."""
        return self.library.remove_books_at(positions, self.filtered_books)

    def book_at(self, position: int) -> Optional[Book]:
        view = self.filtered_books
        if 0 <= position < len(view):
            return view[position]
        return None

    def open_detail(self, position: int) -> Optional[BookDetail]:
        book = self.book_at(position)
        return BookDetail.from_book(book) if book else None

    def statistics(self) -> Dict[str, Any]:
        stats = self.library.get_statistics()
        stats["shown_books"] = len(self.filtered_books)
        return stats
