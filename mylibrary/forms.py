from typing import Callable, Dict, Optional

from mylibrary.book import Book
from utils.validators import TextValidator


class AddBookForm:
    """The "Add Book" sheet: three text fields plus Cancel/Save.

    The form does not know which collection it feeds; saving hands the new
    Book to ``on_save`` and closes the form.
    """

    def __init__(self, on_save: Callable[[Book], None], on_close: Optional[Callable[[], None]] = None) -> None:
        self.title = ""
        self.author = ""
        self.summary = ""
        self._on_save = on_save
        self._on_close = on_close
        self.closed = False

    def cleaned_data(self) -> Dict[str, str]:
        return {
            "title": TextValidator.clean_text(self.title),
            "author": TextValidator.clean_text(self.author),
            "summary": TextValidator.clean_text(self.summary),
        }

    @property
    def can_save(self) -> bool:
        """Save stays disabled until the trimmed title is non-empty."""
        return not self.closed and TextValidator.validate_title(self.title)

    def save(self) -> Book:
        if self.closed:
            raise ValueError("Form is already closed.")
        if not TextValidator.validate_title(self.title):
            raise ValueError("Title cannot be empty.")
        book = Book(**self.cleaned_data())
        self._on_save(book)
        self._close()
        return book

    def cancel(self) -> None:
        self._close()

    def _close(self) -> None:
        self.closed = True
        if self._on_close:
            self._on_close()
