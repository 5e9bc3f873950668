from typing import List

from mylibrary.book import Book

# (title, author, summary) rows seeded into every new session
SAMPLE_BOOKS = [
    ("1984", "George Orwell", "A dystopian classic about surveillance and control."),
    ("The Lord of the Rings", "J.R.R. Tolkien", "Frodo's journey to destroy the One ring."),
    ("Dune", "Frank Herbert", "Politics, religion, and ecology on a desert planet."),
]


def sample_books() -> List[Book]:
    """Build fresh Book records for the sample rows (new ids on every call)."""
    return [Book(title=title, author=author, summary=summary) for title, author, summary in SAMPLE_BOOKS]
