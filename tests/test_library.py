import pytest

from mylibrary.book import Book
from mylibrary.library import Library, filter_books


def titles(books):
    return [b.title for b in books]


def test_sample_data_order(lib):
    assert titles(lib.books) == ["1984", "The Lord of the Rings", "Dune"]
    assert len({b.id for b in lib.books}) == 3


def test_sample_data_gets_new_ids_per_session():
    first = {b.id for b in Library.with_sample_data().books}
    second = {b.id for b in Library.with_sample_data().books}
    assert first.isdisjoint(second)


def test_books_compare_by_id_only():
    a = Book("Dune", "Frank Herbert")
    b = Book("Dune", "Frank Herbert")
    assert a != b
    assert a == Book("Renamed", "Someone", id=a.id)
    assert len({a, b}) == 2


def test_book_to_dict():
    book = Book("Dune", "Frank Herbert", "Desert planet.")
    data = book.to_dict()
    assert data == {"id": book.id, "title": "Dune", "author": "Frank Herbert", "summary": "Desert planet."}


def test_filter_blank_query_returns_same_sequence(lib):
    books = lib.books
    assert filter_books(books, "") is books
    assert filter_books(books, "   \n\t") is books
    assert filter_books(books, None) is books


def test_filter_is_case_insensitive_on_title_and_author(lib):
    assert titles(filter_books(lib.books, "the")) == ["The Lord of the Rings"]
    assert titles(filter_books(lib.books, "ORWELL")) == ["1984"]
    assert titles(filter_books(lib.books, "herb")) == ["Dune"]


def test_filter_keeps_store_order():
    books = [Book("Alpha", "X"), Book("Beta", "Y"), Book("Gamma", "X"), Book("Delta", "Z")]
    assert titles(filter_books(books, "x")) == ["Alpha", "Gamma"]


def test_filter_matching_none_or_all(lib):
    assert filter_books(lib.books, "a query longer than any field in the store") == []
    assert filter_books(lib.books, "zzz") == []
    # every seeded book has an "r" in title or author
    assert titles(filter_books(lib.books, "r")) == titles(lib.books)


def test_filter_does_not_look_at_summary(lib):
    assert filter_books(lib.books, "surveillance") == []


def test_filter_is_idempotent(lib):
    once = filter_books(lib.books, "e")
    assert filter_books(once, "e") == once
    assert filter_books(lib.books, "e") == once


def test_filter_members_all_match(lib):
    query = "or"
    result = filter_books(lib.books, query)
    for book in lib.books:
        matches = query in book.title.lower() or query in book.author.lower()
        assert (book in result) == matches


def test_add_book_appends(lib):
    book = Book("Foundation", "Isaac Asimov")
    lib.add_book(book)
    assert lib.books[-1] is book
    assert len(lib) == 4


def test_add_duplicate_id():
    lib = Library()
    book = Book("Test Book", "Test Author")
    lib.add_book(book)

    with pytest.raises(ValueError, match="already exists"):
        lib.add_book(Book("Other", "Other", id=book.id))

    assert len(lib.books) == 1


def test_constructor_rejects_duplicate_ids():
    book = Book("Dune", "Frank Herbert")
    with pytest.raises(ValueError):
        Library([book, book])


def test_same_title_and_author_are_distinct_books():
    lib = Library()
    lib.add_book(Book("Dune", "Frank Herbert"))
    lib.add_book(Book("Dune", "Frank Herbert"))
    assert titles(lib.books) == ["Dune", "Dune"]


def test_search_result_is_a_copy(lib):
    books = lib.search_books(None)
    books.clear()
    assert len(lib) == 3


def test_find_book(lib):
    dune = lib.books[2]
    assert lib.find_book(dune.id) is dune
    assert lib.find_book("nonexistent") is None


def test_remove_books_by_id(lib):
    orwell, _, dune = lib.books
    removed = lib.remove_books([dune.id, orwell.id, "nonexistent"])
    assert titles(removed) == ["1984", "Dune"]
    assert titles(lib.books) == ["The Lord of the Rings"]


def test_remove_books_with_no_ids_is_noop(lib):
    before = list(lib.books)
    assert lib.remove_books([]) == []
    assert lib.books == before


def test_remove_at_filtered_position_targets_the_shown_book(lib):
    view = filter_books(lib.books, "the")
    removed = lib.remove_books_at({0}, view)
    assert titles(removed) == ["The Lord of the Rings"]
    assert titles(lib.books) == ["1984", "Dune"]


def test_remove_at_never_touches_books_outside_the_view(lib):
    view = filter_books(lib.books, "dune")
    # positions 0..2 of the store would hit 1984 and LOTR; the view only holds Dune
    lib.remove_books_at({0, 1, 2}, view)
    assert titles(lib.books) == ["1984", "The Lord of the Rings"]


def test_remove_at_ignores_out_of_range_positions(lib):
    view = lib.search_books("")
    assert lib.remove_books_at({5, -1}, view) == []
    assert len(lib) == 3


def test_remove_at_multiple_positions(lib):
    view = filter_books(lib.books, "e")  # all three match "e"
    lib.remove_books_at([0, 2], view)
    assert titles(lib.books) == ["The Lord of the Rings"]


def test_search_books_returns_list(lib):
    result = lib.search_books("")
    assert result == lib.books
    assert result is not lib.books


def test_statistics():
    lib = Library([Book("A", "Same"), Book("B", "Same"), Book("C", "")])
    assert lib.get_statistics() == {"total_books": 3, "unique_authors": 1}


def test_concrete_session_scenario(lib):
    assert titles(lib.search_books("the")) == ["The Lord of the Rings"]
    assert titles(lib.search_books("")) == ["1984", "The Lord of the Rings", "Dune"]

    lib.remove_books_at([0], lib.search_books("the"))
    assert titles(lib.books) == ["1984", "Dune"]

    lib.add_book(Book("Foundation", "Asimov", ""))
    assert [(b.title, b.author) for b in lib.books] == [
        ("1984", "George Orwell"),
        ("Dune", "Frank Herbert"),
        ("Foundation", "Asimov"),
    ]
