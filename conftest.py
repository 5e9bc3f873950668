import os
import pytest

from mylibrary.library import Library
from mylibrary.screen import LibraryScreen
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def reset_output_mode():
    # --output writes to os.environ; keep each test on the plain default
    os.environ.pop(OUTPUT_MODE_ENV, None)
    yield
    os.environ.pop(OUTPUT_MODE_ENV, None)

@pytest.fixture
def lib():
    # Fresh seeded collection per test: 1984, The Lord of the Rings, Dune
    return Library.with_sample_data()

@pytest.fixture
def screen(lib):
    return LibraryScreen(lib)
