"""MyLibrary - Core Application Package

This package contains the core application modules including:
- Data model (book.py) and seed rows (sample_data.py)
- In-memory collection, search and delete logic (library.py)
- Add Book form (forms.py) and read-only details (detail.py)
- Screen controller (screen.py)
"""
