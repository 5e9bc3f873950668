"""MyLibrary - Utilities Package

- Text and row-selection validators (validators.py)
- Output-mode aware printing helpers (ui_helpers.py)
"""
