import re
from typing import Optional, Set


class TextValidator:
    """Text cleaning and checks shared by the add form and the search box."""

    @staticmethod
    def clean_text(text: Optional[str]) -> str:
        if text is None:
            return ""
        # str.strip() also drops newlines and tabs
        return text.strip()

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return not TextValidator.clean_text(text)

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        # Any non-empty title is fine, digits-only titles like "1984" included
        return not TextValidator.is_blank(title)


class RowSelection:
    """Parses the row numbers a user types when picking rows on the screen.

    Rows are shown 1-based; the parsed result is a set of 0-based positions.
    Tokens that are not positive integers are dropped rather than reported.
    """

    _SEPARATORS = re.compile(r"[,\s]+")

    @staticmethod
    def parse(raw: Optional[str]) -> Set[int]:
        if raw is None:
            return set()
        positions: Set[int] = set()
        for token in RowSelection._SEPARATORS.split(raw.strip()):
            if not token.isdigit():
                continue
            row = int(token)
            if row >= 1:
                positions.add(row - 1)
        return positions

    @staticmethod
    def parse_one(raw: Optional[str]) -> Optional[int]:
        """Return the single 0-based position typed, or None if it is not one row."""
        positions = RowSelection.parse(raw)
        if len(positions) != 1:
            return None
        return positions.pop()
