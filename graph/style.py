"""Style keywords shared by nodes and edges."""
from enum import Enum


class Style(Enum):
    """Closed set of DOT style keywords; ``NONE`` means no style clause."""
    NONE = ""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    INVISIBLE = "invis"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"

    @property
    def keyword(self) -> str:
        """Text emitted inside the ``style`` clause."""
        return self.value

    @classmethod
    def from_keyword(cls, keyword: str) -> "Style":
        """
        Parse a style keyword.

        Raises:
            ValueError: If the keyword is not a known style
        """
        try:
            return cls(keyword)
        except ValueError:
            raise ValueError(f"Unknown style keyword: {keyword!r}") from None
