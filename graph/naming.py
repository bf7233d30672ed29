"""
Node name validation.

Accepted names match ``[a-zA-Z_.][a-zA-Z_.0-9]*``. This is a strict subset of
the DOT ``ID`` grammar: quoted strings, numerals and HTML labels are not
accepted yet.
"""
from typing import NamedTuple, Optional

from exceptions import InvalidNodeNameError


BAD_FIRST_CHAR = "The name of the node should start with a letter or underscore or dot"
BAD_LATER_CHAR = "The name of the node should only contain letter/number/underscore/dot"


class NameCheck(NamedTuple):
    """Outcome of scanning a candidate name."""
    accepted: bool
    reason: Optional[str] = None


def _in_range(low: str, c: str, high: str) -> bool:
    return ord(low) <= ord(c) <= ord(high)


def is_leading_char(c: str) -> bool:
    """ASCII letter, underscore or dot."""
    return _in_range('a', c, 'z') or _in_range('A', c, 'Z') or c == '_' or c == '.'


def is_constituent_char(c: str) -> bool:
    """Any leading character or an ASCII digit."""
    return is_leading_char(c) or _in_range('0', c, '9')


def check_node_name(name: str) -> NameCheck:
    """
    Scan a candidate node name.

    The first character must satisfy ``is_leading_char``; every following
    character must satisfy ``is_constituent_char``. The empty string has no
    first character and is rejected.

    Args:
        name: Candidate identifier

    Returns:
        NameCheck with ``accepted`` and, on rejection, the reason
    """
    if not name or not is_leading_char(name[0]):
        return NameCheck(False, BAD_FIRST_CHAR)

    rejected = [c for c in name[1:] if not is_constituent_char(c)]
    if rejected:
        return NameCheck(False, BAD_LATER_CHAR)

    return NameCheck(True)


def validate_node_name(name: str) -> str:
    """
    Return ``name`` unchanged if it is a valid node name.

    Raises:
        InvalidNodeNameError: If the name is rejected
    """
    result = check_node_name(name)
    if not result.accepted:
        raise InvalidNodeNameError(name, result.reason)
    return name
