"""
Quoting for DOT string values.
"""


_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\\n',
}


def quote_string(text: str) -> str:
    """
    Wrap text in double quotes for use as a DOT attribute value.

    Backslashes and double quotes are escaped. Newlines are kept as a
    backslash followed by the newline (DOT line continuation).
    """
    return '"' + ''.join(_ESCAPES.get(c, c) for c in text) + '"'
