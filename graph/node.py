"""Node definition."""
from dataclasses import dataclass, replace
from typing import Optional

from .naming import validate_node_name
from .quoting import quote_string
from .style import Style


@dataclass(frozen=True)
class Node:
    """
    A single node of a DOT graph.

    The name is validated on construction and never changes. Optional
    attributes are set through the ``with_*`` methods, each of which returns
    a new Node.

    Example:
        >>> Node("n1").with_color("red").render()
        '"n1"[label="n1"][color="red"];'
    """
    name: str
    label: Optional[str] = None
    style: Style = Style.NONE
    color: Optional[str] = None
    shape: Optional[str] = None
    url: str = ""

    def __post_init__(self):
        validate_node_name(self.name)
        if self.label is None:
            object.__setattr__(self, 'label', self.name)

    def with_label(self, label: str) -> 'Node':
        return replace(self, label=label)

    def with_style(self, style: Style) -> 'Node':
        return replace(self, style=style)

    def with_shape(self, shape: Optional[str]) -> 'Node':
        return replace(self, shape=shape)

    def with_color(self, color: Optional[str]) -> 'Node':
        return replace(self, color=color)

    def with_url(self, url: str) -> 'Node':
        return replace(self, url=url)

    def render(self) -> str:
        """
        Render the node as one DOT statement.

        Clause order is fixed: label, URL, style, color, shape. Shape is
        wrapped in quotes without escaping, unlike label, URL and color.
        """
        text = ['"', self.name, '"']

        text.append('[label=' + quote_string(self.label) + ']')

        if self.url:
            text.append('[URL=' + quote_string(self.url) + ']')

        if self.style is not Style.NONE:
            text.append('[style="' + self.style.keyword + '"]')

        if self.color is not None:
            text.append('[color=' + quote_string(self.color) + ']')

        if self.shape is not None:
            text.append('[shape="' + self.shape + '"]')

        text.append(';')
        return ''.join(text)

    to_dot_string = render
