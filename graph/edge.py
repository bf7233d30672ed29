"""Edge definition."""
from dataclasses import dataclass, replace
from typing import Optional

from .kind import GraphKind
from .naming import validate_node_name
from .quoting import quote_string
from .style import Style


@dataclass(frozen=True)
class Edge:
    """Represents an edge between two named nodes."""
    source: str
    target: str
    label: str = ""
    style: Style = Style.NONE
    color: Optional[str] = None

    def __post_init__(self):
        validate_node_name(self.source)
        validate_node_name(self.target)

    def with_label(self, label: str) -> 'Edge':
        return replace(self, label=label)

    def with_style(self, style: Style) -> 'Edge':
        return replace(self, style=style)

    def with_color(self, color: Optional[str]) -> 'Edge':
        return replace(self, color=color)

    def render(self, kind: GraphKind = GraphKind.DIGRAPH) -> str:
        """Render the edge as one DOT statement using the operator of ``kind``."""
        text = [f'"{self.source}" {kind.edge_op} "{self.target}"']
        text.append('[label=' + quote_string(self.label) + ']')

        if self.style is not Style.NONE:
            text.append('[style="' + self.style.keyword + '"]')

        if self.color is not None:
            text.append('[color=' + quote_string(self.color) + ']')

        text.append(';')
        return ''.join(text)
