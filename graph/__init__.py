"""Graph module."""
from .node import Node
from .edge import Edge
from .kind import GraphKind
from .style import Style
from .naming import check_node_name, validate_node_name
from .quoting import quote_string
from .dot_graph import DotGraph

__all__ = [
    'Node', 'Edge', 'GraphKind', 'Style', 'DotGraph',
    'check_node_name', 'validate_node_name', 'quote_string',
]
