"""
DOT graph container with consistent API.
"""
import networkx as nx
from typing import List, Dict, Any, Optional
import logging

from exceptions import GraphError
from .edge import Edge
from .kind import GraphKind
from .naming import validate_node_name
from .node import Node

logger = logging.getLogger(__name__)


class DotGraph:
    """
    Graph of DOT nodes and edges.

    Features:
    - Consistent API (no direct NetworkX access)
    - Node identities are unique within the graph
    - Edges may only join nodes already in the graph
    - Deterministic rendering in insertion order

    Example:
        >>> graph = DotGraph("deps")
        >>> graph.add_node(Node("a"))
        >>> graph.add_node(Node("b").with_shape("box"))
        >>> graph.add_edge(Edge("a", "b"))
        >>> print(graph.render())
    """

    def __init__(
        self,
        name: str = "G",
        kind: GraphKind = GraphKind.DIGRAPH,
        indent: int = 4
    ):
        """
        Initialize empty graph.

        Args:
            name: Graph identifier, validated like a node name
            kind: Directed or undirected graph
            indent: Spaces before each statement in the rendered document

        Raises:
            InvalidNodeNameError: If the graph name is rejected
        """
        self.name = validate_node_name(name)
        self.kind = kind
        self.indent = indent
        self.graph = nx.MultiDiGraph()
        self._edge_seq = 0

    def add_node(self, node: Node) -> None:
        """
        Add a node to the graph.

        Raises:
            GraphError: If a node with the same name already exists
        """
        if self.has_node(node.name):
            logger.warning(f"Duplicate node {node.name} rejected by graph {self.name}")
            raise GraphError(f"Node '{node.name}' already exists in graph '{self.name}'")

        self.graph.add_node(node.name, node=node)
        logger.debug(f"Added node {node.name}")

    def upsert_node(self, node: Node) -> None:
        """Add a node, replacing any existing node with the same name."""
        if self.has_node(node.name):
            logger.debug(f"Node {node.name} already exists, replacing attributes")
            self.graph.nodes[node.name]['node'] = node
        else:
            self.graph.add_node(node.name, node=node)
            logger.debug(f"Added node {node.name}")

    def add_edge(self, edge: Edge) -> None:
        """
        Add an edge between two existing nodes.

        Raises:
            GraphError: If either endpoint is not in the graph
        """
        if not self.has_node(edge.source):
            raise GraphError(f"Source node '{edge.source}' not found in graph")

        if not self.has_node(edge.target):
            raise GraphError(f"Target node '{edge.target}' not found in graph")

        self.graph.add_edge(edge.source, edge.target, edge=edge, seq=self._edge_seq)
        self._edge_seq += 1
        logger.debug(f"Added edge {edge.source} {self.kind.edge_op} {edge.target}")

    def has_node(self, name: str) -> bool:
        """Check if node exists in graph."""
        return self.graph.has_node(name)

    def get_node(self, name: str) -> Node:
        """
        Get a node by name.

        Raises:
            GraphError: If node doesn't exist
        """
        if not self.has_node(name):
            raise GraphError(f"Node '{name}' not found")

        return self.graph.nodes[name]['node']

    def nodes(self) -> List[Node]:
        """Nodes in insertion order."""
        return [data['node'] for _, data in self.graph.nodes(data=True)]

    def edges(self, source: Optional[str] = None) -> List[Edge]:
        """
        Edges in insertion order, optionally filtered by source node.

        Raises:
            GraphError: If ``source`` is given and not in the graph
        """
        if source is not None:
            if not self.has_node(source):
                raise GraphError(f"Node '{source}' not found")
            edge_iter = self.graph.out_edges(source, data=True)
        else:
            edge_iter = self.graph.edges(data=True)

        ordered = sorted(edge_iter, key=lambda e: e[2]['seq'])
        return [data['edge'] for _, _, data in ordered]

    def render(self) -> str:
        """Render the complete DOT document."""
        pad = ' ' * self.indent
        lines = [f'{self.kind.keyword} "{self.name}" {{\n']

        for node in self.nodes():
            lines.append(f"{pad}{node.render()}\n")

        for edge in self.edges():
            lines.append(f"{pad}{edge.render(self.kind)}\n")

        lines.append("}\n")
        return ''.join(lines)

    to_dot_string = render

    def get_stats(self) -> Dict[str, Any]:
        """Return graph statistics."""
        return {
            'num_nodes': self.graph.number_of_nodes(),
            'num_edges': self.graph.number_of_edges(),
            'kind': self.kind.keyword,
            'styles_used': self._get_style_counts()
        }

    def _get_style_counts(self) -> Dict[str, int]:
        """Count nodes and edges by style keyword, ignoring unstyled ones."""
        style_counts = {}
        items = [*self.nodes(), *self.edges()]
        for item in items:
            keyword = item.style.keyword
            if keyword:
                style_counts[keyword] = style_counts.get(keyword, 0) + 1
        return style_counts
