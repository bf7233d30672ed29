"""Graph kinds."""
from enum import Enum


class GraphKind(Enum):
    """Directed or undirected DOT graph."""
    DIGRAPH = "digraph"
    GRAPH = "graph"

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def edge_op(self) -> str:
        """Edge operator used between endpoints."""
        return "->" if self is GraphKind.DIGRAPH else "--"
