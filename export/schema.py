"""
Schema definitions for JSON graph definitions.
"""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class NodeDefinition(BaseModel):
    """One node entry; name is validated when the Node is built."""
    name: str
    label: Optional[str] = None
    style: str = ""
    color: Optional[str] = None
    shape: Optional[str] = None
    url: str = ""


class EdgeDefinition(BaseModel):
    """One edge entry between two declared nodes."""
    source: str
    target: str
    label: str = ""
    style: str = ""
    color: Optional[str] = None


class GraphDefinition(BaseModel):
    """Complete graph definition with nodes and edges."""
    name: Optional[str] = None
    kind: Optional[Literal["digraph", "graph"]] = None
    nodes: List[NodeDefinition] = Field(default_factory=list)
    edges: List[EdgeDefinition] = Field(default_factory=list)
