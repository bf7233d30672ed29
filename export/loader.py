"""
Graph definition loading and graph construction.
"""
from pathlib import Path
from typing import Optional
import json
import logging

from pydantic import ValidationError

from exceptions import DefinitionLoadError
from graph import DotGraph, Edge, GraphKind, Node, Style
from .schema import GraphDefinition, NodeDefinition, EdgeDefinition

logger = logging.getLogger(__name__)


def load_definition(path: str) -> GraphDefinition:
    """
    Load and validate a JSON graph definition.

    Args:
        path: Path to JSON file

    Returns:
        Validated GraphDefinition

    Raises:
        DefinitionLoadError: If file not found or validation fails
    """
    file_path = Path(path)

    if not file_path.exists():
        raise DefinitionLoadError(f"Definition not found: {path}")

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DefinitionLoadError(f"Failed to read JSON: {e}") from e

    try:
        definition = GraphDefinition.model_validate(data)
    except ValidationError as e:
        raise DefinitionLoadError(f"Invalid graph definition: {e}") from e

    logger.info(
        f"Loaded definition with {len(definition.nodes)} nodes "
        f"and {len(definition.edges)} edges from {path}"
    )
    return definition


def _parse_style(keyword: str) -> Style:
    try:
        return Style.from_keyword(keyword)
    except ValueError as e:
        raise DefinitionLoadError(str(e)) from e


def _build_node(spec: NodeDefinition) -> Node:
    node = Node(spec.name)
    if spec.label is not None:
        node = node.with_label(spec.label)
    return (
        node.with_style(_parse_style(spec.style))
        .with_color(spec.color)
        .with_shape(spec.shape)
        .with_url(spec.url)
    )


def _build_edge(spec: EdgeDefinition) -> Edge:
    return (
        Edge(spec.source, spec.target)
        .with_label(spec.label)
        .with_style(_parse_style(spec.style))
        .with_color(spec.color)
    )


def build_graph(
    definition: GraphDefinition,
    default_name: str = "G",
    default_kind: str = "digraph",
    indent: int = 4,
    graph_name: Optional[str] = None
) -> DotGraph:
    """
    Build a DotGraph from a validated definition.

    Args:
        definition: Parsed graph definition
        default_name: Graph name used when the definition has none
        default_kind: Graph kind used when the definition has none
        indent: Statement indentation for rendering
        graph_name: Overrides both the definition and the default name

    Returns:
        Populated DotGraph

    Raises:
        InvalidNodeNameError: If a node, edge endpoint or graph name is rejected
        DefinitionLoadError: If a style keyword is unknown
        GraphError: If a node is duplicated or an edge endpoint is undeclared
    """
    name = graph_name or definition.name or default_name
    kind = GraphKind(definition.kind or default_kind)
    graph = DotGraph(name, kind=kind, indent=indent)

    for node_spec in definition.nodes:
        graph.add_node(_build_node(node_spec))

    for edge_spec in definition.edges:
        graph.add_edge(_build_edge(edge_spec))

    logger.info(f"Built graph {name}: {graph.get_stats()}")
    return graph
